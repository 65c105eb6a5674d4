from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class PdfInspectionEngine(ABC):
    """
    Read-only view of an exported PDF.

    Engines report page geometry only; they never render, edit or extract text.
    """

    @abstractmethod
    def backend_id(self) -> str:
        raise NotImplementedError

    def backend_version(self) -> str | None:
        return None

    @abstractmethod
    def get_page_sizes(self, *, pdf_file: Path) -> list[tuple[float, float]]:
        """(width_pt, height_pt) per page, in page order."""
        raise NotImplementedError
