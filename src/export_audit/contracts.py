from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from pathlib import Path
from typing import Any


class InspectionEngineName(str, Enum):
    """
    PDF inspection backend identifiers.
    """

    PYPDFIUM2 = "pypdfium2"


@dataclass(frozen=True, slots=True)
class ExportAuditError:
    code: str
    message: str
    detail: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True)
class ExportAuditPage:
    page_num: int  # 1-indexed
    width_pt: float
    height_pt: float


@dataclass(frozen=True, slots=True)
class ExportAuditResult:
    ok: bool
    engine: InspectionEngineName
    source_pdf_relpath: str
    expected_pages: int  # LayoutResult.total_pages
    page_count: int  # pages found in the PDF (0 when unreadable)
    pages: list[ExportAuditPage]
    errors: list[ExportAuditError]
    meta: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class ExportAuditConfig:
    """
    Export audit configuration.

    `data_root` must be passed explicitly; exported PDFs are resolved under it and
    never read from anywhere else.
    """

    data_root: Path
    engine: InspectionEngineName = InspectionEngineName.PYPDFIUM2
    size_tolerance_pt: float = 2.0
    compute_source_sha256: bool = False

    def __post_init__(self) -> None:
        if self.size_tolerance_pt < 0:
            raise ValueError("size_tolerance_pt must be >= 0")
        if not isinstance(self.data_root, Path):
            raise TypeError("data_root must be pathlib.Path")
