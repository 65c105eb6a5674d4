from __future__ import annotations

from pathlib import Path

from .base import PdfInspectionEngine


class Pypdfium2Engine(PdfInspectionEngine):
    def backend_id(self) -> str:
        return "pypdfium2"

    def backend_version(self) -> str | None:
        try:
            import pypdfium2 as pdfium  # type: ignore

            return getattr(pdfium, "__version__", None)
        except ImportError:
            return None

    def _require_pdfium(self):
        try:
            import pypdfium2 as pdfium  # type: ignore

            return pdfium
        except ImportError as e:
            raise RuntimeError("Missing dependency: pypdfium2 is required for export audits.") from e

    def get_page_sizes(self, *, pdf_file: Path) -> list[tuple[float, float]]:
        pdfium = self._require_pdfium()
        doc = pdfium.PdfDocument(str(pdf_file))
        try:
            sizes: list[tuple[float, float]] = []
            for i in range(len(doc)):
                width, height = doc.get_page_size(i)
                sizes.append((float(width), float(height)))
            return sizes
        finally:
            doc.close()
