from .base import PdfInspectionEngine
from .pypdfium2_engine import Pypdfium2Engine

__all__ = ["PdfInspectionEngine", "Pypdfium2Engine"]
