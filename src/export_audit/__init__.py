"""
Export audit: exported PDF vs. the LayoutResult it was rendered from.

This package only inspects PDFs produced by the external exporter:
- It reads page count and page sizes.
- It performs NO rendering, rasterization, text extraction or editing.
"""

from .contracts import (
    ExportAuditConfig,
    ExportAuditError,
    ExportAuditPage,
    ExportAuditResult,
    InspectionEngineName,
)
from .module import run_export_audit_relpath

__all__ = [
    "ExportAuditConfig",
    "ExportAuditError",
    "ExportAuditPage",
    "ExportAuditResult",
    "InspectionEngineName",
    "run_export_audit_relpath",
]
