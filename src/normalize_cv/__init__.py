"""
Content normalization: raw CV document -> canonical document.

Pure transformation:
- whitespace cleanup, bullet extraction, truncation limits
- localized date formatting, newest-first ordering of repeatable sections
- never raises for content problems; clamping decisions are reported as warnings

No layout decisions are made here, but every output field feeds height estimation.
"""

from .config import DEFAULT_MONTH_NAMES, ContentLimits
from .module import normalize_document, normalize_document_with_warnings
from .validation import ValidationIssue, validate_document

__all__ = [
    "DEFAULT_MONTH_NAMES",
    "ContentLimits",
    "normalize_document",
    "normalize_document_with_warnings",
    "ValidationIssue",
    "validate_document",
]
