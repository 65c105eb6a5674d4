"""
Canonical, authoritative layout contracts.

These models are the schema boundary between stages:
- raw document (editor / saved file) -> normalize_cv
- canonical document -> layout
- layout result -> renderer / export_audit

Stage code should consume/produce these contract objects (not ad-hoc dicts).
"""

from .document import (
    CanonicalCertification,
    CanonicalDocument,
    CanonicalEducation,
    CanonicalExperience,
    CertificationEntry,
    CVDocument,
    EducationEntry,
    ExperienceEntry,
    LanguageEntry,
    PersonalInfo,
    SocialLinks,
)
from .layout import BlockKind, LayoutBlock, LayoutResult, Page

__all__ = [
    "SocialLinks",
    "PersonalInfo",
    "ExperienceEntry",
    "EducationEntry",
    "CertificationEntry",
    "LanguageEntry",
    "CVDocument",
    "CanonicalExperience",
    "CanonicalEducation",
    "CanonicalCertification",
    "CanonicalDocument",
    "BlockKind",
    "LayoutBlock",
    "Page",
    "LayoutResult",
]
