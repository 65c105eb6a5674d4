from __future__ import annotations

from typing import Any, Mapping

from contracts.document import CanonicalDocument
from contracts.layout import BlockKind, LayoutBlock

from .config import DensityConstants
from .estimate import (
    estimate_certification_height,
    estimate_education_height,
    estimate_experience_height,
    estimate_languages_height,
    estimate_skills_height,
    estimate_summary_height,
)

# Text carried by section-title blocks; renderers may pass localized titles.
DEFAULT_SECTION_TITLES: dict[str, str] = {
    "experience": "Experience",
    "education": "Education",
    "certifications": "Certifications",
}


def _fmt_block_id(idx: int) -> str:
    return f"b{idx:04d}"


def build_blocks(
    document: CanonicalDocument,
    density: DensityConstants,
    *,
    section_titles: Mapping[str, str] | None = None,
) -> list[LayoutBlock]:
    """
    Canonical document -> ordered layout blocks.

    Order is fixed and mirrors the document:
      header, summary, experience, education, certifications, skills, languages.
    Experience/education/certifications get a section-title block followed by one
    block per entry; skills and languages are one self-titled block each (their
    height includes the title). Empty sections contribute nothing.
    """

    titles = dict(DEFAULT_SECTION_TITLES)
    if section_titles:
        titles.update(section_titles)

    # (kind, height, data, section, can_split, split_points)
    specs: list[tuple[BlockKind, float, Any, str, bool, tuple[int, ...] | None]] = []

    specs.append((BlockKind.HEADER, density.header, document.personal, "header", False, None))

    if document.summary:
        specs.append(
            (
                BlockKind.SUMMARY,
                estimate_summary_height(document.summary, density),
                document.summary,
                "summary",
                False,
                None,
            )
        )

    if document.experience:
        specs.append(
            (BlockKind.SECTION_TITLE, density.section_title, titles["experience"], "experience", False, None)
        )
        for exp in document.experience:
            specs.append(
                (
                    BlockKind.EXPERIENCE,
                    estimate_experience_height(exp, density),
                    exp,
                    "experience",
                    True,
                    tuple(range(len(exp.bullets))),
                )
            )

    if document.education:
        specs.append(
            (BlockKind.SECTION_TITLE, density.section_title, titles["education"], "education", False, None)
        )
        for edu in document.education:
            specs.append(
                (BlockKind.EDUCATION, estimate_education_height(edu, density), edu, "education", False, None)
            )

    if document.certifications:
        specs.append(
            (
                BlockKind.SECTION_TITLE,
                density.section_title,
                titles["certifications"],
                "certifications",
                False,
                None,
            )
        )
        for cert in document.certifications:
            specs.append(
                (
                    BlockKind.CERTIFICATION,
                    estimate_certification_height(cert, density),
                    cert,
                    "certifications",
                    False,
                    None,
                )
            )

    if document.skills:
        specs.append(
            (
                BlockKind.SKILLS,
                estimate_skills_height(document.skills, density),
                tuple(document.skills),
                "skills",
                False,
                None,
            )
        )

    if document.languages:
        specs.append(
            (
                BlockKind.LANGUAGES,
                estimate_languages_height(document.languages, density),
                tuple(document.languages),
                "languages",
                False,
                None,
            )
        )

    # IDs are assigned only after the final order is fixed.
    return [
        LayoutBlock(
            block_id=_fmt_block_id(i),
            kind=kind,
            height=height,
            data=data,
            section=section,
            can_split=can_split,
            split_points=split_points,
        )
        for i, (kind, height, data, section, can_split, split_points) in enumerate(specs)
    ]
