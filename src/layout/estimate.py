from __future__ import annotations

import math

from contracts.document import (
    CanonicalCertification,
    CanonicalEducation,
    CanonicalExperience,
    LanguageEntry,
)

from .config import DensityConstants


def estimate_summary_height(summary: str, density: DensityConstants) -> float:
    # Constant-width estimate: ceil(chars / chars_per_line) text lines under a title.
    lines = math.ceil(len(summary) / density.summary_chars_per_line)
    return density.section_title + lines * density.summary_line


def estimate_experience_height(exp: CanonicalExperience, density: DensityConstants) -> float:
    return density.experience_item + len(exp.bullets) * density.bullet_line


def estimate_education_height(edu: CanonicalEducation, density: DensityConstants) -> float:
    height = density.education_item
    if edu.thesis_title:
        height += density.thesis_line
    if edu.gpa:
        height += density.gpa_line
    return height


def estimate_certification_height(cert: CanonicalCertification, density: DensityConstants) -> float:
    height = density.certification_item
    if cert.credential_id:
        height += density.credential_line
    return height


def estimate_skills_height(skills: list[str], density: DensityConstants) -> float:
    rows = math.ceil(len(skills) / density.skills_per_row)
    return density.section_title + rows * density.skills_row


def estimate_languages_height(languages: list[LanguageEntry], density: DensityConstants) -> float:
    return density.section_title + len(languages) * density.language_item
