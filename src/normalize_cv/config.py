from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

DEFAULT_PRESENT_LABEL = "Present"
DEFAULT_NO_EXPIRY_LABEL = "No Expiry"


def _optional_cap(v: Any) -> int | None:
    return None if v is None else int(v)


@dataclass(frozen=True, slots=True)
class ContentLimits:
    """
    Clamping rules applied during normalization.

    Over-limit content is clamped silently (entries/bullets dropped from the end)
    or visibly (bullet text truncated with `truncation_marker`). Entry caps of
    None disable the cap for that list.
    """

    max_bullet_length: int = 150  # characters, marker included
    max_bullets_per_entry: int = 6
    max_skills_display: int = 20
    max_description_lines: int = 8
    truncation_marker: str = "..."

    max_experience_entries: int | None = None
    max_education_entries: int | None = None
    max_certification_entries: int | None = None
    max_languages: int | None = None

    def validate(self) -> None:
        if self.max_bullets_per_entry < 0:
            raise ValueError("max_bullets_per_entry must be >= 0")
        if self.max_skills_display < 0:
            raise ValueError("max_skills_display must be >= 0")
        if self.max_description_lines < 1:
            raise ValueError("max_description_lines must be >= 1")
        if self.max_bullet_length <= len(self.truncation_marker):
            raise ValueError("max_bullet_length must be longer than truncation_marker")
        for name in (
            "max_experience_entries",
            "max_education_entries",
            "max_certification_entries",
            "max_languages",
        ):
            cap = getattr(self, name)
            if cap is not None and cap < 0:
                raise ValueError(f"{name} must be >= 0 or None")

    def __post_init__(self) -> None:
        self.validate()

    def to_dict(self) -> dict[str, Any]:
        return {
            "max_bullet_length": self.max_bullet_length,
            "max_bullets_per_entry": self.max_bullets_per_entry,
            "max_skills_display": self.max_skills_display,
            "max_description_lines": self.max_description_lines,
            "truncation_marker": self.truncation_marker,
            "max_experience_entries": self.max_experience_entries,
            "max_education_entries": self.max_education_entries,
            "max_certification_entries": self.max_certification_entries,
            "max_languages": self.max_languages,
        }

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "ContentLimits":
        base = ContentLimits()
        return ContentLimits(
            max_bullet_length=int(d.get("max_bullet_length", base.max_bullet_length)),
            max_bullets_per_entry=int(d.get("max_bullets_per_entry", base.max_bullets_per_entry)),
            max_skills_display=int(d.get("max_skills_display", base.max_skills_display)),
            max_description_lines=int(d.get("max_description_lines", base.max_description_lines)),
            truncation_marker=str(d.get("truncation_marker", base.truncation_marker)),
            max_experience_entries=_optional_cap(d.get("max_experience_entries")),
            max_education_entries=_optional_cap(d.get("max_education_entries")),
            max_certification_entries=_optional_cap(d.get("max_certification_entries")),
            max_languages=_optional_cap(d.get("max_languages")),
        )
