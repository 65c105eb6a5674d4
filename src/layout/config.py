from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from normalize_cv.config import ContentLimits

MM_PER_INCH = 25.4
PT_PER_INCH = 72.0


def _section(d: dict[str, Any], key: str) -> dict[str, Any]:
    v = d.get(key) or {}
    if not isinstance(v, dict):
        raise TypeError(f"layout config section {key!r} must be a JSON object")
    return v


@dataclass(frozen=True, slots=True)
class PageGeometry:
    """
    Physical page (A4 by default) and the mm -> px factor of the height unit.
    """

    width_mm: float = 210.0
    height_mm: float = 297.0
    margin_top_mm: float = 20.0
    margin_bottom_mm: float = 20.0
    margin_left_mm: float = 20.0
    margin_right_mm: float = 20.0
    px_per_mm: float = 3.78

    def validate(self) -> None:
        if self.width_mm <= 0 or self.height_mm <= 0:
            raise ValueError("page width/height must be > 0")
        if min(self.margin_top_mm, self.margin_bottom_mm, self.margin_left_mm, self.margin_right_mm) < 0:
            raise ValueError("margins must be >= 0")
        if self.margin_top_mm + self.margin_bottom_mm >= self.height_mm:
            raise ValueError("vertical margins leave no usable height")
        if self.margin_left_mm + self.margin_right_mm >= self.width_mm:
            raise ValueError("horizontal margins leave no usable width")
        if self.px_per_mm <= 0:
            raise ValueError("px_per_mm must be > 0")

    def __post_init__(self) -> None:
        self.validate()

    def usable_height(self) -> float:
        return (self.height_mm - self.margin_top_mm - self.margin_bottom_mm) * self.px_per_mm

    def size_pt(self) -> tuple[float, float]:
        k = PT_PER_INCH / MM_PER_INCH
        return (self.width_mm * k, self.height_mm * k)

    def to_dict(self) -> dict[str, Any]:
        return {
            "width_mm": self.width_mm,
            "height_mm": self.height_mm,
            "margin_top_mm": self.margin_top_mm,
            "margin_bottom_mm": self.margin_bottom_mm,
            "margin_left_mm": self.margin_left_mm,
            "margin_right_mm": self.margin_right_mm,
            "px_per_mm": self.px_per_mm,
        }

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "PageGeometry":
        base = PageGeometry()
        return PageGeometry(**{k: float(d.get(k, getattr(base, k))) for k in base.to_dict()})


@dataclass(frozen=True, slots=True)
class DensityConstants:
    """
    Height estimates (px) for the normal visual density.

    These are constant-width approximations, not font metrics.
    """

    header: float = 80
    section_title: float = 30
    experience_item: float = 100  # title/company/date lines, bullets excluded
    bullet_line: float = 18
    education_item: float = 60
    thesis_line: float = 20
    gpa_line: float = 15
    certification_item: float = 50
    credential_line: float = 15
    skills_row: float = 25
    skills_per_row: int = 4
    language_item: float = 20
    summary_line: float = 18
    summary_chars_per_line: int = 80

    def validate(self) -> None:
        for name in (
            "header",
            "section_title",
            "experience_item",
            "education_item",
            "certification_item",
            "skills_row",
            "language_item",
        ):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be > 0")
        for name in ("bullet_line", "thesis_line", "gpa_line", "credential_line", "summary_line"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0")
        if self.skills_per_row < 1:
            raise ValueError("skills_per_row must be >= 1")
        if self.summary_chars_per_line < 1:
            raise ValueError("summary_chars_per_line must be >= 1")

    def __post_init__(self) -> None:
        self.validate()

    def to_dict(self) -> dict[str, Any]:
        return {
            "header": self.header,
            "section_title": self.section_title,
            "experience_item": self.experience_item,
            "bullet_line": self.bullet_line,
            "education_item": self.education_item,
            "thesis_line": self.thesis_line,
            "gpa_line": self.gpa_line,
            "certification_item": self.certification_item,
            "credential_line": self.credential_line,
            "skills_row": self.skills_row,
            "skills_per_row": self.skills_per_row,
            "language_item": self.language_item,
            "summary_line": self.summary_line,
            "summary_chars_per_line": self.summary_chars_per_line,
        }

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "DensityConstants":
        base = DensityConstants()
        kwargs: dict[str, Any] = {}
        for k, default in base.to_dict().items():
            v = d.get(k, default)
            kwargs[k] = int(v) if k in ("skills_per_row", "summary_chars_per_line") else v
        return DensityConstants(**kwargs)


@dataclass(frozen=True, slots=True)
class CompactionPolicy:
    """
    Banded density-scaling decision.

    Compaction applies only when total height lies strictly inside
    (usable * lower_ratio, usable * upper_ratio). `scale_factor` stands in for the
    renderer's dense style (tighter line spacing and gaps, same fonts).
    """

    enabled: bool = True
    lower_ratio: float = 1.2
    upper_ratio: float = 2.0
    scale_factor: float = 0.85

    def validate(self) -> None:
        if self.lower_ratio <= 0:
            raise ValueError("lower_ratio must be > 0")
        if self.upper_ratio <= self.lower_ratio:
            raise ValueError("upper_ratio must be > lower_ratio")
        if not (0.0 < self.scale_factor <= 1.0):
            raise ValueError("scale_factor must be within (0, 1]")

    def __post_init__(self) -> None:
        self.validate()

    def to_dict(self) -> dict[str, Any]:
        return {
            "enabled": self.enabled,
            "lower_ratio": self.lower_ratio,
            "upper_ratio": self.upper_ratio,
            "scale_factor": self.scale_factor,
        }

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "CompactionPolicy":
        base = CompactionPolicy()
        return CompactionPolicy(
            enabled=bool(d.get("enabled", base.enabled)),
            lower_ratio=float(d.get("lower_ratio", base.lower_ratio)),
            upper_ratio=float(d.get("upper_ratio", base.upper_ratio)),
            scale_factor=float(d.get("scale_factor", base.scale_factor)),
        )


@dataclass(frozen=True, slots=True)
class LayoutConfig:
    """
    Every constant a layout run depends on, passed explicitly to each stage.

    No module-level state and no environment reads: concurrent runs with different
    configs cannot interfere.
    """

    page: PageGeometry = field(default_factory=PageGeometry)
    density: DensityConstants = field(default_factory=DensityConstants)
    limits: ContentLimits = field(default_factory=ContentLimits)
    compaction: CompactionPolicy = field(default_factory=CompactionPolicy)

    def usable_height(self) -> float:
        return self.page.usable_height()

    def to_dict(self) -> dict[str, Any]:
        return {
            "page": self.page.to_dict(),
            "density": self.density.to_dict(),
            "limits": self.limits.to_dict(),
            "compaction": self.compaction.to_dict(),
        }

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "LayoutConfig":
        if not isinstance(d, dict):
            raise TypeError("layout config must be a JSON object")
        return LayoutConfig(
            page=PageGeometry.from_dict(_section(d, "page")),
            density=DensityConstants.from_dict(_section(d, "density")),
            limits=ContentLimits.from_dict(_section(d, "limits")),
            compaction=CompactionPolicy.from_dict(_section(d, "compaction")),
        )
