from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .document import (
    CanonicalCertification,
    CanonicalEducation,
    CanonicalExperience,
    LanguageEntry,
    PersonalInfo,
)


class BlockKind(str, Enum):
    HEADER = "header"
    SECTION_TITLE = "section-title"
    SUMMARY = "summary"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    CERTIFICATION = "certification"
    SKILLS = "skills"
    LANGUAGES = "languages"


def _data_to_dict(data: Any) -> Any:
    if hasattr(data, "to_dict"):
        return data.to_dict()
    if isinstance(data, (list, tuple)):
        return [_data_to_dict(x) for x in data]
    return data


def _data_from_dict(kind: BlockKind, raw: Any) -> Any:
    if kind == BlockKind.HEADER:
        return PersonalInfo.from_dict(raw)
    if kind == BlockKind.EXPERIENCE:
        return CanonicalExperience.from_dict(raw)
    if kind == BlockKind.EDUCATION:
        return CanonicalEducation.from_dict(raw)
    if kind == BlockKind.CERTIFICATION:
        return CanonicalCertification.from_dict(raw)
    if kind == BlockKind.SKILLS:
        return tuple(str(x) for x in (raw or []))
    if kind == BlockKind.LANGUAGES:
        return tuple(LanguageEntry.from_dict(x) for x in (raw or []))
    # section-title / summary carry plain text
    return "" if raw is None else str(raw)


@dataclass(frozen=True, slots=True)
class LayoutBlock:
    """
    Atomic unit of estimated vertical content.

    Blocks are built fresh for every layout run and never edited; compaction
    produces new blocks with scaled heights.
    """

    block_id: str  # b{block_index:04d}, assigned in document order
    kind: BlockKind
    height: float  # estimated height, same unit as the usable page height (px)
    data: Any  # source record: canonical entry, text, or tuple for whole-section blocks
    section: str  # owning section key ("header", "summary", "experience", ...)
    can_split: bool = False
    # Bullet boundaries where a finer-grained splitter could break the block.
    # Carried for renderers; the paginator places every block atomically.
    split_points: tuple[int, ...] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "block_id": self.block_id,
            "kind": self.kind.value,
            "height": self.height,
            "data": _data_to_dict(self.data),
            "section": self.section,
            "can_split": self.can_split,
            "split_points": None if self.split_points is None else list(self.split_points),
        }

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "LayoutBlock":
        kind = BlockKind(str(d["kind"]))
        split_raw = d.get("split_points")
        return LayoutBlock(
            block_id=str(d["block_id"]),
            kind=kind,
            height=d["height"],
            data=_data_from_dict(kind, d.get("data")),
            section=str(d.get("section", "")),
            can_split=bool(d.get("can_split", False)),
            split_points=None if split_raw is None else tuple(int(x) for x in split_raw),
        )


@dataclass(frozen=True, slots=True)
class Page:
    page_number: int  # 1-indexed
    blocks: list[LayoutBlock]  # placement order
    total_height: float
    # True only for the accepted single-block overflow case.
    overflow: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "page_number": self.page_number,
            "blocks": [b.to_dict() for b in self.blocks],
            "total_height": self.total_height,
            "overflow": self.overflow,
        }

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Page":
        blocks_raw = d.get("blocks") or []
        if not isinstance(blocks_raw, list):
            raise TypeError("Page.blocks must be a list")
        return Page(
            page_number=int(d["page_number"]),
            blocks=[LayoutBlock.from_dict(b) for b in blocks_raw],
            total_height=d.get("total_height", 0),
            overflow=bool(d.get("overflow", False)),
        )


@dataclass(frozen=True, slots=True)
class LayoutResult:
    """
    Contract handed to the rendering layer.

    `compact` tells the renderer to switch to its dense visual style, matching the
    scaled estimates the pages were computed with.
    """

    pages: list[Page]
    compact: bool
    total_pages: int
    meta: dict[str, Any]

    def blocks(self) -> list[LayoutBlock]:
        return [b for p in self.pages for b in p.blocks]

    def to_dict(self) -> dict[str, Any]:
        return {
            "pages": [p.to_dict() for p in self.pages],
            "compact": self.compact,
            "total_pages": self.total_pages,
            "meta": dict(self.meta),
        }

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "LayoutResult":
        pages_raw = d.get("pages") or []
        if not isinstance(pages_raw, list):
            raise TypeError("LayoutResult.pages must be a list")
        pages = [Page.from_dict(p) for p in pages_raw]
        return LayoutResult(
            pages=pages,
            compact=bool(d.get("compact", False)),
            total_pages=int(d.get("total_pages", len(pages))),
            meta=dict(d.get("meta") or {}),
        )
