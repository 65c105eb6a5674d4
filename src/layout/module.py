from __future__ import annotations

from typing import Any, Mapping, Sequence

from contracts.document import CanonicalDocument, CVDocument
from contracts.layout import LayoutBlock, LayoutResult, Page
from normalize_cv.config import DEFAULT_MONTH_NAMES, DEFAULT_NO_EXPIRY_LABEL, DEFAULT_PRESENT_LABEL
from normalize_cv.module import canonicalize_warnings, normalize_document_with_warnings

from .blocks import build_blocks
from .compact import compaction_band, maybe_compact, total_height
from .config import LayoutConfig
from .paginate import paginate

_LAYOUT_ALGORITHM = "greedy_sequential"
_LAYOUT_VERSION = "greedy_sequential_v1"


def _overflow_warnings(pages: list[Page], usable_height: float) -> list[dict[str, Any]]:
    out: list[dict[str, Any]] = []
    for p in pages:
        if not p.overflow:
            continue
        out.append(
            {
                "code": "LAYOUT_PAGE_OVERFLOW",
                "message": "Block taller than one page placed alone; renderer will clip it",
                "detail": {
                    "page_number": p.page_number,
                    "block_ids": [b.block_id for b in p.blocks],
                    "page_height": p.total_height,
                    "usable_height": usable_height,
                },
            }
        )
    return out


def _layout_meta(
    *,
    config: LayoutConfig,
    blocks: list[LayoutBlock],
    placed: list[LayoutBlock],
    pages: list[Page],
    warnings: list[dict[str, Any]],
) -> dict[str, Any]:
    usable = config.usable_height()
    lower, upper = compaction_band(usable, config.compaction)
    return {
        "algorithm": _LAYOUT_ALGORITHM,
        "version": _LAYOUT_VERSION,
        "params": config.to_dict(),
        "derived": {
            "usable_height": usable,
            "compaction_band": [lower, upper],
            "total_height_estimated": total_height(blocks),
            "total_height_placed": total_height(placed),
        },
        "counts": {
            "blocks": len(placed),
            "pages": len(pages),
            "overflow_pages": sum(1 for p in pages if p.overflow),
            "warnings_count": len(warnings),
        },
        "warnings": list(warnings),
    }


def layout_canonical_document(
    document: CanonicalDocument,
    config: LayoutConfig | None = None,
    *,
    section_titles: Mapping[str, str] | None = None,
    warnings: list[dict[str, Any]] | None = None,
) -> LayoutResult:
    """
    Canonical document -> blocks -> (conditional) compaction -> pages.

    Pure: identical inputs yield identical results, no shared state between runs.
    """

    config = config or LayoutConfig()
    usable = config.usable_height()

    blocks = build_blocks(document, config.density, section_titles=section_titles)
    placed, compact = maybe_compact(blocks, usable, config.compaction)
    pages = paginate(placed, usable)

    all_warnings = canonicalize_warnings(list(warnings or []) + _overflow_warnings(pages, usable))
    return LayoutResult(
        pages=pages,
        compact=compact,
        total_pages=len(pages),
        meta=_layout_meta(config=config, blocks=blocks, placed=placed, pages=pages, warnings=all_warnings),
    )


def layout_document(
    document: CVDocument | dict[str, Any],
    config: LayoutConfig | None = None,
    *,
    month_names: Sequence[str] = DEFAULT_MONTH_NAMES,
    present_label: str = DEFAULT_PRESENT_LABEL,
    no_expiry_label: str = DEFAULT_NO_EXPIRY_LABEL,
    section_titles: Mapping[str, str] | None = None,
) -> LayoutResult:
    """
    Preferred programmatic entrypoint: raw document -> LayoutResult.

    Normalization warnings (truncations, caps, unparseable years) are merged into
    `result.meta["warnings"]` together with page overflow warnings.
    """

    config = config or LayoutConfig()
    canonical, warnings = normalize_document_with_warnings(
        document,
        month_names,
        limits=config.limits,
        present_label=present_label,
        no_expiry_label=no_expiry_label,
    )
    return layout_canonical_document(
        canonical,
        config,
        section_titles=section_titles,
        warnings=warnings,
    )
