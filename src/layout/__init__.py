"""
Layout: canonical CV document -> paginated blocks.

- height estimation from explicit density constants (no font metrics)
- block building in fixed document order
- banded compaction (uniform height scaling) when it can save a page
- greedy sequential pagination; oversized blocks overflow on their own page

No rendering, rasterization or export happens here.
"""

from .blocks import build_blocks
from .compact import maybe_compact
from .config import CompactionPolicy, DensityConstants, LayoutConfig, PageGeometry
from .module import layout_canonical_document, layout_document
from .paginate import paginate

__all__ = [
    "CompactionPolicy",
    "DensityConstants",
    "LayoutConfig",
    "PageGeometry",
    "build_blocks",
    "maybe_compact",
    "paginate",
    "layout_canonical_document",
    "layout_document",
]
