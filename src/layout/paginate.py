from __future__ import annotations

from contracts.layout import LayoutBlock, Page


def _close_page(page_number: int, blocks: list[LayoutBlock], usable_height: float) -> Page:
    height = sum(b.height for b in blocks)
    return Page(
        page_number=page_number,
        blocks=list(blocks),
        total_height=height,
        overflow=height > usable_height,
    )


def paginate(blocks: list[LayoutBlock], usable_height: float) -> list[Page]:
    """
    Greedy single-pass placement in block order.

    A block goes on the open page when it fits the remaining height; otherwise the
    open page is closed and the block starts a new one. A block taller than a whole
    page still gets its own page (overflow) so no content is ever dropped.
    Blocks are placed atomically; `split_points` are not used here.

    Concatenating the returned pages' blocks reproduces `blocks` exactly.
    """

    pages: list[Page] = []
    current: list[LayoutBlock] = []
    used = 0.0

    for block in blocks:
        if block.height <= usable_height - used:
            current.append(block)
            used += block.height
            continue

        if current:
            pages.append(_close_page(len(pages) + 1, current, usable_height))
        current = [block]
        used = block.height

    if current:
        pages.append(_close_page(len(pages) + 1, current, usable_height))

    return pages
