from __future__ import annotations

import math
from dataclasses import replace

from contracts.layout import LayoutBlock

from .config import CompactionPolicy


def total_height(blocks: list[LayoutBlock]) -> float:
    return sum(b.height for b in blocks)


def compaction_band(usable_height: float, policy: CompactionPolicy) -> tuple[float, float]:
    return (usable_height * policy.lower_ratio, usable_height * policy.upper_ratio)


def should_compact(total: float, usable_height: float, policy: CompactionPolicy) -> bool:
    """
    Open band: below it the content fits as is, at or above it the document spans
    several pages no matter what, so scaling would not save a page.
    """
    if not policy.enabled:
        return False
    lower, upper = compaction_band(usable_height, policy)
    return lower < total < upper


def compact_blocks(blocks: list[LayoutBlock], scale_factor: float) -> list[LayoutBlock]:
    # New records; the input blocks stay untouched.
    return [replace(b, height=math.floor(b.height * scale_factor)) for b in blocks]


def maybe_compact(
    blocks: list[LayoutBlock],
    usable_height: float,
    policy: CompactionPolicy | None = None,
) -> tuple[list[LayoutBlock], bool]:
    policy = policy or CompactionPolicy()
    if should_compact(total_height(blocks), usable_height, policy):
        return compact_blocks(blocks, policy.scale_factor), True
    return list(blocks), False
