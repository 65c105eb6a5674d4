from __future__ import annotations

import unittest

from contracts.layout import BlockKind, LayoutBlock
from layout.paginate import paginate

USABLE = 100.0


def _blocks(*heights: float) -> list[LayoutBlock]:
    return [
        LayoutBlock(
            block_id=f"b{i:04d}",
            kind=BlockKind.EXPERIENCE,
            height=h,
            data="",
            section="experience",
            can_split=True,
            split_points=(0, 1),
        )
        for i, h in enumerate(heights)
    ]


class TestPaginate(unittest.TestCase):
    def test_no_blocks_no_pages(self) -> None:
        self.assertEqual(paginate([], USABLE), [])

    def test_greedy_fill_in_order(self) -> None:
        pages = paginate(_blocks(40, 60, 10, 90, 5), USABLE)
        self.assertEqual(
            [[b.block_id for b in p.blocks] for p in pages],
            [["b0000", "b0001"], ["b0002", "b0003"], ["b0004"]],
        )
        self.assertEqual([p.page_number for p in pages], [1, 2, 3])
        self.assertEqual([p.total_height for p in pages], [100, 100, 5])
        self.assertFalse(any(p.overflow for p in pages))

    def test_exact_fit_stays_on_page(self) -> None:
        pages = paginate(_blocks(50, 50), USABLE)
        self.assertEqual(len(pages), 1)

    def test_no_reordering_for_better_fit(self) -> None:
        # A later small block never jumps back onto an earlier page.
        pages = paginate(_blocks(70, 50, 20), USABLE)
        self.assertEqual([[b.block_id for b in p.blocks] for p in pages], [["b0000"], ["b0001", "b0002"]])

    def test_oversized_block_gets_own_page(self) -> None:
        blocks = _blocks(30, 250, 30)
        pages = paginate(blocks, USABLE)
        self.assertEqual([[b.block_id for b in p.blocks] for p in pages], [["b0000"], ["b0001"], ["b0002"]])
        self.assertEqual([p.overflow for p in pages], [False, True, False])
        self.assertEqual(pages[1].total_height, 250)

    def test_oversized_first_block_on_empty_page(self) -> None:
        pages = paginate(_blocks(150, 10), USABLE)
        self.assertEqual([[b.block_id for b in p.blocks] for p in pages], [["b0000"], ["b0001"]])
        self.assertTrue(pages[0].overflow)

    def test_partition_preserves_blocks_and_height(self) -> None:
        heights = (12, 80, 33, 7, 99, 101, 1, 64, 36, 50, 50, 3)
        blocks = _blocks(*heights)
        pages = paginate(blocks, USABLE)

        flat = [b for p in pages for b in p.blocks]
        self.assertEqual(flat, blocks)
        self.assertEqual(sum(p.total_height for p in pages), sum(heights))
        for p in pages:
            self.assertTrue(p.total_height <= USABLE or len(p.blocks) == 1)

    def test_split_metadata_carried_through(self) -> None:
        pages = paginate(_blocks(120), USABLE)
        block = pages[0].blocks[0]
        self.assertTrue(block.can_split)
        self.assertEqual(block.split_points, (0, 1))


if __name__ == "__main__":
    unittest.main()
