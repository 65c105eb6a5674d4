from __future__ import annotations

import math
import unittest

from contracts.document import CanonicalDocument, CanonicalExperience, LanguageEntry, PersonalInfo
from contracts.layout import BlockKind, LayoutBlock
from layout.blocks import build_blocks
from layout.compact import maybe_compact, should_compact, total_height
from layout.config import CompactionPolicy, DensityConstants
from layout.paginate import paginate

USABLE = 100.0


def _blocks(*heights: float) -> list[LayoutBlock]:
    return [
        LayoutBlock(
            block_id=f"b{i:04d}",
            kind=BlockKind.EDUCATION,
            height=h,
            data="",
            section="education",
        )
        for i, h in enumerate(heights)
    ]


class TestCompaction(unittest.TestCase):
    def test_lower_boundary_is_exclusive(self) -> None:
        blocks = _blocks(60, 60)  # exactly 1.2 x usable
        out, applied = maybe_compact(blocks, USABLE)
        self.assertFalse(applied)
        self.assertEqual([b.height for b in out], [60, 60])

    def test_upper_boundary_is_exclusive(self) -> None:
        blocks = _blocks(100, 100)  # exactly 2.0 x usable
        _, applied = maybe_compact(blocks, USABLE)
        self.assertFalse(applied)

    def test_below_and_above_band_untouched(self) -> None:
        self.assertFalse(should_compact(90, USABLE, CompactionPolicy()))
        self.assertFalse(should_compact(350, USABLE, CompactionPolicy()))

    def test_inside_band_scales_every_block_with_floor(self) -> None:
        blocks = _blocks(61, 33, 27)  # 121 > 120
        out, applied = maybe_compact(blocks, USABLE)
        self.assertTrue(applied)
        self.assertEqual([b.height for b in out], [math.floor(h * 0.85) for h in (61, 33, 27)])
        # Fresh records; inputs untouched.
        self.assertEqual([b.height for b in blocks], [61, 33, 27])
        self.assertEqual([b.block_id for b in out], [b.block_id for b in blocks])

    def test_disabled_policy_never_compacts(self) -> None:
        _, applied = maybe_compact(_blocks(75, 75), USABLE, CompactionPolicy(enabled=False))
        self.assertFalse(applied)

    def test_custom_band_and_factor(self) -> None:
        policy = CompactionPolicy(lower_ratio=1.0, upper_ratio=1.5, scale_factor=0.5)
        out, applied = maybe_compact(_blocks(70, 40), USABLE, policy)
        self.assertTrue(applied)
        self.assertEqual([b.height for b in out], [35, 20])

    def test_compaction_never_adds_pages_at_one_and_a_half_pages(self) -> None:
        blocks = _blocks(50, 50, 50)  # 1.5 x usable
        compacted, applied = maybe_compact(blocks, USABLE)
        self.assertTrue(applied)
        self.assertLessEqual(len(paginate(compacted, USABLE)), len(paginate(blocks, USABLE)))

    def test_compacted_blocks_share_no_mutable_state(self) -> None:
        doc = CanonicalDocument(
            personal=PersonalInfo(full_name="Jane Doe"),
            summary="",
            experience=[
                CanonicalExperience(
                    id="x",
                    job_title="Dev",
                    company="Acme",
                    description="",
                    bullets=["a", "b"],
                    date_range="2020",
                    start_year="2020",
                )
            ],
            education=[],
            certifications=[],
            skills=["SQL", "Python"],
            languages=[LanguageEntry("English", "Fluent")],
        )
        blocks = build_blocks(doc, DensityConstants())
        usable = total_height(blocks) / 1.5
        out, applied = maybe_compact(blocks, usable)
        self.assertTrue(applied)

        by_kind = {b.kind: b for b in out}
        exp = by_kind[BlockKind.EXPERIENCE]
        self.assertEqual(exp.split_points, (0, 1))
        with self.assertRaises(AttributeError):
            exp.split_points.append(99)  # type: ignore[union-attr]
        self.assertIsInstance(by_kind[BlockKind.SKILLS].data, tuple)
        self.assertIsInstance(by_kind[BlockKind.LANGUAGES].data, tuple)
        self.assertEqual([b.split_points for b in blocks], [b.split_points for b in out])

    def test_invalid_policy_rejected(self) -> None:
        with self.assertRaises(ValueError):
            CompactionPolicy(lower_ratio=2.0, upper_ratio=1.2)
        with self.assertRaises(ValueError):
            CompactionPolicy(scale_factor=0.0)
        with self.assertRaises(ValueError):
            CompactionPolicy(scale_factor=1.5)


if __name__ == "__main__":
    unittest.main()
