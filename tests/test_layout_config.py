from __future__ import annotations

import unittest

from layout.config import CompactionPolicy, DensityConstants, LayoutConfig, PageGeometry
from normalize_cv.config import ContentLimits


class TestLayoutConfig(unittest.TestCase):
    def test_default_a4_usable_height(self) -> None:
        cfg = LayoutConfig()
        self.assertAlmostEqual(cfg.usable_height(), (297 - 40) * 3.78)
        w, h = cfg.page.size_pt()
        self.assertAlmostEqual(w, 595.2756, places=3)
        self.assertAlmostEqual(h, 841.8898, places=3)

    def test_partial_dict_keeps_defaults(self) -> None:
        cfg = LayoutConfig.from_dict(
            {
                "page": {"height_mm": 279.4, "width_mm": 215.9},
                "density": {"bullet_line": 16, "skills_per_row": "3"},
                "limits": {"max_bullets_per_entry": 4, "max_languages": 5},
            }
        )
        self.assertEqual(cfg.page.height_mm, 279.4)
        self.assertEqual(cfg.page.margin_top_mm, 20.0)
        self.assertEqual(cfg.density.bullet_line, 16)
        self.assertEqual(cfg.density.skills_per_row, 3)
        self.assertEqual(cfg.density.header, 80)
        self.assertEqual(cfg.limits.max_bullets_per_entry, 4)
        self.assertEqual(cfg.limits.max_languages, 5)
        self.assertIsNone(cfg.limits.max_experience_entries)
        self.assertEqual(cfg.compaction, CompactionPolicy())

    def test_to_dict_from_dict_is_stable(self) -> None:
        cfg = LayoutConfig(
            page=PageGeometry(height_mm=250, px_per_mm=2.0),
            compaction=CompactionPolicy(enabled=False, scale_factor=0.9),
            limits=ContentLimits(max_experience_entries=3),
        )
        self.assertEqual(LayoutConfig.from_dict(cfg.to_dict()), cfg)

    def test_invalid_values_rejected(self) -> None:
        with self.assertRaises(ValueError):
            PageGeometry(height_mm=30, margin_top_mm=20, margin_bottom_mm=20)
        with self.assertRaises(ValueError):
            PageGeometry(px_per_mm=0)
        with self.assertRaises(ValueError):
            DensityConstants(header=0)
        with self.assertRaises(ValueError):
            DensityConstants(skills_per_row=0)
        with self.assertRaises(ValueError):
            ContentLimits(max_bullet_length=3)
        with self.assertRaises(ValueError):
            ContentLimits(max_description_lines=0)
        with self.assertRaises(ValueError):
            ContentLimits(max_education_entries=-1)


if __name__ == "__main__":
    unittest.main()
