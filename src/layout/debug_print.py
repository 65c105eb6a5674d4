from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

from contracts.layout import BlockKind, LayoutBlock

from .artifacts import read_layout_json_artifact


def _fill_bar(used: float, usable: float, width: int) -> str:
    if usable <= 0 or width <= 0:
        return ""
    filled = min(width, int(round(width * used / usable)))
    over = "!" if used > usable else ""
    return "[" + "#" * filled + "." * (width - filled) + "]" + over


def _block_label(b: LayoutBlock) -> str:
    d: Any = b.data
    if b.kind == BlockKind.HEADER:
        return d.full_name or "<no name>"
    if b.kind in (BlockKind.SECTION_TITLE, BlockKind.SUMMARY):
        return str(d)
    if b.kind == BlockKind.EXPERIENCE:
        return f"{d.job_title} @ {d.company} ({len(d.bullets)} bullets)"
    if b.kind == BlockKind.EDUCATION:
        return f"{d.degree} - {d.institution}"
    if b.kind == BlockKind.CERTIFICATION:
        return f"{d.name} - {d.issuer}"
    if b.kind == BlockKind.SKILLS:
        return ", ".join(d)
    if b.kind == BlockKind.LANGUAGES:
        return ", ".join(f"{l.name} ({l.level})" if l.level else l.name for l in d)
    return ""


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="cv-layout-debug-print")
    ap.add_argument("--layout", required=True, type=Path, help="Layout JSON artifact.")
    ap.add_argument("--bar-width", type=int, default=40)
    ap.add_argument("--max-snippet", type=int, default=60, help="Max characters per block label.")
    args = ap.parse_args(argv)

    result = read_layout_json_artifact(args.layout)
    usable = float(result.meta.get("derived", {}).get("usable_height", 0.0))

    print(f"pages={result.total_pages} compact={result.compact} usable_height={usable:.2f}")
    for page in result.pages:
        print(f"\n=== PAGE {page.page_number:03d} ===")
        print(f"height={page.total_height} {_fill_bar(float(page.total_height), usable, args.bar_width)}")
        if page.overflow:
            print("  (overflow: single block taller than one page)")
        for b in page.blocks:
            label = _block_label(b).replace("\n", " ")
            if args.max_snippet and len(label) > args.max_snippet:
                label = label[: args.max_snippet] + "..."
            split = f" split={b.split_points}" if b.can_split else ""
            print(f"  {b.block_id} {b.kind.value:<14} h={b.height:<6}{split} :: {label}")

    warnings = result.meta.get("warnings") or []
    if warnings:
        print("\n-- WARNINGS --")
        for w in warnings:
            print(f"{w.get('code')}: {w.get('message')} {w.get('detail')}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
