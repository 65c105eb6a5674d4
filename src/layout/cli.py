from __future__ import annotations

import argparse
import json
from dataclasses import replace
from pathlib import Path
from typing import Any

from normalize_cv.cli import load_document_json, load_month_names, print_failure
from normalize_cv.config import DEFAULT_NO_EXPIRY_LABEL, DEFAULT_PRESENT_LABEL

from .artifacts import serialize_layout_result
from .config import LayoutConfig
from .module import layout_document


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="cv-layout",
        description="Estimate block heights and paginate a CV document onto fixed-size pages.",
    )
    p.add_argument("--input", required=True, type=Path, help="Raw document JSON (editor or saved file).")
    p.add_argument("--output", required=True, type=Path, help="Path to write the layout JSON artifact.")
    p.add_argument("--config", type=Path, default=None, help="Optional layout config JSON (any subset of keys).")
    p.add_argument("--months-file", type=Path, default=None, help="JSON list of 12 localized month names.")
    p.add_argument("--present-label", default=DEFAULT_PRESENT_LABEL)
    p.add_argument("--no-expiry-label", default=DEFAULT_NO_EXPIRY_LABEL)
    # Explicit overrides; unset flags keep the config file / default values.
    p.add_argument("--page-height-mm", type=float, default=None)
    p.add_argument("--px-per-mm", type=float, default=None)
    p.add_argument("--compaction-lower", type=float, default=None, help="Lower band ratio (exclusive).")
    p.add_argument("--compaction-upper", type=float, default=None, help="Upper band ratio (exclusive).")
    p.add_argument("--compaction-factor", type=float, default=None, help="Height scale factor when compacting.")
    p.add_argument("--disable-compaction", action="store_true", default=False)
    return p


def config_from_args(args: argparse.Namespace) -> tuple[LayoutConfig | None, dict[str, Any] | None]:
    """
    Effective config: defaults, then the optional `--config` file, then explicit flags.

    Bad config data comes back as an error record, never as an exception.
    """
    raw: Any = {}
    if args.config is not None:
        try:
            raw = json.loads(args.config.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            return None, {"code": "CONFIG_UNREADABLE", "message": "Layout config could not be read", "detail": {"error": repr(e)}}

    try:
        cfg = LayoutConfig.from_dict(raw)

        page = cfg.page
        if args.page_height_mm is not None:
            page = replace(page, height_mm=args.page_height_mm)
        if args.px_per_mm is not None:
            page = replace(page, px_per_mm=args.px_per_mm)

        compaction = cfg.compaction
        if args.compaction_lower is not None:
            compaction = replace(compaction, lower_ratio=args.compaction_lower)
        if args.compaction_upper is not None:
            compaction = replace(compaction, upper_ratio=args.compaction_upper)
        if args.compaction_factor is not None:
            compaction = replace(compaction, scale_factor=args.compaction_factor)
        if args.disable_compaction:
            compaction = replace(compaction, enabled=False)
    except (TypeError, ValueError) as e:
        return None, {"code": "CONFIG_INVALID", "message": "Layout config is invalid", "detail": {"error": str(e)}}

    return replace(cfg, page=page, compaction=compaction), None


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    config, error = config_from_args(args)
    if config is None:
        return print_failure(error)

    month_names, error = load_month_names(args.months_file)
    if month_names is None:
        return print_failure(error)

    document, error = load_document_json(args.input)
    if document is None:
        return print_failure(error)

    result = layout_document(
        document,
        config,
        month_names=month_names,
        present_label=args.present_label,
        no_expiry_label=args.no_expiry_label,
    )

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(serialize_layout_result(result), encoding="utf-8")

    summary = {
        "ok": True,
        "pages": result.total_pages,
        "blocks": len(result.blocks()),
        "compact": result.compact,
        "overflow_pages": result.meta["counts"]["overflow_pages"],
        "warnings": len(result.meta["warnings"]),
    }
    print(json.dumps(summary, sort_keys=True, separators=(",", ":"), ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
