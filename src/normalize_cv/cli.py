from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from contracts.document import CVDocument

from .artifacts import write_canonical_document_json
from .config import DEFAULT_MONTH_NAMES, DEFAULT_NO_EXPIRY_LABEL, DEFAULT_PRESENT_LABEL
from .module import normalize_document_with_warnings
from .validation import validate_document


def load_month_names(path: Path | None) -> tuple[tuple[str, ...] | None, dict[str, Any] | None]:
    """Month table from a JSON list of 12 strings; None => English defaults."""
    if path is None:
        return DEFAULT_MONTH_NAMES, None
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        return None, {"code": "MONTHS_FILE_UNREADABLE", "message": "Month names file could not be read", "detail": {"error": repr(e)}}
    if not isinstance(raw, list) or len(raw) != 12 or not all(isinstance(x, str) for x in raw):
        return None, {
            "code": "MONTHS_FILE_INVALID",
            "message": "Month names file must hold a JSON list of 12 strings",
            "detail": {"path": str(path)},
        }
    return tuple(raw), None


def print_failure(error: dict[str, Any]) -> int:
    print(json.dumps({"ok": False, "errors": [error]}, sort_keys=True, separators=(",", ":"), ensure_ascii=False))
    return 2


def load_document_json(path: Path) -> tuple[CVDocument | None, dict[str, Any] | None]:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        return None, {"code": "INPUT_UNREADABLE", "message": "Input document could not be read", "detail": {"error": repr(e)}}
    if not isinstance(raw, dict):
        return None, {"code": "INPUT_NOT_OBJECT", "message": "Input document must be a JSON object", "detail": {}}
    return CVDocument.from_dict(raw), None


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="cv-normalize",
        description="Normalize a raw CV document (cleanup, bullets, dates, newest-first order).",
    )
    p.add_argument("--input", required=True, type=Path, help="Raw document JSON (editor or saved file).")
    p.add_argument("--output", required=True, type=Path, help="Path to write the canonical document JSON.")
    p.add_argument("--months-file", type=Path, default=None, help="JSON list of 12 localized month names.")
    p.add_argument("--present-label", default=DEFAULT_PRESENT_LABEL)
    p.add_argument("--no-expiry-label", default=DEFAULT_NO_EXPIRY_LABEL)
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    month_names, error = load_month_names(args.months_file)
    if month_names is None:
        return print_failure(error)

    document, error = load_document_json(args.input)
    if document is None:
        return print_failure(error)

    canonical, warnings = normalize_document_with_warnings(
        document,
        month_names,
        present_label=args.present_label,
        no_expiry_label=args.no_expiry_label,
    )
    write_canonical_document_json(document=canonical, out_file=args.output, warnings=warnings)

    summary = {
        "ok": True,
        "experience": len(canonical.experience),
        "education": len(canonical.education),
        "certifications": len(canonical.certifications),
        "skills": len(canonical.skills),
        "languages": len(canonical.languages),
        "warnings": len(warnings),
        "validation_issues": [i.code for i in validate_document(document)],
    }
    print(json.dumps(summary, sort_keys=True, separators=(",", ":"), ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
