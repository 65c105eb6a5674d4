from __future__ import annotations

import argparse
from pathlib import Path

from layout.artifacts import read_layout_json_artifact
from layout.config import PageGeometry
from normalize_cv.cli import print_failure

from .artifacts import write_export_audit_json
from .contracts import ExportAuditConfig
from .module import run_export_audit_relpath


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="cv-export-audit",
        description="Check an exported CV PDF against the layout it was rendered from.",
    )
    p.add_argument("--data-root", required=True, type=Path, help="Directory holding exported PDFs.")
    p.add_argument("--pdf-relpath", required=True, help="Exported PDF path relative to --data-root.")
    p.add_argument("--layout", required=True, type=Path, help="Layout JSON artifact the PDF was rendered from.")
    p.add_argument("--output", required=True, type=Path, help="Output audit JSON file.")
    p.add_argument("--size-tolerance-pt", type=float, default=2.0, help="Allowed page size deviation (points).")
    p.add_argument(
        "--compute-source-sha256",
        action="store_true",
        help="Include SHA-256 of the exported PDF in meta for auditing.",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        layout = read_layout_json_artifact(args.layout)
        # The layout artifact echoes the geometry it was computed with.
        geometry = PageGeometry.from_dict((layout.meta.get("params") or {}).get("page") or {})
    except OSError as e:
        return print_failure(
            {"code": "LAYOUT_UNREADABLE", "message": "Layout artifact could not be read", "detail": {"error": repr(e)}}
        )
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        return print_failure(
            {"code": "LAYOUT_INVALID", "message": "Layout artifact is malformed", "detail": {"error": repr(e)}}
        )

    config = ExportAuditConfig(
        data_root=args.data_root,
        size_tolerance_pt=args.size_tolerance_pt,
        compute_source_sha256=args.compute_source_sha256,
    )
    result = run_export_audit_relpath(
        config=config,
        pdf_relpath=args.pdf_relpath,
        layout=layout,
        geometry=geometry,
    )
    write_export_audit_json(result=result, out_file=args.output)

    print(f"pdf={result.source_pdf_relpath} pages={result.page_count}/{result.expected_pages} ok={result.ok}")
    return 0 if result.ok else 2


if __name__ == "__main__":
    raise SystemExit(main())
