from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .contracts import ExportAuditResult


def serialize_export_audit(result: ExportAuditResult) -> str:
    payload: dict[str, Any] = result.to_dict()
    return json.dumps(payload, ensure_ascii=False, sort_keys=True, indent=2) + "\n"


def write_export_audit_json(*, result: ExportAuditResult, out_file: Path) -> None:
    out_file.parent.mkdir(parents=True, exist_ok=True)
    out_file.write_text(serialize_export_audit(result), encoding="utf-8")
