from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from contracts.document import CanonicalDocument


def serialize_canonical_document(
    document: CanonicalDocument, *, warnings: list[dict[str, Any]] | None = None
) -> str:
    payload: dict[str, Any] = {
        "document": document.to_dict(),
        "warnings": list(warnings or []),
    }
    return json.dumps(payload, ensure_ascii=False, sort_keys=True, indent=2) + "\n"


def write_canonical_document_json(
    *,
    document: CanonicalDocument,
    out_file: Path,
    warnings: list[dict[str, Any]] | None = None,
) -> None:
    out_file.parent.mkdir(parents=True, exist_ok=True)
    out_file.write_text(serialize_canonical_document(document, warnings=warnings), encoding="utf-8")
