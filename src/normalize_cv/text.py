from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Sequence

_WS = re.compile(r"\s+")
_HSPACE = re.compile(r"[^\S\n]+")  # whitespace other than newline
_MULTI_NL = re.compile(r"\n{3,}")
_LINE_SPLIT = re.compile(r"[\r\n]+")
# Common list glyphs pasted from word processors and other editors.
_BULLET_GLYPHS = re.compile(r"^(?:[•◦▪▸►‣→➤–\-\*]\s*)+")
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def clean_text(value: Any) -> str:
    """Single-line field cleanup: trim and collapse every whitespace run (newlines included)."""
    if not isinstance(value, str) or value == "":
        return ""
    return _WS.sub(" ", value).strip()


def clean_multiline(value: Any, *, max_lines: int | None = None) -> str:
    """
    Summary/description cleanup.

    Collapses horizontal whitespace per line, keeps line breaks but never more than
    one blank line in a row, trims the whole text. With `max_lines`, only the first
    N non-blank lines (and the blank separators between them) are kept.
    """
    if not isinstance(value, str) or value == "":
        return ""
    text = value.replace("\r\n", "\n").replace("\r", "\n")
    lines = [_HSPACE.sub(" ", ln).strip() for ln in text.split("\n")]
    out = _MULTI_NL.sub("\n\n", "\n".join(lines)).strip()
    if max_lines is not None:
        kept: list[str] = []
        seen = 0
        for ln in out.split("\n"):
            if ln != "":
                if seen >= max_lines:
                    break
                seen += 1
            kept.append(ln)
        out = "\n".join(kept).strip()
    return out


def count_text_lines(text: str) -> int:
    return sum(1 for ln in text.split("\n") if ln.strip() != "")


def truncate(text: str, max_length: int, marker: str = "...") -> str:
    if len(text) <= max_length:
        return text
    return text[: max_length - len(marker)].rstrip() + marker


def parse_leading_int(value: Any) -> int | None:
    """Leading-integer parse: "03" -> 3, "2020 (exp.)" -> 2020, "abc" -> None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        return None
    m = _LEADING_INT.match(value)
    return int(m.group(1)) if m else None


def year_sort_key(year: Any) -> int:
    # Missing or unparseable years sort as the oldest entries.
    return parse_leading_int(year) or 0


def format_date(month: Any, year: Any, month_names: Sequence[str]) -> str:
    """
    "MonthName Year" when the month resolves against `month_names`, else "Year".
    An empty year always yields "".
    """
    y = clean_text(year)
    if y == "":
        return ""
    m = parse_leading_int(month)
    if m is not None and 1 <= m <= len(month_names):
        name = clean_text(month_names[m - 1])
        if name != "":
            return f"{name} {y}"
    return y


def join_date_range(start: str, end: str) -> str:
    if start == "":
        return ""
    if end == "":
        return start
    return f"{start} - {end}"


@dataclass(frozen=True, slots=True)
class BulletExtraction:
    bullets: list[str]
    dropped_count: int  # lines beyond max_bullets
    truncated_indices: list[int]  # indices into `bullets`


def extract_bullets(
    description: Any,
    *,
    max_bullets: int,
    max_length: int,
    marker: str = "...",
) -> BulletExtraction:
    """
    Turn a free-text description into display bullets.

    Lines are split on line breaks, leading list glyphs are stripped, empty lines
    dropped; the first `max_bullets` lines survive and each is truncated to
    `max_length` characters (marker included).
    """
    if not isinstance(description, str) or description == "":
        return BulletExtraction(bullets=[], dropped_count=0, truncated_indices=[])

    lines: list[str] = []
    for raw in _LINE_SPLIT.split(description):
        ln = _WS.sub(" ", raw).strip()
        ln = _BULLET_GLYPHS.sub("", ln).strip()
        if ln:
            lines.append(ln)

    kept = lines[: max(0, max_bullets)]
    bullets: list[str] = []
    truncated: list[int] = []
    for i, ln in enumerate(kept):
        t = truncate(ln, max_length, marker)
        if t != ln:
            truncated.append(i)
        bullets.append(t)

    return BulletExtraction(
        bullets=bullets,
        dropped_count=len(lines) - len(kept),
        truncated_indices=truncated,
    )


def degree_display(degree_type: str, field_of_study: str) -> str:
    """Derived degree label used when the free-text degree is empty."""
    if not degree_type and not field_of_study:
        return ""
    if not field_of_study or field_of_study.lower() == "other":
        return degree_type
    if not degree_type:
        return field_of_study
    dt = degree_type.lower()
    if "high school" in dt:
        return degree_type
    if field_of_study.lower() in ("mba", "business administration") and "master" in dt:
        return "MBA"
    return f"{degree_type} in {field_of_study}"
