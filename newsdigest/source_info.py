"""Source Information helpers: labelled fields from a digest, and newsletter source-name detection."""

from __future__ import annotations

import datetime as dt
import re
from dataclasses import dataclass, field

from dateutil import parser as dtparser

UNKNOWN_SOURCE = "Unknown Source"

# "- **Source**: X" and "- **Source:** X"
_BOLD_FIELD_RE = re.compile(r"^[-*+]\s+\*\*([^*]+?)(?::\*\*|\*\*:)\s*(.*)$")
_PLAIN_FIELD_RE = re.compile(r"^[-*+]\s+([^:*]+?):(?!//)\s*(.*)$")

# Tried in order; first capture wins.
_SOURCE_NAME_PATTERNS = (
    re.compile(r"From:.*?<(.+?)>"),
    re.compile(r"From:\s*(.+?)(?:\n|\Z)"),
    re.compile(r"Newsletter:\s*(.+?)(?:\n|\Z)", re.IGNORECASE),
    re.compile(r"^(.+?)\s*Newsletter", re.IGNORECASE | re.MULTILINE),
)


@dataclass(frozen=True)
class SourceInfo:
    """Fields read from a digest's Source Information block."""

    source: str = ""
    processed: dt.date | None = None
    fields: dict[str, str] = field(default_factory=dict)


def _field_from_line(line: str) -> tuple[str, str] | None:
    s = line.strip()
    m = _BOLD_FIELD_RE.match(s) or _PLAIN_FIELD_RE.match(s)
    if not m:
        return None
    label = m.group(1).strip()
    if not label:
        return None
    return label, m.group(2).strip()


def parse_processed_date(value: str) -> dt.date | None:
    """Parse a free-form date string (ISO, 10/18/2026, 18 Oct 2026, ...); None if unparseable."""
    value = (value or "").strip()
    if not value:
        return None
    try:
        return dtparser.parse(value).date()
    except (ValueError, OverflowError):
        return None


def parse_source_info(text: str) -> SourceInfo:
    """Read 'label: value' bullet lines from Source Information. Never raises."""
    fields: dict[str, str] = {}
    for line in (text or "").split("\n"):
        parsed = _field_from_line(line)
        if parsed is None:
            continue
        label, value = parsed
        fields.setdefault(label, value)

    by_label = {k.casefold(): v for k, v in reversed(list(fields.items()))}
    return SourceInfo(
        source=by_label.get("source", ""),
        processed=parse_processed_date(by_label.get("processed", "")),
        fields=fields,
    )


def extract_source_name(content: str) -> str:
    """Guess the newsletter name from its text (From header, 'Newsletter:' label, '<Name> Newsletter')."""
    for pattern in _SOURCE_NAME_PATTERNS:
        m = pattern.search(content or "")
        if m:
            return m.group(1).strip()
    return UNKNOWN_SOURCE
