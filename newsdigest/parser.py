"""Parse AI-generated newsletter digest markdown into a structured, immutable record.

The model is asked for a fixed skeleton (see newsdigest.prompt) but does not
always follow it, so every extraction step falls back to an empty value
instead of raising. The parser reads no configuration and keeps no state.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

UNTITLED_DIGEST = "Untitled Digest"
TITLE_PREFIX = "Newsletter Digest: "

# field name -> level-2 heading label
SECTION_HEADINGS: dict[str, str] = {
    "executive_summary": "Executive Summary",
    "themes": "Key Themes",
    "notable_quotes": "Notable Quotes",
    "action_items": "Action Items & Takeaways",
    "source_info": "Source Information",
}

_TITLE_RE = re.compile(r"^#[ \t]+(\S.*?)\r?$", re.MULTILINE)
_THEME_MARKER_RE = re.compile(r"### Theme [0-9]+:")
_BULLET = "- "
_QUOTE = "> "


@dataclass(frozen=True)
class Theme:
    """One theme card: title, one-line summary, and bullet details."""

    title: str
    summary: str
    details: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "summary": self.summary, "details": list(self.details)}


@dataclass(frozen=True)
class ParsedDigest:
    """Structured digest recovered from markdown. Absent sections are empty, never None."""

    title: str
    executive_summary: str = ""
    themes: tuple[Theme, ...] = ()
    notable_quotes: tuple[str, ...] = ()
    action_items: tuple[str, ...] = ()
    source_info: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready dict using the camelCase keys the digest UI consumes."""
        return {
            "title": self.title,
            "executiveSummary": self.executive_summary,
            "themes": [t.to_dict() for t in self.themes],
            "notableQuotes": list(self.notable_quotes),
            "actionItems": list(self.action_items),
            "sourceInfo": self.source_info,
        }


def extract_title(markdown: str, default: str | None = UNTITLED_DIGEST) -> str | None:
    """Return the first level-1 heading text without the 'Newsletter Digest: ' prefix, else default."""
    m = _TITLE_RE.search(markdown or "")
    if not m:
        return default
    title = m.group(1)
    if title.startswith(TITLE_PREFIX):
        title = title[len(TITLE_PREFIX) :]
    return title


def _is_heading_line(line: str, label: str) -> bool:
    if not line.startswith("## "):
        return False
    return line[3:].rstrip().casefold() == label.casefold()


def section(markdown: str, label: str) -> str:
    """Return the trimmed body of the first '## <label>' section, up to the next '## ' heading.

    Label matching is case-insensitive. Returns "" when the heading is absent.
    """
    lines = (markdown or "").split("\n")
    body_start = None
    for idx, line in enumerate(lines):
        if _is_heading_line(line, label):
            body_start = idx + 1
            break
    if body_start is None:
        return ""

    body_lines: list[str] = []
    for line in lines[body_start:]:
        if line.startswith("## "):
            break
        body_lines.append(line)
    return "\n".join(body_lines).strip()


def _parse_theme(segment: str) -> Theme:
    lines = segment.strip().split("\n")
    title = lines[0].strip()
    details: list[str] = []
    summary = ""
    for line in lines[1:]:
        s = line.strip()
        if s.startswith(_BULLET):
            details.append(s[len(_BULLET) :])
        elif s and not summary:
            summary = s
    if not summary and details:
        summary = details[0]
    return Theme(title=title, summary=summary, details=tuple(details))


def extract_themes(markdown: str) -> tuple[Theme, ...]:
    """Split the Key Themes section on '### Theme N:' markers; text before the first marker is dropped."""
    body = section(markdown, SECTION_HEADINGS["themes"])
    if not body:
        return ()
    segments = _THEME_MARKER_RE.split(body)
    return tuple(_parse_theme(seg) for seg in segments[1:])


def _strip_quote_marks(text: str) -> str:
    if text.startswith('"'):
        text = text[1:]
    if text.endswith('"'):
        text = text[:-1]
    return text


def extract_quotes(markdown: str) -> tuple[str, ...]:
    """Return one entry per '> ' line in Notable Quotes, with surrounding double quotes removed."""
    quotes: list[str] = []
    for line in section(markdown, SECTION_HEADINGS["notable_quotes"]).split("\n"):
        s = line.strip()
        if s.startswith(_QUOTE):
            quotes.append(_strip_quote_marks(s[len(_QUOTE) :]))
    return tuple(quotes)


def extract_action_items(markdown: str) -> tuple[str, ...]:
    """Return the '- ' bullets of Action Items & Takeaways; other lines are ignored."""
    items: list[str] = []
    for line in section(markdown, SECTION_HEADINGS["action_items"]).split("\n"):
        s = line.strip()
        if s.startswith(_BULLET):
            items.append(s[len(_BULLET) :])
    return tuple(items)


def parse_digest(markdown: str) -> ParsedDigest:
    """Parse digest markdown. Never raises; missing sections come back empty."""
    markdown = markdown or ""
    return ParsedDigest(
        title=extract_title(markdown),
        executive_summary=section(markdown, SECTION_HEADINGS["executive_summary"]),
        themes=extract_themes(markdown),
        notable_quotes=extract_quotes(markdown),
        action_items=extract_action_items(markdown),
        source_info=section(markdown, SECTION_HEADINGS["source_info"]),
    )
