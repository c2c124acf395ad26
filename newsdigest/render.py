"""Render a ParsedDigest to markdown with YAML frontmatter."""

from __future__ import annotations

import datetime as dt

from newsdigest.frontmatter import normalize_tags, with_frontmatter
from newsdigest.parser import ParsedDigest, Theme, extract_title
from newsdigest.utils import normalize_summary

EML_SUFFIX = ".eml"


def title_for_file(markdown: str, filename: str) -> str:
    """Digest title from markdown; falls back to the file name without its .eml suffix."""
    title = extract_title(markdown, default=None)
    if title is not None:
        return title
    if filename.lower().endswith(EML_SUFFIX):
        return filename[: -len(EML_SUFFIX)]
    return filename


def _theme_lines(number: int, theme: Theme) -> list[str]:
    lines = [f"### Theme {number}: {theme.title}".rstrip()]
    # A summary equal to the first detail is what the parser derives on its own.
    if theme.summary and theme.summary != (theme.details[0] if theme.details else None):
        lines.append(theme.summary)
    lines += [f"- {d}" for d in theme.details]
    lines.append("")
    return lines


def render_digest_body(digest: ParsedDigest) -> str:
    """Markdown body in the digest skeleton, so parse_digest reads back the same record.

    Empty sections are omitted.
    """
    lines = [f"# {digest.title}", ""]
    if digest.executive_summary:
        lines += ["## Executive Summary", digest.executive_summary, ""]
    if digest.themes:
        lines += ["## Key Themes"]
        for number, theme in enumerate(digest.themes, start=1):
            lines += _theme_lines(number, theme)
    if digest.notable_quotes:
        lines += ["## Notable Quotes"]
        for quote in digest.notable_quotes:
            lines += [f'> "{quote}"', ""]
    if digest.action_items:
        lines += ["## Action Items & Takeaways"]
        lines += [f"- {item}" for item in digest.action_items]
        lines.append("")
    if digest.source_info:
        lines += ["## Source Information", digest.source_info, ""]
    return "\n".join(lines)


def render_digest_md(
    digest: ParsedDigest,
    *,
    source: str | None = None,
    processed: dt.date | None = None,
    generator: str = "newsdigest",
    description_max_chars: int = 280,
) -> str:
    """Render digest to markdown with frontmatter (title, dates, description, theme tags, counts)."""
    today = dt.datetime.now(dt.timezone.utc).date().isoformat()
    frontmatter = {
        "title": digest.title,
        "date": processed.isoformat() if processed else today,
        "lastmod": today,
        "description": normalize_summary(digest.executive_summary, description_max_chars),
        "source": source or None,
        "tags": normalize_tags([t.title for t in digest.themes]),
        "generator": generator,
        "themes": len(digest.themes),
        "quotes": len(digest.notable_quotes),
        "actions": len(digest.action_items),
    }
    return with_frontmatter(render_digest_body(digest), frontmatter)
