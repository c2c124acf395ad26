"""Tidy a written digest file: mdformat the text and stamp frontmatter lastmod."""

from __future__ import annotations

import datetime as dt
from pathlib import Path

from newsdigest.frontmatter import split_frontmatter_and_body, with_frontmatter


def _mdformat_text(text: str) -> str:
    """mdformat with frontmatter and GFM support; text comes back as is if mdformat is unavailable."""
    try:
        import mdformat
    except ImportError:
        return text
    try:
        return mdformat.text(text, extensions={"frontmatter", "gfm"})
    except (KeyError, ValueError):
        return text


def format_digest_file(path: Path, *, stamp_lastmod: bool = True) -> bool:
    """Format a digest file in place. Returns True if its content changed; missing paths are a no-op."""
    try:
        original = path.read_text(encoding="utf-8")
    except (FileNotFoundError, IsADirectoryError):
        return False

    content = _mdformat_text(original)
    frontmatter, body = split_frontmatter_and_body(content)
    if stamp_lastmod and frontmatter:
        frontmatter["lastmod"] = dt.datetime.now(dt.timezone.utc).date().isoformat()
        content = with_frontmatter(body, frontmatter)

    if content == original:
        return False
    path.write_text(content, encoding="utf-8")
    return True
