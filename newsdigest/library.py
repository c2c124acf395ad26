"""Digest library: scan a directory of digest markdown files, then search and filter the entries."""

from __future__ import annotations

import datetime as dt
import sys
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from tqdm import tqdm

from newsdigest.frontmatter import split_frontmatter_and_body
from newsdigest.parser import parse_digest
from newsdigest.source_info import parse_processed_date, parse_source_info
from newsdigest.utils import normalize_summary, sha1

LIBRARY_SUMMARY_MAX_CHARS = 200


@dataclass(frozen=True)
class LibraryEntry:
    """One processed newsletter digest as listed in the library."""

    path: Path
    digest_id: str
    title: str
    source: str
    processed: dt.date | None
    theme_count: int
    quote_count: int
    action_count: int
    summary: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": str(self.path),
            "id": self.digest_id,
            "title": self.title,
            "source": self.source,
            "processed": self.processed.isoformat() if self.processed else None,
            "themes": self.theme_count,
            "quotes": self.quote_count,
            "actions": self.action_count,
            "summary": self.summary,
        }


def _frontmatter_date(value: Any) -> dt.date | None:
    if value is None or value == "":
        return None
    return parse_processed_date(str(value))


def entry_from_text(path: Path, text: str) -> LibraryEntry:
    """Build a library entry from one digest file's text (frontmatter optional)."""
    frontmatter, body = split_frontmatter_and_body(text)
    digest = parse_digest(body)
    info = parse_source_info(digest.source_info)
    source = str(frontmatter.get("source") or "").strip() or info.source
    processed = info.processed or _frontmatter_date(frontmatter.get("date"))
    return LibraryEntry(
        path=path,
        digest_id=sha1(text),
        title=digest.title,
        source=source,
        processed=processed,
        theme_count=len(digest.themes),
        quote_count=len(digest.notable_quotes),
        action_count=len(digest.action_items),
        summary=normalize_summary(digest.executive_summary, LIBRARY_SUMMARY_MAX_CHARS),
    )


def scan_library(directory: Path, pattern: str = "*.md", *, progress: bool = False) -> list[LibraryEntry]:
    """Parse every matching digest file under directory, sorted by path. Unreadable files are skipped."""
    directory = Path(directory)
    if not directory.is_dir():
        return []
    paths = sorted(p for p in directory.glob(pattern) if p.is_file())
    entries: list[LibraryEntry] = []
    disable_progress = not progress or not sys.stderr.isatty()
    for path in tqdm(paths, desc="library", unit="file", disable=disable_progress):
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            warnings.warn(f"Skipping unreadable digest {path}: {e}", stacklevel=2)
            continue
        entries.append(entry_from_text(path, text))
    return entries


def filter_library(
    entries: list[LibraryEntry],
    *,
    query: str | None = None,
    source: str | None = None,
) -> list[LibraryEntry]:
    """Keep entries whose title or summary contains query, and whose source equals source (case-insensitive)."""
    needle = (query or "").strip().casefold()
    wanted_source = (source or "").strip().casefold()
    kept = []
    for entry in entries:
        if needle and needle not in entry.title.casefold() and needle not in entry.summary.casefold():
            continue
        if wanted_source and entry.source.casefold() != wanted_source:
            continue
        kept.append(entry)
    return kept
