"""Shared helpers used by render, library, and CLI modules."""

import hashlib
import re


def sha1(s: str) -> str:
    """Return SHA-1 hex digest of the string."""
    return hashlib.sha1(s.encode("utf-8")).hexdigest()


def normalize_summary(text: str, max_chars: int = 280) -> str:
    """Collapse whitespace, strip, and truncate to max_chars with ellipsis."""
    s = re.sub(r"\s+", " ", text or "").strip()
    if max_chars > 0 and len(s) > max_chars:
        s = s[:max_chars] + "…"
    return s


def read_text(path) -> str:
    """Read and return the entire contents of a text file."""
    with open(path, encoding="utf-8") as f:
        return f.read()
