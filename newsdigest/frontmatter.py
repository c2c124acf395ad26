"""Frontmatter block of a rendered digest file, and tag slugs from theme titles.

Only the flat subset render_frontmatter writes is read back: ``key: value``
scalars and ``key:`` followed by ``- item`` lines.
"""

from __future__ import annotations

import re
from typing import Any

DIGEST_KEYS = ("title", "date", "lastmod", "description", "source", "tags", "generator", "themes", "quotes", "actions")

_BLOCK_RE = re.compile(r"^---\r?\n(.*?)\r?\n---(?:\r?\n|\Z)", re.DOTALL)
_KEY_RE = re.compile(r"^([A-Za-z_][\w-]*):[ \t]*(.*?)[ \t]*$")
_ITEM_RE = re.compile(r"^[ \t]*- (.*?)[ \t]*$")
_INT_RE = re.compile(r"-?[0-9]+")
_TAG_CLEAN_RE = re.compile(r"[^a-z0-9]+")
_LITERALS = {"null": None, "true": True, "false": False}


def _value(raw: str) -> Any:
    if len(raw) >= 2 and raw[0] == raw[-1] == '"':
        return raw[1:-1].replace('\\"', '"').replace("\\\\", "\\")
    if raw == "[]":
        return []
    if raw in _LITERALS:
        return _LITERALS[raw]
    if _INT_RE.fullmatch(raw):
        return int(raw)
    return raw


def parse_frontmatter(text: str) -> dict[str, Any]:
    data: dict[str, Any] = {}
    items: list | None = None
    for line in text.splitlines():
        item = _ITEM_RE.match(line)
        if item and items is not None:
            items.append(_value(item.group(1)))
            continue
        key = _KEY_RE.match(line)
        if not key:
            items = None
            continue
        name, raw = key.groups()
        if raw:
            data[name] = _value(raw)
            items = None
        else:
            data[name] = items = []
    return data


def split_frontmatter_and_body(markdown: str) -> tuple[dict[str, Any], str]:
    """Return (frontmatter, body); ({}, markdown) when there is no leading --- block."""
    markdown = markdown or ""
    match = _BLOCK_RE.match(markdown)
    if not match:
        return {}, markdown
    return parse_frontmatter(match.group(1)), markdown[match.end() :]


def _yaml_value(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, int):
        return str(value)
    escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def render_frontmatter(data: dict[str, Any]) -> str:
    """Digest keys first in their fixed order, then any others sorted. None values are left out."""
    keys = [k for k in DIGEST_KEYS if k in data] + sorted(k for k in data if k not in DIGEST_KEYS)
    lines = ["---"]
    for key in keys:
        value = data[key]
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            lines.append(f"{key}:" if value else f"{key}: []")
            lines += [f"  - {_yaml_value(v)}" for v in value]
        else:
            lines.append(f"{key}: {_yaml_value(value)}")
    lines.append("---")
    return "\n".join(lines)


def with_frontmatter(markdown: str, frontmatter: dict[str, Any]) -> str:
    """Put frontmatter on markdown, replacing any existing block. Ends with a newline."""
    _, body = split_frontmatter_and_body(markdown)
    body = body.lstrip("\n")
    out = render_frontmatter(frontmatter) + (f"\n\n{body}" if body else "")
    return out if out.endswith("\n") else out + "\n"


def normalize_tags(tags, max_tags: int = 12) -> list[str]:
    """Slug each tag (lowercase, runs of other characters become '-'), drop blanks and repeats."""
    out: list[str] = []
    for raw in tags or ():
        tag = _TAG_CLEAN_RE.sub("-", str(raw or "").lower()).strip("-")
        if tag and len(tag) <= 64 and tag not in out:
            out.append(tag)
        if len(out) >= max_tags:
            break
    return out
