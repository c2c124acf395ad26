"""newsdigest: parse AI-generated newsletter digest markdown into structured records, and render them."""

from newsdigest.parser import (
    ParsedDigest,
    Theme,
    UNTITLED_DIGEST,
    extract_title,
    parse_digest,
    section,
)
from newsdigest.prompt import build_completion_request, build_digest_messages
from newsdigest.render import render_digest_md, title_for_file
from newsdigest.source_info import SourceInfo, extract_source_name, parse_source_info

__all__ = [
    "ParsedDigest",
    "Theme",
    "UNTITLED_DIGEST",
    "extract_title",
    "parse_digest",
    "section",
    "build_completion_request",
    "build_digest_messages",
    "render_digest_md",
    "title_for_file",
    "SourceInfo",
    "extract_source_name",
    "parse_source_info",
]
