"""Digest prompt contract and chat-completion request payload for the summarizing model.

The system prompt asks for exactly the markdown skeleton newsdigest.parser reads.
Sending the request is left to the caller; this module only builds it.
"""

from __future__ import annotations

import datetime as dt
import os
from typing import Any

from newsdigest.config import DigestConfig

PROCESSED_DATE_PLACEHOLDER = "{{PROCESSED_DATE}}"
REQUIRED_PROMPT_PLACEHOLDERS = (PROCESSED_DATE_PLACEHOLDER,)
TRUNCATION_NOTICE = "\n\n[Content truncated due to length...]"
USER_PROMPT_PREFIX = "Please analyze this newsletter content and create a comprehensive markdown digest:\n\n"

DIGEST_PROMPT_TEMPLATE = """You are an expert newsletter analyst. Create a comprehensive markdown digest of the newsletter content.

Structure your response as follows:
# Newsletter Digest: [Title]

## Executive Summary
A 2-3 sentence overview of the main points.

## Key Themes
### Theme 1: [Theme Name]
- Key insight 1
- Key insight 2
- Supporting details

### Theme 2: [Theme Name]
- Key insight 1
- Key insight 2
- Supporting details

(Continue for 3-5 themes as appropriate)

## Notable Quotes
> "Important quote 1"

> "Important quote 2"

## Action Items & Takeaways
- Actionable insight 1
- Actionable insight 2
- Key learning 3

## Source Information
- **Source**: [Newsletter name if identifiable]
- **Processed**: {{PROCESSED_DATE}}

Focus on extracting valuable insights, identifying patterns, and presenting information in a scannable format."""


def load_prompt_template(path: str | None = None) -> str:
    """Load the digest system prompt. Uses path, else NEWSDIGEST_PROMPT_PATH env, else the bundled template."""
    if path is None:
        path = os.getenv("NEWSDIGEST_PROMPT_PATH", "").strip() or None
    if path is None:
        return DIGEST_PROMPT_TEMPLATE
    if not os.path.exists(path):
        raise RuntimeError(f"Prompt file not found: {path}")
    with open(path, encoding="utf-8") as f:
        template = f.read()
    missing = [token for token in REQUIRED_PROMPT_PLACEHOLDERS if token not in template]
    if missing:
        missing_str = ", ".join(missing)
        raise RuntimeError(f"Prompt template missing required placeholders ({missing_str}): {path}")
    return template


def truncate_content(text: str, max_chars: int) -> str:
    """Cut text to max_chars and append a truncation notice. max_chars <= 0 disables truncation."""
    text = text or ""
    if max_chars <= 0 or len(text) <= max_chars:
        return text
    return text[:max_chars] + TRUNCATION_NOTICE


def build_digest_messages(
    content: str,
    *,
    processed: dt.date | None = None,
    max_chars: int = 10000,
    template: str | None = None,
) -> list[dict[str, str]]:
    """Return [system, user] chat messages asking the model for a digest of content."""
    if processed is None:
        processed = dt.datetime.now(dt.timezone.utc).date()
    if template is None:
        template = load_prompt_template()
    system = template.replace(PROCESSED_DATE_PLACEHOLDER, processed.isoformat())
    user = USER_PROMPT_PREFIX + truncate_content(content, max_chars)
    return [
        {"role": "system", "content": system},
        {"role": "user", "content": user},
    ]


def build_completion_request(
    content: str,
    config: DigestConfig,
    *,
    processed: dt.date | None = None,
    template: str | None = None,
) -> dict[str, Any]:
    """Build the JSON-ready chat-completion payload for one newsletter."""
    messages = build_digest_messages(
        content,
        processed=processed,
        max_chars=config.content_max_chars,
        template=template,
    )
    return {
        "model": config.model,
        "messages": messages,
        "max_tokens": config.max_tokens,
        "temperature": config.temperature,
    }
