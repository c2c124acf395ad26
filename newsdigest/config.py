"""Environment-backed runtime configuration for newsdigest prompts, rendering and CLI."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass


def env_bool(name: str, default: bool, environ: Mapping[str, str] | None = None) -> bool:
    """Return boolean env value using common truthy spellings."""
    source = os.environ if environ is None else environ
    raw = source.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def env_int(name: str, default: int, environ: Mapping[str, str] | None = None) -> int:
    """Return integer env value, falling back to default on parse errors."""
    source = os.environ if environ is None else environ
    raw = source.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def env_float(name: str, default: float, environ: Mapping[str, str] | None = None) -> float:
    """Return float env value, falling back to default on parse errors."""
    source = os.environ if environ is None else environ
    raw = source.get(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class DigestConfig:
    """Completion request, rendering and output settings."""

    model: str
    max_tokens: int
    temperature: float
    content_max_chars: int
    description_max_chars: int
    lint_output: bool


def load_digest_config(environ: Mapping[str, str] | None = None) -> DigestConfig:
    """Load digest configuration from environment."""
    source = os.environ if environ is None else environ
    return DigestConfig(
        model=(source.get("OPENAI_MODEL") or "").strip() or "gpt-3.5-turbo",
        max_tokens=env_int("NEWSDIGEST_MAX_TOKENS", 2000, source),
        temperature=env_float("NEWSDIGEST_TEMPERATURE", 0.3, source),
        content_max_chars=env_int("NEWSDIGEST_CONTENT_MAX_CHARS", 10000, source),
        description_max_chars=env_int("NEWSDIGEST_DESCRIPTION_MAX_CHARS", 280, source),
        lint_output=env_bool("NEWSDIGEST_LINT", True, source),
    )
