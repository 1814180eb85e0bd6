"""Utility helpers shared between services."""
from __future__ import annotations

import re

from .logging_config import get_logger

logger = get_logger(__name__)

_OPENING_FENCE = re.compile(r"^\s*```[A-Za-z0-9_-]*[ \t]*\n?")
_CLOSING_FENCE = re.compile(r"\n?```\s*$")
_SLUG_UNSAFE = re.compile(r"[^a-z0-9]")


def strip_markdown_fences(text: str) -> str:
    """Remove optional markdown code fences (```json ... ```) from the response text."""
    text = _OPENING_FENCE.sub("", text, count=1)
    text = _CLOSING_FENCE.sub("", text, count=1)
    return text.strip()


def slugify_title(title: str) -> str:
    """Lower-case the title and replace anything outside [a-z0-9] with '_'."""
    slug = _SLUG_UNSAFE.sub("_", title.lower())
    logger.debug("Slugified title %r to %r", title, slug)
    return slug


__all__ = ["slugify_title", "strip_markdown_fences"]
