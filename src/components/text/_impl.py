"""
Text helpers for card summaries and counters.
"""

from __future__ import annotations

import html
import re

_BR = re.compile(r"<br\s*/?>", re.IGNORECASE)
_TAG = re.compile(r"<[^>]*>")


def truncate_text(text: str | None, max_length: int = 150) -> str:
    """Cut to max_length characters and add an ellipsis when shortened."""
    if not text:
        return ""

    if len(text) <= max_length:
        return text

    return text[:max_length].strip() + "..."


def strip_html_tags(markup: str | None) -> str:
    """
    Plain text from an HTML fragment.

    <br> becomes a newline, all other tags are dropped and entities are
    unescaped.
    """
    if not markup:
        return ""

    text = _BR.sub("\n", markup)
    text = _TAG.sub("", text)
    return html.unescape(text).replace("\xa0", " ").strip()


def format_count(num: int) -> str:
    """Compact counter: 999, 1.2K, 3.4M, 1.0B."""
    if num < 1000:
        return str(num)
    if num < 1_000_000:
        return f"{num / 1000:.1f}K"
    if num < 1_000_000_000:
        return f"{num / 1_000_000:.1f}M"
    return f"{num / 1_000_000_000:.1f}B"
