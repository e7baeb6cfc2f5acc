"""
Text component - Summary truncation, tag stripping, compact counters.
"""

from ._impl import format_count, strip_html_tags, truncate_text

__all__ = [
    "format_count",
    "strip_html_tags",
    "truncate_text",
]
