"""
Articles component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from src.core.ports.randomness import RandomPort
from src.core.ports.time import TimePort

from .models import Article


class ArticleSourcePort(Protocol):
    """Read access to content records."""

    def list_all(self) -> list[Article]:
        """All articles, newest first."""
        ...

    def get_by_slug(self, slug: str) -> Article | None:
        """Article by canonical slug, or None."""
        ...


__all__ = ["ArticleSourcePort", "RandomPort", "TimePort"]
