"""
Articles component input/output models.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

# --- Validation Error ---


@dataclass(frozen=True)
class ArticleValidationError:
    """Article lookup/validation error."""

    code: str
    message: str
    field: str | None = None


# --- Content Record ---


@dataclass(frozen=True)
class Article:
    """
    Raw content record as produced by ingestion or fabrication.

    image may be a URL, a list of URLs, or a JSON-encoded list; author may
    be missing. Never mutated by the presentation pipeline.
    """

    id: str
    title: str
    date: str
    slug: str
    summary: str = ""
    content: str = ""
    image: str | Sequence[str] | None = None
    author: str | None = None
    author_avatar: str | None = None
    published_at: str | None = None
    view_count: int = 0


# --- Card (normalized) ---


@dataclass(frozen=True)
class ArticleCard:
    """Canonical, render-safe view of an article."""

    id: str
    slug: str
    url: str
    title: str
    summary: str
    author: str
    author_avatar: str
    image_url: str
    published: str
    published_relative: str
    views: str


# --- Input Models ---


@dataclass(frozen=True)
class ListArticlesInput:
    """Input for listing article cards."""

    limit: int | None = None


@dataclass(frozen=True)
class GetArticleInput:
    """Input for fetching one article card by slug."""

    slug: str


# --- Output Models ---


@dataclass(frozen=True)
class ArticleListOutput:
    """Output containing article cards."""

    cards: tuple[ArticleCard, ...]
    total: int
    errors: list[ArticleValidationError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class ArticleOutput:
    """Output containing a single article card."""

    card: ArticleCard | None
    errors: list[ArticleValidationError] = field(default_factory=list)
    success: bool = True
