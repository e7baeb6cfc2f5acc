"""
In-memory article source (ArticleSourcePort implementation).

Constructed by the caller and opened/closed explicitly; there is no module
level client. open() fabricates placeholder articles unless a fixed list
was supplied.
"""

from __future__ import annotations

import logging

from src.components.articles import Article, mock_articles
from src.core.ports.randomness import RandomPort
from src.core.ports.time import TimePort

logger = logging.getLogger(__name__)


class ArticleSourceClosedError(RuntimeError):
    """Raised when reading from a source that is not open."""


class InMemoryArticleSource:
    """Article source backed by a list held in memory."""

    def __init__(
        self,
        *,
        rng: RandomPort,
        time: TimePort,
        count: int = 10,
        id_length: int = 7,
        articles: list[Article] | None = None,
    ) -> None:
        self._rng = rng
        self._time = time
        self._count = count
        self._id_length = id_length
        self._seed_articles = articles
        self._articles: list[Article] | None = None
        self._by_slug: dict[str, Article] = {}

    def open(self) -> None:
        """Load articles. Opening an open source is a no-op."""
        if self._articles is not None:
            return

        if self._seed_articles is not None:
            articles = list(self._seed_articles)
        else:
            articles = mock_articles(
                self._count, rng=self._rng, time=self._time, id_length=self._id_length
            )

        self._articles = articles
        self._by_slug = {article.slug: article for article in articles}
        logger.info("Article source opened with %d articles", len(articles))

    def close(self) -> None:
        """Drop loaded articles. Safe to call more than once."""
        if self._articles is None:
            return
        self._articles = None
        self._by_slug = {}
        logger.info("Article source closed")

    @property
    def is_open(self) -> bool:
        return self._articles is not None

    def _require_open(self) -> list[Article]:
        if self._articles is None:
            raise ArticleSourceClosedError("Article source is not open")
        return self._articles

    def list_all(self) -> list[Article]:
        return list(self._require_open())

    def get_by_slug(self, slug: str) -> Article | None:
        self._require_open()
        return self._by_slug.get(slug)
