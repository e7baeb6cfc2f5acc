"""
Articles component - Normalized article cards.

Shell Layer - reads from the article source and converts to cards.
"""

from __future__ import annotations

from ._impl import DEFAULT_CARD_CONFIG, CardConfig, to_card
from .models import (
    ArticleListOutput,
    ArticleOutput,
    ArticleValidationError,
    GetArticleInput,
    ListArticlesInput,
)
from .ports import ArticleSourcePort, TimePort


def run_list(
    inp: ListArticlesInput,
    *,
    source: ArticleSourcePort,
    time: TimePort,
    config: CardConfig = DEFAULT_CARD_CONFIG,
) -> ArticleListOutput:
    """
    List article cards.

    Args:
        inp: Input with optional limit.
        source: Article source port.
        time: Time port for date display.
        config: Card normalization config.

    Returns:
        ArticleListOutput with cards, or an error for a negative limit.
    """
    if inp.limit is not None and inp.limit < 0:
        return ArticleListOutput(
            cards=(),
            total=0,
            errors=[
                ArticleValidationError(
                    code="limit_invalid",
                    message="Limit must be zero or greater",
                    field="limit",
                )
            ],
            success=False,
        )

    articles = source.list_all()
    total = len(articles)
    if inp.limit is not None:
        articles = articles[: inp.limit]

    cards = tuple(to_card(article, time=time, config=config) for article in articles)
    return ArticleListOutput(cards=cards, total=total)


def run_get(
    inp: GetArticleInput,
    *,
    source: ArticleSourcePort,
    time: TimePort,
    config: CardConfig = DEFAULT_CARD_CONFIG,
) -> ArticleOutput:
    """Get one article card by slug."""
    article = source.get_by_slug(inp.slug)
    if article is None:
        return ArticleOutput(
            card=None,
            errors=[
                ArticleValidationError(
                    code="article_not_found",
                    message=f"Article with slug '{inp.slug}' not found",
                    field="slug",
                )
            ],
            success=False,
        )

    return ArticleOutput(card=to_card(article, time=time, config=config))


def run(
    inp: ListArticlesInput | GetArticleInput,
    *,
    source: ArticleSourcePort,
    time: TimePort,
    config: CardConfig = DEFAULT_CARD_CONFIG,
) -> ArticleListOutput | ArticleOutput:
    """
    Main entry point for the articles component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, ListArticlesInput):
        return run_list(inp, source=source, time=time, config=config)
    elif isinstance(inp, GetArticleInput):
        return run_get(inp, source=source, time=time, config=config)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
