"""
Articles component - Placeholder content and normalized article cards.
"""

from ._impl import (
    DEFAULT_CARD_CONFIG,
    CardConfig,
    create_dummy_article,
    mock_articles,
    to_card,
)
from .component import run, run_get, run_list
from .models import (
    Article,
    ArticleCard,
    ArticleListOutput,
    ArticleOutput,
    ArticleValidationError,
    GetArticleInput,
    ListArticlesInput,
)
from .ports import ArticleSourcePort

__all__ = [
    # Entry points
    "run",
    "run_get",
    "run_list",
    # Input models
    "GetArticleInput",
    "ListArticlesInput",
    # Output models
    "Article",
    "ArticleCard",
    "ArticleListOutput",
    "ArticleOutput",
    "ArticleValidationError",
    # Ports
    "ArticleSourcePort",
    # Functional core
    "DEFAULT_CARD_CONFIG",
    "CardConfig",
    "create_dummy_article",
    "mock_articles",
    "to_card",
]
