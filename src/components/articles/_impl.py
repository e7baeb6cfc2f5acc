"""
Article fabrication and card normalization.

Placeholder articles exercise the identity and author components together;
to_card runs any content record through the presentation pipeline (image,
date, author, text) to produce a render-safe card.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.adapters.randomness import SeededRandom
from src.components.authors import resolve_author
from src.components.dates import (
    DEFAULT_DATE_CONFIG,
    DateFormatConfig,
    format_display_date,
    time_ago,
)
from src.components.identity import DEFAULT_ID_LENGTH, generate_id, make_slug
from src.components.images import (
    DEFAULT_IMAGE_CONFIG,
    ImageConfig,
    resolve_content_image,
    resolve_profile_image,
)
from src.components.text import format_count, strip_html_tags, truncate_text

from .models import Article, ArticleCard
from .ports import RandomPort, TimePort

# --- Configuration ---


@dataclass(frozen=True)
class CardConfig:
    """Card normalization configuration."""

    url_prefix: str = "/article"
    summary_length: int = 100
    images: ImageConfig = DEFAULT_IMAGE_CONFIG
    dates: DateFormatConfig = DEFAULT_DATE_CONFIG


DEFAULT_CARD_CONFIG = CardConfig()


# --- Fabrication ---


def create_dummy_article(
    idx: int = 0,
    *,
    rng: RandomPort,
    time: TimePort,
    id_length: int = DEFAULT_ID_LENGTH,
) -> Article:
    """Fabricate the idx-th placeholder market-analysis article."""
    content_id = generate_id(rng, length=id_length)
    now = time.now_local()
    date = now.date().isoformat()
    title = f"비트코인 시세 분석 {idx + 1}"

    return Article(
        id=content_id,
        title=title,
        date=date,
        slug=make_slug(title, date, content_id),
        summary=f"이것은 {idx + 1}번째 비트코인 시장 동향 요약입니다.",
        content=f"최근 시장 동향을 바탕으로 한 {idx + 1}차 분석 보고입니다.",
        image=f"https://source.unsplash.com/800x400/?crypto&sig={idx}",
        author=resolve_author(None, rng),
        published_at=now.isoformat(),
    )


def mock_articles(
    count: int = 10,
    *,
    rng: RandomPort,
    time: TimePort,
    id_length: int = DEFAULT_ID_LENGTH,
) -> list[Article]:
    """Fabricate `count` placeholder articles."""
    return [
        create_dummy_article(i, rng=rng, time=time, id_length=id_length)
        for i in range(count)
    ]


# --- Normalization ---


def to_card(
    article: Article,
    *,
    time: TimePort,
    rng: RandomPort | None = None,
    config: CardConfig = DEFAULT_CARD_CONFIG,
) -> ArticleCard:
    """
    Normalize a content record into a card.

    Without an explicit random source the author fallback is seeded by the
    article id, so the same article always shows the same assigned name.
    """
    timestamp = article.published_at or article.date
    summary_source = article.summary or strip_html_tags(article.content)

    return ArticleCard(
        id=article.id,
        slug=article.slug,
        url=f"{config.url_prefix}/{article.slug}",
        title=article.title,
        summary=truncate_text(summary_source, config.summary_length),
        author=resolve_author(article.author, rng or SeededRandom(article.id)),
        author_avatar=resolve_profile_image(article.author_avatar, config.images),
        image_url=resolve_content_image(article.image, config.images),
        published=format_display_date(timestamp, time=time, config=config.dates),
        published_relative=time_ago(timestamp, time=time, config=config.dates),
        views=format_count(article.view_count),
    )
