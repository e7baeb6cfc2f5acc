"""Public article endpoints returning normalized article cards."""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel

from src.api.deps import get_article_source, get_rules, get_time
from src.components.articles import (
    ArticleCard,
    ArticleSourcePort,
    GetArticleInput,
    ListArticlesInput,
    run_get,
    run_list,
)
from src.core.ports.time import TimePort
from src.rules.models import Rules

router = APIRouter()


class ArticleCardResponse(BaseModel):
    """Render-ready article card."""

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


class ArticleListResponse(BaseModel):
    items: list[ArticleCardResponse]
    count: int
    total: int


def _to_response(card: ArticleCard) -> ArticleCardResponse:
    return ArticleCardResponse(
        id=card.id,
        slug=card.slug,
        url=card.url,
        title=card.title,
        summary=card.summary,
        author=card.author,
        author_avatar=card.author_avatar,
        image_url=card.image_url,
        published=card.published,
        published_relative=card.published_relative,
        views=card.views,
    )


@router.get("", response_model=ArticleListResponse)
def list_articles(
    limit: int | None = Query(default=None, ge=0, le=100),
    source: ArticleSourcePort = Depends(get_article_source),
    time: TimePort = Depends(get_time),
    rules: Rules = Depends(get_rules),
) -> ArticleListResponse:
    """List article cards, newest first."""
    result = run_list(
        ListArticlesInput(limit=limit),
        source=source,
        time=time,
        config=rules.card_config(),
    )
    if not result.success:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=[e.message for e in result.errors],
        )

    items = [_to_response(card) for card in result.cards]
    return ArticleListResponse(items=items, count=len(items), total=result.total)


@router.get("/{slug}", response_model=ArticleCardResponse)
def get_article(
    slug: str,
    source: ArticleSourcePort = Depends(get_article_source),
    time: TimePort = Depends(get_time),
    rules: Rules = Depends(get_rules),
) -> ArticleCardResponse:
    """Get one article card by canonical slug."""
    result = run_get(
        GetArticleInput(slug=slug),
        source=source,
        time=time,
        config=rules.card_config(),
    )
    if result.card is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Article not found")

    return _to_response(result.card)
