"""Public presentation config consumed by the front end."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.api.deps import get_rules
from src.components.viewport import DEFAULT_PLACEHOLDER
from src.rules.models import Rules

router = APIRouter()


class ViewportConfigResponse(BaseModel):
    """Viewport gate defaults - margin, threshold and pending placeholder."""

    root_margin: str
    threshold: float
    placeholder_html: str


class SiteConfigResponse(BaseModel):
    name: str
    url: str
    description: str
    locale: str
    timezone: str


@router.get("/viewport", response_model=ViewportConfigResponse)
def get_viewport_config(rules: Rules = Depends(get_rules)) -> ViewportConfigResponse:
    options = rules.gate_options()
    return ViewportConfigResponse(
        root_margin=options.root_margin,
        threshold=options.threshold,
        placeholder_html=DEFAULT_PLACEHOLDER,
    )


@router.get("/site", response_model=SiteConfigResponse)
def get_site_config(rules: Rules = Depends(get_rules)) -> SiteConfigResponse:
    return SiteConfigResponse(
        name=rules.site.name,
        url=rules.site.url,
        description=rules.site.description,
        locale=rules.display.locale,
        timezone=rules.display.timezone,
    )
