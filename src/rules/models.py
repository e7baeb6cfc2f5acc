from pydantic import BaseModel, Field, field_validator

from src.components.articles import CardConfig
from src.components.dates import LOCALE_RENDERERS, DateFormatConfig
from src.components.images import ImageConfig
from src.components.viewport import GateOptions, parse_root_margin


class SiteRules(BaseModel):
    name: str
    url: str
    description: str = ""


class DisplayRules(BaseModel):
    timezone: str = "Asia/Seoul"
    locale: str = "ko-KR"

    @field_validator("locale")
    @classmethod
    def locale_supported(cls, v: str) -> str:
        if v not in LOCALE_RENDERERS:
            raise ValueError(f"unsupported locale {v!r}")
        return v


class ImageRules(BaseModel):
    content_placeholder: str = "/placeholder-card.jpg"
    profile_placeholder: str = "/placeholder-thumb.jpg"
    avatar_service_host: str = "api.dicebear.com"


class IdentityRules(BaseModel):
    id_length: int = Field(default=7, ge=4, le=32)


class ViewportRules(BaseModel):
    root_margin: str = "50px"
    threshold: float = Field(default=0.1, ge=0.0, le=1.0)

    @field_validator("root_margin")
    @classmethod
    def margin_parses(cls, v: str) -> str:
        parse_root_margin(v)
        return v


class ArticleRules(BaseModel):
    mock_count: int = Field(default=10, ge=0)
    summary_length: int = Field(default=100, ge=1)
    url_prefix: str = "/article"
    random_seed: int | None = None


class Rules(BaseModel):
    site: SiteRules
    display: DisplayRules = DisplayRules()
    images: ImageRules = ImageRules()
    identity: IdentityRules = IdentityRules()
    viewport: ViewportRules = ViewportRules()
    articles: ArticleRules = ArticleRules()

    def image_config(self) -> ImageConfig:
        return ImageConfig(
            content_placeholder=self.images.content_placeholder,
            profile_placeholder=self.images.profile_placeholder,
            avatar_service_host=self.images.avatar_service_host,
        )

    def card_config(self) -> CardConfig:
        return CardConfig(
            url_prefix=self.articles.url_prefix,
            summary_length=self.articles.summary_length,
            images=self.image_config(),
            dates=DateFormatConfig(locale=self.display.locale),
        )

    def gate_options(self) -> GateOptions:
        return GateOptions(
            root_margin=self.viewport.root_margin,
            threshold=self.viewport.threshold,
        )
