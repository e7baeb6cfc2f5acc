import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.adapters.article_source import InMemoryArticleSource
from src.adapters.randomness import create_random_source
from src.adapters.time_display import DisplayTimeAdapter
from src.api.deps import get_settings
from src.rules.loader import load_rules

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    # Load rules on startup (fail-fast)
    try:
        rules = load_rules(settings.rules_path)
    except (FileNotFoundError, ValueError):
        logger.critical("Rules load failed from %s", settings.rules_path, exc_info=True)
        raise
    logger.info("Rules loaded from %s", settings.rules_path)

    time = DisplayTimeAdapter(rules.display.timezone)
    source = InMemoryArticleSource(
        rng=create_random_source(rules.articles.random_seed),
        time=time,
        count=rules.articles.mock_count,
        id_length=rules.identity.id_length,
    )
    source.open()

    app.state.rules = rules
    app.state.time = time
    app.state.article_source = source

    try:
        yield
    finally:
        source.close()


app = FastAPI(
    title="Policy Content API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from src.api.routes import articles, public_config  # noqa: E402

app.include_router(articles.router, prefix="/api/articles", tags=["Articles"])
app.include_router(public_config.router, prefix="/api/config", tags=["Config"])


# CORS (Allow Frontend)
origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "https://my7.co.kr",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "api"}
