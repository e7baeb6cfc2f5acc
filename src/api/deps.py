import os
from functools import lru_cache
from pathlib import Path

from fastapi import Request

from src.adapters.article_source import InMemoryArticleSource
from src.core.ports.time import TimePort
from src.rules.loader import resolve_rules_path
from src.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.rules_path = resolve_rules_path(self.base_dir)
        self.log_level = os.environ.get("POLICY_LOG_LEVEL", "INFO").upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Application state ---
# Populated by the app lifespan; routes receive these via Depends so tests
# can override them without starting the lifespan.


def get_rules(request: Request) -> Rules:
    return request.app.state.rules


def get_time(request: Request) -> TimePort:
    return request.app.state.time


def get_article_source(request: Request) -> InMemoryArticleSource:
    return request.app.state.article_source
