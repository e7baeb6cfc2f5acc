from datetime import UTC, datetime
from pathlib import Path

import pytest

from src.adapters.article_source import InMemoryArticleSource
from src.adapters.randomness import SeededRandom
from src.adapters.time_display import FrozenTimeAdapter
from src.rules.models import Rules, SiteRules

PROJECT_ROOT = Path(__file__).parent.parent

# 2023-10-27 10:00 UTC is 19:00 the same day in Asia/Seoul.
FROZEN_UTC = datetime(2023, 10, 27, 10, 0, 0, tzinfo=UTC)


@pytest.fixture
def rng() -> SeededRandom:
    """Deterministic random source."""
    return SeededRandom(1234)


@pytest.fixture
def frozen_time() -> FrozenTimeAdapter:
    """Clock frozen at FROZEN_UTC, displaying Asia/Seoul."""
    return FrozenTimeAdapter(FROZEN_UTC)


@pytest.fixture
def rules() -> Rules:
    """Rules with defaults for everything but the site block."""
    return Rules(site=SiteRules(name="Test Site", url="https://example.com"))


@pytest.fixture
def article_source(rng: SeededRandom, frozen_time: FrozenTimeAdapter) -> InMemoryArticleSource:
    """Open in-memory source with five fabricated articles."""
    source = InMemoryArticleSource(rng=rng, time=frozen_time, count=5)
    source.open()
    yield source
    source.close()
