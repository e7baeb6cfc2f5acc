"""
Tests for author assignment and the random source adapters.
"""

from __future__ import annotations

from collections import Counter

from src.adapters.randomness import SeededRandom, SystemRandomSource, create_random_source
from src.components.authors import AUTHOR_POOL, assign_author, resolve_author


class TestAuthorPool:
    def test_pool_size(self) -> None:
        assert len(AUTHOR_POOL) == 30

    def test_pool_entries_unique_and_non_empty(self) -> None:
        assert len(set(AUTHOR_POOL)) == len(AUTHOR_POOL)
        assert all(name.strip() for name in AUTHOR_POOL)


class TestAssignAuthor:
    def test_only_pool_values(self, rng: SeededRandom) -> None:
        for _ in range(1000):
            assert assign_author(rng) in AUTHOR_POOL

    def test_exercises_most_of_pool(self, rng: SeededRandom) -> None:
        counts = Counter(assign_author(rng) for _ in range(3000))
        assert len(counts) >= 27
        # Expected ~100 per name; no single name dominates.
        assert max(counts.values()) < 200

    def test_deterministic_with_seed(self) -> None:
        first = [assign_author(SeededRandom(9)) for _ in range(5)]
        second = [assign_author(SeededRandom(9)) for _ in range(5)]
        assert first == second

    def test_custom_pool(self, rng: SeededRandom) -> None:
        assert assign_author(rng, pool=("편집부",)) == "편집부"


class TestResolveAuthor:
    def test_known_author_kept(self, rng: SeededRandom) -> None:
        assert resolve_author("  홍길동 ", rng) == "홍길동"

    def test_missing_author_assigned(self, rng: SeededRandom) -> None:
        assert resolve_author(None, rng) in AUTHOR_POOL
        assert resolve_author("   ", rng) in AUTHOR_POOL


class TestRandomSources:
    def test_factory_seeded(self) -> None:
        source = create_random_source(3)
        assert isinstance(source, SeededRandom)
        assert source.seed == 3

    def test_factory_unseeded(self) -> None:
        assert type(create_random_source()) is SystemRandomSource

    def test_randbelow_range(self, rng: SeededRandom) -> None:
        values = {rng.randbelow(5) for _ in range(200)}
        assert values == {0, 1, 2, 3, 4}
