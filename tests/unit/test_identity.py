"""
Tests for the identity component (ids and canonical slugs).
"""

from __future__ import annotations

import re

import pytest
from hypothesis import given
from hypothesis import strategies as st

from src.adapters.randomness import SeededRandom
from src.components.identity import (
    ID_ALPHABET,
    GenerateIdInput,
    IdOutput,
    MakeSlugInput,
    SlugOutput,
    estimate_collision_probability,
    generate_id,
    generate_slug,
    make_slug,
    run,
)

SLUG_CHARS = re.compile(r"[a-z0-9가-힣-]*")

ids = st.text(alphabet=ID_ALPHABET, min_size=7, max_size=7)
dates = st.dates().map(lambda d: d.isoformat())


class TestGenerateId:
    """Content id generation."""

    def test_fixed_length(self, rng: SeededRandom) -> None:
        assert len(generate_id(rng)) == 7
        assert len(generate_id(rng, length=12)) == 12

    def test_alphabet(self, rng: SeededRandom) -> None:
        for _ in range(50):
            assert set(generate_id(rng)) <= set(ID_ALPHABET)

    def test_deterministic_with_seed(self) -> None:
        assert generate_id(SeededRandom(5)) == generate_id(SeededRandom(5))

    def test_successive_ids_differ(self, rng: SeededRandom) -> None:
        generated = {generate_id(rng) for _ in range(200)}
        assert len(generated) == 200

    def test_rejects_non_positive_length(self, rng: SeededRandom) -> None:
        with pytest.raises(ValueError):
            generate_id(rng, length=0)

    def test_rejects_empty_alphabet(self, rng: SeededRandom) -> None:
        with pytest.raises(ValueError):
            generate_id(rng, alphabet="")

    def test_draws_alphabet_indices(self) -> None:
        class Counter:
            def __init__(self) -> None:
                self.calls: list[int] = []

            def choice(self, seq):  # type: ignore[no-untyped-def]
                raise AssertionError("ids are drawn by index")

            def randbelow(self, n: int) -> int:
                self.calls.append(n)
                return len(self.calls) - 1

        source = Counter()
        assert generate_id(source, length=3, alphabet="xyz") == "xyz"
        assert source.calls == [3, 3, 3]


class TestMakeSlug:
    """Canonical slug construction."""

    def test_basic(self) -> None:
        assert make_slug("Hello World", "2023-10-27", "abc1234") == "hello-world-20231027-abc1234"

    def test_hangul_preserved(self) -> None:
        slug = make_slug("비트코인 시세 분석 1", "2023-10-27", "x1y2z3a")
        assert slug == "비트코인-시세-분석-1-20231027-x1y2z3a"

    def test_punctuation_stripped(self) -> None:
        slug = make_slug("청년 주거지원, 2024년 확대!", "2024-01-05", "id00001")
        assert slug == "청년-주거지원-2024년-확대-20240105-id00001"

    def test_whitespace_collapsed_and_trimmed(self) -> None:
        slug = make_slug("  many   spaces\there  ", "2023-10-27", "abc")
        assert slug == "many-spaces-here-20231027-abc"

    def test_full_timestamp_keeps_digits_only(self) -> None:
        slug = make_slug("title", "2023-10-27T10:00:00Z", "abc")
        assert slug == "title-20231027100000-abc"

    def test_empty_title_is_degenerate_but_total(self) -> None:
        assert make_slug("", "2023-10-27", "abc") == "-20231027-abc"

    def test_symbol_only_title(self) -> None:
        assert make_slug("!!! ???", "", "abc") == "--abc"

    def test_same_title_and_date_different_ids_do_not_collide(self) -> None:
        a = make_slug("같은 제목", "2023-10-27", "aaaaaaa")
        b = make_slug("같은 제목", "2023-10-27", "aaaaaab")
        assert a != b

    @given(title=st.text(), date_iso=dates, content_id=ids)
    def test_charset_and_id_suffix(self, title: str, date_iso: str, content_id: str) -> None:
        slug = make_slug(title, date_iso, content_id)
        assert SLUG_CHARS.fullmatch(slug)
        assert slug.endswith("-" + content_id)

    @given(title=st.text(), date_iso=dates, content_id=ids)
    def test_deterministic(self, title: str, date_iso: str, content_id: str) -> None:
        assert make_slug(title, date_iso, content_id) == make_slug(title, date_iso, content_id)


class TestGenerateSlug:
    """Title-only page slugs."""

    def test_basic(self) -> None:
        assert generate_slug("Housing Policy") == "housing-policy"

    def test_keeps_hyphen_and_collapses(self) -> None:
        assert generate_slug("startup -- support") == "startup-support"

    def test_trims_edge_hyphens(self) -> None:
        assert generate_slug("-교육 정책-") == "교육-정책"

    def test_empty(self) -> None:
        assert generate_slug("") == ""


class TestCollisionEstimate:
    """Birthday-bound collision estimate."""

    def test_single_id_never_collides(self) -> None:
        assert estimate_collision_probability(1) == 0.0

    def test_grows_with_count(self) -> None:
        low = estimate_collision_probability(1_000)
        high = estimate_collision_probability(1_000_000)
        assert 0.0 < low < high <= 1.0

    def test_tiny_space_almost_certain(self) -> None:
        assert estimate_collision_probability(100, length=1, alphabet_size=36) > 0.99


class TestComponentRun:
    """Dispatcher entry point."""

    def test_make_slug(self) -> None:
        result = run(MakeSlugInput(title="A B", date_iso="2023-10-27", content_id="id1"))
        assert isinstance(result, SlugOutput)
        assert result.slug == "a-b-20231027-id1"

    def test_generate_id(self, rng: SeededRandom) -> None:
        result = run(GenerateIdInput(length=9), rng=rng)
        assert isinstance(result, IdOutput)
        assert len(result.id) == 9

    def test_generate_id_requires_rng(self) -> None:
        with pytest.raises(ValueError):
            run(GenerateIdInput())

    def test_unknown_input(self) -> None:
        with pytest.raises(ValueError):
            run("nope")  # type: ignore[arg-type]
