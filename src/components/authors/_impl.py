"""
Author assignment for records with no known author.
"""

from __future__ import annotations

from src.core.ports.randomness import RandomPort

# Common Korean names with no celebrity association.
AUTHOR_POOL: tuple[str, ...] = (
    "김서현", "이주호", "박선영", "정도현", "최유림",
    "강민재", "오경아", "한도윤", "윤하준", "조윤아",
    "임태현", "신수빈", "권민지", "배지호", "노서연",
    "송지훈", "문예지", "전우성", "홍수아", "백지훈",
    "서유진", "양도현", "유서연", "남승현", "황예준",
    "표지은", "구도연", "진우석", "채민아", "마태준",
)  # fmt: skip


def assign_author(rng: RandomPort, pool: tuple[str, ...] = AUTHOR_POOL) -> str:
    """Pick a display name uniformly at random from the pool."""
    return rng.choice(pool)


def resolve_author(author_field: str | None, rng: RandomPort) -> str:
    """Keep a known author, otherwise assign one from the pool."""
    if author_field and author_field.strip():
        return author_field.strip()
    return assign_author(rng)
