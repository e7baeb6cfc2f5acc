"""
Content identity - ids and canonical slugs.

Functional Core - pure business logic. Randomness is injected.

Invariants:
- Slug characters are limited to Hangul syllables, a-z, 0-9 and hyphen
- make_slug is deterministic for a fixed (title, date, id)
- The id is appended unmodified, so equal title+date never collide
  unless the ids do
"""

from __future__ import annotations

import math
import re
import string

from .ports import RandomPort

ID_ALPHABET = string.ascii_lowercase + string.digits
DEFAULT_ID_LENGTH = 7

# Hangul syllables block is U+AC00..U+D7A3
_SLUG_STRIP = re.compile(r"[^가-힣a-zA-Z0-9\s]")
_PAGE_SLUG_STRIP = re.compile(r"[^A-Za-z0-9_가-힣\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")
_NON_DIGIT = re.compile(r"[^0-9]")


def generate_id(
    rng: RandomPort,
    length: int = DEFAULT_ID_LENGTH,
    alphabet: str = ID_ALPHABET,
) -> str:
    """
    Generate an opaque fixed-length content id.

    Collision-resistant, not collision-free: see estimate_collision_probability.
    """
    if length < 1:
        raise ValueError("id length must be positive")
    if not alphabet:
        raise ValueError("id alphabet must not be empty")
    size = len(alphabet)
    return "".join(alphabet[rng.randbelow(size)] for _ in range(length))


def slugify_title(title: str) -> str:
    """Lowercase, strip disallowed characters, hyphenate whitespace runs."""
    cleaned = _SLUG_STRIP.sub("", title.lower()).strip()
    return _WHITESPACE.sub("-", cleaned)


def make_slug(title: str, date_iso: str, content_id: str) -> str:
    """
    Build the canonical slug for a content record.

    Format: ``{title-part}-{date digits}-{id}``. Empty or fully stripped
    titles yield a leading hyphen (e.g. ``-20231027-abc1234``); that output
    is accepted rather than repaired.
    """
    date_part = _NON_DIGIT.sub("", date_iso)
    return f"{slugify_title(title)}-{date_part}-{content_id}"


def generate_slug(title: str) -> str:
    """
    Title-only slug for category and static page URLs.

    Keeps existing hyphens and underscores, collapses hyphen runs and trims
    hyphens from both ends.
    """
    if not title:
        return ""

    slug = _PAGE_SLUG_STRIP.sub("", title.lower().strip())
    slug = _WHITESPACE.sub("-", slug)
    slug = _HYPHENS.sub("-", slug)
    return slug.strip("-")


def estimate_collision_probability(
    count: int,
    length: int = DEFAULT_ID_LENGTH,
    alphabet_size: int = len(ID_ALPHABET),
) -> float:
    """
    Birthday-bound probability that any two of `count` ids collide.

    Slugs sharing title and date are only distinguished by their id, so this
    is also their collision probability.
    """
    if count < 2:
        return 0.0
    space = float(alphabet_size) ** length
    pairs = count * (count - 1) / 2
    return -math.expm1(-pairs / space)
