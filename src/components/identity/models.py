"""
Identity component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from ._impl import DEFAULT_ID_LENGTH


@dataclass(frozen=True)
class GenerateIdInput:
    """Input for generating a content id."""

    length: int = DEFAULT_ID_LENGTH


@dataclass(frozen=True)
class MakeSlugInput:
    """Input for building a canonical slug."""

    title: str
    date_iso: str
    content_id: str


@dataclass(frozen=True)
class IdOutput:
    """Output containing a generated id."""

    id: str


@dataclass(frozen=True)
class SlugOutput:
    """Output containing a canonical slug."""

    slug: str
