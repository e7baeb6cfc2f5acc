"""
Image reference resolution.

Content records carry their image field in whichever shape the ingestion
source produced: a URL, a list of URLs, or a JSON-encoded list stored as
text. Rendering needs exactly one displayable URL.

Invariants:
- Results are always non-empty strings
- Content images fall back to the card placeholder on absent, empty or
  unparseable input
- Profile images only fall back when the value is absent; present values
  are returned unchanged
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImageConfig:
    """Placeholder paths and known avatar service."""

    content_placeholder: str = "/placeholder-card.jpg"
    profile_placeholder: str = "/placeholder-thumb.jpg"
    avatar_service_host: str = "api.dicebear.com"


DEFAULT_IMAGE_CONFIG = ImageConfig()

ImageField = str | Sequence[str] | None


def _first_usable(items: Sequence[Any], fallback: str) -> str:
    first = items[0]
    if isinstance(first, str) and first:
        return first
    return fallback


def resolve_content_image(
    image_field: ImageField,
    config: ImageConfig = DEFAULT_IMAGE_CONFIG,
) -> str:
    """
    Resolve a content record's image field to one displayable URL.

    Policy, in order:
    1. None or empty -> content placeholder
    2. Non-empty list/tuple -> its first element
    3. Text shaped like ``[...]`` -> first element of the parsed JSON list,
       or the placeholder when parsing fails or the list is empty
    4. Any other text -> returned unchanged
    """
    placeholder = config.content_placeholder

    if not image_field:
        return placeholder

    if isinstance(image_field, (list, tuple)):
        return _first_usable(image_field, placeholder)

    if not isinstance(image_field, str):
        logger.warning("Unsupported image field type: %s", type(image_field).__name__)
        return placeholder

    if image_field.startswith("[") and image_field.endswith("]"):
        try:
            parsed = json.loads(image_field)
        except ValueError as e:
            logger.warning("Failed to parse image URL array %r: %s", image_field, e)
            return placeholder

        if isinstance(parsed, list) and parsed:
            return _first_usable(parsed, placeholder)
        return placeholder

    return image_field


def resolve_profile_image(
    avatar_field: str | None,
    config: ImageConfig = DEFAULT_IMAGE_CONFIG,
) -> str:
    """
    Resolve a profile avatar URL.

    Generated avatars (avatar service URLs) and any other present value are
    returned as-is; only an absent value gets the profile placeholder.
    """
    if not avatar_field:
        return config.profile_placeholder

    if config.avatar_service_host in avatar_field:
        return avatar_field

    return avatar_field


def validate_image_url(
    url: str | None,
    config: ImageConfig = DEFAULT_IMAGE_CONFIG,
) -> str:
    """Accept absolute http(s) or root-relative URLs, else the placeholder."""
    if not url:
        return config.content_placeholder

    if url.startswith(("http://", "https://")):
        return url

    if url.startswith("/"):
        return url

    return config.content_placeholder
