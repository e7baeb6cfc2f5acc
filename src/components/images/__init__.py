"""
Images component - Normalize image fields to a single displayable URL.
"""

from ._impl import (
    DEFAULT_IMAGE_CONFIG,
    ImageConfig,
    ImageField,
    resolve_content_image,
    resolve_profile_image,
    validate_image_url,
)

__all__ = [
    "DEFAULT_IMAGE_CONFIG",
    "ImageConfig",
    "ImageField",
    "resolve_content_image",
    "resolve_profile_image",
    "validate_image_url",
]
