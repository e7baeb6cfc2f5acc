"""
Identity component - Content ids and canonical slugs.
"""

from ._impl import (
    DEFAULT_ID_LENGTH,
    ID_ALPHABET,
    estimate_collision_probability,
    generate_id,
    generate_slug,
    make_slug,
    slugify_title,
)
from .component import run, run_generate_id, run_make_slug
from .models import GenerateIdInput, IdOutput, MakeSlugInput, SlugOutput
from .ports import RandomPort

__all__ = [
    # Entry points
    "run",
    "run_generate_id",
    "run_make_slug",
    # Input models
    "GenerateIdInput",
    "MakeSlugInput",
    # Output models
    "IdOutput",
    "SlugOutput",
    # Ports
    "RandomPort",
    # Functional core
    "DEFAULT_ID_LENGTH",
    "ID_ALPHABET",
    "estimate_collision_probability",
    "generate_id",
    "generate_slug",
    "make_slug",
    "slugify_title",
]
