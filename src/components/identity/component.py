"""
Identity component - content ids and canonical slugs.

Shell Layer - dispatches inputs to the functional core.
"""

from __future__ import annotations

from ._impl import generate_id, make_slug
from .models import GenerateIdInput, IdOutput, MakeSlugInput, SlugOutput
from .ports import RandomPort


def run_generate_id(inp: GenerateIdInput, *, rng: RandomPort) -> IdOutput:
    """Generate a new content id from the injected random source."""
    return IdOutput(id=generate_id(rng, length=inp.length))


def run_make_slug(inp: MakeSlugInput) -> SlugOutput:
    """Build the canonical slug for a (title, date, id) triple."""
    return SlugOutput(slug=make_slug(inp.title, inp.date_iso, inp.content_id))


def run(
    inp: GenerateIdInput | MakeSlugInput,
    *,
    rng: RandomPort | None = None,
) -> IdOutput | SlugOutput:
    """
    Main entry point for the identity component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, GenerateIdInput):
        if rng is None:
            raise ValueError("GenerateIdInput requires a random source")
        return run_generate_id(inp, rng=rng)
    elif isinstance(inp, MakeSlugInput):
        return run_make_slug(inp)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
