"""
Authors component - Display-name assignment from a fixed pool.
"""

from ._impl import AUTHOR_POOL, assign_author, resolve_author

__all__ = [
    "AUTHOR_POOL",
    "assign_author",
    "resolve_author",
]
