"""
Identity component port definitions.
"""

from __future__ import annotations

from src.core.ports.randomness import RandomPort

__all__ = ["RandomPort"]
