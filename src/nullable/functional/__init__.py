"""Functional primitives for nullable.

This module provides the combinators and composition helpers that operate on
``Nullable`` values. Utilities are stateless and side-effect-free so they can
be composed into point-free pipelines.
"""

from nullable.functional.combinators import (
    and_then,
    ap,
    is_none,
    is_some,
    map,
    maybe,
    with_default,
)
from nullable.functional.composition import compose, lift, pipe

__all__ = [
    "is_none",
    "is_some",
    "map",
    "and_then",
    "with_default",
    "maybe",
    "ap",
    "compose",
    "pipe",
    "lift",
]
