"""Optional values and the combinators that work on them."""

from nullable.core.types import NOTHING, Nothing, Nullable, Some, from_optional, to_optional
from nullable.functional import (
    and_then,
    ap,
    compose,
    is_none,
    is_some,
    lift,
    map,
    maybe,
    pipe,
    with_default,
)

__version__ = "0.1.0"

__all__ = [
    "Some",
    "Nothing",
    "NOTHING",
    "Nullable",
    "from_optional",
    "to_optional",
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
