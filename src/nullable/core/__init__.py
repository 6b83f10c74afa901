"""Core data structures for optional values."""

from nullable.core.types import NOTHING, Nothing, Nullable, Some, from_optional, to_optional

__all__ = [
    "Some",
    "Nothing",
    "NOTHING",
    "Nullable",
    "from_optional",
    "to_optional",
]
