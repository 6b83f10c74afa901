"""The ``Nullable`` sum type.

A ``Nullable[T]`` is exactly one of two variants:

    - ``Some(value)``: a present value of type ``T``.
    - ``Nothing``: absence, carrying no payload.

Both variants are frozen Pydantic v2 models, so values are immutable, compare
structurally and are hashable whenever their payload is. ``None`` is an ordinary
payload here (``Some(None)`` is present), which keeps the state space exactly
two-valued. Plain ``Optional`` values coming from the outside world are brought
in with :func:`from_optional` and handed back with :func:`to_optional`.

Example:
    >>> from nullable.core.types import Some, NOTHING, from_optional
    >>> Some(3)
    Some(3)
    >>> from_optional(None) == NOTHING
    True
    >>> match Some("noob"):
    ...     case Some(name):
    ...         print(name)
    noob
"""

import typing as tp

from pydantic import BaseModel, ConfigDict

__all__ = [
    "Some",
    "Nothing",
    "NOTHING",
    "Nullable",
    "from_optional",
    "to_optional",
]

T = tp.TypeVar("T")


class Some(BaseModel, tp.Generic[T]):
    """A present value.

    Attributes:
        value: The wrapped value. Stored as-is, without validation or copying.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    __match_args__ = ("value",)

    value: T

    def __init__(self, value: T, /, **data: tp.Any) -> None:
        super().__init__(value=value, **data)

    def __repr__(self) -> str:
        return f"Some({self.value!r})"

    __str__ = __repr__


class Nothing(BaseModel):
    """The absence of a value."""

    model_config = ConfigDict(frozen=True)

    def __repr__(self) -> str:
        return "Nothing"

    __str__ = __repr__


# Shared absent value; any ``Nothing()`` compares equal to it
NOTHING = Nothing()

Nullable = tp.Union[Some, Nothing]


def from_optional(value: tp.Optional[T]) -> Nullable:
    """Wrap a plain optional value.

    Args:
        value: Any value, where ``None`` means absent.

    Returns:
        ``NOTHING`` for ``None``, ``Some(value)`` otherwise.
    """
    return NOTHING if value is None else Some(value)


def to_optional(nullable: Nullable) -> tp.Optional[T]:
    """Unwrap to a plain optional value (``None`` when absent).

    Raises:
        TypeError: If ``nullable`` is neither ``Some`` nor ``Nothing``.
    """
    if isinstance(nullable, Some):
        return nullable.value
    if isinstance(nullable, Nothing):
        return None
    raise TypeError(
        f"to_optional expects a Nullable (Some or Nothing), got {type(nullable).__name__}."
    )
