"""Combinators over ``Nullable`` values.

These functions let callers transform possibly-absent values without checking
for absence at every call site. Each one branches on the absence predicate and
never calls a user function on ``Nothing``, so the functions handed in may be
partial or have side effects that must not fire on absence.

Operations:
    - **is_none / is_some**: absence predicate and its negation.
    - **map**: apply a plain function to a present value.
    - **and_then**: apply a function that itself returns a ``Nullable``
      (monadic bind). The first absence in a chain propagates to the end.
    - **with_default**: unwrap, falling back to a default on absence.
    - **maybe**: map then unwrap, falling back to a default on absence.
    - **ap**: apply a wrapped function to a wrapped value (applicative apply).

Calling convention:
    Every combinator can be called fully applied, with the container as the
    last argument, or partially applied, omitting the container and getting
    back a unary function that awaits it. The second form is what makes
    point-free pipelines possible.

Examples:
    >>> from nullable.core.types import Some, NOTHING
    >>> from nullable.functional.combinators import map, and_then, with_default
    >>>
    >>> map(str.upper, Some("noob noob"))
    Some('NOOB NOOB')
    >>> map(str.upper)(NOTHING)
    Nothing
    >>>
    >>> def safe_reciprocal(x):
    ...     return NOTHING if x == 0 else Some(1 / x)
    >>> and_then(safe_reciprocal)(Some(4))
    Some(0.25)
    >>> with_default(0.0)(and_then(safe_reciprocal, Some(0)))
    0.0

Note:
    ``map`` shadows the builtin inside this module's namespace. Import it by
    name or through the module (``from nullable.functional import combinators
    as N; N.map(...)``).
"""

import typing as tp

from nullable.core.types import NOTHING, Nothing, Nullable, Some
from nullable.functional.utils import check_callable, check_nullable
from nullable.logger.logger import logger

__all__ = [
    "is_none",
    "is_some",
    "map",
    "and_then",
    "with_default",
    "maybe",
    "ap",
]

A = tp.TypeVar("A")
B = tp.TypeVar("B")

# Marks an omitted container argument
_MISSING: tp.Any = object()


# =============================================================================
# Absence Predicate
# =============================================================================


def is_none(nullable: Nullable) -> bool:
    """Return True iff ``nullable`` is ``Nothing``."""
    check_nullable(nullable, "is_none")
    return isinstance(nullable, Nothing)


def is_some(nullable: Nullable) -> bool:
    """Return True iff ``nullable`` holds a value."""
    return not is_none(nullable)


# =============================================================================
# Functor / Monad
# =============================================================================


def _map(func: tp.Callable[[A], B], nullable: Nullable) -> Nullable:
    check_nullable(nullable, "map")
    if isinstance(nullable, Nothing):
        return NOTHING
    return Some(func(nullable.value))


def map(func, nullable=_MISSING):
    """Apply ``func`` to the value inside ``nullable``.

    Args:
        func: A plain function ``A -> B``. Never called on absence.
        nullable: The container. Omit it to get a curried function back.

    Returns:
        ``Some(func(value))`` for ``Some(value)``, ``NOTHING`` for ``Nothing``.
        If ``nullable`` is omitted, a function ``Nullable -> Nullable``.

    Raises:
        TypeError: If ``func`` is not callable or ``nullable`` is not a Nullable.
    """
    check_callable(func, "map")
    if nullable is _MISSING:
        return lambda nullable_: _map(func, nullable_)
    return _map(func, nullable)


def _and_then(func: tp.Callable[[A], Nullable], nullable: Nullable) -> Nullable:
    check_nullable(nullable, "and_then")
    if isinstance(nullable, Nothing):
        logger.debug("and_then skipped %s on Nothing", getattr(func, "__name__", func))
        return NOTHING

    result = func(nullable.value)
    if not isinstance(result, (Some, Nothing)):
        raise TypeError(
            f"and_then expects its function to return a Nullable, got {type(result).__name__}. "
            "Use map for functions returning plain values."
        )
    return result


def and_then(func, nullable=_MISSING):
    """Chain a computation that may itself produce absence (monadic bind).

    The result of ``func`` is returned as-is, not re-wrapped. In a sequence of
    ``and_then`` steps the first ``Nothing`` reaches the end unchanged and no
    later step runs.

    Args:
        func: A function ``A -> Nullable``. Never called on absence.
        nullable: The container. Omit it to get a curried function back.

    Returns:
        ``func(value)`` for ``Some(value)``, ``NOTHING`` for ``Nothing``.
        If ``nullable`` is omitted, a function ``Nullable -> Nullable``.

    Raises:
        TypeError: If ``func`` is not callable, ``nullable`` is not a Nullable,
            or ``func`` returns something other than a Nullable.
    """
    check_callable(func, "and_then")
    if nullable is _MISSING:
        return lambda nullable_: _and_then(func, nullable_)
    return _and_then(func, nullable)


# =============================================================================
# Elimination
# =============================================================================


def _with_default(default: A, nullable: Nullable) -> A:
    check_nullable(nullable, "with_default")
    if isinstance(nullable, Nothing):
        return default
    return nullable.value


def with_default(default, nullable=_MISSING):
    """Unwrap ``nullable``, returning ``default`` when it is absent.

    Omit ``nullable`` to get a curried function back.
    """
    if nullable is _MISSING:
        return lambda nullable_: _with_default(default, nullable_)
    return _with_default(default, nullable)


def _maybe(default: B, func: tp.Callable[[A], B], nullable: Nullable) -> B:
    check_nullable(nullable, "maybe")
    if isinstance(nullable, Nothing):
        return default
    return func(nullable.value)


def maybe(default, func, nullable=_MISSING):
    """Return ``func(value)`` when present, ``default`` otherwise.

    Same as ``with_default(default, map(func, nullable))``. ``func`` is never
    called on absence. Omit ``nullable`` to get a curried function back.
    """
    check_callable(func, "maybe")
    if nullable is _MISSING:
        return lambda nullable_: _maybe(default, func, nullable_)
    return _maybe(default, func, nullable)


# =============================================================================
# Applicative
# =============================================================================


def _ap(target: Nullable, applicative: Nullable) -> Nullable:
    check_nullable(applicative, "ap")
    if isinstance(target, Nothing) or isinstance(applicative, Nothing):
        logger.debug("ap short-circuited: target=%r, applicative=%r", target, applicative)
        return NOTHING

    func = applicative.value
    check_callable(func, "ap")
    return Some(func(target.value))


def ap(target, applicative=_MISSING):
    """Apply a wrapped function to a wrapped value.

    The wrapped function is only called when both ``target`` and
    ``applicative`` are present. Chaining one ``ap`` per argument lifts a
    curried n-ary function into ``Nullable`` context::

        >>> add3 = lambda a: lambda b: lambda c: a + b + c
        >>> ap(Some(3), ap(Some(2), ap(Some(1), Some(add3))))
        Some(6)

    Args:
        target: The wrapped argument.
        applicative: The wrapped function ``A -> B``. Omit it to get a curried
            function back.

    Returns:
        ``Some(func(value))`` if both are present, ``NOTHING`` otherwise.

    Raises:
        TypeError: If either operand is not a Nullable, or ``applicative``
            holds something that is not callable.
    """
    check_nullable(target, "ap")
    if applicative is _MISSING:
        return lambda applicative_: _ap(target, applicative_)
    return _ap(target, applicative)
