"""Point-free composition helpers.

``compose`` and ``pipe`` chain unary functions, typically curried combinators,
without naming intermediate values. ``lift`` turns a curried function over plain
values into one over ``Nullable`` values by applying ``ap`` once per argument.

Example:
    Divide 32 by 2, then 4, then 0, then 3; the zero step yields ``Nothing``
    and the last step never runs::

        from nullable.functional.combinators import and_then

        def safe_divide(divisor):
            return lambda x: NOTHING if divisor == 0 else Some(x / divisor)

        divide = pipe(
            safe_divide(2),
            and_then(safe_divide(4)),
            and_then(safe_divide(0)),
            and_then(safe_divide(3)),
        )
        divide(32)  # Nothing
"""

import typing as tp
from functools import reduce

from nullable.core.types import Nullable, Some
from nullable.functional.combinators import ap
from nullable.functional.utils import check_callable
from nullable.logger.logger import logger

__all__ = [
    "compose",
    "pipe",
    "lift",
]


def _identity(value: tp.Any) -> tp.Any:
    return value


def _chain(funcs, caller: str) -> tp.Callable[[tp.Any], tp.Any]:
    for func in funcs:
        check_callable(func, caller)
    if not funcs:
        return _identity

    def chained(value):
        return reduce(lambda acc, func: func(acc), funcs, value)

    return chained


def compose(*funcs: tp.Callable[[tp.Any], tp.Any]) -> tp.Callable[[tp.Any], tp.Any]:
    """Compose unary functions right to left: ``compose(f, g)(x) == f(g(x))``.

    With no functions, returns the identity.

    Raises:
        TypeError: If any argument is not callable.
    """
    logger.debug("Composing %d functions right to left", len(funcs))
    return _chain(tuple(reversed(funcs)), "compose")


def pipe(*funcs: tp.Callable[[tp.Any], tp.Any]) -> tp.Callable[[tp.Any], tp.Any]:
    """Compose unary functions left to right: ``pipe(f, g)(x) == g(f(x))``."""
    logger.debug("Piping %d functions left to right", len(funcs))
    return _chain(funcs, "pipe")


def lift(func: tp.Callable[..., tp.Any]) -> tp.Callable[..., Nullable]:
    """Lift a curried function into ``Nullable`` context.

    Args:
        func: A curried function ``a -> b -> ... -> r``.

    Returns:
        A function taking one ``Nullable`` per curried argument. It returns
        ``Some(r)`` when every argument is present, and ``NOTHING`` as soon as
        one is absent; ``func`` is not called past that point.

    Example:
        >>> add3 = lambda a: lambda b: lambda c: a + b + c
        >>> lift(add3)(Some(1), Some(2), Some(3))
        Some(6)
        >>> lift(add3)(Some(1), NOTHING, Some(3))
        Nothing
    """
    check_callable(func, "lift")
    logger.debug("Lifting %s into Nullable context", getattr(func, "__name__", func))

    def lifted(*args: Nullable) -> Nullable:
        return reduce(lambda acc, arg: ap(arg, acc), args, Some(func))

    return lifted
