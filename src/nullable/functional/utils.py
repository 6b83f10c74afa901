"""Argument checks shared by the combinators and composition helpers."""

import typing as tp

from nullable.core.types import Nothing, Some

__all__ = ["check_callable", "check_nullable"]


def check_callable(func: tp.Any, caller: str) -> None:
    """Raise ``TypeError`` unless ``func`` is callable."""
    if not callable(func):
        raise TypeError(f"{caller} expects a callable, got {type(func).__name__}.")


def check_nullable(value: tp.Any, caller: str) -> None:
    """Raise ``TypeError`` unless ``value`` is ``Some`` or ``Nothing``."""
    if not isinstance(value, (Some, Nothing)):
        raise TypeError(
            f"{caller} expects a Nullable (Some or Nothing), got {type(value).__name__}. "
            "Wrap plain values with from_optional()."
        )
