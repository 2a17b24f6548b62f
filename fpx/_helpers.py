"""Internal helpers for fpx.

Common functions used across multiple modules.
These are not part of the public API but can be used for writing custom instances."""

from __future__ import annotations

import typing
from collections.abc import Iterable

from kungfu import Error, Nothing, Ok, Option, Result, Some


# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


def materialize[T](items: Iterable[T]) -> tuple[T, ...]:
    """
    Materialize an iterable into a tuple.

    Generators are single-use; wrappers that may be traversed more than once
    keep the tuple instead.
    """
    if isinstance(items, tuple):
        return items
    return tuple(items)


# Option helpers
def option_of[T](value: T | None) -> Option[T]:
    """None becomes Nothing(), anything else Some(value)."""
    if value is None:
        return Nothing()
    return Some(value)


def first_option[T](items: Iterable[T]) -> Option[T]:
    """First element as Some, Nothing() for an empty iterable."""
    for item in items:
        return Some(item)
    return Nothing()


def is_present(opt: Option[typing.Any]) -> bool:
    match opt:
        case Some(_):
            return True
        case _:
            return False


def result_to_option[T, E](result: Result[T, E]) -> Option[T]:
    """Ok(v) -> Some(v), Error(_) -> Nothing()."""
    match result:
        case Ok(value):
            return Some(value)
        case Error(_):
            return Nothing()


__all__ = (
    "identity",
    "materialize",
    "option_of",
    "first_option",
    "is_present",
    "result_to_option",
)
