"""
Подъем значений: plain values into Option and LazyCoroResult.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Never

from kungfu import Error, LazyCoroResult, Nothing, Ok, Option, Result, Some

from .._helpers import option_of, result_to_option


def some[T](value: T) -> Option[T]:
    return Some(value)


def nothing() -> Option[Never]:
    return Nothing()


def optional[T](value: T | None) -> Option[T]:
    """None becomes Nothing(), anything else Some(value)."""
    return option_of(value)


def from_result[T, E](value: Result[T, E]) -> Option[T]:
    """Ok(v) -> Some(v); the error of Error(e) is dropped."""
    return result_to_option(value)


def pure[T](value: T) -> LazyCoroResult[T, Never]:
    return LazyCoroResult.pure(value)


def fail[E](error: E) -> LazyCoroResult[Never, E]:
    async def run() -> Result[Never, E]:
        return Error(error)

    return LazyCoroResult(run)


def from_option[T, E](opt: Option[T], *, error: Callable[[], E]) -> LazyCoroResult[T, E]:
    """
    Some(v) -> Ok(v), Nothing() -> Error(error()).

    error is a thunk so it is only built when needed.
    """

    async def run() -> Result[T, E]:
        match opt:
            case Some(value):
                return Ok(value)
            case _:
                return Error(error())

    return LazyCoroResult(run)


def catching[T, E](thunk: Callable[[], T], *, on_error: Callable[[Exception], E]) -> LazyCoroResult[T, E]:
    """Run a raising thunk lazily; exceptions become Error(on_error(exc))."""

    async def run() -> Result[T, E]:
        try:
            return Ok(thunk())
        except Exception as exc:
            return Error(on_error(exc))

    return LazyCoroResult(run)


__all__ = (
    "catching",
    "fail",
    "from_option",
    "from_result",
    "nothing",
    "optional",
    "pure",
    "some",
)
