"""
Опускание: Option and LazyCoroResult back into plain values.
"""

from __future__ import annotations

from kungfu import LazyCoroResult, Option, Result, Some


def to_optional[T](opt: Option[T]) -> T | None:
    match opt:
        case Some(value):
            return value
        case _:
            return None


def or_else[T](opt: Option[T], default: T) -> T:
    match opt:
        case Some(value):
            return value
        case _:
            return default


def unsafe[T](opt: Option[T]) -> T:
    """Value of Some; raises ValueError on Nothing()."""
    match opt:
        case Some(value):
            return value
        case _:
            raise ValueError("unsafe(): option is empty")


async def to_result[T, E](interp: LazyCoroResult[T, E]) -> Result[T, E]:
    return await interp()


__all__ = (
    "or_else",
    "to_optional",
    "to_result",
    "unsafe",
)
