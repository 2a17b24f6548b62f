"""
Future comprehensions
=====================

for_each2..for_each4 over kungfu LazyCoroResult.

Lazy: nothing runs until the result is awaited. Generators run sequentially,
each one sees all previously bound values. An Error short-circuits; a
rejected filter becomes Error(FilteredOutError(values)).
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, LazyCoroResult, Ok, Result

from .._errors import FilteredOutError
from .._types import Fn2, Fn3, Fn4


def for_each2[T, R1, R, E](
    value1: LazyCoroResult[T, E],
    value2: Callable[[T], LazyCoroResult[R1, E]],
    yield_: Fn2[T, R1, R],
    *,
    filter_: Fn2[T, R1, bool] | None = None,
) -> LazyCoroResult[R, E | FilteredOutError]:
    async def run() -> Result[R, E | FilteredOutError]:
        match await value1():
            case Error(e):
                return Error(e)
            case Ok(a):
                pass
        match await value2(a)():
            case Error(e):
                return Error(e)
            case Ok(b):
                pass
        if filter_ is not None and not filter_(a, b):
            return Error(FilteredOutError((a, b)))
        return Ok(yield_(a, b))

    return LazyCoroResult(run)


def for_each3[T, R1, R2, R, E](
    value1: LazyCoroResult[T, E],
    value2: Callable[[T], LazyCoroResult[R1, E]],
    value3: Fn2[T, R1, LazyCoroResult[R2, E]],
    yield_: Fn3[T, R1, R2, R],
    *,
    filter_: Fn3[T, R1, R2, bool] | None = None,
) -> LazyCoroResult[R, E | FilteredOutError]:
    async def run() -> Result[R, E | FilteredOutError]:
        match await value1():
            case Error(e):
                return Error(e)
            case Ok(a):
                pass
        match await value2(a)():
            case Error(e):
                return Error(e)
            case Ok(b):
                pass
        match await value3(a, b)():
            case Error(e):
                return Error(e)
            case Ok(c):
                pass
        if filter_ is not None and not filter_(a, b, c):
            return Error(FilteredOutError((a, b, c)))
        return Ok(yield_(a, b, c))

    return LazyCoroResult(run)


def for_each4[T, R1, R2, R3, R, E](
    value1: LazyCoroResult[T, E],
    value2: Callable[[T], LazyCoroResult[R1, E]],
    value3: Fn2[T, R1, LazyCoroResult[R2, E]],
    value4: Fn3[T, R1, R2, LazyCoroResult[R3, E]],
    yield_: Fn4[T, R1, R2, R3, R],
    *,
    filter_: Fn4[T, R1, R2, R3, bool] | None = None,
) -> LazyCoroResult[R, E | FilteredOutError]:
    async def run() -> Result[R, E | FilteredOutError]:
        match await value1():
            case Error(e):
                return Error(e)
            case Ok(a):
                pass
        match await value2(a)():
            case Error(e):
                return Error(e)
            case Ok(b):
                pass
        match await value3(a, b)():
            case Error(e):
                return Error(e)
            case Ok(c):
                pass
        match await value4(a, b, c)():
            case Error(e):
                return Error(e)
            case Ok(d):
                pass
        if filter_ is not None and not filter_(a, b, c, d):
            return Error(FilteredOutError((a, b, c, d)))
        return Ok(yield_(a, b, c, d))

    return LazyCoroResult(run)


__all__ = ("for_each2", "for_each3", "for_each4")
