"""
Iterable comprehensions
=======================

for_each2..for_each4 over iterables. Results come back as a list in
nested-loop order:

    for_each2([1, 2], lambda a: [a, a * 10], lambda a, b: (a, b))
    # [(1, 1), (1, 10), (2, 2), (2, 20)]
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from .._types import Fn2, Fn3, Fn4
from .generic import for_each2M, for_each3M, for_each4M


def _bind[T, R](items: Iterable[T], fn: Callable[[T], Iterable[R]]) -> list[R]:
    return [r for item in items for r in fn(item)]


def _fmap[T, R](items: Iterable[T], fn: Callable[[T], R]) -> list[R]:
    return [fn(item) for item in items]


def _guard[T](items: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    return [item for item in items if predicate(item)]


def for_each2[T, R1, R](
    value1: Iterable[T],
    value2: Callable[[T], Iterable[R1]],
    yield_: Fn2[T, R1, R],
    *,
    filter_: Fn2[T, R1, bool] | None = None,
) -> list[R]:
    return typing.cast(
        list[R],
        for_each2M(value1, value2, yield_, bind=_bind, fmap=_fmap, guard=_guard, filter_=filter_),
    )


def for_each3[T, R1, R2, R](
    value1: Iterable[T],
    value2: Callable[[T], Iterable[R1]],
    value3: Fn2[T, R1, Iterable[R2]],
    yield_: Fn3[T, R1, R2, R],
    *,
    filter_: Fn3[T, R1, R2, bool] | None = None,
) -> list[R]:
    return typing.cast(
        list[R],
        for_each3M(value1, value2, value3, yield_, bind=_bind, fmap=_fmap, guard=_guard, filter_=filter_),
    )


def for_each4[T, R1, R2, R3, R](
    value1: Iterable[T],
    value2: Callable[[T], Iterable[R1]],
    value3: Fn2[T, R1, Iterable[R2]],
    value4: Fn3[T, R1, R2, Iterable[R3]],
    yield_: Fn4[T, R1, R2, R3, R],
    *,
    filter_: Fn4[T, R1, R2, R3, bool] | None = None,
) -> list[R]:
    return typing.cast(
        list[R],
        for_each4M(
            value1, value2, value3, value4, yield_, bind=_bind, fmap=_fmap, guard=_guard, filter_=filter_
        ),
    )


__all__ = ("for_each2", "for_each3", "for_each4")
