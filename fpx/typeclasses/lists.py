"""
List instances
==============

Type-class records for plain Python lists.
"""

from __future__ import annotations

import functools
import typing
from collections.abc import Callable

from .instances import Applicative, Foldable, Functor, Monad, MonadPlus, MonadZero, Traverse, Unit
from .monoid import Monoid, Monoids


def unit_fn[T](value: T) -> list[T]:
    return [value]


def zero_fn() -> list[typing.Any]:
    return []


def map_fn[T, R](fn: Callable[[T], R], xs: list[T]) -> list[R]:
    return [fn(x) for x in xs]


def flat_map_fn[T, R](fn: Callable[[T], list[R]], xs: list[T]) -> list[R]:
    return [y for x in xs for y in fn(x)]


def filter_fn[T](predicate: Callable[[T], bool], xs: list[T]) -> list[T]:
    return [x for x in xs if predicate(x)]


def ap_fn[T, R](fns: list[Callable[[T], R]], xs: list[T]) -> list[R]:
    return [fn(x) for fn in fns for x in xs]


def fold_left_fn[T, U](seed: U, fn: Callable[[U, T], U], xs: list[T]) -> U:
    return functools.reduce(fn, xs, seed)


def fold_right_fn[T, U](seed: U, fn: Callable[[T, U], U], xs: list[T]) -> U:
    acc = seed
    for x in reversed(xs):
        acc = fn(x, acc)
    return acc


def traverse_a_fn(applicative: Applicative, fn: Callable[[typing.Any], typing.Any], xs: list[typing.Any]) -> typing.Any:
    """Left to right: each fn(x) is combined into the accumulated list with map2."""
    acc = applicative.unit([])
    for x in xs:
        acc = applicative.map2(lambda values, v: [*values, v], acc, fn(x))
    return acc


def unit() -> Unit:
    return Unit(unit=unit_fn)


def functor() -> Functor:
    return Functor(map=map_fn)


def applicative() -> Applicative:
    return Applicative(unit=unit_fn, map=map_fn, ap=ap_fn)


def monad() -> Monad:
    return Monad(unit=unit_fn, map=map_fn, flat_map=flat_map_fn)


def monad_zero() -> MonadZero:
    return MonadZero(unit=unit_fn, map=map_fn, flat_map=flat_map_fn, zero=zero_fn, filter_fn=filter_fn)


def monad_plus(monoid: Monoid[list[typing.Any]] | None = None) -> MonadPlus:
    """Default plus concatenates."""
    return MonadPlus(
        unit=unit_fn,
        map=map_fn,
        flat_map=flat_map_fn,
        zero=zero_fn,
        filter_fn=filter_fn,
        monoid=monoid if monoid is not None else Monoids.list_concat(),
    )


def foldable() -> Foldable:
    return Foldable(fold_left=fold_left_fn, fold_right=fold_right_fn)


def traverse() -> Traverse:
    return Traverse(traverse_a=traverse_a_fn)


__all__ = (
    "unit",
    "functor",
    "applicative",
    "monad",
    "monad_zero",
    "monad_plus",
    "foldable",
    "traverse",
)
