"""
Option instances
================

Type-class records for kungfu's Option (Some / Nothing).

    from fpx.typeclasses import options as O

    O.monad().flat_map(lambda v: Some(v + 1), Some(1))  # Some(2)
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Nothing, Option, Some

from .instances import Applicative, Foldable, Functor, Monad, MonadPlus, MonadZero, Traverse, Unit
from .monoid import Monoid, Monoids


# ============================================================================
# Primitive operations
# ============================================================================


def unit_fn[T](value: T) -> Option[T]:
    return Some(value)


def zero_fn() -> Option[typing.Never]:
    return Nothing()


def map_fn[T, R](fn: Callable[[T], R], opt: Option[T]) -> Option[R]:
    match opt:
        case Some(value):
            return Some(fn(value))
        case _:
            return Nothing()


def flat_map_fn[T, R](fn: Callable[[T], Option[R]], opt: Option[T]) -> Option[R]:
    match opt:
        case Some(value):
            return fn(value)
        case _:
            return Nothing()


def filter_fn[T](predicate: Callable[[T], bool], opt: Option[T]) -> Option[T]:
    match opt:
        case Some(value) if predicate(value):
            return opt
        case _:
            return Nothing()


def ap_fn[T, R](fn_opt: Option[Callable[[T], R]], opt: Option[T]) -> Option[R]:
    match (fn_opt, opt):
        case (Some(fn), Some(value)):
            return Some(fn(value))
        case _:
            return Nothing()


def fold_left_fn[T, U](seed: U, fn: Callable[[U, T], U], opt: Option[T]) -> U:
    match opt:
        case Some(value):
            return fn(seed, value)
        case _:
            return seed


def fold_right_fn[T, U](seed: U, fn: Callable[[T, U], U], opt: Option[T]) -> U:
    match opt:
        case Some(value):
            return fn(value, seed)
        case _:
            return seed


def traverse_a_fn(applicative: Applicative, fn: Callable[[typing.Any], typing.Any], opt: Option[typing.Any]) -> typing.Any:
    match opt:
        case Some(value):
            return applicative.map(Some, fn(value))
        case _:
            return applicative.unit(Nothing())


# ============================================================================
# Instance constructors
# ============================================================================


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


def monad_plus(monoid: Monoid[Option[typing.Any]] | None = None) -> MonadPlus:
    """Default plus keeps the first present value."""
    return MonadPlus(
        unit=unit_fn,
        map=map_fn,
        flat_map=flat_map_fn,
        zero=zero_fn,
        filter_fn=filter_fn,
        monoid=monoid if monoid is not None else Monoids.first_present(),
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
