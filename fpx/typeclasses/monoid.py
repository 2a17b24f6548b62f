"""
Monoid - zero + associative combine
===================================

Laws:
- Left identity: combine(zero, x) == x
- Right identity: combine(x, zero) == x
- Associativity: combine(combine(x, y), z) == combine(x, combine(y, z))
"""

from __future__ import annotations

import functools
import operator
import typing
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from kungfu import Nothing, Option, Some


@dataclass(frozen=True, slots=True)
class Monoid[T]:
    zero: T
    combine: Callable[[T, T], T]

    @staticmethod
    def of[V](zero: V, combine: Callable[[V, V], V]) -> Monoid[V]:
        return Monoid(zero, combine)

    def reduce(self, items: Iterable[T]) -> T:
        """Fold left from zero."""
        return functools.reduce(self.combine, items, self.zero)

    def fold_right(self, items: Iterable[T]) -> T:
        values = list(items)
        acc = self.zero
        for item in reversed(values):
            acc = self.combine(item, acc)
        return acc


@dataclass(frozen=True, slots=True)
class Reducer[T](Monoid[T]):
    """
    Monoid plus a conversion of arbitrary input into the monoid's type.

    A Reducer is a Monoid: reduce / fold_right / scans accept it as is,
    map_reduce converts the inputs first.
    """

    map_to_type: Callable[[typing.Any], T]

    @staticmethod
    def of[V](  # type: ignore[override]
        zero: V,
        combine: Callable[[V, V], V],
        map_to_type: Callable[[typing.Any], V],
    ) -> Reducer[V]:
        return Reducer(zero, combine, map_to_type)

    @staticmethod
    def from_monoid[V](monoid: Monoid[V], map_to_type: Callable[[typing.Any], V]) -> Reducer[V]:
        return Reducer(monoid.zero, monoid.combine, map_to_type)

    def map_reduce(self, items: Iterable[typing.Any]) -> T:
        return self.reduce(self.map_to_type(item) for item in items)


# ============================================================================
# Stock monoids
# ============================================================================


def _first_present[T](a: Option[T], b: Option[T]) -> Option[T]:
    match a:
        case Some(_):
            return a
        case _:
            return b


def _last_present[T](a: Option[T], b: Option[T]) -> Option[T]:
    match b:
        case Some(_):
            return b
        case _:
            return a


class Monoids:
    """Namespace of ready-made monoids."""

    int_sum: typing.ClassVar[Monoid[int]] = Monoid(0, operator.add)
    int_product: typing.ClassVar[Monoid[int]] = Monoid(1, operator.mul)
    float_sum: typing.ClassVar[Monoid[float]] = Monoid(0.0, operator.add)
    string_concat: typing.ClassVar[Monoid[str]] = Monoid("", operator.add)
    bool_all: typing.ClassVar[Monoid[bool]] = Monoid(True, lambda a, b: a and b)
    bool_any: typing.ClassVar[Monoid[bool]] = Monoid(False, lambda a, b: a or b)

    @staticmethod
    def int_max(minimum: int) -> Monoid[int]:
        """Max with an explicit lower bound as zero."""
        return Monoid(minimum, max)

    @staticmethod
    def int_min(maximum: int) -> Monoid[int]:
        return Monoid(maximum, min)

    @staticmethod
    def list_concat[T]() -> Monoid[list[T]]:
        return Monoid([], lambda a, b: [*a, *b])

    @staticmethod
    def string_join(separator: str) -> Monoid[str]:
        """Join non-empty strings with a separator."""

        def join(a: str, b: str) -> str:
            if not a:
                return b
            if not b:
                return a
            return f"{a}{separator}{b}"

        return Monoid("", join)

    @staticmethod
    def first_present[T]() -> Monoid[Option[T]]:
        return Monoid(Nothing(), _first_present)

    @staticmethod
    def last_present[T]() -> Monoid[Option[T]]:
        return Monoid(Nothing(), _last_present)


__all__ = ("Monoid", "Monoids", "Reducer")
