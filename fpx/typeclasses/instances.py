"""
Type-class instance records.

Architecture:
- Each record is a frozen dataclass of functions over one concrete type
  (Future, Option, list, ...). Functions take the value last: map(fn, fa).
- Records nest by inheritance: Monad carries unit + map + flat_map,
  MonadZero adds zero + filter, MonadPlus adds a monoid.
- Derived operations (map2, flatten, fold_map, ...) are plain methods built
  from the stored functions.

For a new type:
1. Write the primitive functions (unit, map, flat_map, ...)
2. Build the records from them
3. Expose constructors in a namespace module (see futures.py / options.py)
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .monoid import Monoid


@dataclass(frozen=True, slots=True)
class Unit:
    unit: Callable[[Any], Any]


@dataclass(frozen=True, slots=True)
class Functor:
    map: Callable[[Callable[[Any], Any], Any], Any]


@dataclass(frozen=True, slots=True)
class Applicative:
    unit: Callable[[Any], Any]
    map: Callable[[Callable[[Any], Any], Any], Any]
    ap: Callable[[Any, Any], Any]

    def map2(self, fn: Callable[[Any, Any], Any], fa: Any, fb: Any) -> Any:
        """Lift a binary function: ap(map(curry(fn), fa), fb)."""
        return self.ap(self.map(lambda a: lambda b: fn(a, b), fa), fb)


@dataclass(frozen=True, slots=True)
class Monad:
    """
    Monadic laws:
    - Left identity: flat_map(f, unit(a)) == f(a)
    - Right identity: flat_map(unit, m) == m
    - Associativity: flat_map(g, flat_map(f, m)) == flat_map(lambda x: flat_map(g, f(x)), m)
    """

    unit: Callable[[Any], Any]
    map: Callable[[Callable[[Any], Any], Any], Any]
    flat_map: Callable[[Callable[[Any], Any], Any], Any]

    def ap(self, ff: Any, fa: Any) -> Any:
        return self.flat_map(lambda f: self.map(f, fa), ff)

    def flatten(self, ffa: Any) -> Any:
        return self.flat_map(lambda fa: fa, ffa)

    def applicative(self) -> Applicative:
        return Applicative(unit=self.unit, map=self.map, ap=self.ap)


@dataclass(frozen=True, slots=True)
class MonadZero(Monad):
    zero: Callable[[], Any]
    filter_fn: Callable[[Callable[[Any], bool], Any], Any] | None = None

    def filter(self, predicate: Callable[[Any], bool], fa: Any) -> Any:
        """Keep the value when predicate holds, otherwise zero()."""
        if self.filter_fn is not None:
            return self.filter_fn(predicate, fa)
        return self.flat_map(lambda a: self.unit(a) if predicate(a) else self.zero(), fa)


@dataclass(frozen=True, slots=True)
class MonadPlus(MonadZero):
    monoid: Monoid[Any] | None = None

    def plus(self, a: Any, b: Any) -> Any:
        if self.monoid is None:
            raise ValueError("MonadPlus.plus(): no monoid configured")
        return self.monoid.combine(a, b)

    def sum(self, items: typing.Iterable[Any]) -> Any:
        if self.monoid is None:
            raise ValueError("MonadPlus.sum(): no monoid configured")
        return self.monoid.reduce(items)


@dataclass(frozen=True, slots=True)
class Foldable:
    fold_left: Callable[[Any, Callable[[Any, Any], Any], Any], Any]
    fold_right: Callable[[Any, Callable[[Any, Any], Any], Any], Any]

    def fold_map(self, monoid: Monoid[Any], fn: Callable[[Any], Any], fa: Any) -> Any:
        return self.fold_left(monoid.zero, lambda acc, a: monoid.combine(acc, fn(a)), fa)

    def to_list(self, fa: Any) -> list[Any]:
        return self.fold_left([], lambda acc, a: [*acc, a], fa)

    def is_empty(self, fa: Any) -> bool:
        return not self.fold_left(False, lambda _acc, _a: True, fa)


@dataclass(frozen=True, slots=True)
class Traverse:
    """traverse_a(applicative, fn, fa): run fn over fa inside `applicative`'s effect."""

    traverse_a: Callable[[Applicative, Callable[[Any], Any], Any], Any]

    def sequence_a(self, applicative: Applicative, fga: Any) -> Any:
        return self.traverse_a(applicative, lambda ga: ga, fga)


__all__ = (
    "Applicative",
    "Foldable",
    "Functor",
    "Monad",
    "MonadPlus",
    "MonadZero",
    "Traverse",
    "Unit",
)
