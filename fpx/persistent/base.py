"""
Persistent collection base
==========================

Fluent, immutable wrapper over a pyrsistent collection.

Every operation builds a NEW wrapper through ``type(self).from_iterable``, so
results keep the concrete type (PVectorX stays PVectorX, POrderedSetX stays
POrderedSetX) and the receiver is never modified.

Subclasses provide:
- _backing(items)  - build the underlying pyrsistent value from an iterable
- plus(value)      - persistent insert with the type's own semantics
- minus(value)     - persistent removal (no-op when absent)
"""

from __future__ import annotations

import functools
import random as _random
import typing
from collections.abc import Callable, Iterable, Iterator

from kungfu import Nothing, Option, Some

from .. import _seq
from .._errors import EmptyCollectionError
from .._helpers import first_option
from .._types import Consumer, Fn2, Fn3, Fn4, Predicate, Supplier
from ..comprehensions import iterables as _for
from ..typeclasses.monoid import Monoid, Reducer

if typing.TYPE_CHECKING:
    from .bag import PBagX
    from .hash_set import PSetX
    from .ordered_set import POrderedSetX
    from .stack import PStackX
    from .vector import PVectorX


class PersistentCollectionX[T]:
    __slots__ = ("_data",)

    def __init__(self, data: typing.Any, /) -> None:
        """Wrap an already-built backing value. Prefer the class constructors."""
        self._data = data

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    @classmethod
    def _backing(cls, items: Iterable[typing.Any]) -> typing.Any:
        raise NotImplementedError

    def plus(self, value: T, /) -> typing.Self:
        raise NotImplementedError

    def minus(self, value: T, /) -> typing.Self:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_iterable(cls, items: Iterable[typing.Any]) -> typing.Self:
        return cls(cls._backing(items))

    @classmethod
    def of(cls, *values: typing.Any) -> typing.Self:
        return cls.from_iterable(values)

    @classmethod
    def empty(cls) -> typing.Self:
        return cls.from_iterable(())

    @classmethod
    def singleton(cls, value: typing.Any) -> typing.Self:
        return cls.from_iterable((value,))

    @classmethod
    def range(cls, start: int, end: int) -> typing.Self:
        """Integers in [start, end)."""
        return cls.from_iterable(range(start, end))

    @classmethod
    def iterate(cls, limit: int, seed: typing.Any, fn: Callable[[typing.Any], typing.Any]) -> typing.Self:
        """seed, fn(seed), fn(fn(seed)), ... (limit elements)."""
        if limit < 0:
            raise ValueError(f"iterate(): limit must be >= 0, got {limit}")
        values = []
        current = seed
        for _ in range(limit):
            values.append(current)
            current = fn(current)
        return cls.from_iterable(values)

    @classmethod
    def generate(cls, limit: int, supplier: Supplier[typing.Any]) -> typing.Self:
        if limit < 0:
            raise ValueError(f"generate(): limit must be >= 0, got {limit}")
        return cls.from_iterable(supplier() for _ in range(limit))

    @classmethod
    def unfold(
        cls,
        seed: typing.Any,
        unfolder: Callable[[typing.Any], Option[tuple[typing.Any, typing.Any]]],
    ) -> typing.Self:
        """Emit values until unfolder returns Nothing()."""
        values = []
        state = seed
        while True:
            match unfolder(state):
                case Some((value, next_state)):
                    values.append(value)
                    state = next_state
                case _:
                    break
        return cls.from_iterable(values)

    # ------------------------------------------------------------------
    # Protocol
    # ------------------------------------------------------------------

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, value: object) -> bool:
        return value in self._data

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(self._data == typing.cast(PersistentCollectionX[T], other)._data)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._data))

    def __repr__(self) -> str:
        return f"{type(self).__name__}.of({', '.join(repr(v) for v in self)})"

    def unwrap(self) -> typing.Any:
        """Underlying pyrsistent collection."""
        return self._data

    def size(self) -> int:
        return len(self)

    def is_empty(self) -> bool:
        return len(self) == 0

    def _unit(self, items: Iterable[typing.Any]) -> typing.Self:
        return type(self).from_iterable(items)

    # ------------------------------------------------------------------
    # Persistent bulk operations
    # ------------------------------------------------------------------

    def plus_all(self, values: Iterable[T], /) -> typing.Self:
        return functools.reduce(lambda acc, v: acc.plus(v), values, self)

    def minus_all(self, values: Iterable[T], /) -> typing.Self:
        return functools.reduce(lambda acc, v: acc.minus(v), values, self)

    def append(self, *values: T) -> typing.Self:
        """Add values after the existing elements (in iteration order)."""
        return self._unit([*self, *values])

    def prepend(self, *values: T) -> typing.Self:
        return self._unit([*values, *self])

    def plus_in_order(self, value: T, /) -> typing.Self:
        """Add so that `value` comes last in iteration order."""
        return self.append(value)

    def insert_at(self, pos: int, *values: T) -> typing.Self:
        return self._unit(_seq.insert_at(self, pos, values))

    def delete_between(self, start: int, end: int) -> typing.Self:
        return self._unit(_seq.delete_between(self, start, end))

    def remove_all(self, *values: T) -> typing.Self:
        return self.filter_not(lambda v: v in values)

    def retain_all(self, *values: T) -> typing.Self:
        return self.filter(lambda v: v in values)

    # ------------------------------------------------------------------
    # Functor / monad
    # ------------------------------------------------------------------

    def map[R](self, fn: Callable[[T], R]) -> PersistentCollectionX[R]:
        return self._unit(fn(v) for v in self)

    def flat_map[R](self, fn: Callable[[T], Iterable[R]]) -> PersistentCollectionX[R]:
        return self._unit(r for v in self for r in fn(v))

    def filter(self, predicate: Predicate[T]) -> typing.Self:
        return self._unit(v for v in self if predicate(v))

    def filter_not(self, predicate: Predicate[T]) -> typing.Self:
        return self._unit(v for v in self if not predicate(v))

    def not_none(self) -> typing.Self:
        return self.filter(lambda v: v is not None)

    def of_type[U](self, cls: type[U]) -> PersistentCollectionX[U]:
        return typing.cast(PersistentCollectionX[U], self.filter(lambda v: isinstance(v, cls)))

    def peek(self, consumer: Consumer[T]) -> typing.Self:
        def tap(v: T) -> T:
            consumer(v)
            return v

        return self._unit(tap(v) for v in self)

    def coflat_map[R](self, fn: Callable[[typing.Self], R]) -> PersistentCollectionX[R]:
        """Singleton collection holding fn(self)."""
        return type(self).singleton(fn(self))

    def for_each2[R1, R](
        self,
        fn2: Callable[[T], Iterable[R1]],
        yield_: Fn2[T, R1, R],
        *,
        filter_: Fn2[T, R1, bool] | None = None,
    ) -> PersistentCollectionX[R]:
        return self._unit(_for.for_each2(self, fn2, yield_, filter_=filter_))

    def for_each3[R1, R2, R](
        self,
        fn2: Callable[[T], Iterable[R1]],
        fn3: Fn2[T, R1, Iterable[R2]],
        yield_: Fn3[T, R1, R2, R],
        *,
        filter_: Fn3[T, R1, R2, bool] | None = None,
    ) -> PersistentCollectionX[R]:
        return self._unit(_for.for_each3(self, fn2, fn3, yield_, filter_=filter_))

    def for_each4[R1, R2, R3, R](
        self,
        fn2: Callable[[T], Iterable[R1]],
        fn3: Fn2[T, R1, Iterable[R2]],
        fn4: Fn3[T, R1, R2, Iterable[R3]],
        yield_: Fn4[T, R1, R2, R3, R],
        *,
        filter_: Fn4[T, R1, R2, R3, bool] | None = None,
    ) -> PersistentCollectionX[R]:
        return self._unit(_for.for_each4(self, fn2, fn3, fn4, yield_, filter_=filter_))

    # ------------------------------------------------------------------
    # Slicing
    # ------------------------------------------------------------------

    def take(self, n: int) -> typing.Self:
        return self._unit(_seq.take(self, n))

    def drop(self, n: int) -> typing.Self:
        return self._unit(_seq.drop(self, n))

    def take_right(self, n: int) -> typing.Self:
        return self._unit(_seq.take_right(self, n))

    def drop_right(self, n: int) -> typing.Self:
        return self._unit(_seq.drop_right(self, n))

    def take_while(self, predicate: Predicate[T]) -> typing.Self:
        return self._unit(_seq.take_while(self, predicate))

    def drop_while(self, predicate: Predicate[T]) -> typing.Self:
        return self._unit(_seq.drop_while(self, predicate))

    def take_until(self, predicate: Predicate[T]) -> typing.Self:
        return self._unit(_seq.take_until(self, predicate))

    def drop_until(self, predicate: Predicate[T]) -> typing.Self:
        return self._unit(_seq.drop_until(self, predicate))

    def slice(self, start: int, stop: int) -> typing.Self:
        return self._unit(_seq.slice_(self, start, stop))

    limit = take
    skip = drop
    limit_last = take_right
    skip_last = drop_right
    limit_while = take_while
    limit_until = take_until
    skip_while = drop_while
    skip_until = drop_until

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------

    def sorted(self, key: Callable[[T], typing.Any] | None = None, *, reverse: bool = False) -> typing.Self:
        return self._unit(sorted(self, key=key, reverse=reverse))  # type: ignore[type-var, arg-type]

    def reverse(self) -> typing.Self:
        values = list(self)
        values.reverse()
        return self._unit(values)

    def distinct(self) -> typing.Self:
        return self._unit(_seq.distinct(self))

    def intersperse(self, value: T) -> typing.Self:
        return self._unit(_seq.intersperse(self, value))

    def shuffle(self, rng: _random.Random | None = None) -> typing.Self:
        return self._unit(_seq.shuffle(self, rng))

    def combine(self, predicate: Callable[[T, T], bool], op: Callable[[T, T], T]) -> typing.Self:
        """Merge neighbours while predicate(previous, next) holds."""
        return self._unit(_seq.combine_adjacent(self, predicate, op))

    # ------------------------------------------------------------------
    # Grouping / windows / zipping
    # ------------------------------------------------------------------

    def grouped(self, size: int) -> PersistentCollectionX[PVectorX[T]]:
        from .vector import PVectorX

        return self._unit(PVectorX.from_iterable(g) for g in _seq.grouped(self, size))

    def grouped_while(self, predicate: Predicate[T]) -> PersistentCollectionX[PVectorX[T]]:
        from .vector import PVectorX

        return self._unit(PVectorX.from_iterable(g) for g in _seq.grouped_while(self, predicate))

    def grouped_until(self, predicate: Predicate[T]) -> PersistentCollectionX[PVectorX[T]]:
        from .vector import PVectorX

        return self._unit(PVectorX.from_iterable(g) for g in _seq.grouped_until(self, predicate))

    def grouped_by[K](self, classifier: Callable[[T], K]) -> PersistentCollectionX[tuple[K, PVectorX[T]]]:
        from .vector import PVectorX

        return self._unit((k, PVectorX.from_iterable(g)) for k, g in _seq.grouped_by(self, classifier))

    def sliding(self, size: int, increment: int = 1) -> PersistentCollectionX[PVectorX[T]]:
        from .vector import PVectorX

        return self._unit(PVectorX.from_iterable(w) for w in _seq.sliding(self, size, increment))

    def zip[U](self, other: Iterable[U]) -> PersistentCollectionX[tuple[T, U]]:
        return self._unit(zip(self, other))

    def zip_with[U, R](self, other: Iterable[U], fn: Callable[[T, U], R]) -> PersistentCollectionX[R]:
        return self._unit(fn(a, b) for a, b in zip(self, other))

    def zip3[S, U](self, second: Iterable[S], third: Iterable[U]) -> PersistentCollectionX[tuple[T, S, U]]:
        return self._unit(zip(self, second, third))

    def zip4[S, U, V](
        self,
        second: Iterable[S],
        third: Iterable[U],
        fourth: Iterable[V],
    ) -> PersistentCollectionX[tuple[T, S, U, V]]:
        return self._unit(zip(self, second, third, fourth))

    def zip_with_index(self) -> PersistentCollectionX[tuple[T, int]]:
        return self._unit((v, i) for i, v in enumerate(self))

    # ------------------------------------------------------------------
    # Scans / cycles
    # ------------------------------------------------------------------

    def scan_left[U](
        self,
        seed: U | Monoid[U],
        fn: Callable[[U, T], U] | None = None,
    ) -> PersistentCollectionX[U]:
        """scan_left(seed, fn) or scan_left(monoid). The seed is the first element."""
        if fn is None:
            if not isinstance(seed, Monoid):
                raise ValueError("scan_left(): pass either (seed, fn) or a Monoid")
            return self._unit(_seq.scan_left(self, seed.zero, seed.combine))
        return self._unit(_seq.scan_left(self, seed, fn))

    def scan_right[U](
        self,
        seed: U | Monoid[U],
        fn: Callable[[T, U], U] | None = None,
    ) -> PersistentCollectionX[U]:
        if fn is None:
            if not isinstance(seed, Monoid):
                raise ValueError("scan_right(): pass either (seed, fn) or a Monoid")
            return self._unit(_seq.scan_right(self, seed.zero, seed.combine))
        return self._unit(_seq.scan_right(self, seed, fn))

    def cycle(self, times: int) -> PStackX[T]:
        """Repeat `times` times. Returns a stack so repeats survive in sets."""
        from .stack import PStackX

        return PStackX.from_iterable(_seq.cycle(self, times))

    def cycle_while(self, predicate: Predicate[T]) -> PStackX[T]:
        from .stack import PStackX

        return PStackX.from_iterable(_seq.cycle_while(self, predicate))

    def cycle_until(self, predicate: Predicate[T]) -> PStackX[T]:
        from .stack import PStackX

        return PStackX.from_iterable(_seq.cycle_until(self, predicate))

    # ------------------------------------------------------------------
    # Empty handling
    # ------------------------------------------------------------------

    def on_empty(self, value: T) -> typing.Self:
        return self if len(self) else self._unit((value,))

    def on_empty_get(self, supplier: Supplier[T]) -> typing.Self:
        return self if len(self) else self._unit((supplier(),))

    def on_empty_switch(self, supplier: Supplier[Iterable[T]]) -> typing.Self:
        return self if len(self) else self._unit(supplier())

    def on_empty_raise(self, supplier: Supplier[BaseException]) -> typing.Self:
        if not len(self):
            raise supplier()
        return self

    # ------------------------------------------------------------------
    # Terminal operations
    # ------------------------------------------------------------------

    def fold_left[U](self, seed: U, fn: Callable[[U, T], U]) -> U:
        return functools.reduce(fn, self, seed)

    def fold_right[U](self, seed: U, fn: Callable[[T, U], U]) -> U:
        values = list(self)
        acc = seed
        for v in reversed(values):
            acc = fn(v, acc)
        return acc

    def reduce(self, monoid: Monoid[T]) -> T:
        return monoid.reduce(self)

    def map_reduce[R](self, reducer: Reducer[R]) -> R:
        return reducer.map_reduce(self)

    def single(self) -> T:
        """The only element. Raises on empty (EmptyCollectionError) or on more than one (ValueError)."""
        if not len(self):
            raise EmptyCollectionError("single")
        if len(self) > 1:
            raise ValueError(f"single(): expected exactly one element, got {len(self)}")
        return next(iter(self))

    def first(self) -> Option[T]:
        return first_option(self)

    def get_or_nothing(self, index: int) -> Option[T]:
        """Element at iteration position `index`, Nothing() when out of range."""
        if index < 0:
            return Nothing()
        for i, v in enumerate(self):
            if i == index:
                return Some(v)
        return Nothing()

    def sum(self, fn: Callable[[T], typing.Any] | None = None) -> typing.Any:
        if fn is None:
            return sum(typing.cast(Iterable[typing.Any], self))
        return sum(fn(v) for v in self)

    def join(self, separator: str = "") -> str:
        return separator.join(str(v) for v in self)

    def any_match(self, predicate: Predicate[T]) -> bool:
        return any(predicate(v) for v in self)

    def all_match(self, predicate: Predicate[T]) -> bool:
        return all(predicate(v) for v in self)

    def none_match(self, predicate: Predicate[T]) -> bool:
        return not self.any_match(predicate)

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def to_list(self) -> list[T]:
        return list(self)

    def to_tuple(self) -> tuple[T, ...]:
        return tuple(self)

    def to_pvector_x(self) -> PVectorX[T]:
        from .vector import PVectorX

        return PVectorX.from_iterable(self)

    def to_pstack_x(self) -> PStackX[T]:
        from .stack import PStackX

        return PStackX.from_iterable(self)

    def to_porderedset_x(self) -> POrderedSetX[T]:
        from .ordered_set import POrderedSetX

        return POrderedSetX.from_iterable(self)

    def to_pset_x(self) -> PSetX[T]:
        from .hash_set import PSetX

        return PSetX.from_iterable(self)

    def to_pbag_x(self) -> PBagX[T]:
        from .bag import PBagX

        return PBagX.from_iterable(self)


__all__ = ("PersistentCollectionX",)
