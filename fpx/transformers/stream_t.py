"""
StreamT
=======

A stream nested inside an outer effect. The outer effect is described by an
instance record (fpx.typeclasses), so the same transformer works over Option,
list, Future or anything else with a Monad:

    StreamT.from_option(Some([1, 2, 3])).map(lambda x: x * 2).unwrap()
    # Some((2, 4, 6))

    StreamT.from_list([[1, 2], [3]]).filter(lambda x: x > 1).unwrap()
    # [(2,), (3,)]

Inner iterables are materialised to tuples, so a transformer can be read
more than once. Operations act on the inner stream and leave the outer
effect in place.
"""

from __future__ import annotations

import itertools
import random as _random
import typing
from collections.abc import Callable, Iterable, Iterator
from concurrent.futures import Future
from dataclasses import dataclass

from kungfu import Option

from .. import _seq
from .._helpers import materialize
from .._types import Consumer, Fn2, Fn3, Fn4, Predicate, Supplier
from ..comprehensions import iterables as _for
from ..persistent.vector import PVectorX
from ..typeclasses import futures as _futures
from ..typeclasses import lists as _lists
from ..typeclasses import options as _options
from ..typeclasses.instances import Foldable, Monad
from ..typeclasses.monoid import Monoid

type Inner[T] = tuple[T, ...]


@dataclass(frozen=True, slots=True)
class StreamT[T]:
    """
    Outer effect containing inner streams.

    Attributes:
        run: outer value (Option / list / Future / ...) of tuples
        monad: Monad instance of the outer effect
        foldable: Foldable instance of the outer effect, needed by stream(),
            is_seq_present() and flat_map_t()
    """

    run: typing.Any
    monad: Monad
    foldable: Foldable | None = None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @staticmethod
    def of[V](run: typing.Any, monad: Monad, foldable: Foldable | None = None) -> StreamT[V]:
        return StreamT(monad.map(materialize, run), monad, foldable)

    @staticmethod
    def from_option[V](opt: Option[Iterable[V]]) -> StreamT[V]:
        return StreamT.of(opt, _options.monad_zero(), _options.foldable())

    @staticmethod
    def from_list[V](nested: list[Iterable[V]]) -> StreamT[V]:
        return StreamT.of(list(nested), _lists.monad_zero(), _lists.foldable())

    @staticmethod
    def from_future[V](fut: Future[Iterable[V]]) -> StreamT[V]:
        return StreamT.of(fut, _futures.monad_zero(), _futures.foldable())

    @staticmethod
    def from_any[V](value: typing.Any, monad: Monad, foldable: Foldable | None = None) -> StreamT[V]:
        """Lift every value of a plain outer effect into a one-element stream."""
        return StreamT(monad.map(lambda v: (v,), value), monad, foldable)

    @staticmethod
    def empty_of[V](monad: Monad, foldable: Foldable | None = None) -> StreamT[V]:
        return StreamT(monad.unit(()), monad, foldable)

    def unit[R](self, value: R) -> StreamT[R]:
        return StreamT(self.monad.unit((value,)), self.monad, self.foldable)

    def empty[R](self) -> StreamT[R]:
        return StreamT.empty_of(self.monad, self.foldable)

    def _with_inner[R](self, fn: Callable[[Inner[T]], Iterable[R]]) -> StreamT[R]:
        return StreamT(self.monad.map(lambda inner: materialize(fn(inner)), self.run), self.monad, self.foldable)

    def _require_foldable(self, operation: str) -> Foldable:
        if self.foldable is None:
            raise ValueError(f"{operation}() requires a Foldable for the outer effect")
        return self.foldable

    # ------------------------------------------------------------------
    # Outer access
    # ------------------------------------------------------------------

    def unwrap(self) -> typing.Any:
        return self.run

    def unwrap_to[R](self, fn: Callable[[typing.Any], R]) -> R:
        return fn(self.run)

    def visit[R](self, fn: Callable[[Inner[T]], R]) -> typing.Any:
        """Map each inner stream into the outer effect."""
        return self.monad.map(fn, self.run)

    def stream(self) -> Iterator[T]:
        """All inner values of all outer values, in order."""
        foldable = self._require_foldable("stream")
        return itertools.chain.from_iterable(foldable.to_list(self.run))

    def __iter__(self) -> Iterator[T]:
        return self.stream()

    def is_seq_present(self) -> bool:
        return not self._require_foldable("is_seq_present").is_empty(self.run)

    # ------------------------------------------------------------------
    # Functor / monad on the inner stream
    # ------------------------------------------------------------------

    def map[R](self, fn: Callable[[T], R]) -> StreamT[R]:
        return self._with_inner(lambda inner: (fn(v) for v in inner))

    def filter(self, predicate: Predicate[T]) -> StreamT[T]:
        return self._with_inner(lambda inner: (v for v in inner if predicate(v)))

    def peek(self, consumer: Consumer[T]) -> StreamT[T]:
        def tap(v: T) -> T:
            consumer(v)
            return v

        return self.map(tap)

    def flat_map[R](self, fn: Callable[[T], Iterable[R]]) -> StreamT[R]:
        return self._with_inner(lambda inner: (r for v in inner for r in fn(v)))

    def flat_map_t[R](self, fn: Callable[[T], StreamT[R]]) -> StreamT[R]:
        """Concatenate every inner value of every outer value of fn's transformers."""
        return self._with_inner(lambda inner: (r for v in inner for r in fn(v).stream()))

    def for_each2[R1, R](
        self,
        fn2: Callable[[T], Iterable[R1]],
        yield_: Fn2[T, R1, R],
        *,
        filter_: Fn2[T, R1, bool] | None = None,
    ) -> StreamT[R]:
        return self._with_inner(lambda inner: _for.for_each2(inner, fn2, yield_, filter_=filter_))

    def for_each3[R1, R2, R](
        self,
        fn2: Callable[[T], Iterable[R1]],
        fn3: Fn2[T, R1, Iterable[R2]],
        yield_: Fn3[T, R1, R2, R],
        *,
        filter_: Fn3[T, R1, R2, bool] | None = None,
    ) -> StreamT[R]:
        return self._with_inner(lambda inner: _for.for_each3(inner, fn2, fn3, yield_, filter_=filter_))

    def for_each4[R1, R2, R3, R](
        self,
        fn2: Callable[[T], Iterable[R1]],
        fn3: Fn2[T, R1, Iterable[R2]],
        fn4: Fn3[T, R1, R2, Iterable[R3]],
        yield_: Fn4[T, R1, R2, R3, R],
        *,
        filter_: Fn4[T, R1, R2, R3, bool] | None = None,
    ) -> StreamT[R]:
        return self._with_inner(lambda inner: _for.for_each4(inner, fn2, fn3, fn4, yield_, filter_=filter_))

    # ------------------------------------------------------------------
    # Sequence operations on the inner stream
    # ------------------------------------------------------------------

    def take(self, n: int) -> StreamT[T]:
        return self._with_inner(lambda inner: _seq.take(inner, n))

    def drop(self, n: int) -> StreamT[T]:
        return self._with_inner(lambda inner: _seq.drop(inner, n))

    def take_right(self, n: int) -> StreamT[T]:
        return self._with_inner(lambda inner: _seq.take_right(inner, n))

    def drop_right(self, n: int) -> StreamT[T]:
        return self._with_inner(lambda inner: _seq.drop_right(inner, n))

    def take_while(self, predicate: Predicate[T]) -> StreamT[T]:
        return self._with_inner(lambda inner: _seq.take_while(inner, predicate))

    def drop_while(self, predicate: Predicate[T]) -> StreamT[T]:
        return self._with_inner(lambda inner: _seq.drop_while(inner, predicate))

    def take_until(self, predicate: Predicate[T]) -> StreamT[T]:
        return self._with_inner(lambda inner: _seq.take_until(inner, predicate))

    def drop_until(self, predicate: Predicate[T]) -> StreamT[T]:
        return self._with_inner(lambda inner: _seq.drop_until(inner, predicate))

    def slice(self, start: int, stop: int) -> StreamT[T]:
        return self._with_inner(lambda inner: _seq.slice_(inner, start, stop))

    limit = take
    skip = drop
    limit_last = take_right
    skip_last = drop_right
    limit_while = take_while
    skip_while = drop_while
    limit_until = take_until
    skip_until = drop_until

    def distinct(self) -> StreamT[T]:
        return self._with_inner(_seq.distinct)

    def sorted(self, key: Callable[[T], typing.Any] | None = None, *, reverse: bool = False) -> StreamT[T]:
        return self._with_inner(lambda inner: sorted(inner, key=key, reverse=reverse))  # type: ignore[type-var, arg-type]

    def reverse(self) -> StreamT[T]:
        return self._with_inner(lambda inner: inner[::-1])

    def shuffle(self, rng: _random.Random | None = None) -> StreamT[T]:
        return self._with_inner(lambda inner: _seq.shuffle(inner, rng))

    def intersperse(self, value: T) -> StreamT[T]:
        return self._with_inner(lambda inner: _seq.intersperse(inner, value))

    def combine(self, predicate: Callable[[T, T], bool], op: Callable[[T, T], T]) -> StreamT[T]:
        return self._with_inner(lambda inner: _seq.combine_adjacent(inner, predicate, op))

    def zip[U](self, other: Iterable[U]) -> StreamT[tuple[T, U]]:
        others = materialize(other)
        return self._with_inner(lambda inner: zip(inner, others))

    def zip_with[U, R](self, other: Iterable[U], fn: Callable[[T, U], R]) -> StreamT[R]:
        others = materialize(other)
        return self._with_inner(lambda inner: (fn(a, b) for a, b in zip(inner, others)))

    def zip3[S, U](self, second: Iterable[S], third: Iterable[U]) -> StreamT[tuple[T, S, U]]:
        seconds, thirds = materialize(second), materialize(third)
        return self._with_inner(lambda inner: zip(inner, seconds, thirds))

    def zip4[S, U, V](
        self,
        second: Iterable[S],
        third: Iterable[U],
        fourth: Iterable[V],
    ) -> StreamT[tuple[T, S, U, V]]:
        seconds, thirds, fourths = materialize(second), materialize(third), materialize(fourth)
        return self._with_inner(lambda inner: zip(inner, seconds, thirds, fourths))

    def zip_with_index(self) -> StreamT[tuple[T, int]]:
        return self._with_inner(lambda inner: ((v, i) for i, v in enumerate(inner)))

    def sliding(self, size: int, increment: int = 1) -> StreamT[PVectorX[T]]:
        return self._with_inner(
            lambda inner: (PVectorX.from_iterable(w) for w in _seq.sliding(inner, size, increment))
        )

    def grouped(self, size: int) -> StreamT[PVectorX[T]]:
        return self._with_inner(lambda inner: (PVectorX.from_iterable(g) for g in _seq.grouped(inner, size)))

    def grouped_while(self, predicate: Predicate[T]) -> StreamT[PVectorX[T]]:
        return self._with_inner(
            lambda inner: (PVectorX.from_iterable(g) for g in _seq.grouped_while(inner, predicate))
        )

    def grouped_until(self, predicate: Predicate[T]) -> StreamT[PVectorX[T]]:
        return self._with_inner(
            lambda inner: (PVectorX.from_iterable(g) for g in _seq.grouped_until(inner, predicate))
        )

    def grouped_by[K](self, classifier: Callable[[T], K]) -> StreamT[tuple[K, PVectorX[T]]]:
        return self._with_inner(
            lambda inner: ((k, PVectorX.from_iterable(g)) for k, g in _seq.grouped_by(inner, classifier))
        )

    def scan_left[U](self, seed: U | Monoid[U], fn: Callable[[U, T], U] | None = None) -> StreamT[U]:
        if fn is None:
            if not isinstance(seed, Monoid):
                raise ValueError("scan_left(): pass either (seed, fn) or a Monoid")
            monoid = seed
            return self._with_inner(lambda inner: _seq.scan_left(inner, monoid.zero, monoid.combine))
        step = fn
        return self._with_inner(lambda inner: _seq.scan_left(inner, seed, step))

    def scan_right[U](self, seed: U | Monoid[U], fn: Callable[[T, U], U] | None = None) -> StreamT[U]:
        if fn is None:
            if not isinstance(seed, Monoid):
                raise ValueError("scan_right(): pass either (seed, fn) or a Monoid")
            monoid = seed
            return self._with_inner(lambda inner: _seq.scan_right(inner, monoid.zero, monoid.combine))
        step = fn
        return self._with_inner(lambda inner: _seq.scan_right(inner, seed, step))

    def cycle(self, times: int) -> StreamT[T]:
        return self._with_inner(lambda inner: _seq.cycle(inner, times))

    def cycle_while(self, predicate: Predicate[T]) -> StreamT[T]:
        return self._with_inner(lambda inner: _seq.cycle_while(inner, predicate))

    def cycle_until(self, predicate: Predicate[T]) -> StreamT[T]:
        return self._with_inner(lambda inner: _seq.cycle_until(inner, predicate))

    def on_empty(self, value: T) -> StreamT[T]:
        return self._with_inner(lambda inner: inner or (value,))

    def on_empty_get(self, supplier: Supplier[T]) -> StreamT[T]:
        return self._with_inner(lambda inner: inner or (supplier(),))

    def on_empty_raise(self, supplier: Supplier[BaseException]) -> StreamT[T]:
        def check(inner: Inner[T]) -> Inner[T]:
            if not inner:
                raise supplier()
            return inner

        return self._with_inner(check)


__all__ = ("StreamT",)
