"""
Future instances
================

Combinators and type-class records for ``concurrent.futures.Future``.

Futures are chained with ``add_done_callback``: every combinator returns a
new pending Future that settles when its sources do. Exceptions raised by a
mapping function fail the resulting future; cancellation propagates.

    from fpx.typeclasses import futures as F

    doubled = F.monad().flat_map(lambda i: F.completed(i * 2), F.completed(3))
    doubled.result()  # 6
"""

from __future__ import annotations

import threading
import typing
from collections.abc import Callable, Iterable
from concurrent.futures import Future, InvalidStateError

from .instances import Applicative, Foldable, Functor, Monad, MonadPlus, MonadZero, Traverse, Unit
from .monoid import Monoid


# ============================================================================
# Constructors
# ============================================================================


def completed[T](value: T) -> Future[T]:
    """Already-completed future."""
    fut: Future[T] = Future()
    fut.set_result(value)
    return fut


def failed(exc: BaseException) -> Future[typing.Any]:
    """Already-failed future."""
    fut: Future[typing.Any] = Future()
    fut.set_exception(exc)
    return fut


def never() -> Future[typing.Any]:
    """Future that nobody completes (zero of MonadZero)."""
    return Future()


# ============================================================================
# Chaining
# ============================================================================


def resolve[T](out: Future[T], value: T) -> None:
    """set_result, ignoring a future its consumer already cancelled."""
    try:
        out.set_result(value)
    except InvalidStateError:
        if not out.cancelled():
            raise


def reject(out: Future[typing.Any], exc: BaseException) -> None:
    """set_exception, ignoring a future its consumer already cancelled."""
    try:
        out.set_exception(exc)
    except InvalidStateError:
        if not out.cancelled():
            raise


def _settle_from[T](out: Future[T], src: Future[T]) -> None:
    """Copy the outcome of a finished `src` into `out`."""
    if src.cancelled():
        out.cancel()
        return
    exc = src.exception()
    if exc is not None:
        reject(out, exc)
    else:
        resolve(out, src.result())


def map[T, R](fn: Callable[[T], R], fut: Future[T]) -> Future[R]:
    out: Future[R] = Future()

    def done(src: Future[T]) -> None:
        if out.cancelled():
            return
        if src.cancelled():
            out.cancel()
            return
        exc = src.exception()
        if exc is not None:
            reject(out, exc)
            return
        try:
            value = fn(src.result())
        except Exception as e:
            reject(out, e)
            return
        resolve(out, value)

    fut.add_done_callback(done)
    return out


def flat_map[T, R](fn: Callable[[T], Future[R]], fut: Future[T]) -> Future[R]:
    out: Future[R] = Future()

    def done(src: Future[T]) -> None:
        if out.cancelled():
            return
        if src.cancelled():
            out.cancel()
            return
        exc = src.exception()
        if exc is not None:
            reject(out, exc)
            return
        try:
            inner = fn(src.result())
        except Exception as e:
            reject(out, e)
            return
        inner.add_done_callback(lambda f: _settle_from(out, f))

    fut.add_done_callback(done)
    return out


def filter[T](predicate: Callable[[T], bool], fut: Future[T]) -> Future[T]:
    """
    Completes with the value only if predicate holds.

    NOTE: a rejected value leaves the result pending forever (zero),
          there is no "empty" completed future.
    """
    out: Future[T] = Future()

    def done(src: Future[T]) -> None:
        if out.cancelled():
            return
        if src.cancelled():
            out.cancel()
            return
        exc = src.exception()
        if exc is not None:
            reject(out, exc)
            return
        value = src.result()
        try:
            keep = predicate(value)
        except Exception as e:
            reject(out, e)
            return
        if keep:
            resolve(out, value)

    fut.add_done_callback(done)
    return out


def zip_with[A, B, R](fn: Callable[[A, B], R], fa: Future[A], fb: Future[B]) -> Future[R]:
    return flat_map(lambda a: map(lambda b: fn(a, b), fb), fa)


def ap[T, R](fn_fut: Future[Callable[[T], R]], fut: Future[T]) -> Future[R]:
    return zip_with(lambda fn, value: fn(value), fn_fut, fut)


def any_of[T](*futs: Future[T]) -> Future[T]:
    """First future to settle wins (success or failure)."""
    if not futs:
        raise ValueError("any_of() requires at least one future")
    out: Future[T] = Future()
    lock = threading.Lock()

    def done(src: Future[T]) -> None:
        with lock:
            if out.done():
                return
            _settle_from(out, src)

    for fut in futs:
        fut.add_done_callback(done)
    return out


def sequence[T](futs: Iterable[Future[T]]) -> Future[list[T]]:
    """All values in input order; the first failure fails the result."""
    sources = list(futs)
    out: Future[list[T]] = Future()
    if not sources:
        out.set_result([])
        return out

    lock = threading.Lock()
    remaining = [len(sources)]

    def done(src: Future[T]) -> None:
        with lock:
            if out.done():
                return
            if src.cancelled():
                out.cancel()
                return
            exc = src.exception()
            if exc is not None:
                reject(out, exc)
                return
            remaining[0] -= 1
            if remaining[0] == 0:
                resolve(out, [f.result() for f in sources])

    for fut in sources:
        fut.add_done_callback(done)
    return out


def traverse_fn[T, R](items: Iterable[T], fn: Callable[[T], Future[R]]) -> Future[list[R]]:
    return sequence(fn(item) for item in items)


def accumulate[T](futs: Iterable[Future[T]], monoid: Monoid[T]) -> Future[T]:
    """Reduce all values with a monoid once every future completes."""
    return map(monoid.reduce, sequence(futs))


# ============================================================================
# Type-class records
# ============================================================================


def _fold_left[T, U](seed: U, fn: Callable[[U, T], U], fut: Future[T]) -> U:
    return fn(seed, fut.result())


def _fold_right[T, U](seed: U, fn: Callable[[T, U], U], fut: Future[T]) -> U:
    return fn(fut.result(), seed)


def _traverse_a(applicative: Applicative, fn: Callable[[typing.Any], typing.Any], fut: Future[typing.Any]) -> typing.Any:
    """Blocks for the value, runs fn, wraps the outcome back into a completed future."""
    return applicative.map(completed, fn(fut.result()))


def _first_completed_monoid() -> Monoid[Future[typing.Any]]:
    return Monoid(never(), lambda a, b: any_of(a, b))


def unit() -> Unit:
    return Unit(unit=completed)


def functor() -> Functor:
    return Functor(map=map)


def applicative() -> Applicative:
    return Applicative(unit=completed, map=map, ap=ap)


def monad() -> Monad:
    return Monad(unit=completed, map=map, flat_map=flat_map)


def monad_zero() -> MonadZero:
    return MonadZero(unit=completed, map=map, flat_map=flat_map, zero=never, filter_fn=filter)


def monad_plus(monoid: Monoid[Future[typing.Any]] | None = None) -> MonadPlus:
    """Default plus returns whichever future completes first."""
    return MonadPlus(
        unit=completed,
        map=map,
        flat_map=flat_map,
        zero=never,
        filter_fn=filter,
        monoid=monoid if monoid is not None else _first_completed_monoid(),
    )


def foldable() -> Foldable:
    """NOTE: folds block until the future completes."""
    return Foldable(fold_left=_fold_left, fold_right=_fold_right)


def traverse() -> Traverse:
    return Traverse(traverse_a=_traverse_a)


__all__ = (
    # Constructors
    "completed",
    "failed",
    "never",
    # Chaining
    "resolve",
    "reject",
    "map",
    "flat_map",
    "filter",
    "zip_with",
    "ap",
    "any_of",
    "sequence",
    "traverse_fn",
    "accumulate",
    # Instances
    "unit",
    "functor",
    "applicative",
    "monad",
    "monad_zero",
    "monad_plus",
    "foldable",
    "traverse",
)
