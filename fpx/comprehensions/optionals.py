"""
Option comprehensions
=====================

for_each2..for_each4 over kungfu Option, plus sequence / accumulate helpers.

    for_each3(
        Some(1),
        lambda a: Some(a + 1),
        lambda a, b: Some(a + b),
        lambda a, b, c: a + b + c,
    )  # Some(6)

Any Nothing() along the chain (or a failed filter) short-circuits to Nothing().
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from kungfu import Nothing, Option, Some

from .._helpers import first_option, is_present, option_of
from .._types import Fn2, Fn3, Fn4
from ..typeclasses import options as _O
from ..typeclasses.monoid import Monoid, Reducer
from .generic import for_each2M, for_each3M, for_each4M

if typing.TYPE_CHECKING:
    from ..persistent.vector import PVectorX


def _bind[T, R](opt: Option[T], fn: Callable[[T], Option[R]]) -> Option[R]:
    return _O.flat_map_fn(fn, opt)


def _fmap[T, R](opt: Option[T], fn: Callable[[T], R]) -> Option[R]:
    return _O.map_fn(fn, opt)


def _guard[T](opt: Option[T], predicate: Callable[[T], bool]) -> Option[T]:
    return _O.filter_fn(predicate, opt)


# ============================================================================
# Comprehensions
# ============================================================================


def for_each2[T, R1, R](
    value1: Option[T],
    value2: Callable[[T], Option[R1]],
    yield_: Fn2[T, R1, R],
    *,
    filter_: Fn2[T, R1, bool] | None = None,
) -> Option[R]:
    return for_each2M(value1, value2, yield_, bind=_bind, fmap=_fmap, guard=_guard, filter_=filter_)


def for_each3[T, R1, R2, R](
    value1: Option[T],
    value2: Callable[[T], Option[R1]],
    value3: Fn2[T, R1, Option[R2]],
    yield_: Fn3[T, R1, R2, R],
    *,
    filter_: Fn3[T, R1, R2, bool] | None = None,
) -> Option[R]:
    return for_each3M(value1, value2, value3, yield_, bind=_bind, fmap=_fmap, guard=_guard, filter_=filter_)


def for_each4[T, R1, R2, R3, R](
    value1: Option[T],
    value2: Callable[[T], Option[R1]],
    value3: Fn2[T, R1, Option[R2]],
    value4: Fn3[T, R1, R2, Option[R3]],
    yield_: Fn4[T, R1, R2, R3, R],
    *,
    filter_: Fn4[T, R1, R2, R3, bool] | None = None,
) -> Option[R]:
    return for_each4M(
        value1, value2, value3, value4, yield_, bind=_bind, fmap=_fmap, guard=_guard, filter_=filter_
    )


# ============================================================================
# Conversions
# ============================================================================


def optional[T](value: T | None) -> Option[T]:
    """Nullable scalar (int / float / ...) to Option."""
    return option_of(value)


# ============================================================================
# Sequence / accumulate
# ============================================================================


def sequence[T](opts: Iterable[Option[T]]) -> Option[PVectorX[T]]:
    """
    Flip structure: [Option[T]] -> Option[[T]].

    Nothing() if any element is absent.
    """
    from ..persistent.vector import PVectorX

    values: list[T] = []
    for opt in opts:
        match opt:
            case Some(value):
                values.append(value)
            case _:
                return Nothing()
    return Some(PVectorX.from_iterable(values))


def sequence_present[T](opts: Iterable[Option[T]]) -> Option[PVectorX[T]]:
    """Keep only present values. Always Some."""
    return sequence(opt for opt in opts if is_present(opt))


def accumulate_present[T, R](
    opts: Iterable[Option[T]],
    monoid: Monoid[R],
    *,
    mapper: Callable[[T], R] | None = None,
) -> Option[R]:
    """
    Reduce the present values with a monoid (optionally mapping first).
    A Reducer without a mapper converts values with its own map_to_type.

        accumulate_present([Some(10), Nothing(), Some(1)], Monoids.string_concat, mapper=str)
        # Some("101")
    """
    present = sequence_present(opts)

    def reduce_values(values: PVectorX[T]) -> R:
        if mapper is not None:
            return monoid.reduce(mapper(v) for v in values)
        if isinstance(monoid, Reducer):
            return monoid.map_reduce(values)
        return monoid.reduce(typing.cast(Iterable[R], values))

    return _O.map_fn(reduce_values, present)


def combine[A, B, R](
    first: Option[A],
    second: Option[B],
    fn: Callable[[A, B], R],
) -> Option[R]:
    """Both present -> Some(fn(a, b)), otherwise Nothing()."""
    return _O.applicative().map2(fn, first, second)


def zip[A, B, R](
    opt: Option[A],
    items: Iterable[B],
    fn: Callable[[A, B], R],
) -> Option[R]:
    """Pair with the first element of `items`."""
    return combine(opt, first_option(items), fn)


__all__ = (
    "for_each2",
    "for_each3",
    "for_each4",
    "optional",
    "sequence",
    "sequence_present",
    "accumulate_present",
    "combine",
    "zip",
)
