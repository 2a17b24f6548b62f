"""
Sequence operations
===================

Plain functions over iterables shared by the persistent collections and
StreamT. Every function consumes its input eagerly and returns a list, so
callers can rebuild whatever container they wrap.
"""

from __future__ import annotations

import itertools
import random as _random
import typing
from collections.abc import Callable, Hashable, Iterable

from ._types import Predicate


def _check_non_negative(name: str, n: int) -> None:
    if n < 0:
        raise ValueError(f"{name}(): n must be >= 0, got {n}")


def _check_positive(name: str, n: int) -> None:
    if n < 1:
        raise ValueError(f"{name}(): size must be >= 1, got {n}")


# ============================================================================
# Slicing
# ============================================================================


def take[T](items: Iterable[T], n: int) -> list[T]:
    _check_non_negative("take", n)
    return list(itertools.islice(items, n))


def drop[T](items: Iterable[T], n: int) -> list[T]:
    _check_non_negative("drop", n)
    return list(itertools.islice(items, n, None))


def take_right[T](items: Iterable[T], n: int) -> list[T]:
    _check_non_negative("take_right", n)
    values = list(items)
    if n == 0:
        return []
    return values[-n:]


def drop_right[T](items: Iterable[T], n: int) -> list[T]:
    _check_non_negative("drop_right", n)
    values = list(items)
    if n == 0:
        return values
    return values[:-n]


def take_while[T](items: Iterable[T], predicate: Predicate[T]) -> list[T]:
    return list(itertools.takewhile(predicate, items))


def drop_while[T](items: Iterable[T], predicate: Predicate[T]) -> list[T]:
    return list(itertools.dropwhile(predicate, items))


def take_until[T](items: Iterable[T], predicate: Predicate[T]) -> list[T]:
    return take_while(items, lambda x: not predicate(x))


def drop_until[T](items: Iterable[T], predicate: Predicate[T]) -> list[T]:
    return drop_while(items, lambda x: not predicate(x))


def slice_[T](items: Iterable[T], start: int, stop: int) -> list[T]:
    """Elements with index in [start, stop)."""
    _check_non_negative("slice", start)
    if stop < start:
        return []
    return list(itertools.islice(items, start, stop))


# ============================================================================
# Reordering / dedup
# ============================================================================


def distinct[T](items: Iterable[T]) -> list[T]:
    """Keep first occurrence of each element, preserving order."""
    seen_hashable: set[typing.Any] = set()
    seen_other: list[T] = []
    out: list[T] = []
    for item in items:
        if isinstance(item, Hashable):
            try:
                if item in seen_hashable:
                    continue
                seen_hashable.add(item)
            except TypeError:
                # hashable by type, unhashable by content (tuple of lists)
                if item in seen_other:
                    continue
                seen_other.append(item)
        else:
            if item in seen_other:
                continue
            seen_other.append(item)
        out.append(item)
    return out


def shuffle[T](items: Iterable[T], rng: _random.Random | None = None) -> list[T]:
    values = list(items)
    (rng or _random).shuffle(values)
    return values


def intersperse[T](items: Iterable[T], value: T) -> list[T]:
    out: list[T] = []
    for i, item in enumerate(items):
        if i:
            out.append(value)
        out.append(item)
    return out


# ============================================================================
# Grouping / windows
# ============================================================================


def grouped[T](items: Iterable[T], size: int) -> list[list[T]]:
    """Consecutive chunks of `size`; the last chunk may be shorter."""
    _check_positive("grouped", size)
    out: list[list[T]] = []
    current: list[T] = []
    for item in items:
        current.append(item)
        if len(current) == size:
            out.append(current)
            current = []
    if current:
        out.append(current)
    return out


def grouped_while[T](items: Iterable[T], predicate: Predicate[T]) -> list[list[T]]:
    """
    Accumulate elements into a group; an element failing `predicate`
    closes the current group (and belongs to it).
    """
    out: list[list[T]] = []
    current: list[T] = []
    for item in items:
        current.append(item)
        if not predicate(item):
            out.append(current)
            current = []
    if current:
        out.append(current)
    return out


def grouped_until[T](items: Iterable[T], predicate: Predicate[T]) -> list[list[T]]:
    return grouped_while(items, lambda x: not predicate(x))


def grouped_by[T, K](items: Iterable[T], classifier: Callable[[T], K]) -> list[tuple[K, list[T]]]:
    """Group by key; keys appear in order of first occurrence."""
    groups: dict[typing.Any, list[T]] = {}
    keys: list[K] = []
    for item in items:
        key = classifier(item)
        if key not in groups:
            groups[key] = []
            keys.append(key)
        groups[key].append(item)
    return [(k, groups[k]) for k in keys]


def sliding[T](items: Iterable[T], size: int, increment: int = 1) -> list[list[T]]:
    """
    Windows of `size` elements starting every `increment` elements.

    A collection shorter than `size` yields a single (partial) window, and
    elements left after the last full window form a final partial one.
    """
    _check_positive("sliding", size)
    _check_positive("sliding", increment)
    values = list(items)
    if not values:
        return []
    if len(values) <= size:
        return [values]
    starts = range(0, len(values) - size + 1, increment)
    windows = [values[i : i + size] for i in starts]
    tail = values[starts[-1] + increment :]
    if starts[-1] + size < len(values) and tail:
        windows.append(tail)
    return windows


def combine_adjacent[T](
    items: Iterable[T],
    predicate: Callable[[T, T], bool],
    op: Callable[[T, T], T],
) -> list[T]:
    """Merge neighbours with `op` while `predicate(previous, next)` holds."""
    out: list[T] = []
    for item in items:
        if out and predicate(out[-1], item):
            out[-1] = op(out[-1], item)
        else:
            out.append(item)
    return out


# ============================================================================
# Scans / cycles
# ============================================================================


def scan_left[T, U](items: Iterable[T], seed: U, fn: Callable[[U, T], U]) -> list[U]:
    """[seed, fn(seed, a), fn(fn(seed, a), b), ...]"""
    return list(itertools.accumulate(items, fn, initial=seed))


def scan_right[T, U](items: Iterable[T], seed: U, fn: Callable[[T, U], U]) -> list[U]:
    """Scan from the right: [seed, fn(z, seed), fn(y, fn(z, seed)), ...]"""
    values = list(items)
    values.reverse()
    return scan_left(values, seed, lambda acc, x: fn(x, acc))


def cycle[T](items: Iterable[T], times: int) -> list[T]:
    _check_non_negative("cycle", times)
    values = list(items)
    return values * times


def cycle_while[T](items: Iterable[T], predicate: Predicate[T]) -> list[T]:
    """
    Repeat the elements, stopping at the first that fails `predicate`.

    NOTE: never terminates if `predicate` always holds; usually the
          predicate is stateful (a counter).
    """
    values = list(items)
    if not values:
        return []
    return list(itertools.takewhile(predicate, itertools.cycle(values)))


def cycle_until[T](items: Iterable[T], predicate: Predicate[T]) -> list[T]:
    return cycle_while(items, lambda x: not predicate(x))


# ============================================================================
# Positional edits
# ============================================================================


def insert_at[T](items: Iterable[T], pos: int, values: Iterable[T]) -> list[T]:
    _check_non_negative("insert_at", pos)
    out = list(items)
    out[pos:pos] = list(values)
    return out


def delete_between[T](items: Iterable[T], start: int, stop: int) -> list[T]:
    _check_non_negative("delete_between", start)
    out = list(items)
    del out[start:stop]
    return out


__all__ = (
    "take",
    "drop",
    "take_right",
    "drop_right",
    "take_while",
    "drop_while",
    "take_until",
    "drop_until",
    "slice_",
    "distinct",
    "shuffle",
    "intersperse",
    "grouped",
    "grouped_while",
    "grouped_until",
    "grouped_by",
    "sliding",
    "combine_adjacent",
    "scan_left",
    "scan_right",
    "cycle",
    "cycle_while",
    "cycle_until",
    "insert_at",
    "delete_between",
)
