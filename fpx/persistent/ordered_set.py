"""
POrderedSetX: insertion-ordered persistent set.

Backed by a pvector (order) plus a pset (membership), both shared structurally
between versions. Equality is set equality; order only affects iteration.
"""

from __future__ import annotations

import typing
from collections.abc import Iterable, Iterator

from pyrsistent import PSet, PVector, pset, pvector

from .base import PersistentCollectionX


class _OrderedPSet[T]:
    __slots__ = ("members", "order")

    def __init__(self, order: PVector[T], members: PSet[T]) -> None:
        self.order = order
        self.members = members

    @classmethod
    def from_iterable(cls, items: Iterable[T]) -> _OrderedPSet[T]:
        seen: set[T] = set()
        order = []
        for item in items:
            if item not in seen:
                seen.add(item)
                order.append(item)
        return cls(pvector(order), pset(order))

    def add(self, value: T) -> _OrderedPSet[T]:
        if value in self.members:
            return self
        return _OrderedPSet(self.order.append(value), self.members.add(value))

    def discard(self, value: T) -> _OrderedPSet[T]:
        if value not in self.members:
            return self
        return _OrderedPSet(self.order.remove(value), self.members.remove(value))

    def __iter__(self) -> Iterator[T]:
        return iter(self.order)

    def __len__(self) -> int:
        return len(self.order)

    def __contains__(self, value: object) -> bool:
        return value in self.members

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _OrderedPSet):
            return NotImplemented
        return bool(self.members == other.members)

    def __hash__(self) -> int:
        return hash(self.members)


class POrderedSetX[T](PersistentCollectionX[T]):
    __slots__ = ()

    _data: _OrderedPSet[T]

    @classmethod
    def _backing(cls, items: Iterable[typing.Any]) -> _OrderedPSet[typing.Any]:
        return _OrderedPSet.from_iterable(items)

    def plus(self, value: T, /) -> POrderedSetX[T]:
        """Append unless already present."""
        return POrderedSetX(self._data.add(value))

    plus_in_order = plus

    def minus(self, value: T, /) -> POrderedSetX[T]:
        return POrderedSetX(self._data.discard(value))

    def unwrap(self) -> PVector[T]:
        """Elements in insertion order."""
        return self._data.order


__all__ = ("POrderedSetX",)
