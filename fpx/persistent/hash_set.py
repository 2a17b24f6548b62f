"""PSetX: unordered persistent hash set over pyrsistent.pset."""

from __future__ import annotations

import typing
from collections.abc import Iterable

from pyrsistent import PSet, pset

from .base import PersistentCollectionX


class PSetX[T](PersistentCollectionX[T]):
    __slots__ = ()

    _data: PSet[T]

    @classmethod
    def _backing(cls, items: Iterable[typing.Any]) -> PSet[typing.Any]:
        return pset(items)

    def plus(self, value: T, /) -> PSetX[T]:
        return PSetX(self._data.add(value))

    def minus(self, value: T, /) -> PSetX[T]:
        return PSetX(self._data.discard(value))

    def union(self, other: Iterable[T]) -> PSetX[T]:
        return PSetX(self._data.union(other))

    def intersection(self, other: Iterable[T]) -> PSetX[T]:
        return PSetX(self._data.intersection(other))

    def difference(self, other: Iterable[T]) -> PSetX[T]:
        return PSetX(self._data.difference(other))


__all__ = ("PSetX",)
