"""PVectorX: indexed persistent vector over pyrsistent.pvector."""

from __future__ import annotations

import typing
from collections.abc import Iterable

from kungfu import Nothing, Option, Some
from pyrsistent import PVector, pvector

from .base import PersistentCollectionX


class PVectorX[T](PersistentCollectionX[T]):
    __slots__ = ()

    _data: PVector[T]

    @classmethod
    def _backing(cls, items: Iterable[typing.Any]) -> PVector[typing.Any]:
        return pvector(items)

    def __getitem__(self, index: int) -> T:
        return self._data[index]

    def plus(self, value: T, /) -> PVectorX[T]:
        return PVectorX(self._data.append(value))

    def minus(self, value: T, /) -> PVectorX[T]:
        if value not in self._data:
            return self
        return PVectorX(self._data.remove(value))

    def plus_at(self, index: int, value: T) -> PVectorX[T]:
        """Insert before position `index` (index == len appends)."""
        if not 0 <= index <= len(self):
            raise IndexError(f"plus_at(): index {index} out of range for size {len(self)}")
        values = self._data.tolist()
        values.insert(index, value)
        return PVectorX(pvector(values))

    def with_(self, index: int, value: T) -> PVectorX[T]:
        """Replace the element at `index`."""
        if not 0 <= index < len(self):
            raise IndexError(f"with_(): index {index} out of range for size {len(self)}")
        return PVectorX(self._data.set(index, value))

    def minus_at(self, index: int) -> PVectorX[T]:
        if not 0 <= index < len(self):
            raise IndexError(f"minus_at(): index {index} out of range for size {len(self)}")
        return PVectorX(self._data.delete(index))

    def get(self, index: int) -> Option[T]:
        if 0 <= index < len(self):
            return Some(self._data[index])
        return Nothing()


__all__ = ("PVectorX",)
