"""PBagX: persistent multiset over pyrsistent.pbag."""

from __future__ import annotations

import typing
from collections.abc import Iterable

from pyrsistent import PBag, pbag

from .base import PersistentCollectionX


class PBagX[T](PersistentCollectionX[T]):
    __slots__ = ()

    _data: PBag[T]

    @classmethod
    def _backing(cls, items: Iterable[typing.Any]) -> PBag[typing.Any]:
        return pbag(items)

    def plus(self, value: T, /) -> PBagX[T]:
        return PBagX(self._data.add(value))

    def minus(self, value: T, /) -> PBagX[T]:
        """Remove ONE occurrence, if any."""
        if value not in self._data:
            return self
        return PBagX(self._data.remove(value))

    def count_of(self, value: T) -> int:
        return self._data.count(value)


__all__ = ("PBagX",)
