"""
PStackX: persistent stack over pyrsistent.plist.

Iteration order is stack order, top first. ``of(1, 2, 3)`` has 1 on top;
``plus`` pushes a new top.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from kungfu import Nothing, Option, Some
from pyrsistent import PList, plist

from .base import PersistentCollectionX


class PStackX[T](PersistentCollectionX[T]):
    __slots__ = ()

    _data: PList[T]

    @classmethod
    def _backing(cls, items: Iterable[typing.Any]) -> PList[typing.Any]:
        return plist(items)

    def plus(self, value: T, /) -> PStackX[T]:
        return PStackX(self._data.cons(value))

    def minus(self, value: T, /) -> PStackX[T]:
        if value not in self._data:
            return self
        return PStackX(self._data.remove(value))

    def _with_list(self, fn: Callable[[list[T]], object]) -> PStackX[T]:
        values = list(self._data)
        fn(values)
        return PStackX(plist(values))

    def plus_at(self, index: int, value: T) -> PStackX[T]:
        if not 0 <= index <= len(self):
            raise IndexError(f"plus_at(): index {index} out of range for size {len(self)}")
        return self._with_list(lambda values: values.insert(index, value))

    def with_(self, index: int, value: T) -> PStackX[T]:
        if not 0 <= index < len(self):
            raise IndexError(f"with_(): index {index} out of range for size {len(self)}")

        def replace(values: list[T]) -> None:
            values[index] = value

        return self._with_list(replace)

    def minus_at(self, index: int) -> PStackX[T]:
        if not 0 <= index < len(self):
            raise IndexError(f"minus_at(): index {index} out of range for size {len(self)}")
        return self._with_list(lambda values: values.pop(index))

    def get(self, index: int) -> Option[T]:
        if not 0 <= index < len(self):
            return Nothing()
        for i, value in enumerate(self._data):
            if i == index:
                return Some(value)
        return Nothing()

    def pop(self) -> PStackX[T]:
        """Stack without its top element. Empty stays empty."""
        if not self._data:
            return self
        return PStackX(self._data.rest)


__all__ = ("PStackX",)
