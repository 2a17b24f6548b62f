"""
ADT predicates
==============

Recursive structural predicates over algebraic data types.

A value decomposes into positional fields:
- an ``unapply()`` method, if present
- tuple / list items
- dataclass fields
- ``__match_args__`` attributes
- otherwise the value itself as a 1-tuple

Each expected field may be a type (isinstance), a matcher (anything with a
``matches(value)`` method), a predicate (callable), or a plain value (==):

    Add = type_(Add)
    Add.is_guard(ANY, Add.with_(ANY, Const(0)))(expr)
"""

from __future__ import annotations

import dataclasses
import typing
from dataclasses import dataclass

from .._types import Predicate


def decompose(value: typing.Any) -> tuple[typing.Any, ...]:
    unapply = getattr(value, "unapply", None)
    if callable(unapply):
        return tuple(unapply())
    if isinstance(value, (tuple, list)):
        return tuple(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return tuple(getattr(value, f.name) for f in dataclasses.fields(value))
    match_args = getattr(type(value), "__match_args__", None)
    if match_args is not None:
        return tuple(getattr(value, name) for name in match_args)
    return (value,)


def is_matcher(obj: typing.Any) -> bool:
    """Duck-typed matcher check (PyHamcrest and friends)."""
    return not isinstance(obj, type) and callable(getattr(obj, "matches", None))


def field_matches(expected: typing.Any, actual: typing.Any) -> bool:
    if isinstance(expected, type):
        return isinstance(actual, expected)
    if is_matcher(expected):
        return bool(expected.matches(actual))
    if callable(expected):
        return bool(expected(actual))
    return bool(expected == actual)


def _fields_match(expected: tuple[typing.Any, ...], actual: tuple[typing.Any, ...]) -> bool:
    return all(field_matches(e, a) for e, a in zip(expected, actual, strict=False))


@dataclass(frozen=True, slots=True)
class ADTPredicateBuilder[T]:
    """Predicate factory for one type (or a tuple of types, as isinstance accepts)."""

    type_: type[T] | tuple[type, ...]

    def __call__(self, value: typing.Any) -> bool:
        return isinstance(value, self.type_)

    def is_guard(self, *values: typing.Any) -> Predicate[typing.Any]:
        """Instance of the type with exactly len(values) fields, all matching."""

        def predicate(value: typing.Any) -> bool:
            if not isinstance(value, self.type_):
                return False
            fields = decompose(value)
            return len(fields) == len(values) and _fields_match(values, fields)

        return predicate

    def has_guard(self, *values: typing.Any) -> Predicate[typing.Any]:
        """Instance of the type whose first len(values) fields match."""

        def predicate(value: typing.Any) -> bool:
            if not isinstance(value, self.type_):
                return False
            fields = decompose(value)
            return len(fields) >= len(values) and _fields_match(values, fields)

        return predicate

    def with_(self, *values: typing.Any) -> Predicate[typing.Any]:
        return self.is_guard(*values)

    def eq(self, expected: typing.Any) -> Predicate[typing.Any]:
        return lambda value: isinstance(value, self.type_) and value == expected

    def is_where(self, *predicates: Predicate[typing.Any]) -> Predicate[typing.Any]:
        return self.is_guard(*predicates)

    def has_where(self, *predicates: Predicate[typing.Any]) -> Predicate[typing.Any]:
        return self.has_guard(*predicates)

    def is_match(self, *matchers: typing.Any) -> Predicate[typing.Any]:
        _require_matchers("is_match", matchers)
        return self.is_guard(*matchers)

    def has_match(self, *matchers: typing.Any) -> Predicate[typing.Any]:
        _require_matchers("has_match", matchers)
        return self.has_guard(*matchers)


def _require_matchers(operation: str, matchers: tuple[typing.Any, ...]) -> None:
    for m in matchers:
        if not is_matcher(m):
            raise ValueError(f"{operation}(): {m!r} has no matches() method")


__all__ = ("ADTPredicateBuilder", "decompose", "field_matches", "is_matcher")
