"""
Predicates
==========

Predicate combinators and structural guards.

    from fpx.matching import predicates as P

    P.all_of(P.greater_than(0), P.not_(P.in_(3, 5)))(4)   # True
    P.type_(Point).is_guard(0, P.ANY)(Point(0, 7))        # True
    P.decons(P.eq(1), P.ANY)((1, "x"))                     # True
"""

from __future__ import annotations

import typing

from .._types import Predicate
from .adt import ADTPredicateBuilder

ANY: Predicate[typing.Any] = lambda _value: True  # noqa: E731

_OBJECT = ADTPredicateBuilder(object)


def p[T](predicate: Predicate[T]) -> Predicate[T]:
    return predicate


def any_() -> Predicate[typing.Any]:
    return ANY


def any_of_type(cls: type) -> Predicate[typing.Any]:
    return lambda value: isinstance(value, cls)


def type_[T](cls: type[T]) -> ADTPredicateBuilder[T]:
    return ADTPredicateBuilder(cls)


def decons(*predicates: Predicate[typing.Any]) -> Predicate[typing.Any]:
    """Tuple deconstruction: a tuple/list with exactly len(predicates) items."""
    if not 1 <= len(predicates) <= 5:
        raise ValueError(f"decons(): expected 1 to 5 predicates, got {len(predicates)}")
    return ADTPredicateBuilder((tuple, list)).is_guard(*predicates)


# ============================================================================
# Structural guards over any value
# ============================================================================


def has(*values: typing.Any) -> Predicate[typing.Any]:
    return _OBJECT.has_guard(*values)


def has_where(*predicates: Predicate[typing.Any]) -> Predicate[typing.Any]:
    return _OBJECT.has_where(*predicates)


def has_match(*matchers: typing.Any) -> Predicate[typing.Any]:
    return _OBJECT.has_match(*matchers)


def is_(*values: typing.Any) -> Predicate[typing.Any]:
    return _OBJECT.is_guard(*values)


def is_where(*predicates: Predicate[typing.Any]) -> Predicate[typing.Any]:
    return _OBJECT.is_where(*predicates)


def is_match(*matchers: typing.Any) -> Predicate[typing.Any]:
    return _OBJECT.is_match(*matchers)


# ============================================================================
# Value predicates
# ============================================================================


def eq(expected: typing.Any) -> Predicate[typing.Any]:
    return lambda value: bool(value == expected)


def not_[T](predicate: Predicate[T]) -> Predicate[T]:
    return lambda value: not predicate(value)


def in_(*values: typing.Any) -> Predicate[typing.Any]:
    return lambda value: value in values


def greater_than(bound: typing.Any) -> Predicate[typing.Any]:
    return lambda value: bool(value > bound)


def greater_than_or_equals(bound: typing.Any) -> Predicate[typing.Any]:
    return lambda value: bool(value >= bound)


def less_than(bound: typing.Any) -> Predicate[typing.Any]:
    return lambda value: bool(value < bound)


def less_than_or_equals(bound: typing.Any) -> Predicate[typing.Any]:
    return lambda value: bool(value <= bound)


def equals(bound: typing.Any) -> Predicate[typing.Any]:
    """Compare-equal: neither less nor greater (1 and 1.0 are equal)."""
    return lambda value: not (value < bound) and not (value > bound)


def none_value() -> Predicate[typing.Any]:
    return lambda value: value is None


def instance_of(cls: type) -> Predicate[typing.Any]:
    return lambda value: isinstance(value, cls)


# ============================================================================
# Combinators
# ============================================================================


def all_of[T](*predicates: Predicate[T]) -> Predicate[T]:
    return lambda value: all(pred(value) for pred in predicates)


def any_of[T](*predicates: Predicate[T]) -> Predicate[T]:
    return lambda value: any(pred(value) for pred in predicates)


def none_of[T](*predicates: Predicate[T]) -> Predicate[T]:
    return lambda value: not any(pred(value) for pred in predicates)


def x_of[T](x: int, *predicates: Predicate[T]) -> Predicate[T]:
    """Exactly x of the predicates hold."""
    return lambda value: sum(1 for pred in predicates if pred(value)) == x


__all__ = (
    "ANY",
    "all_of",
    "any_",
    "any_of",
    "any_of_type",
    "decons",
    "eq",
    "equals",
    "greater_than",
    "greater_than_or_equals",
    "has",
    "has_match",
    "has_where",
    "in_",
    "instance_of",
    "is_",
    "is_match",
    "is_where",
    "less_than",
    "less_than_or_equals",
    "none_of",
    "none_value",
    "not_",
    "p",
    "type_",
    "x_of",
)
