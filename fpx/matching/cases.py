"""
Cases
=====

Ordered case lists: the first case whose guard accepts the value wins.

    cases = Cases.of(
        case(P.type_(Const).is_guard(0), lambda c: "zero"),
        case_values(ANY, ANY, type_=Add, fn=lambda left, right: f"add {left} {right}"),
    )
    cases.apply(Const(0))          # Some("zero")
    cases.apply_or(Const(1), "?")  # "?"

A guard may be anything a field matcher accepts: a predicate, a type,
a matcher object or a plain value.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from kungfu import Nothing, Option, Some

from .._errors import NoMatchError
from .adt import ADTPredicateBuilder, decompose, field_matches
from .predicates import is_


@dataclass(frozen=True, slots=True)
class Case[T, R]:
    guard: typing.Any
    fn: Callable[[T], R]

    def test(self, value: T) -> bool:
        return field_matches(self.guard, value)

    def apply(self, value: T) -> Option[R]:
        if self.test(value):
            return Some(self.fn(value))
        return Nothing()


def case[T, R](guard: typing.Any, fn: Callable[[T], R]) -> Case[T, R]:
    return Case(guard, fn)


def case_values[R](
    *matchers: typing.Any,
    fn: Callable[..., R],
    type_: type | None = None,
) -> Case[typing.Any, R]:
    """
    Match the decomposed fields exactly; fn receives them positionally.

    Matchers only see the fields. Pass type_ to also require an instance
    of that type: case_values(ANY, ANY, type_=Add, fn=...).
    """
    guard = is_(*matchers) if type_ is None else ADTPredicateBuilder(type_).is_guard(*matchers)
    return Case(guard, lambda value: fn(*decompose(value)))


@dataclass(frozen=True, slots=True)
class Cases[T, R]:
    cases: tuple[Case[T, R], ...] = ()

    @staticmethod
    def of[V, U](*cases: Case[V, U]) -> Cases[V, U]:
        return Cases(cases)

    def append(self, extra: Case[T, R]) -> Cases[T, R]:
        return Cases((*self.cases, extra))

    def apply(self, value: T) -> Option[R]:
        for c in self.cases:
            if c.test(value):
                return Some(c.fn(value))
        return Nothing()

    def apply_or(self, value: T, default: R) -> R:
        match self.apply(value):
            case Some(result):
                return result
            case _:
                return default

    def apply_or_raise(self, value: T) -> R:
        match self.apply(value):
            case Some(result):
                return result
            case _:
                raise NoMatchError(value)


__all__ = ("Case", "Cases", "case", "case_values")
