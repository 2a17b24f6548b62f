"""
Generic comprehensions
======================

for_each2M..for_each4M: fixed-arity nested bind / filter / map over any monad.

Каждый генератор получает все ранее связанные значения. The monad is
described by its functions (bind + fmap + optional guard), same as the
instance records take them:

    for_each2M(
        Some(1),
        lambda a: Some(a + 1),
        lambda a, b: a + b,
        bind=lambda m, f: options.flat_map_fn(f, m),
        fmap=lambda m, f: options.map_fn(f, m),
    )
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._types import Fn2, Fn3, Fn4

type Bind[M] = Callable[[M, Callable[[typing.Any], M]], M]
type FMap[M] = Callable[[M, Callable[[typing.Any], typing.Any]], M]
type Guard[M] = Callable[[M, Callable[[typing.Any], bool]], M]


def _require_guard[M](guard: Guard[M] | None, name: str) -> Guard[M]:
    if guard is None:
        raise ValueError(f"{name}(): filter_ given but the monad has no guard")
    return guard


def _innermost[M](
    m: M,
    *,
    fmap: FMap[M],
    guard: Guard[M] | None,
    keep: Callable[[typing.Any], bool] | None,
    produce: Callable[[typing.Any], typing.Any],
    name: str,
) -> M:
    if keep is not None:
        m = _require_guard(guard, name)(m, keep)
    return fmap(m, produce)


def for_each2M[M, T, R1, R](
    value1: M,
    value2: Callable[[T], M],
    yield_: Fn2[T, R1, R],
    *,
    bind: Bind[M],
    fmap: FMap[M],
    guard: Guard[M] | None = None,
    filter_: Fn2[T, R1, bool] | None = None,
) -> M:
    """value1 >>= a -> value2(a) [filter (a, b)] map yield_(a, b)"""
    if filter_ is not None:
        _require_guard(guard, "for_each2M")

    return bind(
        value1,
        lambda a: _innermost(
            value2(a),
            fmap=fmap,
            guard=guard,
            keep=None if filter_ is None else (lambda b: filter_(a, b)),
            produce=lambda b: yield_(a, b),
            name="for_each2M",
        ),
    )


def for_each3M[M, T, R1, R2, R](
    value1: M,
    value2: Callable[[T], M],
    value3: Fn2[T, R1, M],
    yield_: Fn3[T, R1, R2, R],
    *,
    bind: Bind[M],
    fmap: FMap[M],
    guard: Guard[M] | None = None,
    filter_: Fn3[T, R1, R2, bool] | None = None,
) -> M:
    """value1 >>= a -> value2(a) >>= b -> value3(a, b) [filter] map yield_(a, b, c)"""
    if filter_ is not None:
        _require_guard(guard, "for_each3M")

    return bind(
        value1,
        lambda a: bind(
            value2(a),
            lambda b: _innermost(
                value3(a, b),
                fmap=fmap,
                guard=guard,
                keep=None if filter_ is None else (lambda c: filter_(a, b, c)),
                produce=lambda c: yield_(a, b, c),
                name="for_each3M",
            ),
        ),
    )


def for_each4M[M, T, R1, R2, R3, R](
    value1: M,
    value2: Callable[[T], M],
    value3: Fn2[T, R1, M],
    value4: Fn3[T, R1, R2, M],
    yield_: Fn4[T, R1, R2, R3, R],
    *,
    bind: Bind[M],
    fmap: FMap[M],
    guard: Guard[M] | None = None,
    filter_: Fn4[T, R1, R2, R3, bool] | None = None,
) -> M:
    """Four nested generators, optional filter on all four bound values."""
    if filter_ is not None:
        _require_guard(guard, "for_each4M")

    return bind(
        value1,
        lambda a: bind(
            value2(a),
            lambda b: bind(
                value3(a, b),
                lambda c: _innermost(
                    value4(a, b, c),
                    fmap=fmap,
                    guard=guard,
                    keep=None if filter_ is None else (lambda d: filter_(a, b, c, d)),
                    produce=lambda d: yield_(a, b, c, d),
                    name="for_each4M",
                ),
            ),
        ),
    )


__all__ = ("for_each2M", "for_each3M", "for_each4M")
