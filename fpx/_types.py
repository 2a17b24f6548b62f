"""
Core type definitions for fpx.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Selector = function that extracts a key for comparison/sorting
type Selector[T, K] = Callable[[T], K]

# Supplier / Consumer = zero-arg producer and side-effecting sink
type Supplier[T] = Callable[[], T]
type Consumer[T] = Callable[[T], None]

# Fixed-arity functions used by the for_each helpers
type Fn2[A, B, R] = Callable[[A, B], R]
type Fn3[A, B, C, R] = Callable[[A, B, C], R]
type Fn4[A, B, C, D, R] = Callable[[A, B, C, D], R]

# NoError = type representing "never fails" semantic
type NoError = typing.Never

__all__ = (
    "Predicate",
    "Selector",
    "Supplier",
    "Consumer",
    "Fn2",
    "Fn3",
    "Fn4",
    "NoError",
)
