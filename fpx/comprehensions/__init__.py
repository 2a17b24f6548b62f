"""
Monadic comprehensions.

Namespaces:
- optionals  - for_each over Option, sequence / accumulate helpers
- futures    - for_each over LazyCoroResult
- iterables  - for_each over iterables
- converters - normalise foreign values into monadic form

Generic *M functions work with any monad via bind + fmap (+ guard).
"""

from . import converters, futures, iterables, optionals
from .converters import MonadicConverter, to_monadic_form
from .generic import for_each2M, for_each3M, for_each4M

__all__ = (
    # Namespaces
    "converters",
    "futures",
    "iterables",
    "optionals",
    # Generic
    "for_each2M",
    "for_each3M",
    "for_each4M",
    # Converters
    "MonadicConverter",
    "to_monadic_form",
)
