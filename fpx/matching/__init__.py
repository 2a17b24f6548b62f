"""
Pattern matching DSL.

- predicates - predicate combinators and structural guards (alias: Predicates)
- ADTPredicateBuilder - per-type recursive guards
- Cases - first-match case lists
"""

from . import predicates
from . import predicates as Predicates  # noqa: N812
from .adt import ADTPredicateBuilder, decompose
from .cases import Case, Cases, case, case_values
from .predicates import ANY

__all__ = (
    "ANY",
    "ADTPredicateBuilder",
    "Case",
    "Cases",
    "Predicates",
    "case",
    "case_values",
    "decompose",
    "predicates",
)
