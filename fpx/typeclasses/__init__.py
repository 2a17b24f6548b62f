"""
Type-class instances retrofitted onto existing types.

Namespaces (one per concrete type):
    from fpx.typeclasses import futures as F, options as O, lists as Ls

    F.functor().map(len, F.completed("hello"))
    O.monad_plus().plus(Nothing(), Some(1))
    Ls.traverse().traverse_a(O.applicative(), lambda x: Some(x), [1, 2])
"""

from . import futures, lists, options
from . import futures as FutureInstances  # noqa: N812
from . import lists as ListInstances  # noqa: N812
from . import options as OptionInstances  # noqa: N812
from .instances import Applicative, Foldable, Functor, Monad, MonadPlus, MonadZero, Traverse, Unit
from .monoid import Monoid, Monoids, Reducer

__all__ = (
    # Namespaces
    "futures",
    "lists",
    "options",
    "FutureInstances",
    "ListInstances",
    "OptionInstances",
    # Records
    "Applicative",
    "Foldable",
    "Functor",
    "Monad",
    "MonadPlus",
    "MonadZero",
    "Traverse",
    "Unit",
    # Monoids
    "Monoid",
    "Monoids",
    "Reducer",
)
