"""
Functional extensions: comprehensions, persistent collections, monad
transformers, pattern matching and type-class instances.

Architecture:
- Generic comprehensions (*M functions) work with any monad via bind + fmap (+ guard)
- Sugar comprehensions per monad: comprehensions.optionals / futures / iterables
- Type-class instances are records of functions (typeclasses.futures / options / lists)
- Persistent collections wrap pyrsistent behind one fluent base
"""

# Core types
from ._types import Consumer, Fn2, Fn3, Fn4, NoError, Predicate, Selector, Supplier

# Errors
from ._errors import EmptyCollectionError, FilteredOutError, NoMatchError, QueueClosedError, TimeoutError

# Logging
from ._logging import get_logger, setup_logger

# Comprehensions
from . import comprehensions
from .comprehensions import for_each2M, for_each3M, for_each4M, to_monadic_form

# Type classes
from . import typeclasses
from .typeclasses import (
    Applicative,
    Foldable,
    Functor,
    Monad,
    MonadPlus,
    MonadZero,
    Monoid,
    Monoids,
    Reducer,
    Traverse,
    Unit,
)

# Persistent collections
from . import persistent
from .persistent import PBagX, POrderedSetX, PSetX, PStackX, PVectorX, PersistentCollectionX

# Transformers
from . import transformers
from .transformers import StreamT

# Matching
from . import matching
from .matching import ANY, ADTPredicateBuilder, Cases, Predicates, case, case_values

# Control
from . import control
from .control import RetryPolicy, retry, retry_call

# React
from . import react
from .react import (
    PushableFutureStream,
    PushableStream,
    Queue,
    QueueFactories,
    QueueFactory,
    SimpleReact,
    SimpleReactStream,
    pushable_future_stream,
    pushable_stream,
)

# Lift helpers
from . import lift

__all__ = (
    # Types
    "Consumer",
    "Fn2",
    "Fn3",
    "Fn4",
    "NoError",
    "Predicate",
    "Selector",
    "Supplier",
    # Errors
    "EmptyCollectionError",
    "FilteredOutError",
    "NoMatchError",
    "QueueClosedError",
    "TimeoutError",
    # Logging
    "get_logger",
    "setup_logger",
    # Comprehensions
    "comprehensions",
    "for_each2M",
    "for_each3M",
    "for_each4M",
    "to_monadic_form",
    # Type classes
    "typeclasses",
    "Applicative",
    "Foldable",
    "Functor",
    "Monad",
    "MonadPlus",
    "MonadZero",
    "Monoid",
    "Monoids",
    "Reducer",
    "Traverse",
    "Unit",
    # Persistent
    "persistent",
    "PBagX",
    "POrderedSetX",
    "PSetX",
    "PStackX",
    "PVectorX",
    "PersistentCollectionX",
    # Transformers
    "transformers",
    "StreamT",
    # Matching
    "matching",
    "ANY",
    "ADTPredicateBuilder",
    "Cases",
    "Predicates",
    "case",
    "case_values",
    # Control
    "control",
    "RetryPolicy",
    "retry",
    "retry_call",
    # React
    "react",
    "PushableFutureStream",
    "PushableStream",
    "Queue",
    "QueueFactories",
    "QueueFactory",
    "SimpleReact",
    "SimpleReactStream",
    "pushable_future_stream",
    "pushable_stream",
    # Lift
    "lift",
)
