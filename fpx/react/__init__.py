"""
Future-based dataflow.

- SimpleReact / SimpleReactStream - eager stages over concurrent.futures
- Queue / QueueFactory / QueueFactories - closable thread-safe queues
- PushableStream / PushableFutureStream - push values in, read or process them out
"""

from .pushable import (
    FutureStream,
    PushableFutureStream,
    PushableStream,
    pushable_future_stream,
    pushable_stream,
)
from .queue import Queue, QueueFactories, QueueFactory
from .simple_react import SimpleReact, SimpleReactStream

__all__ = (
    "FutureStream",
    "PushableFutureStream",
    "PushableStream",
    "Queue",
    "QueueFactories",
    "QueueFactory",
    "SimpleReact",
    "SimpleReactStream",
    "pushable_future_stream",
    "pushable_stream",
)
