"""
Pushable streams
================

A queue paired with a consumer side. Producers ``offer`` into the queue and
``close`` it when done; the consumer reads values as they arrive.

    pushable = pushable_stream()
    pushable.queue.offer(1)
    pushable.queue.close()
    list(pushable.stream)  # [1]

    pfs = pushable_future_stream()
    results = pfs.stream.then(lambda x: x * 2)
    pfs.queue.offer(5)
    pfs.queue.close()
    results.collect()      # [10]
"""

from __future__ import annotations

import dataclasses
import typing
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from .._types import Consumer, Predicate
from .queue import Queue, QueueFactory
from .simple_react import SimpleReact, SimpleReactStream, log_failure

type Stage = Callable[[SimpleReactStream[typing.Any]], SimpleReactStream[typing.Any]]


@dataclass(frozen=True, slots=True)
class PushableStream[T]:
    queue: Queue[T]
    stream: Iterator[T]


def pushable_stream[T](queue_factory: QueueFactory | None = None) -> PushableStream[T]:
    q: Queue[T] = (queue_factory or QueueFactory()).build()
    return PushableStream(q, q.stream())


@dataclass(frozen=True, slots=True)
class FutureStream[T]:
    """
    Lazy chain of SimpleReactStream stages over a queue.

    Nothing runs until collect(): it then feeds each value read from the
    queue through the stages as soon as it arrives, and waits for all
    results once the queue is closed.
    """

    source: Queue[typing.Any]
    simple_react: SimpleReact = field(default_factory=SimpleReact)
    stages: tuple[Stage, ...] = ()
    error_handler: Callable[[BaseException], None] = log_failure

    def _stage(self, stage: Stage) -> FutureStream[typing.Any]:
        return dataclasses.replace(self, stages=(*self.stages, stage))

    def then[R](self, fn: Callable[[T], R]) -> FutureStream[R]:
        return self._stage(lambda s: s.then(fn))

    def then_sync[R](self, fn: Callable[[T], R]) -> FutureStream[R]:
        return self._stage(lambda s: s.then_sync(fn))

    def retry[R](self, fn: Callable[[T], R]) -> FutureStream[R]:
        return self._stage(lambda s: s.retry(fn))

    def filter(self, predicate: Predicate[T]) -> FutureStream[T]:
        return self._stage(lambda s: s.filter(predicate))

    def peek(self, consumer: Consumer[T]) -> FutureStream[T]:
        return self._stage(lambda s: s.peek(consumer))

    def on_fail(
        self,
        handler: Callable[[BaseException], T],
        *,
        exc_type: type[BaseException] = Exception,
    ) -> FutureStream[T]:
        return self._stage(lambda s: s.on_fail(handler, exc_type=exc_type))

    def capture(self, consumer: Callable[[BaseException], None]) -> FutureStream[T]:
        return dataclasses.replace(self, error_handler=consumer)

    def _run(self, value: typing.Any) -> SimpleReactStream[typing.Any]:
        stream = self.simple_react.of(value).capture(self.error_handler)
        for stage in self.stages:
            stream = stage(stream)
        return stream

    def to_simple_react_stream(self) -> SimpleReactStream[T]:
        """Drain the queue (until closed), starting every value's stages on arrival."""
        futures = [fut for value in self.source.stream() for fut in self._run(value).futures]
        return SimpleReactStream(tuple(futures), self.simple_react, self.error_handler)

    def collect(
        self,
        collector: Callable[[list[T]], typing.Any] | None = None,
        *,
        timeout: float | None = None,
    ) -> typing.Any:
        return self.to_simple_react_stream().block(collector, timeout=timeout)


@dataclass(frozen=True, slots=True)
class PushableFutureStream[T]:
    queue: Queue[T]
    stream: FutureStream[T]


def pushable_future_stream[T](simple_react: SimpleReact | None = None) -> PushableFutureStream[T]:
    react = simple_react if simple_react is not None else SimpleReact()
    q: Queue[T] = react.queue_factory.build()
    return PushableFutureStream(q, FutureStream(q, react))


__all__ = (
    "FutureStream",
    "PushableFutureStream",
    "PushableStream",
    "pushable_future_stream",
    "pushable_stream",
)
