"""
SimpleReact
===========

Eager, future-based dataflow. Every value travels in its own
``concurrent.futures.Future``; stages chain onto each future independently,
so a slow element never holds back the others.

    stream = SimpleReact().react(lambda: 1, lambda: 2, lambda: 3)
    stream.then(lambda x: x * 10).filter(lambda x: x > 10).block()
    # [20, 30]

Failures stay inside their future. ``block()`` drops them after reporting
each one to the error handler (default: log at ERROR); ``on_fail`` turns
them back into values. Filtered values are dropped without a report.
"""

from __future__ import annotations

import concurrent.futures
import dataclasses
import threading
import typing
from collections.abc import Callable, Iterable
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass, field

from .._errors import FilteredOutError, QueueClosedError, TimeoutError
from .._logging import get_logger
from .._types import Consumer, Predicate, Supplier
from ..control.retry import RetryPolicy, retry_call
from ..typeclasses import futures as _futures
from .queue import Queue, QueueFactories, QueueFactory

log = get_logger(__name__)

_default_executor: ThreadPoolExecutor | None = None
_default_executor_lock = threading.Lock()


def default_executor() -> Executor:
    """Shared pool, created on first use."""
    global _default_executor
    with _default_executor_lock:
        if _default_executor is None:
            _default_executor = ThreadPoolExecutor(thread_name_prefix="fpx-react")
        return _default_executor


def log_failure(exc: BaseException) -> None:
    log.error("SimpleReactStream stage failed: %r", exc, exc_info=exc)


def _run_now[T](supplier: Supplier[T]) -> Future[T]:
    try:
        return _futures.completed(supplier())
    except Exception as exc:
        return _futures.failed(exc)


def _when_all_settled(futures: Iterable[Future[typing.Any]]) -> Future[None]:
    """Completes (with None) once every future is done, whatever the outcome."""
    sources = list(futures)
    out: Future[None] = Future()
    if not sources:
        out.set_result(None)
        return out
    lock = threading.Lock()
    remaining = [len(sources)]

    def done(_src: Future[typing.Any]) -> None:
        with lock:
            remaining[0] -= 1
            if remaining[0] == 0:
                _futures.resolve(out, None)

    for fut in sources:
        fut.add_done_callback(done)
    return out


# ============================================================================
# SimpleReact (configuration + entry points)
# ============================================================================


@dataclass(frozen=True, slots=True)
class SimpleReact:
    """
    Attributes:
        executor: where async stages run (shared ThreadPoolExecutor when None)
        is_async: run suppliers and then() stages on the executor
        retrier: policy for SimpleReactStream.retry (3 attempts when None)
        queue_factory: queues built by to_queue() and pushable streams
    """

    executor: Executor | None = None
    is_async: bool = True
    retrier: RetryPolicy[Exception] | None = None
    queue_factory: QueueFactory = field(default_factory=QueueFactories.unbounded)

    @property
    def task_executor(self) -> Executor:
        return self.executor if self.executor is not None else default_executor()

    @property
    def retry_policy(self) -> RetryPolicy[Exception]:
        return self.retrier if self.retrier is not None else RetryPolicy.fixed(times=3)

    def react[U](self, *suppliers: Supplier[U]) -> SimpleReactStream[U]:
        if self.is_async:
            executor = self.task_executor
            futures = tuple(executor.submit(s) for s in suppliers)
        else:
            futures = tuple(_run_now(s) for s in suppliers)
        return SimpleReactStream(futures, self)

    def of[U](self, *values: U) -> SimpleReactStream[U]:
        return self.from_iterable(values)

    def from_iterable[U](self, values: Iterable[U]) -> SimpleReactStream[U]:
        return SimpleReactStream(tuple(_futures.completed(v) for v in values), self)

    def from_futures[U](self, futures: Iterable[Future[U]]) -> SimpleReactStream[U]:
        return SimpleReactStream(tuple(futures), self)

    def with_executor(self, executor: Executor) -> SimpleReact:
        return dataclasses.replace(self, executor=executor)

    def with_async(self, is_async: bool) -> SimpleReact:
        return dataclasses.replace(self, is_async=is_async)

    def with_retrier(self, retrier: RetryPolicy[Exception]) -> SimpleReact:
        return dataclasses.replace(self, retrier=retrier)

    def with_queue_factory(self, queue_factory: QueueFactory) -> SimpleReact:
        return dataclasses.replace(self, queue_factory=queue_factory)


# ============================================================================
# SimpleReactStream
# ============================================================================


@dataclass(frozen=True, slots=True)
class SimpleReactStream[U]:
    futures: tuple[Future[U], ...]
    simple_react: SimpleReact = field(default_factory=SimpleReact)
    error_handler: Callable[[BaseException], None] = log_failure

    def __len__(self) -> int:
        return len(self.futures)

    def _with_futures[R](self, futures: Iterable[Future[R]]) -> SimpleReactStream[R]:
        return SimpleReactStream(tuple(futures), self.simple_react, self.error_handler)

    def _with_react(self, simple_react: SimpleReact) -> SimpleReactStream[U]:
        return SimpleReactStream(self.futures, simple_react, self.error_handler)

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def then[R](self, fn: Callable[[U], R]) -> SimpleReactStream[R]:
        """Next stage; on the executor when async, inline otherwise."""
        if not self.simple_react.is_async:
            return self.then_sync(fn)
        executor = self.simple_react.task_executor
        return self._with_futures(
            _futures.flat_map(lambda value: executor.submit(fn, value), fut) for fut in self.futures
        )

    def then_sync[R](self, fn: Callable[[U], R]) -> SimpleReactStream[R]:
        """Next stage, run on whichever thread completes the previous one."""
        return self._with_futures(_futures.map(fn, fut) for fut in self.futures)

    def retry[R](self, fn: Callable[[U], R]) -> SimpleReactStream[R]:
        """Like then(), retrying fn with the configured RetryPolicy."""
        policy = self.simple_react.retry_policy
        return self.then(lambda value: retry_call(fn, value, policy=policy))

    def filter(self, predicate: Predicate[U]) -> SimpleReactStream[U]:
        def check(value: U) -> U:
            if not predicate(value):
                raise FilteredOutError((value,))
            return value

        return self.then_sync(check)

    def peek(self, consumer: Consumer[U]) -> SimpleReactStream[U]:
        def tap(value: U) -> U:
            consumer(value)
            return value

        return self.then_sync(tap)

    def on_fail(
        self,
        handler: Callable[[BaseException], U],
        *,
        exc_type: type[BaseException] = Exception,
    ) -> SimpleReactStream[U]:
        """Recover failures of exc_type with handler(exc). Filtered values stay filtered."""

        def recover(fut: Future[U]) -> Future[U]:
            out: Future[U] = Future()

            def done(src: Future[U]) -> None:
                if out.cancelled():
                    return
                if src.cancelled():
                    out.cancel()
                    return
                exc = src.exception()
                if exc is None:
                    _futures.resolve(out, src.result())
                    return
                if isinstance(exc, FilteredOutError) or not isinstance(exc, exc_type):
                    _futures.reject(out, exc)
                    return
                try:
                    recovered = handler(exc)
                except Exception as e:
                    _futures.reject(out, e)
                    return
                _futures.resolve(out, recovered)

            fut.add_done_callback(done)
            return out

        return self._with_futures(recover(fut) for fut in self.futures)

    def capture(self, consumer: Callable[[BaseException], None]) -> SimpleReactStream[U]:
        """Report failures to consumer instead of the log."""
        return SimpleReactStream(self.futures, self.simple_react, consumer)

    with_error_handler = capture

    # ------------------------------------------------------------------
    # Configuration (copy-on-write)
    # ------------------------------------------------------------------

    def with_async(self, is_async: bool) -> SimpleReactStream[U]:
        return self._with_react(self.simple_react.with_async(is_async))

    def with_task_executor(self, executor: Executor) -> SimpleReactStream[U]:
        return self._with_react(self.simple_react.with_executor(executor))

    def with_retrier(self, retrier: RetryPolicy[Exception]) -> SimpleReactStream[U]:
        return self._with_react(self.simple_react.with_retrier(retrier))

    def with_queue_factory(self, queue_factory: QueueFactory) -> SimpleReactStream[U]:
        return self._with_react(self.simple_react.with_queue_factory(queue_factory))

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def _report(self, fut: Future[U]) -> bool:
        """True when fut succeeded; failures other than filtering go to the handler."""
        if fut.cancelled():
            return False
        exc = fut.exception()
        if exc is None:
            return True
        if not isinstance(exc, FilteredOutError):
            self.error_handler(exc)
        return False

    def _successes(self) -> list[U]:
        return [fut.result() for fut in self.futures if self._report(fut)]

    def block(
        self,
        collector: Callable[[list[U]], typing.Any] | None = None,
        *,
        timeout: float | None = None,
    ) -> typing.Any:
        """Wait for every future; successful values in input order."""
        _, pending = concurrent.futures.wait(self.futures, timeout=timeout)
        if pending:
            raise TimeoutError(timeout or 0.0)
        values = self._successes()
        return values if collector is None else collector(values)

    def all_of[R](self, collector: Callable[[list[U]], typing.Any], fn: Callable[[typing.Any], R]) -> Future[R]:
        """Future of fn(collector(successful values)), without blocking."""
        return _futures.map(lambda _: fn(collector(self._successes())), _when_all_settled(self.futures))

    def any_of(self) -> Future[U]:
        """First future to settle."""
        return _futures.any_of(*self.futures)

    def to_queue(self) -> Queue[U]:
        """
        Successful values in completion order; the queue closes once all futures settle.

        A feeder thread does the offering, so a bounded queue applies
        back-pressure to it and never to the caller or a future's callback.
        """
        out: Queue[U] = self.simple_react.queue_factory.build()

        def feed() -> None:
            try:
                for fut in concurrent.futures.as_completed(self.futures):
                    if self._report(fut):
                        out.offer(fut.result())
            except QueueClosedError:
                log.debug("to_queue: queue closed by its reader, stop feeding")
            finally:
                out.close()

        threading.Thread(target=feed, name="fpx-to-queue", daemon=True).start()
        return out


__all__ = (
    "SimpleReact",
    "SimpleReactStream",
    "default_executor",
    "log_failure",
)
