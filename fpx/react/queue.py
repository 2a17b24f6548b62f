"""
Closable queues
===============

Thread-safe queue that can be closed: readers drain what is left and then
stop. A deque guarded by two conditions (not_empty / not_full); close()
wakes every waiter, so a full bounded queue can always be closed.

    q = QueueFactories.unbounded().build()
    q.offer(1)
    q.offer(2)
    q.close()
    list(q.stream())  # [1, 2]
"""

from __future__ import annotations

import collections
import threading
from collections.abc import Iterator
from dataclasses import dataclass

from .._errors import QueueClosedError, TimeoutError
from .._logging import get_logger

log = get_logger(__name__)


class Queue[T]:
    """Closable FIFO. max_size=0 means unbounded."""

    def __init__(self, max_size: int = 0) -> None:
        if max_size < 0:
            raise ValueError(f"Queue max_size must be >= 0, got {max_size}")
        self._max_size = max_size
        self._items: collections.deque[T] = collections.deque()
        self._lock = threading.Lock()
        self._not_empty = threading.Condition(self._lock)
        self._not_full = threading.Condition(self._lock)
        self._open = True

    @property
    def max_size(self) -> int:
        return self._max_size

    def is_open(self) -> bool:
        return self._open

    def size(self) -> int:
        """Number of buffered values."""
        with self._lock:
            return len(self._items)

    def _full(self) -> bool:
        return 0 < self._max_size <= len(self._items)

    def offer(self, value: T) -> bool:
        """
        Enqueue; blocks while a bounded queue is full.

        Raises QueueClosedError once closed, also for a producer that was
        waiting for room when close() ran.
        """
        with self._not_full:
            self._not_full.wait_for(lambda: not self._open or not self._full())
            if not self._open:
                raise QueueClosedError()
            self._items.append(value)
            self._not_empty.notify()
        return True

    def close(self) -> bool:
        """Stop accepting values. Returns False when already closed."""
        with self._lock:
            if not self._open:
                return False
            self._open = False
            self._not_empty.notify_all()
            self._not_full.notify_all()
        log.debug("queue closed")
        return True

    def get(self, timeout: float | None = None) -> T:
        """Next value; QueueClosedError when closed and drained."""
        with self._not_empty:
            ready = self._not_empty.wait_for(lambda: self._items or not self._open, timeout=timeout)
            if self._items:
                item = self._items.popleft()
                self._not_full.notify()
                return item
            if not ready:
                raise TimeoutError(timeout or 0.0)
            raise QueueClosedError()

    def stream(self, timeout: float | None = None) -> Iterator[T]:
        """Values until the queue is closed and drained."""
        while True:
            try:
                yield self.get(timeout)
            except QueueClosedError:
                return

    def __iter__(self) -> Iterator[T]:
        return self.stream()


@dataclass(frozen=True, slots=True)
class QueueFactory:
    max_size: int = 0

    def __post_init__(self) -> None:
        if self.max_size < 0:
            raise ValueError("QueueFactory.max_size must be >= 0")

    def build[T](self) -> Queue[T]:
        return Queue(self.max_size)


class QueueFactories:
    @staticmethod
    def unbounded() -> QueueFactory:
        return QueueFactory()

    @staticmethod
    def bounded(max_size: int) -> QueueFactory:
        if max_size < 1:
            raise ValueError("bounded(): max_size must be >= 1")
        return QueueFactory(max_size)


__all__ = ("Queue", "QueueFactories", "QueueFactory")
