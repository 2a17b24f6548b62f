from __future__ import annotations

import typing


class TimeoutError(Exception):
    """Blocking read took too long."""

    seconds: float

    def __init__(self, seconds: float) -> None:
        self.seconds = seconds
        super().__init__(f"Timed out after {seconds}s")


class EmptyCollectionError(Exception):
    """Operation needs at least one element but the collection is empty."""

    operation: str

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}() called on an empty collection")


class NoMatchError(Exception):
    """No case matched the value."""

    value: typing.Any

    def __init__(self, value: typing.Any) -> None:
        self.value = value
        super().__init__(f"No case matched {value!r}")


class FilteredOutError(Exception):
    """Comprehension filter rejected the bound values."""

    values: tuple[typing.Any, ...]

    def __init__(self, values: tuple[typing.Any, ...]) -> None:
        self.values = values
        super().__init__(f"Filtered out: {values!r}")


class QueueClosedError(Exception):
    """Queue is closed: no more values can be offered or read."""

    def __init__(self) -> None:
        super().__init__("Queue is closed")


__all__ = (
    "EmptyCollectionError",
    "FilteredOutError",
    "NoMatchError",
    "QueueClosedError",
    "TimeoutError",
)
