"""
Monadic converters
==================

Normalise foreign values into a form the comprehensions understand:

- None                -> Nothing()
- Ok(v) / Error(e)    -> Some(v) / Nothing()
- iterator/generator  -> tuple (re-iterable)

Converters are tried in priority order (higher first); the first one that
accepts the value converts it. Unaccepted values pass through unchanged.
"""

from __future__ import annotations

import threading
import typing
from collections.abc import Iterator
from dataclasses import dataclass, field

from kungfu import Error, Nothing, Ok

from .._helpers import result_to_option


@typing.runtime_checkable
class MonadicConverter(typing.Protocol):
    def accept(self, obj: typing.Any) -> bool: ...

    def convert(self, obj: typing.Any) -> typing.Any: ...


@dataclass(frozen=True, slots=True)
class NoneToNothingConverter:
    def accept(self, obj: typing.Any) -> bool:
        return obj is None

    def convert(self, obj: typing.Any) -> typing.Any:
        _ = obj
        return Nothing()


@dataclass(frozen=True, slots=True)
class ResultToOptionConverter:
    def accept(self, obj: typing.Any) -> bool:
        return isinstance(obj, (Ok, Error))

    def convert(self, obj: typing.Any) -> typing.Any:
        return result_to_option(obj)


@dataclass(frozen=True, slots=True)
class IteratorToTupleConverter:
    def accept(self, obj: typing.Any) -> bool:
        return isinstance(obj, Iterator)

    def convert(self, obj: typing.Any) -> typing.Any:
        return tuple(obj)


def _default_converters() -> list[tuple[int, MonadicConverter]]:
    return [
        (0, NoneToNothingConverter()),
        (0, ResultToOptionConverter()),
        (0, IteratorToTupleConverter()),
    ]


@dataclass(slots=True)
class ConverterRegistry:
    """Ordered converter list. Registration is thread-safe."""

    _entries: list[tuple[int, MonadicConverter]] = field(default_factory=_default_converters)
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def register(self, converter: MonadicConverter, *, priority: int = 0) -> None:
        """Add a converter; among equal priorities, later registrations win."""
        with self._lock:
            self._entries.insert(0, (priority, converter))
            self._entries.sort(key=lambda entry: -entry[0])

    def converters(self) -> tuple[MonadicConverter, ...]:
        with self._lock:
            return tuple(c for _, c in self._entries)

    def convert(self, obj: typing.Any) -> typing.Any:
        for converter in self.converters():
            if converter.accept(obj):
                return converter.convert(obj)
        return obj


registry = ConverterRegistry()


def register(converter: MonadicConverter, *, priority: int = 0) -> None:
    registry.register(converter, priority=priority)


def to_monadic_form(obj: typing.Any) -> typing.Any:
    return registry.convert(obj)


__all__ = (
    "ConverterRegistry",
    "IteratorToTupleConverter",
    "MonadicConverter",
    "NoneToNothingConverter",
    "ResultToOptionConverter",
    "register",
    "registry",
    "to_monadic_form",
)
