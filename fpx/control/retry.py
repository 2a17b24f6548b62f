"""
Retry
=====

RetryPolicy plus two runners:

- retry(lcr, policy=...)           - async, for LazyCoroResult (retries on Error)
- retry_call(fn, *args, policy=...) - blocking, for callables that raise

Повторяем пока не получим успех или не кончатся попытки.
"""

from __future__ import annotations

import asyncio
import random
import time
import typing
from collections.abc import Callable
from dataclasses import dataclass

from kungfu import Error, LazyCoroResult, Ok, Result

from .._logging import get_logger
from .._types import Predicate

log = get_logger(__name__)


# BackoffStrategy = (attempt_num, error) -> delay_seconds
type BackoffStrategy[E] = Callable[[int, E], float]


def _fixed_backoff[E](delay: float) -> BackoffStrategy[E]:
    def strategy(attempt: int, error: E) -> float:
        _ = (attempt, error)
        return delay

    return strategy


def _exponential_backoff[E](initial: float, multiplier: float, max_delay: float) -> BackoffStrategy[E]:
    """initial * multiplier^attempt, capped at max_delay."""

    def strategy(attempt: int, error: E) -> float:
        _ = error
        return min(initial * (multiplier**attempt), max_delay)

    return strategy


def _with_jitter[E](inner: BackoffStrategy[E], jitter_factor: float) -> BackoffStrategy[E]:
    """Scale another strategy's delay by 1 ± jitter_factor."""

    def strategy(attempt: int, error: E) -> float:
        noise = random.uniform(-jitter_factor, jitter_factor)
        return max(0.0, inner(attempt, error) * (1.0 + noise))

    return strategy


def _check_exponential(initial: float, multiplier: float, max_delay: float) -> None:
    if initial < 0.0:
        raise ValueError("initial must be >= 0")
    if multiplier < 1.0:
        raise ValueError("multiplier must be >= 1.0")
    if max_delay < initial:
        raise ValueError("max_delay must be >= initial")


def _check_jitter(jitter_factor: float) -> None:
    if not 0.0 <= jitter_factor <= 1.0:
        raise ValueError("jitter_factor must be in [0, 1]")


@dataclass(frozen=True, slots=True)
class RetryPolicy[E]:
    """
    How many attempts, how long to wait between them, which errors to retry.

    times counts ALL attempts, so times=1 means no retry.
    """

    times: int
    backoff: BackoffStrategy[E]
    retry_on: Predicate[E] | None = None

    def __post_init__(self) -> None:
        if self.times < 1:
            raise ValueError("RetryPolicy.times must be >= 1")

    @classmethod
    def fixed(
        cls,
        times: int,
        delay_seconds: float = 0.0,
        retry_on: Predicate[E] | None = None,
    ) -> RetryPolicy[E]:
        if delay_seconds < 0.0:
            raise ValueError("delay_seconds must be >= 0")
        return cls(times=times, backoff=_fixed_backoff(delay_seconds), retry_on=retry_on)

    @classmethod
    def exponential(
        cls,
        times: int,
        initial: float = 0.1,
        multiplier: float = 2.0,
        max_delay: float = 60.0,
        retry_on: Predicate[E] | None = None,
    ) -> RetryPolicy[E]:
        _check_exponential(initial, multiplier, max_delay)
        return cls(times=times, backoff=_exponential_backoff(initial, multiplier, max_delay), retry_on=retry_on)

    @classmethod
    def jitter(
        cls,
        times: int,
        base: float = 1.0,
        jitter_factor: float = 0.5,
        retry_on: Predicate[E] | None = None,
    ) -> RetryPolicy[E]:
        if base < 0.0:
            raise ValueError("base must be >= 0")
        _check_jitter(jitter_factor)
        return cls(times=times, backoff=_with_jitter(_fixed_backoff(base), jitter_factor), retry_on=retry_on)

    @classmethod
    def exponential_jitter(
        cls,
        times: int,
        initial: float = 0.1,
        multiplier: float = 2.0,
        max_delay: float = 60.0,
        jitter_factor: float = 0.3,
        retry_on: Predicate[E] | None = None,
    ) -> RetryPolicy[E]:
        _check_exponential(initial, multiplier, max_delay)
        _check_jitter(jitter_factor)
        return cls(
            times=times,
            backoff=_with_jitter(_exponential_backoff(initial, multiplier, max_delay), jitter_factor),
            retry_on=retry_on,
        )

    def should_retry(self, attempt: int, error: E) -> bool:
        """attempt is zero-based: the attempt that just failed."""
        if attempt + 1 >= self.times:
            return False
        return self.retry_on is None or bool(self.retry_on(error))

    def delay(self, attempt: int, error: E) -> float:
        return self.backoff(attempt, error)


# ============================================================================
# Async: LazyCoroResult
# ============================================================================


def retry[T, E](
    interp: LazyCoroResult[T, E],
    *,
    policy: RetryPolicy[E],
) -> LazyCoroResult[T, E]:
    """Re-run interp until Ok; the last Error is returned when attempts run out."""

    async def run() -> Result[T, E]:
        attempt = 0
        while True:
            match await interp():
                case Ok(value):
                    return Ok(value)
                case Error(e):
                    if not policy.should_retry(attempt, e):
                        return Error(e)
                    log.debug("retry: attempt %d failed with %r", attempt + 1, e)
                    delay = policy.delay(attempt, e)
                    if delay > 0.0:
                        await asyncio.sleep(delay)
                    attempt += 1

    return LazyCoroResult(run)


# ============================================================================
# Blocking: callables that raise
# ============================================================================


def retry_call[R](
    fn: Callable[..., R],
    *args: typing.Any,
    policy: RetryPolicy[Exception],
    **kwargs: typing.Any,
) -> R:
    """Call fn until it returns; the last exception propagates when attempts run out."""
    attempt = 0
    while True:
        try:
            return fn(*args, **kwargs)
        except Exception as exc:
            if not policy.should_retry(attempt, exc):
                raise
            log.debug("retry_call: attempt %d of %s failed with %r", attempt + 1, fn, exc)
            delay = policy.delay(attempt, exc)
            if delay > 0.0:
                time.sleep(delay)
            attempt += 1


__all__ = (
    "BackoffStrategy",
    "RetryPolicy",
    "retry",
    "retry_call",
)
