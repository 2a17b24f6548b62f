import logging

import pytest
from kungfu import Error, LazyCoroResult, Ok

from fpx.control import RetryPolicy, retry, retry_call


def _flaky_lcr(failures, error="boom"):
    calls = []

    async def run():
        calls.append(len(calls))
        if len(calls) <= failures:
            return Error(error)
        return Ok(len(calls))

    return LazyCoroResult(run), calls


@pytest.mark.asyncio
async def test_retry_until_ok():
    lcr, calls = _flaky_lcr(failures=2)

    result = await retry(lcr, policy=RetryPolicy.fixed(times=3))()

    assert result.unwrap() == 3
    assert len(calls) == 3


@pytest.mark.asyncio
async def test_retry_returns_last_error():
    lcr, calls = _flaky_lcr(failures=5)

    result = await retry(lcr, policy=RetryPolicy.fixed(times=2))()

    match result:
        case Error(e):
            assert e == "boom"
        case _:
            pytest.fail("expected Error")
    assert len(calls) == 2


@pytest.mark.asyncio
async def test_retry_on_predicate_stops_early():
    lcr, calls = _flaky_lcr(failures=5, error="fatal")

    await retry(lcr, policy=RetryPolicy.fixed(times=5, retry_on=lambda e: e != "fatal"))()

    assert len(calls) == 1


@pytest.mark.asyncio
async def test_retry_logs_attempts(caplog):
    lcr, _ = _flaky_lcr(failures=1)

    with caplog.at_level(logging.DEBUG, logger="fpx"):
        await retry(lcr, policy=RetryPolicy.fixed(times=2))()

    assert any("attempt 1 failed" in r.getMessage() for r in caplog.records)


def test_retry_call_succeeds_after_failures():
    attempts = []

    def flaky(x, *, scale):
        attempts.append(x)
        if len(attempts) < 2:
            raise ConnectionError("again")
        return x * scale

    assert retry_call(flaky, 2, scale=5, policy=RetryPolicy.fixed(times=3)) == 10
    assert attempts == [2, 2]


def test_retry_call_reraises_last_exception():
    def boom():
        raise ValueError("nope")

    with pytest.raises(ValueError, match="nope"):
        retry_call(boom, policy=RetryPolicy.fixed(times=2))


def test_retry_call_predicate_receives_exception():
    seen = []

    def boom():
        raise KeyError("k")

    def retry_on(exc):
        seen.append(exc)
        return False

    with pytest.raises(KeyError):
        retry_call(boom, policy=RetryPolicy.fixed(times=3, retry_on=retry_on))
    assert isinstance(seen[0], KeyError)


def test_policy_validation():
    with pytest.raises(ValueError):
        RetryPolicy.fixed(times=0)
    with pytest.raises(ValueError):
        RetryPolicy.fixed(times=1, delay_seconds=-1)
    with pytest.raises(ValueError):
        RetryPolicy.exponential(times=2, multiplier=0.5)
    with pytest.raises(ValueError):
        RetryPolicy.jitter(times=2, jitter_factor=2.0)
    with pytest.raises(ValueError):
        RetryPolicy.exponential_jitter(times=2, initial=1.0, max_delay=0.5)


def test_backoff_strategies():
    exponential = RetryPolicy.exponential(times=5, initial=1.0, multiplier=2.0, max_delay=5.0)
    jitter = RetryPolicy.jitter(times=2, base=1.0, jitter_factor=0.5)

    assert [exponential.delay(i, None) for i in range(4)] == [1.0, 2.0, 4.0, 5.0]
    assert all(0.5 <= jitter.delay(0, None) <= 1.5 for _ in range(20))
    assert not exponential.should_retry(4, None)
    assert exponential.should_retry(3, None)
