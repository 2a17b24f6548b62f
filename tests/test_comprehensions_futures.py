import pytest
from kungfu import Error, LazyCoroResult, Ok

from fpx import FilteredOutError
from fpx.comprehensions import futures
from fpx.lift import up


def _error_of(result):
    match result:
        case Error(e):
            return e
        case _:
            raise AssertionError(f"expected Error, got {result!r}")


@pytest.mark.asyncio
async def test_for_each2_async():
    lcr = futures.for_each2(up.pure(10), lambda a: up.pure(a + 5), lambda a, b: a + b)

    result = await lcr()

    assert result.unwrap() == 25


@pytest.mark.asyncio
async def test_for_each3_async():
    lcr = futures.for_each3(
        up.pure(1),
        lambda a: up.pure(a + 1),
        lambda a, b: up.pure(a + b),
        lambda a, b, c: [a, b, c],
    )

    assert (await lcr()).unwrap() == [1, 2, 3]


@pytest.mark.asyncio
async def test_for_each4_async_error_short_circuits():
    reached = []

    def fourth(a, b, c):
        reached.append(c)
        return up.pure(0)

    lcr = futures.for_each4(
        up.pure(1),
        lambda a: up.fail("boom"),
        lambda a, b: up.pure(3),
        fourth,
        lambda a, b, c, d: a,
    )

    assert _error_of(await lcr()) == "boom"
    assert reached == []


@pytest.mark.asyncio
async def test_filter_rejection_is_filtered_out_error():
    lcr = futures.for_each2(
        up.pure(1),
        lambda a: up.pure(2),
        lambda a, b: a + b,
        filter_=lambda a, b: a > b,
    )

    error = _error_of(await lcr())

    assert isinstance(error, FilteredOutError)
    assert error.values == (1, 2)


@pytest.mark.asyncio
async def test_comprehension_is_lazy():
    runs = []

    async def source():
        runs.append("ran")
        return Ok(1)

    lcr = futures.for_each2(LazyCoroResult(source), lambda a: up.pure(a), lambda a, b: a + b)
    assert runs == []

    assert (await lcr()).unwrap() == 2
    assert runs == ["ran"]
