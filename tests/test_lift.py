import pytest
from kungfu import Error, Nothing, Ok

from fpx import lift as L


def test_up_options():
    assert L.up.some(1).unwrap() == 1
    assert isinstance(L.up.nothing(), Nothing)
    assert L.up.optional(0).unwrap() == 0
    assert isinstance(L.up.optional(None), Nothing)
    assert L.up.from_result(Ok("v")).unwrap() == "v"
    assert isinstance(L.up.from_result(Error("e")), Nothing)


def test_down_options():
    assert L.down.to_optional(L.up.some(3)) == 3
    assert L.down.to_optional(L.up.nothing()) is None
    assert L.down.or_else(L.up.nothing(), "default") == "default"
    assert L.down.unsafe(L.up.some("x")) == "x"
    with pytest.raises(ValueError):
        L.down.unsafe(L.up.nothing())


@pytest.mark.asyncio
async def test_pure_and_fail():
    assert (await L.down.to_result(L.up.pure(5))).unwrap() == 5

    match await L.down.to_result(L.up.fail("bad")):
        case Error(e):
            assert e == "bad"
        case _:
            pytest.fail("expected Error")


@pytest.mark.asyncio
async def test_from_option():
    ok = await L.up.from_option(L.up.some(1), error=lambda: "missing")()
    assert ok.unwrap() == 1

    match await L.up.from_option(L.up.nothing(), error=lambda: "missing")():
        case Error(e):
            assert e == "missing"
        case _:
            pytest.fail("expected Error")


@pytest.mark.asyncio
async def test_catching():
    result = await L.up.catching(lambda: int("x"), on_error=lambda exc: type(exc).__name__)()

    match result:
        case Error(name):
            assert name == "ValueError"
        case _:
            pytest.fail("expected Error")
