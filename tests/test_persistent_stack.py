import pytest
from kungfu import Nothing

from fpx.persistent import PStackX


def test_of_keeps_order_top_first():
    stack = PStackX.of(1, 2, 3)

    assert stack.to_list() == [1, 2, 3]
    assert stack.first().unwrap() == 1


def test_plus_pushes_on_top():
    stack = PStackX.of(1, 2).plus(0)

    assert stack.to_list() == [0, 1, 2]
    assert PStackX.empty().plus_all([1, 2, 3]).to_list() == [3, 2, 1]


def test_plus_in_order_appends_at_bottom():
    assert PStackX.of(1, 2).plus_in_order(3).to_list() == [1, 2, 3]


def test_minus_removes_first_occurrence():
    stack = PStackX.of(1, 2, 1)

    assert stack.minus(1).to_list() == [2, 1]
    assert stack.minus(9) is stack


def test_indexed_ops():
    stack = PStackX.of("a", "b", "c")

    assert stack.plus_at(1, "x").to_list() == ["a", "x", "b", "c"]
    assert stack.with_(2, "C").to_list() == ["a", "b", "C"]
    assert stack.minus_at(0).to_list() == ["b", "c"]
    assert stack.get(1).unwrap() == "b"
    assert isinstance(stack.get(3), Nothing)
    with pytest.raises(IndexError):
        stack.with_(3, "d")


def test_pop():
    assert PStackX.of(1, 2).pop().to_list() == [2]
    assert PStackX.empty().pop().is_empty()


def test_persistence():
    base = PStackX.of(1, 2)
    base.plus(0)
    base.minus(1)

    assert base.to_list() == [1, 2]


def test_fluent_ops_stay_stacks():
    mapped = PStackX.of(1, 2, 3).map(lambda x: x + 1)

    assert isinstance(mapped, PStackX)
    assert mapped.to_list() == [2, 3, 4]
    assert PStackX.of(1, 2) == PStackX.of(1, 2)
