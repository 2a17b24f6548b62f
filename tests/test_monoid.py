from kungfu import Nothing, Some

from fpx.typeclasses import Monoid, Monoids, Reducer


def test_stock_monoids():
    assert Monoids.int_sum.reduce([1, 2, 3]) == 6
    assert Monoids.int_product.reduce([2, 3, 4]) == 24
    assert Monoids.int_max(0).reduce([3, 9, 2]) == 9
    assert Monoids.int_min(100).reduce([3, 9, 2]) == 2
    assert Monoids.bool_all.reduce([True, False]) is False
    assert Monoids.bool_any.reduce([False, True]) is True
    assert Monoids.list_concat().reduce([[1], [2, 3]]) == [1, 2, 3]
    assert Monoids.string_join(", ").reduce(["a", "", "b"]) == "a, b"


def test_empty_reduce_is_zero():
    assert Monoids.int_sum.reduce([]) == 0
    assert Monoids.string_concat.reduce([]) == ""


def test_fold_right_order():
    assert Monoids.string_concat.fold_right(["a", "b", "c"]) == "abc"
    assert Monoid.of("", lambda a, b: b + a).fold_right(["a", "b", "c"]) == "cba"


def test_option_monoids():
    assert Monoids.first_present().reduce([Nothing(), Some(1), Some(2)]).unwrap() == 1
    assert Monoids.last_present().reduce([Some(1), Some(2), Nothing()]).unwrap() == 2
    assert isinstance(Monoids.first_present().reduce([]), Nothing)


def test_reducer_maps_then_combines():
    counter = Reducer.of(0, lambda a, b: a + b, lambda _: 1)

    assert counter.map_reduce("hello") == 5
    assert counter.zero == 0
    assert counter.combine(2, 3) == 5


def test_reducer_is_a_monoid():
    to_int = Reducer.from_monoid(Monoids.int_sum, int)

    assert isinstance(to_int, Monoid)
    assert to_int.reduce([1, 2, 3]) == 6
    assert to_int.fold_right([1, 2]) == 3
    assert to_int.map_reduce(["1", "2"]) == 3
