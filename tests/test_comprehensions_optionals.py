import pytest
from kungfu import Nothing, Ok, Error, Some

from fpx.comprehensions import optionals
from fpx.comprehensions import for_each2M
from fpx.typeclasses import Monoids, Reducer
from fpx.typeclasses import options


def test_for_each2_binds_in_order():
    result = optionals.for_each2(Some(10), lambda a: Some(a + 5), lambda a, b: a + b)

    assert result.unwrap() == 25


def test_for_each3_sees_all_previous_values():
    result = optionals.for_each3(
        Some(1),
        lambda a: Some(a + 1),
        lambda a, b: Some(a + b),
        lambda a, b, c: (a, b, c),
    )

    assert result.unwrap() == (1, 2, 3)


def test_for_each4_short_circuits_on_nothing():
    calls = []

    def last(a, b, c):
        calls.append((a, b, c))
        return Some(0)

    result = optionals.for_each4(
        Some(1),
        lambda a: Some(2),
        lambda a, b: Nothing(),
        last,
        lambda a, b, c, d: a + b + c + d,
    )

    assert isinstance(result, Nothing)
    assert calls == []


def test_for_each2_nothing_first():
    result = optionals.for_each2(Nothing(), lambda a: Some(a), lambda a, b: a + b)

    assert isinstance(result, Nothing)


def test_for_each2_filter_rejects():
    result = optionals.for_each2(
        Some(2),
        lambda a: Some(3),
        lambda a, b: a * b,
        filter_=lambda a, b: a > b,
    )

    assert isinstance(result, Nothing)


def test_for_each3_filter_accepts():
    result = optionals.for_each3(
        Some(2),
        lambda a: Some(3),
        lambda a, b: Some(4),
        lambda a, b, c: a * b * c,
        filter_=lambda a, b, c: a < b < c,
    )

    assert result.unwrap() == 24


def test_generic_filter_without_guard_raises():
    with pytest.raises(ValueError):
        for_each2M(
            Some(1),
            lambda a: Some(a),
            lambda a, b: a + b,
            bind=lambda m, f: options.flat_map_fn(f, m),
            fmap=lambda m, f: options.map_fn(f, m),
            filter_=lambda a, b: True,
        )


def test_optional_from_nullable():
    assert optionals.optional(5).unwrap() == 5
    assert isinstance(optionals.optional(None), Nothing)


def test_sequence_all_present():
    result = optionals.sequence([Some(1), Some(2), Some(3)])

    assert result.unwrap().to_list() == [1, 2, 3]


def test_sequence_any_absent():
    assert isinstance(optionals.sequence([Some(1), Nothing(), Some(3)]), Nothing)


def test_sequence_present_skips_absent():
    result = optionals.sequence_present([Some(1), Nothing(), Some(3)])

    assert result.unwrap().to_list() == [1, 3]


def test_accumulate_present_with_mapper():
    result = optionals.accumulate_present(
        [Some(10), Nothing(), Some(1)],
        Monoids.string_concat,
        mapper=str,
    )

    assert result.unwrap() == "101"


def test_accumulate_present_sum():
    result = optionals.accumulate_present([Some(1), Some(2), Nothing()], Monoids.int_sum)

    assert result.unwrap() == 3


def test_combine_and_zip():
    assert optionals.combine(Some(2), Some(3), lambda a, b: a * b).unwrap() == 6
    assert isinstance(optionals.combine(Some(2), Nothing(), lambda a, b: a * b), Nothing)
    assert optionals.zip(Some("a"), ["b", "c"], lambda a, b: a + b).unwrap() == "ab"
    assert isinstance(optionals.zip(Some("a"), [], lambda a, b: a + b), Nothing)


def test_result_values_are_not_options():
    # Ok/Error are converted by to_monadic_form, not by the comprehensions
    from fpx.comprehensions import to_monadic_form

    assert to_monadic_form(Ok(1)).unwrap() == 1
    assert isinstance(to_monadic_form(Error("boom")), Nothing)


def test_accumulate_present_with_reducer():
    reducer = Reducer.of(0, lambda a, b: a + b, int)

    assert optionals.accumulate_present([Some("1"), Nothing(), Some("41")], reducer).unwrap() == 42
    assert optionals.accumulate_present([Some("1")], reducer, mapper=len).unwrap() == 1
