from dataclasses import dataclass

import pytest
from kungfu import Nothing

from fpx import NoMatchError
from fpx.matching import ANY, Cases, case, case_values, predicates as P


@dataclass(frozen=True)
class Const:
    value: int


@dataclass(frozen=True)
class Add:
    left: object
    right: object


@pytest.fixture
def evaluator():
    return Cases.of(
        case(P.type_(Const).is_guard(0), lambda c: "zero"),
        case(Const, lambda c: f"const {c.value}"),
        case_values(1, ANY, fn=lambda left, right: f"one plus {right}"),
    )


def test_first_matching_case_wins(evaluator):
    assert evaluator.apply(Const(0)).unwrap() == "zero"
    assert evaluator.apply(Const(7)).unwrap() == "const 7"


def test_case_values_receives_fields(evaluator):
    assert evaluator.apply(Add(1, 2)).unwrap() == "one plus 2"


def test_no_match(evaluator):
    assert isinstance(evaluator.apply("nope"), Nothing)
    assert evaluator.apply_or("nope", "default") == "default"
    with pytest.raises(NoMatchError):
        evaluator.apply_or_raise("nope")


def test_append_and_plain_value_guard():
    cases = Cases.of(case(1, lambda _: "one")).append(case(P.greater_than(1), lambda x: "many"))

    assert cases.apply_or(1, None) == "one"
    assert cases.apply_or(5, None) == "many"
    assert cases.apply_or(0, None) is None


def test_single_case_apply():
    c = case(P.eq(2), lambda x: x * 2)

    assert c.apply(2).unwrap() == 4
    assert isinstance(c.apply(3), Nothing)


@dataclass(frozen=True)
class Mul:
    left: object
    right: object


def test_case_values_with_type_checks_the_value_type():
    cases = Cases.of(
        case_values(ANY, ANY, type_=Add, fn=lambda left, right: f"add {left} {right}"),
        case_values(ANY, ANY, type_=Mul, fn=lambda left, right: f"mul {left} {right}"),
    )

    assert cases.apply(Add(1, 2)).unwrap() == "add 1 2"
    assert cases.apply(Mul(3, 4)).unwrap() == "mul 3 4"
    assert isinstance(cases.apply((1, 2)), Nothing)


def test_case_values_without_type_sees_only_fields():
    by_fields = Cases.of(case_values(ANY, ANY, fn=lambda left, right: left + right))

    assert by_fields.apply(Mul(3, 4)).unwrap() == 7
    assert by_fields.apply((1, 2)).unwrap() == 3
