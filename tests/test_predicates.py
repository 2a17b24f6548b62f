import pytest

from fpx.matching import ANY, predicates as P


class _StartsWith:
    def __init__(self, prefix):
        self.prefix = prefix

    def matches(self, value):
        return isinstance(value, str) and value.startswith(self.prefix)


def test_basic_predicates():
    assert P.p(lambda x: x > 1)(2)
    assert ANY(object())
    assert P.any_()(None)
    assert P.eq(3)(3)
    assert not P.eq(3)(4)
    assert P.not_(P.eq(3))(4)
    assert P.in_(1, 2, 3)(2)
    assert not P.in_(1, 2, 3)(5)
    assert P.none_value()(None)
    assert not P.none_value()(0)
    assert P.instance_of(int)(1)
    assert P.any_of_type(str)("s")


def test_comparisons():
    assert P.greater_than(2)(3)
    assert not P.greater_than(3)(3)
    assert P.greater_than_or_equals(3)(3)
    assert P.less_than(3)(2)
    assert P.less_than_or_equals(3)(3)
    assert P.equals(1)(1.0)
    assert not P.equals(1)(2)


def test_combinators():
    positive_even = P.all_of(P.greater_than(0), lambda x: x % 2 == 0)

    assert positive_even(4)
    assert not positive_even(-4)
    assert P.any_of(P.eq(1), P.eq(2))(2)
    assert P.none_of(P.eq(1), P.eq(2))(3)
    assert P.x_of(2, P.greater_than(0), P.less_than(10), P.eq(5))(3)
    assert not P.x_of(2, P.greater_than(0), P.less_than(10), P.eq(5))(5)


def test_is_and_has_on_tuples():
    assert P.is_(1, 2)((1, 2))
    assert not P.is_(1, 2)((1, 2, 3))
    assert P.has(1, 2)((1, 2, 3))
    assert not P.has(1, 3)((1, 2, 3))
    assert P.is_(5)(5)


def test_where_and_match_variants():
    assert P.is_where(P.greater_than(0), ANY)((1, "x"))
    assert P.has_where(P.eq("a"))(("a", "b"))
    assert P.is_match(_StartsWith("he"))(("hello",))
    assert P.has_match(_StartsWith("a"), _StartsWith("b"))(["ax", "bx", "cx"])


def test_match_variants_reject_non_matchers():
    with pytest.raises(ValueError):
        P.is_match(lambda x: True)


def test_decons():
    pair = P.decons(P.eq(1), ANY)

    assert pair((1, "x"))
    assert not pair((2, "x"))
    assert not pair((1, "x", "y"))
    assert not pair("1x")


@pytest.mark.parametrize("count", [0, 6])
def test_decons_arity(count):
    with pytest.raises(ValueError):
        P.decons(*([ANY] * count))
