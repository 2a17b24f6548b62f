from dataclasses import dataclass
from typing import NamedTuple

from fpx.matching import ANY, ADTPredicateBuilder, decompose, predicates as P


@dataclass(frozen=True)
class Const:
    value: int


@dataclass(frozen=True)
class Add:
    left: object
    right: object


@dataclass(frozen=True)
class Mult:
    left: object
    right: object


class Point(NamedTuple):
    x: int
    y: int


class Custom:
    def __init__(self, a, b):
        self.a = a
        self.b = b

    def unapply(self):
        return (self.a, self.b)


class WithMatchArgs:
    __match_args__ = ("name",)

    def __init__(self, name):
        self.name = name


def test_decompose_sources():
    assert decompose(Const(1)) == (1,)
    assert decompose(Point(1, 2)) == (1, 2)
    assert decompose(Custom("a", "b")) == ("a", "b")
    assert decompose(WithMatchArgs("n")) == ("n",)
    assert decompose([1, 2]) == (1, 2)
    assert decompose(42) == (42,)


def test_builder_is_instance_check():
    assert P.type_(Const)(Const(1))
    assert not P.type_(Const)(Add(1, 2))


def test_is_guard_exact_arity():
    add = P.type_(Add)

    assert add.is_guard(1, 2)(Add(1, 2))
    assert not add.is_guard(1)(Add(1, 2))
    assert not add.is_guard(1, 2)(Mult(1, 2))


def test_has_guard_prefix():
    add = P.type_(Add)

    assert add.has_guard(1)(Add(1, 2))
    assert not add.has_guard(2)(Add(1, 2))


def test_recursive_match():
    expr = Add(Const(1), Mult(Const(5), Const(0)))
    zero_product = P.type_(Mult).with_(ANY, Const(0))

    assert P.type_(Add).with_(ANY, zero_product)(expr)
    assert not P.type_(Add).with_(ANY, zero_product)(Add(Const(1), Mult(Const(5), Const(2))))


def test_field_types_and_builders():
    assert P.type_(Add).is_guard(Const, P.type_(Mult))(Add(Const(1), Mult(1, 2)))
    assert not P.type_(Add).is_guard(Const, Const)(Add(Const(1), Mult(1, 2)))


def test_eq_and_where():
    assert P.type_(Const).eq(Const(3))(Const(3))
    assert not P.type_(Const).eq(Const(3))(Const(4))
    assert P.type_(Point).is_where(P.greater_than(0), P.less_than(0))(Point(1, -1))
    assert P.type_(Point).has_where(P.eq(1))(Point(1, 9))


def test_tuple_of_types():
    numeric = ADTPredicateBuilder((int, float))

    assert numeric(1.5)
    assert numeric.is_guard(P.greater_than(1))(2)
