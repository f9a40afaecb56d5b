import pytest
from hypothesis import given, strategies as st

from schemer.builtin.primitives import PRIMITIVES, car, cdr, cons
from schemer.errors import SchemerArithmeticError, SchemerArityError, SchemerTypeError
from schemer.types.boolean import FALSE, TRUE
from schemer.types.primitive import Primitive
from schemer.types.symbol import Symbol


def test_ten_primitives():
    assert sorted(str(name) for name in PRIMITIVES) == sorted(
        ["cons", "car", "cdr", "null?", "eq?", "atom?", "zero?", "add1", "sub1", "number?"]
    )
    assert all(isinstance(p, Primitive) for p in PRIMITIVES.values())


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(atom? 1)", "#t"),
        ("(atom? (quote x))", "#t"),
        ("(atom? #f)", "#t"),
        ("(atom? (quote ()))", "#f"),
        ("(atom? car)", "#t"),
        ("(null? (quote ()))", "#t"),
        ("(null? (quote (x)))", "#f"),
        ("(eq? (quote x) (quote x))", "#t"),
        ("(eq? (quote x) (quote y))", "#f"),
        ("(number? 1)", "#t"),
        ("(number? (quote x))", "#f"),
        ("(number? (quote ()))", "#f"),
        ("(number? #t)", "#f"),
        ("(zero? 0)", "#t"),
        ("(zero? 1)", "#f"),
        ("(add1 0)", "1"),
        ("(add1 41)", "42"),
        ("(sub1 1)", "0"),
        ("(cons 1 (quote ()))", "(1)"),
        ("(cons 1 (quote (2)))", "(1 2)"),
        ("(cons (quote (1)) (quote (2)))", "((1) 2)"),
        ("(car (quote (1 2)))", "1"),
        ("(car (quote ((1) 2)))", "(1)"),
        ("(car (car (quote ((1) 2))))", "1"),
        ("(cdr (quote (1)))", "()"),
        ("(cdr (quote (1 2)))", "(2)"),
        ("(cdr (quote (1 2 3)))", "(2 3)"),
        ("(cdr (cdr (quote (1 2 3))))", "(3)"),
    ],
)
def test_primitive_results(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source",
    [
        "(cons 1)",
        "(car)",
        "(car (quote (1)) 2)",
        "(cdr)",
        "(cdr (quote (1)) 2)",
        "(null?)",
        "(null? 1 2)",
        "(eq?)",
        "(eq? 1)",
        "(eq? 1 2 3)",
        "(atom?)",
        "(atom? 1 2)",
        "(zero?)",
        "(zero? 1 2)",
        "(add1)",
        "(add1 2 3)",
        "(sub1)",
        "(sub1 2 3)",
        "(number?)",
        "(number? 2 3)",
    ],
)
def test_primitive_arity_errors(interp, source):
    with pytest.raises(SchemerArityError):
        interp.eval(source)


@pytest.mark.parametrize(
    "source",
    [
        "(cons 1 2)",
        "(car 1)",
        "(car (quote ()))",
        "(cdr 1)",
        "(cdr (quote ()))",
        "(null? 1)",
        "(eq? 1 2)",
        "(eq? #t #f)",
        "(eq? #f 2)",
        "(eq? (quote ()) (quote ()))",
        "(zero? #f)",
        "(add1 (quote ()))",
        "(sub1 #f)",
    ],
)
def test_primitive_type_errors(interp, source):
    with pytest.raises(SchemerTypeError):
        interp.eval(source)


def test_arity_message_names_primitive(interp):
    with pytest.raises(SchemerArityError, match="cons takes two arguments"):
        interp.eval("(cons 1)")


def test_add1_overflow_at_default_width(interp):
    assert interp.eval("(add1 18446744073709551614)") == 18446744073709551615
    with pytest.raises(SchemerArithmeticError, match="overflow"):
        interp.eval("(add1 18446744073709551615)")


def test_add1_overflow_follows_configured_width(interp, narrow_numbers):
    assert interp.eval("(add1 254)") == narrow_numbers
    with pytest.raises(SchemerArithmeticError):
        interp.eval("(add1 255)")


def test_sub1_underflow(interp):
    with pytest.raises(SchemerArithmeticError, match="underflow"):
        interp.eval("(sub1 0)")


def test_predicates_return_boolean_atoms(interp):
    assert interp.eval("(zero? 0)") is TRUE
    assert interp.eval("(null? (quote (a)))") is FALSE


def test_primitives_do_not_mutate_arguments():
    original = (Symbol("a"), Symbol("b"))
    assert cons([Symbol("z"), original]) == (Symbol("z"), Symbol("a"), Symbol("b"))
    assert cdr([original]) == (Symbol("b"),)
    assert original == (Symbol("a"), Symbol("b"))


atoms = st.one_of(
    st.integers(min_value=0, max_value=1000),
    st.sampled_from([TRUE, FALSE]),
    st.sampled_from(["a", "b", "foo", "bar-baz"]).map(Symbol),
)
lists = st.recursive(atoms, lambda children: st.lists(children, max_size=4).map(tuple), max_leaves=12)


@given(st.lists(lists, min_size=1, max_size=6).map(tuple))
def test_cons_car_cdr_round_trip(lst):
    assert cons([car([lst]), cdr([lst])]) == lst
