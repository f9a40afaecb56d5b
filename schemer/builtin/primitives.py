"""Built-in procedures for schemer.

The ten primitives are a closed set. Each takes the already-evaluated argument
list (its length was checked against the arity before the call) and returns a
new value or raises a SchemerError. None of them mutate their arguments.
"""
from __future__ import annotations

from schemer import LispValue
from schemer.config import get_max_number
from schemer.errors import SchemerArithmeticError, SchemerTypeError
from schemer.types.boolean import Boolean, to_boolean
from schemer.types.expression import is_atom, is_list, is_number, is_symbol
from schemer.types.primitive import Primitive
from schemer.types.symbol import Symbol


# -------------------------------
# Lists
# -------------------------------
def cons(args: list[LispValue]) -> tuple:
    """Return a new list with the first argument in front of the second."""
    head, rest = args
    if not is_list(rest):
        raise SchemerTypeError("second argument to cons must be a list")
    return (head, *rest)


def _non_empty_list(name: str, value: LispValue) -> tuple:
    if not is_list(value):
        raise SchemerTypeError(f"{name} takes one list")
    if not value:
        raise SchemerTypeError(f"cannot take {name} of empty list")
    return value


def car(args: list[LispValue]) -> LispValue:
    """First element of a non-empty list."""
    return _non_empty_list("car", args[0])[0]


def cdr(args: list[LispValue]) -> tuple:
    """Everything but the first element of a non-empty list."""
    return _non_empty_list("cdr", args[0])[1:]


# -------------------------------
# Predicates
# -------------------------------
def null_p(args: list[LispValue]) -> Boolean:
    """#t for the empty list; anything that is not a list is an error."""
    value = args[0]
    if not is_list(value):
        raise SchemerTypeError("null? takes one list")
    return to_boolean(len(value) == 0)


def eq_p(args: list[LispValue]) -> Boolean:
    """#t if both arguments are the same symbol.

    Numbers, booleans and lists are rejected outright rather than compared.
    """
    first, second = args
    if not is_symbol(first) or not is_symbol(second):
        raise SchemerTypeError("eq? takes two atoms")
    return to_boolean(first == second)


def atom_p(args: list[LispValue]) -> Boolean:
    return to_boolean(is_atom(args[0]))


def zero_p(args: list[LispValue]) -> Boolean:
    return to_boolean(_number("zero?", args[0]) == 0)


def number_p(args: list[LispValue]) -> Boolean:
    return to_boolean(is_number(args[0]))


# -------------------------------
# Arithmetic
# -------------------------------
def _number(name: str, value: LispValue) -> int:
    if not is_number(value):
        raise SchemerTypeError(f"{name} takes one number")
    return value


def add1(args: list[LispValue]) -> int:
    """Successor, bounded by the configured number width."""
    num = _number("add1", args[0])
    if num >= get_max_number():
        raise SchemerArithmeticError("add1 would cause overflow")
    return num + 1


def sub1(args: list[LispValue]) -> int:
    """Predecessor; numbers are unsigned so sub1 of 0 is an error."""
    num = _number("sub1", args[0])
    if num == 0:
        raise SchemerArithmeticError("sub1 would cause underflow")
    return num - 1


PRIMITIVES: dict[Symbol, Primitive] = {
    Symbol(p.name): p
    for p in (
        Primitive("cons", 2, cons),
        Primitive("car", 1, car),
        Primitive("cdr", 1, cdr),
        Primitive("null?", 1, null_p),
        Primitive("eq?", 2, eq_p),
        Primitive("atom?", 1, atom_p),
        Primitive("zero?", 1, zero_p),
        Primitive("add1", 1, add1),
        Primitive("sub1", 1, sub1),
        Primitive("number?", 1, number_p),
    )
}


def lookup_primitive(name: Symbol) -> Primitive | None:
    """Return the primitive called `name`, or None if it is not one of the ten."""
    return PRIMITIVES.get(name)
