"""Predicates over the four expression shapes.

Numbers are Python ints (never bool), lists are tuples. Anything that is not
a tuple counts as an atom, including closures and primitives.
"""

from __future__ import annotations

from schemer import LispValue
from schemer.types.symbol import Symbol


def is_symbol(value: LispValue) -> bool:
    return isinstance(value, Symbol)


def is_number(value: LispValue) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_list(value: LispValue) -> bool:
    return isinstance(value, tuple)


def is_atom(value: LispValue) -> bool:
    return not is_list(value)
