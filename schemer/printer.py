"""Render values back to surface syntax."""

from __future__ import annotations

from io import StringIO

from schemer import LispValue
from schemer.types.expression import is_list


def to_source(value: LispValue) -> str:
    """Return the text form of `value`: (a b c), 42, #t, foo, #<closure (x)>."""
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()


def _write(value: LispValue, buffer: StringIO) -> None:
    if is_list(value):
        buffer.write("(")
        for i, item in enumerate(value):
            if i:
                buffer.write(" ")
            _write(item, buffer)
        buffer.write(")")
    else:
        # Symbol, Boolean, Closure and Primitive all print themselves
        buffer.write(str(value))
