from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from schemer import LispValue

PrimitiveFn = Callable[[list[LispValue]], LispValue]


@dataclass(frozen=True)
class Primitive:
    """One of the built-in procedures: a name, a fixed arity and its implementation."""

    name: str
    arity: int
    fn: PrimitiveFn

    def __call__(self, args: list[LispValue]) -> LispValue:
        return self.fn(args)

    def __str__(self) -> str:
        return f"#<primitive {self.name}>"
