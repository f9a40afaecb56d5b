from __future__ import annotations


class Boolean:
    """One of the two truth atoms, #t and #f.

    Kept apart from Python's bool, which is an int and would otherwise
    pass for a Number.
    """

    __slots__ = ("value",)

    def __init__(self, value: bool):
        self.value = bool(value)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Boolean) and self.value == other.value

    def __hash__(self) -> int:
        return hash(("boolean", self.value))

    def __bool__(self) -> bool:
        return self.value

    def __repr__(self):
        return "#t" if self.value else "#f"

    __str__ = __repr__


TRUE = Boolean(True)
FALSE = Boolean(False)


def to_boolean(flag: bool) -> Boolean:
    return TRUE if flag else FALSE
