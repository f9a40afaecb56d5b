"""Runtime environment (the symbol table) for schemer.

An Environment is an immutable chain of Frames, innermost first. A Frame binds
Symbols to evaluated values and is built once, when a closure is applied.
Extending an Environment prepends a Frame and returns a new Environment; the
tail is shared with the original, so closures can hold on to any Environment
without it ever changing underneath them.
"""

from __future__ import annotations

from io import StringIO
from types import MappingProxyType
from typing import Iterable, Mapping

from schemer import LispValue
from schemer.errors import SchemerUnboundSymbol
from schemer.types.symbol import Symbol

Frame = Mapping[Symbol, LispValue]


class _NotFound:
    def __repr__(self):
        return "NOT_FOUND"

    def __bool__(self):
        return False


NOT_FOUND = _NotFound()


def make_frame(bindings: Mapping[Symbol, LispValue] | Iterable[tuple[Symbol, LispValue]]) -> Frame:
    """Return a read-only Frame holding a private copy of `bindings`."""
    return MappingProxyType(dict(bindings))


class Environment:
    """Persistent chain of Frames with first-match lookup."""

    __slots__ = ("frames",)

    def __init__(self, frames: tuple[Frame, ...] = ()):
        self.frames: tuple[Frame, ...] = frames

    @classmethod
    def empty(cls) -> Environment:
        return _EMPTY

    def find(self, name: Symbol) -> LispValue:
        """Return the value bound to `name` in the innermost frame that has it.

        Returns NOT_FOUND, never a default, when no frame binds `name`.
        """
        for frame in self.frames:
            if name in frame:
                return frame[name]
        return NOT_FOUND

    def lookup(self, name: Symbol) -> LispValue:
        """Look up `name`, raising SchemerUnboundSymbol if nothing binds it."""
        value = self.find(name)
        if value is NOT_FOUND:
            raise SchemerUnboundSymbol(f"unrecognized identifier: {str(name)!r}")
        return value

    def extend(self, frame: Frame) -> Environment:
        """Return a new Environment with `frame` in front; self is unchanged."""
        if not isinstance(frame, MappingProxyType):
            frame = make_frame(frame)
        return Environment((frame, *self.frames))

    def extend_with(self, names: Iterable[Symbol], values: Iterable[LispValue]) -> Environment:
        """Bind names to values positionally in one new Frame."""
        return self.extend(make_frame(zip(names, values)))

    @property
    def depth(self) -> int:
        return len(self.frames)

    def __contains__(self, name: object) -> bool:
        return any(name in frame for frame in self.frames)

    def _write_frame(self, frame: Frame, buffer: StringIO) -> None:
        """Write one frame's bindings into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in frame.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Innermost frame only, with an indicator for the rest of the chain."""
        with StringIO() as buffer:
            if self.frames:
                self._write_frame(self.frames[0], buffer)
                if len(self.frames) > 1:
                    buffer.write(" -> ...")
            else:
                buffer.write("{}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            chain = []
            for frame in self.frames:
                frame_buf = StringIO()
                self._write_frame(frame, frame_buf)
                chain.append(frame_buf.getvalue())
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()


_EMPTY = Environment()
