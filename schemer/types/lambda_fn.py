"""Closure representation for schemer lambdas."""

from __future__ import annotations

import logging
from io import StringIO

from schemer import SExpression, LispValue
from schemer.errors import SchemerArityError
from schemer.types.environment import Environment
from schemer.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Closure:
    """A first-class lambda: formal parameters, body, and the captured env."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: tuple[Symbol, ...], body: SExpression, env: Environment):
        self.formals: tuple[Symbol, ...] = tuple(formals)
        self.body: SExpression = body
        # The Environment active where the lambda was evaluated
        self.env: Environment = env
        logger.debug("closure created: formals=(%s) env_depth=%d",
                     " ".join(str(f) for f in self.formals), env.depth)

    @property
    def arity(self) -> int:
        return len(self.formals)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("#<closure (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values to this closure's formal parameters and
        return the Environment for evaluating the body: one new Frame in front
        of the captured Environment.
        """
        if len(args) != len(self.formals):
            raise SchemerArityError(
                f"wrong number of arguments to lambda: expected {len(self.formals)}, got {len(args)}"
            )
        logger.debug("applying %s to %d argument(s)", self, len(args))
        return self.env.extend_with(self.formals, args)
