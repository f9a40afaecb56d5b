from __future__ import annotations

import logging
import sys

from schemer import LispValue
from schemer.config import get_recursion_limit
from schemer.errors import SchemerError, SchemerSyntaxError
from schemer.evaluation.evaluator import evaluate_top_level
from schemer.printer import to_source
from schemer.reader.parser import parse_all

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates schemer source text.
    Every top-level form is evaluated on its own in the empty environment;
    nothing carries over from one form to the next.
    """
    def __init__(self, recursion_limit: int | None = None):
        limit = recursion_limit if recursion_limit is not None else get_recursion_limit()
        if limit is not None and limit > sys.getrecursionlimit():
            sys.setrecursionlimit(limit)

    def eval_all(self, code: str) -> list[LispValue]:
        """Evaluate every form in `code` and return their values in order."""
        results = []
        for expr in parse_all(code):
            try:
                results.append(evaluate_top_level(expr))
            except SchemerError as e:
                logger.error("evaluating %s failed: %s", to_source(expr), e)
                raise
        return results

    def eval(self, code: str) -> LispValue:
        """Evaluate `code` and return the value of its last form.

        A program with no forms at all is a SchemerSyntaxError.
        """
        results = self.eval_all(code)
        if not results:
            raise SchemerSyntaxError("unexpected EOF")
        return results[-1]

    def eval_to_string(self, code: str) -> str:
        return to_source(self.eval(code))
