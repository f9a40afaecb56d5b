"""Core evaluator for schemer.

`meaning` reduces an expression to a value in an Environment:

1. A non-empty list headed by quote, lambda or cond goes to its special form.
2. Any other list is an application: the head and then the arguments are
   evaluated left to right, and the head must have yielded a Closure or Primitive.
3. Numbers and booleans evaluate to themselves.
4. A symbol naming one of the ten primitives yields that Primitive, before
   the Environment is consulted, so primitive names cannot be rebound.
   Other symbols are looked up in the Environment.

Errors are raised where they happen; a SchemerError is never caught here.
"""

from __future__ import annotations

import logging

from schemer import SExpression, LispValue
from schemer.builtin.primitives import lookup_primitive
from schemer.errors import SchemerApplicationError, SchemerRecursionError, SchemerTypeError
from schemer.evaluation.apply import apply, is_applicable
from schemer.evaluation.special_forms import SPECIAL_FORMS
from schemer.types.boolean import Boolean
from schemer.types.environment import Environment
from schemer.types.expression import is_number
from schemer.types.symbol import Symbol

logger = logging.getLogger(__name__)


def evaluate_top_level(expr: SExpression) -> LispValue:
    """Evaluate `expr` in the empty Environment.

    A Python RecursionError (a program recursing deeper than the host stack
    allows) is reported as SchemerRecursionError.
    """
    try:
        return meaning(expr, Environment.empty())
    except RecursionError as e:
        raise SchemerRecursionError("recursion depth exceeded") from e


def meaning(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case tuple():
            return _list_meaning(expr, env)

        case Symbol():
            primitive = lookup_primitive(expr)
            if primitive is not None:
                return primitive
            return env.lookup(expr)

        case Boolean():
            return expr

    # --- Remaining atoms ---
    if is_number(expr) or is_applicable(expr):
        return expr
    raise SchemerTypeError(f"not an expression: {expr!r}")


def _list_meaning(expr: tuple, env: Environment) -> LispValue:
    if not expr:
        raise SchemerApplicationError("application requires a non-empty list")

    head, *operands = expr
    if isinstance(head, Symbol) and head in SPECIAL_FORMS:
        logger.debug("special form %s", head)
        return SPECIAL_FORMS[head](operands, env, meaning)

    fn = meaning(head, env)
    # Left to right; the first failing argument aborts the rest
    args = [meaning(arg, env) for arg in operands]
    # apply rejects a head that is not a Closure or Primitive
    return apply(fn, args, meaning)
