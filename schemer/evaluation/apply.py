"""Application engine for schemer.

Closures bind their arguments in one new Frame on top of the captured
Environment and evaluate their body there. Primitives have their arity
checked here and are then called with the argument list. Anything else in
head position cannot be applied.
"""

from schemer import LispValue, EvaluatorFn
from schemer.errors import SchemerApplicationError, SchemerArityError
from schemer.printer import to_source
from schemer.types.lambda_fn import Closure
from schemer.types.primitive import Primitive

_COUNT_WORDS = {0: "no", 1: "one", 2: "two"}


def apply_closure(fn: Closure, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a Closure to already-evaluated arguments.

    Raises SchemerArityError unless there is exactly one argument per formal.
    """
    new_env = fn.extend_env(args)
    return evaluate_fn(fn.body, new_env)


def apply_primitive(fn: Primitive, args: list[LispValue]) -> LispValue:
    if len(args) != fn.arity:
        noun = "argument" if fn.arity == 1 else "arguments"
        raise SchemerArityError(
            f"{fn.name} takes {_COUNT_WORDS.get(fn.arity, fn.arity)} {noun}, got {len(args)}"
        )
    return fn(args)


def apply(head: LispValue, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply either a Closure or a Primitive; anything else is an error."""
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    elif isinstance(head, Primitive):
        return apply_primitive(head, args)
    else:
        raise SchemerApplicationError(f"unsupported application type: {to_source(head)}")


def is_applicable(value: LispValue) -> bool:
    return isinstance(value, (Closure, Primitive))
