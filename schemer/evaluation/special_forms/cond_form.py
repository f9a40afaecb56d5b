from schemer import EvaluatorFn
from schemer import SExpression, LispValue
from schemer.errors import SchemerMalformedFormError
from schemer.types.boolean import TRUE
from schemer.types.environment import Environment
from schemer.types.expression import is_list
from schemer.types.symbol import Symbol

ELSE = Symbol("else")


def cond_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Evaluate the result of the first line whose test holds.

    Lines are tried in source order. A line whose test is the symbol `else`
    always matches, wherever it appears, so an early else hides the lines
    after it. Only #t counts as a match: #f and any non-boolean value skip
    the line.
    """
    for line in tail:
        if not is_list(line):
            raise SchemerMalformedFormError("cond lines must be lists")
        if len(line) != 2:
            raise SchemerMalformedFormError("cond lines must be lists with two elements")
        test, result = line
        if test == ELSE:
            return evaluate_fn(result, env)
        if evaluate_fn(test, env) == TRUE:
            return evaluate_fn(result, env)
    raise SchemerMalformedFormError("cond must have an else line")
