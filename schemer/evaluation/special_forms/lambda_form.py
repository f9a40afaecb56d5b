from schemer import EvaluatorFn
from schemer import SExpression, LispValue
from schemer.errors import SchemerMalformedFormError
from schemer.types.environment import Environment
from schemer.types.expression import is_list, is_symbol
from schemer.types.lambda_fn import Closure


def lambda_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    # (lambda formals body): exactly one body expression, which is not
    # evaluated until the closure is applied.
    if len(tail) != 2:
        raise SchemerMalformedFormError("lambda requires a list with three elements")

    formals, body = tail
    if not is_list(formals) or not all(is_symbol(f) for f in formals):
        raise SchemerMalformedFormError("lambda formals must be a list of symbols")

    return Closure(formals, body, env)
