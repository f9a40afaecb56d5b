from schemer import SExpression, EvaluatorFn
from schemer.errors import SchemerMalformedFormError
from schemer.types.environment import Environment


def quote_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> SExpression:
    """(quote x) returns x unevaluated."""
    if len(tail) != 1:
        raise SchemerMalformedFormError("quote must be a list with two elements")
    return tail[0]
