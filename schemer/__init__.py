# Core type aliases for schemer's data model.
# Expressions are plain Python values plus a few small wrapper types:
# Symbol and Boolean (schemer.types), int for Number and tuple for List.
# No explicit Cons type is defined; lists are flat immutable tuples.
#
# Naming guidance:
# - SExpression: Use in reader/special-form code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values, which also
#   include Closure and Primitive.

import logging
from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias (code and data share one representation)
SExpression = LispValue

# Evaluator function type: passed into special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]

logging.getLogger(__name__).addHandler(logging.NullHandler())
