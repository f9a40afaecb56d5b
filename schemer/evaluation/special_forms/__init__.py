"""Registry of special forms for the schemer evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
function application. Each handler receives the form's operands (everything
after the keyword), the current Environment and the evaluator to recurse with.
"""

from schemer.types.symbol import Symbol
from schemer.evaluation.special_forms.quote_form import quote_form
from schemer.evaluation.special_forms.lambda_form import lambda_form
from schemer.evaluation.special_forms.cond_form import cond_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("lambda"): lambda_form,
    Symbol("cond"): cond_form,
}
