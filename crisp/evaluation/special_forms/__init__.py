"""Registry of special forms for the Crisp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
function application, so these names cannot be rebound as procedures.

Every handler has the signature
    handler(tail, env, evaluate_fn, is_tail_call) -> LispValue
where `tail` is the Python list of unevaluated argument forms.
"""

from crisp.types.symbol import Symbol
from crisp.evaluation.special_forms.quote_form import quote_form
from crisp.evaluation.special_forms.if_form import if_form
from crisp.evaluation.special_forms.define_form import define_form
from crisp.evaluation.special_forms.lambda_form import lambda_form
from crisp.evaluation.special_forms.progn_form import progn_form
from crisp.evaluation.special_forms.let_form import let_form, let_star_form
from crisp.evaluation.special_forms.set_form import set_form
from crisp.evaluation.special_forms.cond_form import cond_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("define"): define_form,
    Symbol("def"): define_form,
    Symbol("lambda"): lambda_form,
    Symbol("fn"): lambda_form,
    Symbol("begin"): progn_form,
    Symbol("progn"): progn_form,
    Symbol("let"): let_form,
    Symbol("let*"): let_star_form,
    Symbol("set!"): set_form,
    Symbol("cond"): cond_form,
}
