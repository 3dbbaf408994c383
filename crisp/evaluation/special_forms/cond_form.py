from crisp import EvaluatorFn
from crisp import SExpression, LispValue
from crisp.errors import CrispTypeError
from crisp.evaluation.special_forms.if_form import is_truthy
from crisp.evaluation.special_forms.progn_form import progn_form
from crisp.types.environment import Environment
from crisp.types.nil import Nil
from crisp.types.pair import Pair, is_list, to_list
from crisp.types.symbol import Symbol

ELSE = Symbol("else")


def cond_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    """(cond (test body...) ... (else body...))

    Clauses are tried in order. A clause with no body yields its test value;
    when no clause matches the result is Nil.
    """
    for clause in tail:
        if not (isinstance(clause, Pair) and is_list(clause)):
            raise CrispTypeError(f"cond: clause must be a non-empty list, got {clause!r}")
        test, *body = to_list(clause)
        if test == ELSE:
            return progn_form(body, env, evaluate_fn, is_tail_call)
        value = evaluate_fn(test, env)
        if is_truthy(value):
            if not body:
                return value
            return progn_form(body, env, evaluate_fn, is_tail_call)
    return Nil
