from crisp import EvaluatorFn
from crisp import SExpression, LispValue
from crisp.errors import ArityError
from crisp.types.environment import Environment
from crisp.types.nil import Nil


def is_truthy(value: LispValue) -> bool:
    # Only false is false: 0, "", and () are all true.
    return value is not False


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    """(if test then [else]); a missing else branch yields Nil."""
    if len(tail) not in (2, 3):
        raise ArityError("if requires a condition, a then-expression and an optional else-expression")

    cond = evaluate_fn(tail[0], env)
    if is_truthy(cond):
        return evaluate_fn(tail[1], env, is_tail_call)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env, is_tail_call)
    else:
        return Nil
