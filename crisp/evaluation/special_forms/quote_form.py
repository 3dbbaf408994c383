from crisp import SExpression, LispValue, EvaluatorFn
from crisp.errors import ArityError
from crisp.types.environment import Environment


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn, _: bool = False
) -> LispValue:
    if len(tail) != 1:
        raise ArityError(f"quote expects exactly 1 argument, got {len(tail)}")
    return tail[0]
