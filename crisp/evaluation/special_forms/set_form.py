from crisp import EvaluatorFn
from crisp import SExpression, LispValue
from crisp.errors import ArityError, CrispTypeError
from crisp.types.symbol import Symbol
from crisp.types.environment import Environment


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool = False,
) -> LispValue:
    if len(tail) != 2:
        raise ArityError("set! requires exactly 2 arguments: (set! var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise CrispTypeError(f"set! first argument must be a symbol, got {var_sym!r}")
    value = evaluate_fn(val_expr, env)
    env.set(var_sym, value)

    return value
