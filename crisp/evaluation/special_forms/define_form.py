from crisp import EvaluatorFn
from crisp import SExpression, LispValue
from crisp.errors import ArityError, CrispTypeError
from crisp.evaluation.special_forms.lambda_form import make_body, parse_params
from crisp.types.closure import Closure
from crisp.types.environment import Environment
from crisp.types.pair import Pair
from crisp.types.symbol import Symbol

LAMBDA_FORMS = (Symbol("lambda"), Symbol("fn"))


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool = False,
) -> LispValue:
    """
    (define name value) or (define (name params...) body...)
    Binds in the current frame only and returns the bound value.
    """
    if not tail:
        raise ArityError("define requires a name and a value")

    target = tail[0]
    if isinstance(target, Pair):
        # Procedure shorthand
        name = target.car
        if not isinstance(name, Symbol):
            raise CrispTypeError(f"define: procedure name must be a symbol, got {name!r}")
        formals, rest = parse_params(target.cdr)
        value = Closure(formals, make_body(tail[1:]), env, rest, name=name.id)
        env.define(name, value)
        return value

    if len(tail) != 2:
        raise ArityError("define requires exactly 2 arguments: (define name value)")
    if not isinstance(target, Symbol):
        raise CrispTypeError(f"define: first argument must be a symbol, got {target!r}")

    value = evaluate_fn(tail[1], env)
    if isinstance(tail[1], Pair) and tail[1].car in LAMBDA_FORMS:
        # A fresh closure from a lambda form takes the defined name
        value.name = target.id
    env.define(target, value)
    return value
