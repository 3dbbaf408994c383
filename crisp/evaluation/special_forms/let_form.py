from crisp import EvaluatorFn
from crisp import SExpression, LispValue
from crisp.errors import ArityError, CrispSyntaxError, CrispTypeError
from crisp.evaluation.special_forms.lambda_form import MALFORMED_FORM
from crisp.evaluation.special_forms.progn_form import progn_form
from crisp.types.environment import Environment
from crisp.types.nil import Nil
from crisp.types.pair import Pair, is_list, to_list
from crisp.types.symbol import Symbol


def _parse_bindings(form_name: str, bindings: SExpression) -> list[tuple[Symbol, SExpression]]:
    if bindings is not Nil and not (isinstance(bindings, Pair) and is_list(bindings)):
        raise CrispTypeError(f"{form_name}: bindings must be a list, got {bindings!r}")
    parsed = []
    for binding in to_list(bindings):
        if not (isinstance(binding, Pair) and is_list(binding)) or len(binding) != 2:
            raise ArityError(f"{form_name}: each binding must be (name value), got {binding!r}")
        name, expr = to_list(binding)
        if not isinstance(name, Symbol):
            raise CrispTypeError(f"{form_name}: binding name must be a symbol, got {name!r}")
        parsed.append((name, expr))
    return parsed


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    """(let ((name value) ...) body...)

    Every value is evaluated in the outer environment before any name is
    bound; the body runs in a fresh child frame.
    """
    if not tail:
        raise ArityError("let requires a binding list")
    bindings = _parse_bindings("let", tail[0])
    names = [name for name, _ in bindings]
    if len(set(names)) != len(names):
        raise CrispSyntaxError(MALFORMED_FORM, f"let: duplicate binding name in {[str(n) for n in names]}")

    values = [evaluate_fn(expr, env) for _, expr in bindings]
    local_env = env.child()
    for name, value in zip(names, values):
        local_env.define(name, value)
    return progn_form(tail[1:], local_env, evaluate_fn, is_tail_call)


def let_star_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool = False,
) -> LispValue:
    """(let* ((name value) ...) body...) where each value sees the names bound before it."""
    if not tail:
        raise ArityError("let* requires a binding list")
    local_env = env
    for name, expr in _parse_bindings("let*", tail[0]):
        value = evaluate_fn(expr, local_env)
        local_env = local_env.child()
        local_env.define(name, value)
    if local_env is env:
        local_env = env.child()
    return progn_form(tail[1:], local_env, evaluate_fn, is_tail_call)
