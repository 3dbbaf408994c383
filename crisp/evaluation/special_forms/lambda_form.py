from crisp import EvaluatorFn
from crisp import SExpression, LispValue
from crisp.errors import ArityError, CrispSyntaxError, CrispTypeError
from crisp.types.closure import Closure
from crisp.types.environment import Environment
from crisp.types.nil import Nil
from crisp.types.pair import Pair, make_list
from crisp.types.symbol import Symbol

MALFORMED_FORM = "MalformedForm"


def parse_params(params: SExpression) -> tuple[list[Symbol], Symbol | None]:
    """Split a parameter list into positional formals and an optional rest name.

    Accepted shapes: (a b c), (a b . rest), a bare symbol `args`, or ().
    """
    formals: list[Symbol] = []
    node = params
    while isinstance(node, Pair):
        if not isinstance(node.car, Symbol):
            raise CrispTypeError(f"Parameter must be a symbol, got {node.car!r}")
        formals.append(node.car)
        node = node.cdr
    if node is Nil:
        rest = None
    elif isinstance(node, Symbol):
        rest = node
    else:
        raise CrispTypeError(f"Parameter list must be a list of symbols, got {params!r}")

    names = formals + ([rest] if rest is not None else [])
    if len(set(names)) != len(names):
        raise CrispSyntaxError(MALFORMED_FORM, f"Duplicate parameter name in {[str(n) for n in names]}")
    return formals, rest


def make_body(body_forms: list[SExpression]) -> SExpression:
    # Several body forms are an implicit begin; none means the call yields nil.
    if not body_forms:
        return Nil
    if len(body_forms) == 1:
        return body_forms[0]
    return make_list([Symbol("begin"), *body_forms])


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    _: bool = False,
) -> LispValue:
    """(lambda (params...) body...) captures `env` by reference; the body is not evaluated here."""
    if not tail:
        raise ArityError("lambda requires at least a parameter list")

    formals, rest = parse_params(tail[0])
    return Closure(formals, make_body(tail[1:]), env, rest)
