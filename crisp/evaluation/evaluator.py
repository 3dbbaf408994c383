"""Core evaluator and trampoline for the Crisp interpreter.

Implements special-form dispatch, lexical variable resolution and tail-call
aware application via a simple trampoline using TailCall objects.
"""

from __future__ import annotations

from crisp import SExpression, LispValue
from crisp.errors import CrispSyntaxError, StackExhaustedError
from crisp.evaluation.apply import apply, trampoline
from crisp.evaluation.special_forms import SPECIAL_FORMS
from crisp.evaluation.special_forms.lambda_form import MALFORMED_FORM
from crisp.printer import to_string
from crisp.types.environment import Environment
from crisp.types.nil import Nil
from crisp.types.pair import Pair
from crisp.types.symbol import Symbol
from crisp.types.tail_call import TailCall


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """
    Trampoline evaluator: tail-call aware evaluation of one expression.

    Raises StackExhaustedError when non-tail recursion outgrows the host stack.
    """
    try:
        return trampoline(evaluate0(expr, env, True), evaluate0)
    except RecursionError:
        raise StackExhaustedError("Maximum recursion depth exceeded during evaluation") from None


def form_arguments(form: Pair) -> list[SExpression]:
    """Unevaluated argument forms of a call or special form, as a Python list."""
    items: list[SExpression] = []
    node = form.cdr
    while isinstance(node, Pair):
        items.append(node.car)
        node = node.cdr
    if node is not Nil:
        raise CrispSyntaxError(MALFORMED_FORM, f"Improper list in code position: {to_string(form)}")
    return items


def evaluate0(
    expr: SExpression,
    env: Environment,
    is_tail_call: bool = False,
) -> LispValue | TailCall:
    """
    Core evaluator: single-step evaluation with tail-call awareness.
    Returns either a value or, only when is_tail_call is set, a TailCall.
    """
    match expr:
        case Symbol():
            return env.lookup(expr)

        case Pair(car=head):
            tail_args = form_arguments(expr)

            # --- Special forms handling ---
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail_args, env, evaluate0, is_tail_call)

            # --- Application ---
            fn = evaluate0(head, env)
            args = [evaluate0(arg, env) for arg in tail_args]
            return apply(fn, args, env, evaluate0, is_tail_call)

    # --- Atoms (numbers, booleans, strings, nil, procedures) return as-is ---
    return expr
