"""Application engine for Crisp.

This module centralizes procedure application semantics for the interpreter:
- One arity check (`check_arity`) shared by primitives and closures.
- Tail-call awareness via TailCall objects (consumed by the trampoline).
- Application of Primitive procedures registered in the environment.

Keeping this logic in one place prevents duplication between the evaluator
and the special forms.
"""

from __future__ import annotations

from crisp import LispValue, EvaluatorFn
from crisp.errors import ArityError, NotCallableError
from crisp.printer import to_string
from crisp.types.closure import Closure
from crisp.types.environment import Environment
from crisp.types.primitive import Primitive
from crisp.types.tail_call import TailCall


def describe_arity(min_args: int, max_args: int | None) -> str:
    if max_args is None:
        return f"at least {min_args}"
    if min_args == max_args:
        return f"exactly {min_args}"
    return f"between {min_args} and {max_args}"


def check_arity(name: str, min_args: int, max_args: int | None, count: int) -> None:
    """Raise ArityError unless `count` fits the declared [min_args, max_args] range."""
    if count < min_args or (max_args is not None and count > max_args):
        raise ArityError(
            f"{name} expects {describe_arity(min_args, max_args)} argument(s), got {count}"
        )


def trampoline(result: LispValue | TailCall, evaluate_fn: EvaluatorFn) -> LispValue:
    """Run pending tail calls until a plain value comes back."""
    while isinstance(result, TailCall):
        result = evaluate_fn(result.fn.body, result.env, True)
    return result


def apply_closure(
    fn: Closure,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
    is_tail_call: bool,
) -> LispValue | TailCall:
    """Apply a Closure value.

    Parameters:
    - fn: The Closure being applied.
    - args: The already-evaluated argument values.
    - evaluate_fn: Evaluator function to step the trampoline if needed.
    - is_tail_call: Whether the call position is tail; if True, return a TailCall.

    A new frame is created off the closure's captured environment (never the
    caller's), so free variables resolve lexically.
    """
    check_arity(fn.name or "lambda", fn.min_args, fn.max_args, len(args))
    new_env = fn.extend_env(args)
    if is_tail_call:
        return TailCall(fn, new_env)
    # Not tail position: run the body to completion here.
    return trampoline(evaluate_fn(fn.body, new_env, True), evaluate_fn)


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    tail: bool = False,
) -> LispValue | TailCall:
    """Apply either a Closure or a Primitive.

    - For Closure, defer to apply_closure (handling tail calls).
    - For Primitive, enforce its declared arity, then invoke with the runtime env and list of args.
    - Otherwise, raise NotCallableError.
    """
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn, tail)
    elif isinstance(head, Primitive):
        check_arity(head.name, head.min_args, head.max_args, len(args))
        return head.fn(env, args)
    else:
        raise NotCallableError(head, f"Cannot apply non-procedure {to_string(head)}")
