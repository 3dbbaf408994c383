from __future__ import annotations

from crisp import LispValue
from crisp.types.environment import Environment
from crisp.types.pair import make_list
from crisp.types.symbol import Symbol
from crisp.errors import ArityError


def bind_arguments(
    formals: list[Symbol],
    rest: Symbol | None,
    supplied_args: list[LispValue],
    closure_env: Environment,
) -> Environment:
    """
    Single source of truth for parameter binding.

    Supports:
    - Positional required parameters
    - A rest parameter capturing remaining supplied args as a list

    Returns a new Environment whose outer is the closure_env, populated with
    the bindings for evaluating the callee body.
    """
    provided = len(supplied_args)
    arity = len(formals)

    if provided < arity:
        missing = formals[provided:]
        raise ArityError(
            f"Too few arguments; missing {len(missing)} parameter(s): {[str(s) for s in missing]}"
        )
    if provided > arity and rest is None:
        raise ArityError(f"Too many arguments: expected {arity}, got {provided}")

    local_env = closure_env.child()
    for formal, value in zip(formals, supplied_args):
        local_env.define(formal, value)
    if rest is not None:
        local_env.define(rest, make_list(supplied_args[arity:]))
    return local_env
