from __future__ import annotations

from typing import Callable

from crisp import LispValue
from crisp.types.environment import Environment

PrimitiveFn = Callable[[Environment, list[LispValue]], LispValue]


class Primitive:
    """A built-in procedure with a declared arity contract.

    `fn` is called as fn(env, args) with already evaluated arguments; the
    evaluator checks `min_args`/`max_args` before calling it. `max_args` of
    None means variadic.
    """

    __slots__ = ("name", "fn", "min_args", "max_args")

    def __init__(self, name: str, fn: PrimitiveFn, min_args: int = 0, max_args: int | None = None):
        self.name = name
        self.fn = fn
        self.min_args = min_args
        self.max_args = max_args

    def __str__(self) -> str:
        return f"#<primitive {self.name}>"

    def __repr__(self) -> str:
        return f"Primitive({self.name!r}, min_args={self.min_args}, max_args={self.max_args})"
