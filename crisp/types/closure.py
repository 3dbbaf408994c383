"""Closure representation for Crisp."""

from __future__ import annotations

from crisp import SExpression, LispValue
from crisp.types.environment import Environment
from crisp.types.symbol import Symbol


class Closure:
    """A first-class procedure with formal parameters, body, and captured env."""

    __slots__ = ("formals", "rest", "body", "env", "name")

    def __init__(
        self,
        formals: list[Symbol],
        body: SExpression,
        env: Environment,
        rest: Symbol | None = None,
        name: str | None = None,
    ):
        self.formals: list[Symbol] = formals
        self.rest: Symbol | None = rest
        self.body: SExpression = body
        self.env: Environment = env
        self.name: str | None = name

    @property
    def min_args(self) -> int:
        return len(self.formals)

    @property
    def max_args(self) -> int | None:
        return None if self.rest is not None else len(self.formals)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values to this closure's formal parameters and
        return a new child Environment of the captured env for evaluating the body.
        """
        from crisp.types.bind import bind_arguments
        return bind_arguments(self.formals, self.rest, args, self.env)

    def __str__(self) -> str:
        from crisp.printer import to_string
        return to_string(self)

    def __repr__(self) -> str:
        params = " ".join(str(f) for f in self.formals)
        if self.rest is not None:
            params = f"{params} . {self.rest}" if params else f". {self.rest}"
        return f"Closure({self.name or 'lambda'!s}, ({params}))"
