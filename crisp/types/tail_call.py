from crisp.types.closure import Closure
from crisp.types.environment import Environment


class TailCall:
    """Pending closure body evaluation, consumed by the evaluator's trampoline."""

    __slots__ = ("fn", "env")

    def __init__(self, fn: Closure, env: Environment):
        self.fn = fn
        self.env = env
