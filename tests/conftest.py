import pytest

from crisp.builtins import make_root_env
from crisp.evaluation.evaluator import evaluate
from crisp.interpreter import Interpreter
from crisp.reader.parser import read_all


@pytest.fixture
def env():
    """Fresh root environment with the primitive library loaded."""
    return make_root_env()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(env):
    """Evaluate every form of a source string in the shared `env`; return the last value."""
    def _run(source):
        result = None
        for expr in read_all(source):
            result = evaluate(expr, env)
        return result
    return _run
