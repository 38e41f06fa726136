import pytest

from kappa.builtin.env_builtin import register
from kappa.evaluation.evaluator import evaluate
from kappa.interpreter import Interpreter
from kappa.reader.parser import read_all
from kappa.types.environment import Environment


@pytest.fixture
def env():
    """Fresh root environment with the primitive library loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def run(env):
    """Evaluate every expression of a source string in `env`; return the last."""
    def _run(source):
        result = None
        for expr in read_all(source):
            result = evaluate(expr, env)
        return result
    return _run


@pytest.fixture
def interp():
    """Interpreter with primitives and I/O primitives but no prelude."""
    with Interpreter(prelude=None) as it:
        yield it
