import pytest

from scm.builtin.env_builtin import standard_env
from scm.evaluation.evaluator import evaluate
from scm.interpreter import Interpreter
from scm.reader.parser import read_all


@pytest.fixture
def env():
    """Fresh global environment with builtins loaded."""
    return standard_env()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(env):
    """Evaluate every form in a source string against `env`; return the last value."""

    def _run(source):
        result = None
        for expr in read_all(source):
            result = evaluate(expr, env)
        return result

    return _run
