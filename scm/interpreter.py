from __future__ import annotations

from scm import LispValue
from scm.reader.parser import read_all
from scm.types.environment import Environment
from scm.types.errors import ScmRecursionError
from scm.builtin.env_builtin import register
from scm.evaluation.evaluator import evaluate


class Interpreter:
    """
    Reads and evaluates scm code against one persistent global Environment,
    so definitions survive across calls.
    """

    def __init__(self):
        self.env: Environment = Environment()
        register(self.env)

    def eval_forms(self, code: str) -> list[LispValue]:
        """Evaluate each form in `code` in order and return all the values."""
        results: list[LispValue] = []
        try:
            for expr in read_all(code):
                results.append(evaluate(expr, self.env))
        except RecursionError as ex:
            raise ScmRecursionError("maximum recursion depth exceeded") from ex
        return results

    def eval(self, code: str) -> LispValue:
        """Evaluate `code` and return the value of its last form, () if it has none."""
        results = self.eval_forms(code)
        if not results:
            return []
        return results[-1]
