from scm import EvaluatorFn
from scm import SExpression, LispValue
from scm.types.environment import Environment
from scm.types.errors import ScmArityError


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise ScmArityError("quote expects exactly 1 argument")
    return tail[0]
