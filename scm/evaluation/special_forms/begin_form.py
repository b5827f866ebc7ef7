from scm import EvaluatorFn
from scm import SExpression, LispValue
from scm.types.environment import Environment


def begin_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    result: LispValue = []
    for e in tail:
        result = evaluate_fn(e, env)
    return result
