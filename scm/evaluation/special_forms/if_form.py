from scm import EvaluatorFn
from scm import SExpression, LispValue
from scm.types.environment import Environment
from scm.types.errors import ScmArityError, ScmTypeError
from scm.types.kinds import is_boolean


def if_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 3:
        raise ScmArityError("if requires a test, a consequent and an alternative")

    test, consequent, alternative = tail
    cond = evaluate_fn(test, env)
    # No truthiness: the test must be a Boolean
    if not is_boolean(cond):
        raise ScmTypeError(f"if test must be a boolean, got {cond!r}")

    if cond:
        return evaluate_fn(consequent, env)
    return evaluate_fn(alternative, env)
