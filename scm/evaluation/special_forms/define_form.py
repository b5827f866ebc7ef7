from scm import EvaluatorFn
from scm import SExpression, LispValue
from scm.types.environment import Environment
from scm.types.errors import ScmArityError, ScmTypeError
from scm.types.symbol import Symbol
from scm.evaluation.special_forms.set_form import OK


def define_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """
    (define name value)
    Always binds in the innermost frame, unlike set!.
    """
    if len(tail) != 2:
        raise ScmArityError("define requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise ScmTypeError(f"define first argument must be a Symbol, got {name!r}")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return OK
