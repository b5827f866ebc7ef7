from scm import EvaluatorFn
from scm import SExpression, LispValue
from scm.types.environment import Environment
from scm.types.errors import ScmArityError, ScmTypeError
from scm.types.procedure import Closure
from scm.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    # (lambda (a b) body) binds positionally, (lambda args body) binds
    # every argument to `args`. Exactly one body expression.
    if len(tail) != 2:
        raise ScmArityError("lambda requires a parameter list and one body expression")

    params, body = tail
    if isinstance(params, list):
        for p in params:
            if not isinstance(p, Symbol):
                raise ScmTypeError(f"lambda parameter must be a Symbol, got {p!r}")
        params = list(params)
    elif not isinstance(params, Symbol):
        raise ScmTypeError(
            f"lambda parameters must be a list of Symbols or a Symbol, got {params!r}"
        )

    return Closure(params, body, env)
