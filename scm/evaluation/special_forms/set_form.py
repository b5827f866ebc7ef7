from scm import EvaluatorFn
from scm import SExpression, LispValue
from scm.types.environment import Environment
from scm.types.errors import ScmArityError, ScmTypeError
from scm.types.symbol import Symbol

OK = Symbol("ok")


def set_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 2:
        raise ScmArityError("set! requires exactly 2 arguments: (set! var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise ScmTypeError(f"set! first argument must be a Symbol, got {var_sym!r}")
    value = evaluate_fn(val_expr, env)
    env.set(var_sym, value)
    return OK
