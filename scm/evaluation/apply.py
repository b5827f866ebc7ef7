"""Application engine for scm.

Primitives are called on the argument list directly. Closures get one fresh
frame, child of their captured environment, and their body is evaluated
there. There is no tail-call elimination: each nested call is a nested
Python call.
"""

from scm import LispValue, EvaluatorFn
from scm.types.errors import ScmUnknownForm
from scm.types.procedure import Closure, Primitive


def apply_closure(
    fn: Closure, args: list[LispValue], evaluate_fn: EvaluatorFn
) -> LispValue:
    new_env = fn.extend_env(args)
    return evaluate_fn(fn.body, new_env)


def apply(proc: LispValue, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply either a Primitive or a Closure to already-evaluated arguments."""
    if isinstance(proc, Primitive):
        return proc(args)
    if isinstance(proc, Closure):
        return apply_closure(proc, args, evaluate_fn)
    raise ScmUnknownForm(f"Unknown procedure type: {proc!r}")
