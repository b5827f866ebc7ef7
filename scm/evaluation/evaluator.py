"""Core evaluator for the scm interpreter.

Dispatches on the kind of the expression: atoms evaluate to themselves,
symbols are looked up, lists are special forms or applications.
"""

from __future__ import annotations

from scm import SExpression, LispValue
from scm.types.environment import Environment
from scm.types.errors import ScmUnknownForm
from scm.types.kinds import Kind, kind_of
from scm.types.symbol import Symbol
from scm.evaluation.apply import apply
from scm.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    kind = kind_of(expr)

    if kind is Kind.NUMBER or kind is Kind.BOOLEAN:
        return expr

    if kind is Kind.SYMBOL:
        return env.lookup(expr)

    if kind is Kind.LIST:
        if not expr:
            return []
        head, *tail = expr
        form = SPECIAL_FORMS.get(head) if isinstance(head, Symbol) else None
        if form is not None:
            return form(tail, env, evaluate)
        proc = evaluate(head, env)
        args = [evaluate(arg, env) for arg in tail]
        return apply(proc, args, evaluate)

    # Closures and primitives are values, never syntax
    raise ScmUnknownForm(f"Unknown expression type: {expr!r}")
