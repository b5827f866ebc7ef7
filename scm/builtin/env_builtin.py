"""Built-in procedures for the scm runtime environment.

Defines arithmetic, comparison, equality and list construction/access, the
immutable primitive table, and the bootstrap of the global environment.
"""
from __future__ import annotations

import logging
import math
from functools import reduce
from types import MappingProxyType
from typing import Callable, Mapping

from scm import LispValue
from scm.types.environment import Environment
from scm.types.errors import ScmArityError, ScmTypeError
from scm.types.kinds import is_list, is_number
from scm.types.procedure import Closure, Primitive
from scm.types.symbol import Symbol
from scm.reader.parser import read

logger = logging.getLogger(__name__)

# Evaluated against the global environment at startup: `list` needs nothing
# beyond variadic binding.
LIST_DEFINITION = "(lambda z z)"


def _expect_arity(name: str, args: list[LispValue], n: int) -> None:
    if len(args) != n:
        raise ScmArityError(f"{name} requires exactly {n} argument(s), got {len(args)}")


def _expect_numbers(name: str, args: list[LispValue]) -> None:
    for a in args:
        if not is_number(a):
            raise ScmTypeError(f"All arguments to {name} must be numbers, got {a!r}")


# -------------------------------
# Arithmetic
# -------------------------------
def _reducer(name: str, op: Callable[[float, float], float]) -> Callable[[list[LispValue]], float]:
    """Left fold over the arguments, seeded with the first one."""

    def fold(args: list[LispValue]) -> float:
        if not args:
            raise ScmArityError(f"{name} requires at least 1 argument")
        _expect_numbers(name, args)
        return reduce(op, args)

    fold.__name__ = f"fold_{name}"
    return fold


def _div(a: float, b: float) -> float:
    # IEEE semantics, no ZeroDivisionError
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return float("nan")
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


add = _reducer("+", lambda a, b: a + b)
sub = _reducer("-", lambda a, b: a - b)
mul = _reducer("*", lambda a, b: a * b)
div = _reducer("/", _div)


# -------------------------------
# Comparison and equality
# -------------------------------
def lte(args: list[LispValue]) -> bool:
    _expect_arity("<=", args, 2)
    _expect_numbers("<=", args)
    return args[0] <= args[1]


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Deep equality: element-wise for lists, by value for atoms, by identity for procedures.

    There is no identity shortcut: a NaN is never equal to itself, even when
    both operands are the same object.
    """
    if type(a) is not type(b):
        # bool/float never compare equal even though True == 1.0
        return False
    if isinstance(a, list):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, (Closure, Primitive)):
        return a is b
    return a == b


def equal(args: list[LispValue]) -> bool:
    _expect_arity("equal?", args, 2)
    return is_equal(args[0], args[1])


# -------------------------------
# List operations
# -------------------------------
def cons(args: list[LispValue]) -> list[LispValue]:
    """Pair two values into a new two-element list. There are no dotted pairs."""
    _expect_arity("cons", args, 2)
    return [args[0], args[1]]


def _expect_pair(name: str, args: list[LispValue]) -> list[LispValue]:
    _expect_arity(name, args, 1)
    lst = args[0]
    if not is_list(lst):
        raise ScmTypeError(f"{name} requires a list, got {lst!r}")
    if not lst:
        raise ScmTypeError(f"{name} of empty list")
    return lst


def car(args: list[LispValue]) -> LispValue:
    return _expect_pair("car", args)[0]


def cdr(args: list[LispValue]) -> list[LispValue]:
    """Remaining elements as a new list: (cdr (cons 1 2)) is (2)."""
    return _expect_pair("cdr", args)[1:]


PRIMITIVES: Mapping[Symbol, LispValue] = MappingProxyType({
    Symbol("#t"): True,
    Symbol("#f"): False,
    Symbol("+"): Primitive("+", add),
    Symbol("-"): Primitive("-", sub),
    Symbol("*"): Primitive("*", mul),
    Symbol("/"): Primitive("/", div),
    Symbol("<="): Primitive("<=", lte),
    Symbol("equal?"): Primitive("equal?", equal),
    Symbol("cons"): Primitive("cons", cons),
    Symbol("car"): Primitive("car", car),
    Symbol("cdr"): Primitive("cdr", cdr),
})


def register(env: Environment) -> None:
    """Install the primitive table and the self-hosted `list` into `env`."""
    from scm.evaluation.evaluator import evaluate

    env.update(PRIMITIVES)
    env.define(Symbol("list"), evaluate(read(LIST_DEFINITION), env))
    logger.debug("registered %d builtins", len(env.vars))


def standard_env() -> Environment:
    """A fresh global environment with every builtin bound."""
    env = Environment()
    register(env)
    return env
