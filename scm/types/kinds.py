"""Classification of runtime values into the closed set of value kinds.

    Number    -> float
    Symbol    -> Symbol
    Boolean   -> bool
    List      -> list
    Closure   -> Closure
    Primitive -> Primitive

bool is checked before float because `isinstance(True, int)` holds in Python
and a Boolean must never pass for a Number.
"""

from __future__ import annotations

from enum import Enum

from scm import LispValue
from scm.types.errors import ScmUnknownForm
from scm.types.procedure import Closure, Primitive
from scm.types.symbol import Symbol


class Kind(Enum):
    NUMBER = "number"
    SYMBOL = "symbol"
    BOOLEAN = "boolean"
    LIST = "list"
    CLOSURE = "closure"
    PRIMITIVE = "primitive"


def is_boolean(value: LispValue) -> bool:
    return isinstance(value, bool)


def is_number(value: LispValue) -> bool:
    return isinstance(value, float)


def is_list(value: LispValue) -> bool:
    return isinstance(value, list)


def kind_of(value: LispValue) -> Kind:
    """Return the Kind of `value`; anything outside the six kinds is an ScmUnknownForm."""
    if isinstance(value, bool):
        return Kind.BOOLEAN
    if isinstance(value, float):
        return Kind.NUMBER
    if isinstance(value, Symbol):
        return Kind.SYMBOL
    if isinstance(value, list):
        return Kind.LIST
    if isinstance(value, Closure):
        return Kind.CLOSURE
    if isinstance(value, Primitive):
        return Kind.PRIMITIVE
    raise ScmUnknownForm(f"Unknown value type: {type(value).__name__} {value!r}")
