"""Text rendering of scm values, as printed by the read loop."""

from __future__ import annotations

import math

from scm import LispValue


def format_number(x: float) -> str:
    if math.isfinite(x) and x.is_integer():
        return str(int(x))
    return repr(x)


def to_string(value: LispValue) -> str:
    """Render `value` as text: lists parenthesized and space-separated, atoms as written."""
    if isinstance(value, bool):
        return "#t" if value else "#f"
    if isinstance(value, float):
        return format_number(value)
    if isinstance(value, list):
        return "(" + " ".join(to_string(v) for v in value) + ")"
    return str(value)
