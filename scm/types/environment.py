"""Runtime environment for scm.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. Closures hold a reference to the frame
they were created in, so frames are shared, never copied.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional

from scm import LispValue
from scm.types.errors import ScmTypeError, ScmUnboundSymbol
from scm.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, replacing any previous binding.

        Raises ScmTypeError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise ScmTypeError(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def set(self, name: Symbol, value: LispValue) -> None:
        """Update an existing binding for `name` in the environment chain.

        Raises ScmUnboundSymbol if the symbol is not found; set never creates
        a binding.
        """
        env = self.find(name)
        if env is None:
            raise ScmUnboundSymbol(f"Cannot set unbound symbol {name}")
        env.vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first."""
        env = self.find(name)
        if env is None:
            raise ScmUnboundSymbol(f"Cannot lookup unbound symbol {name}")
        return env.vars[name]

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def update(self, mapping: Mapping[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Whole chain, innermost frame first."""
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            first = True
            while env is not None:
                if not first:
                    buffer.write(" -> ")
                env._write_vars(buffer)
                first = False
                env = env.outer
            buffer.write(">")
            return buffer.getvalue()
