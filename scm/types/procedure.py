"""Procedure values: user closures and native primitives."""

from __future__ import annotations

from io import StringIO
from typing import Callable

from scm import SExpression, LispValue
from scm.types.environment import Environment
from scm.types.errors import ScmArityError
from scm.types.symbol import Symbol


class Closure:
    """A lambda value: formal parameters, a body, and the defining environment.

    `params` is either a list of Symbols bound positionally, or a single
    Symbol bound to the whole argument list.
    """

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[Symbol] | Symbol, body: SExpression, env: Environment):
        self.params = params
        self.body: SExpression = body
        # Shared, not copied: later define/set! in env is visible to the body
        self.env: Environment = env

    @property
    def variadic(self) -> bool:
        return isinstance(self.params, Symbol)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """Bind argument values to the parameters in a fresh child of `env`."""
        frame = Environment(outer=self.env)
        if self.variadic:
            frame.define(self.params, list(args))
            return frame
        if len(args) != len(self.params):
            raise ScmArityError(
                f"Expected {len(self.params)} arguments, got {len(args)}"
            )
        for name, value in zip(self.params, args):
            frame.define(name, value)
        return frame

    def __str__(self) -> str:
        from scm.printer import to_string

        with StringIO() as buffer:
            buffer.write("(lambda ")
            if self.variadic:
                buffer.write(str(self.params))
            else:
                buffer.write("(")
                buffer.write(" ".join(str(p) for p in self.params))
                buffer.write(")")
            buffer.write(" ")
            buffer.write(to_string(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)


class Primitive:
    """A built-in procedure, called directly on its evaluated argument list."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: Callable[[list[LispValue]], LispValue]):
        self.name = name
        self.fn = fn

    def __call__(self, args: list[LispValue]) -> LispValue:
        return self.fn(args)

    def __str__(self) -> str:
        return f"#<primitive {self.name}>"

    def __repr__(self) -> str:
        return str(self)
