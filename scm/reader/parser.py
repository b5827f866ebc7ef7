"""
  Reader: tokenizer and parser

Emits Python values directly, no Cons cells:

    - lists   -> Python list ("()" -> [])
    - numbers -> float (anything float() accepts, except spellings with
      digit-group underscores such as 1_000, which stay symbols)
    - other atoms -> Symbol, including #t and #f, which only become booleans
      through their global bindings

The only structural delimiters are parentheses. There are no strings,
comments or quote shorthand.
"""

from __future__ import annotations

from collections import deque
from typing import Iterator

from scm import SExpression
from scm.types.errors import ScmSyntaxError
from scm.types.symbol import Symbol

LPAREN = "("
RPAREN = ")"


def tokenize(source: str) -> deque[str]:
    """Split `source` on whitespace, with parentheses as single-character tokens."""
    return deque(source.replace(LPAREN, " ( ").replace(RPAREN, " ) ").split())


def atom(token: str) -> SExpression:
    if "_" in token:
        return Symbol(token)
    try:
        return float(token)
    except ValueError:
        return Symbol(token)


def parse(tokens: deque[str]) -> SExpression:
    """Parse one expression, consuming its tokens from the front of `tokens`."""
    if not tokens:
        raise ScmSyntaxError("unexpected end of input")
    token = tokens.popleft()
    if token == LPAREN:
        items = []
        while True:
            if not tokens:
                raise ScmSyntaxError("unexpected end of input")
            if tokens[0] == RPAREN:
                tokens.popleft()
                return items
            items.append(parse(tokens))
    if token == RPAREN:
        raise ScmSyntaxError("unexpected close paren")
    return atom(token)


def read(source: str) -> SExpression:
    """Read the first expression in `source`; trailing text is ignored."""
    return parse(tokenize(source))


def read_all(source: str) -> Iterator[SExpression]:
    """Yield every expression in `source`, in order."""
    tokens = tokenize(source)
    while tokens:
        yield parse(tokens)
