"""Line-oriented read-eval-print loop for scm.

Reads one line at a time, evaluates every form on it against a single
persistent interpreter and prints each value after the result marker. An
error abandons the rest of the line; the session continues.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, TextIO

from scm.config import MIN_RECURSION_LIMIT, Settings
from scm.interpreter import Interpreter
from scm.printer import to_string
from scm.types.errors import ScmError, ScmRecursionError

logger = logging.getLogger(__name__)


def render_line(interp: Interpreter, line: str, settings: Settings) -> list[str]:
    """Evaluate `line` and format every result; nothing is printed if any step fails."""
    try:
        return [f"{settings.marker} {to_string(r)}" for r in interp.eval_forms(line)]
    except RecursionError as ex:
        # printing a deeply nested value can exhaust the stack too
        raise ScmRecursionError("maximum recursion depth exceeded") from ex


def eval_line(
    interp: Interpreter, line: str, out: TextIO, settings: Settings
) -> bool:
    """Evaluate one line and print its results; return False if it raised an ScmError."""
    try:
        rendered = render_line(interp, line, settings)
    except ScmError as ex:
        logger.warning("%s: %s", type(ex).__name__, ex)
        print(f"error: {ex}", file=out)
        return False
    for text in rendered:
        print(text, file=out)
    return True


def repl(
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
    interp: Optional[Interpreter] = None,
    settings: Optional[Settings] = None,
) -> int:
    settings = settings or Settings()
    interp = interp or Interpreter()
    while True:
        stdout.write(settings.prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            print("Bye.", file=stdout)
            return 0
        eval_line(interp, line, stdout, settings)


def main(argv: Optional[list[str]] = None) -> int:
    settings = Settings()
    parser = argparse.ArgumentParser(
        prog="scm", description="A minimal Scheme-like interpreter"
    )
    parser.add_argument("--prompt", default=settings.prompt, help="Input prompt")
    parser.add_argument("--marker", default=settings.marker, help="Prefix printed before each result")
    parser.add_argument(
        "--recursion-limit",
        type=int,
        default=settings.recursion_limit,
        help="Host recursion limit; bounds the depth of nested calls",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ...); defaults to SCM_LOG_LEVEL",
    )
    parser.add_argument(
        "-e", "--eval", dest="code", default=None, help="Evaluate CODE, print the results and exit"
    )
    args = parser.parse_args(argv)

    settings.prompt = args.prompt
    settings.marker = args.marker
    if args.recursion_limit < MIN_RECURSION_LIMIT:
        parser.error(f"--recursion-limit must be at least {MIN_RECURSION_LIMIT}")
    settings.recursion_limit = args.recursion_limit
    if args.log_level:
        level = getattr(logging, args.log_level.upper(), None)
        if not isinstance(level, int):
            parser.error(f"unknown log level: {args.log_level}")
        settings.log_level = level

    logging.basicConfig(level=settings.log_level, format="%(message)s", stream=sys.stderr)
    sys.setrecursionlimit(settings.recursion_limit)

    interp = Interpreter()
    if args.code is not None:
        return 0 if eval_line(interp, args.code, sys.stdout, settings) else 1
    return repl(sys.stdin, sys.stdout, interp, settings)
