from __future__ import annotations
import logging
import os
from dataclasses import dataclass, field


_DEFAULT_PROMPT = "> "
_DEFAULT_MARKER = "==>"
_DEFAULT_RECURSION_LIMIT = 10000
MIN_RECURSION_LIMIT = 100


def str_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    return default if raw is None else raw


def int_from_env(var: str, default: int, minimum: int | None = None) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    if minimum is not None and value < minimum:
        return default
    return value


def log_level_from_env(var: str, default: int = logging.WARNING) -> int:
    raw = os.environ.get(var)
    if raw:
        level = getattr(logging, raw.strip().upper(), None)
        if isinstance(level, int):
            return level
    return default


@dataclass
class Settings:
    """Front-end settings, read from SCM_* environment variables."""

    prompt: str = field(default_factory=lambda: str_from_env("SCM_PROMPT", _DEFAULT_PROMPT))
    marker: str = field(default_factory=lambda: str_from_env("SCM_RESULT_MARKER", _DEFAULT_MARKER))
    recursion_limit: int = field(
        default_factory=lambda: int_from_env("SCM_RECURSION_LIMIT", _DEFAULT_RECURSION_LIMIT, MIN_RECURSION_LIMIT)
    )
    log_level: int = field(default_factory=lambda: log_level_from_env("SCM_LOG_LEVEL"))
