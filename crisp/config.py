from __future__ import annotations
import logging
import os


_DEFAULT_RECURSION_LIMIT = 5000
_DEFAULT_PROMPT = "> "
_DEFAULT_CONTINUATION_PROMPT = "... "
_DEFAULT_LOG_LEVEL = "WARNING"


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{var} must be positive, got {value}")
    return value


def get_recursion_limit() -> int:
    return int_from_env('CRISP_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT)


def get_prompt() -> str:
    return os.environ.get('CRISP_PROMPT', _DEFAULT_PROMPT)


def get_continuation_prompt() -> str:
    return os.environ.get('CRISP_CONTINUATION_PROMPT', _DEFAULT_CONTINUATION_PROMPT)


def get_log_level() -> int:
    name = os.environ.get('CRISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns a "Level X" string for unknown names
    return level if isinstance(level, int) else logging.WARNING
