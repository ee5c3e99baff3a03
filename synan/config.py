from __future__ import annotations
import os

# Defaults
_DEFAULT_RECURSION_LIMIT = 10000


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    value = int(raw.strip())
    if value <= 0:
        raise ValueError(f"{var} must be a positive integer, got {raw!r}")
    return value


def get_recursion_limit() -> int:
    """Python recursion limit installed while a top-level program runs."""
    return int_from_env('SYNAN_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT)
