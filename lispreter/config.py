from __future__ import annotations
import os


_TRUE_VALUES = ("1", "true", "yes", "on")

# Defaults
_DEFAULT_RECURSION_LIMIT = 10000


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUE_VALUES


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def get_debug_default() -> bool:
    return flag_from_env('LISPRETER_DEBUG', False)


def get_recursion_limit() -> int:
    # deep user recursion maps onto Python recursion in the evaluator
    return max(int_from_env('LISPRETER_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT), 1000)
