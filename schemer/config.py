from __future__ import annotations
import os
from typing import Optional


_DEFAULT_NUMBER_BITS = 64


def int_from_env(var: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def get_number_bits() -> int:
    return int_from_env('SCHEMER_NUMBER_BITS', _DEFAULT_NUMBER_BITS)


def get_max_number() -> int:
    """Largest value a Number may hold: numbers are unsigned and fixed width."""
    return (1 << get_number_bits()) - 1


def get_recursion_limit() -> Optional[int]:
    # None means leave the host interpreter's limit alone
    return int_from_env('SCHEMER_RECURSION_LIMIT', None)
