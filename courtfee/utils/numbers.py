"""Numeric helpers shared by the validator and the engine.

Python ints are unbounded, so they are always finite and are never
passed to ``math.isfinite`` (which converts to float and overflows).
"""

import math
from decimal import Decimal
from typing import Any


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def is_finite(value: Any) -> bool:
    if isinstance(value, int):
        return True
    if isinstance(value, Decimal):
        return value.is_finite()
    return math.isfinite(value)


def is_positive_infinity(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_infinite() and not value.is_signed()
    return isinstance(value, float) and value == math.inf


def to_float(value: Any) -> float:
    """float(value), saturating to +/-inf for ints too large for a float."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf
