"""
Lenient number parsing for third-party payload fields.

Deal and Steam APIs send most numbers as strings, and plugin settings
arrive as whatever the form produced. These helpers read the leading
number out of a value and return ``None`` when there is none, so the
callers can pick their own default.
"""

import math
import re
from typing import Any

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_int(value: Any) -> int | None:
    """
    Parse a leading base-10 integer.

    ``"42"`` → 42, ``" 7abc"`` → 7, ``"12.9"`` → 12, ``12.9`` → 12.
    Booleans, non-finite floats and values without a leading integer
    yield ``None``.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if not isinstance(value, str):
        return None

    match = _INT_PREFIX.match(value)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # Past the interpreter's int string conversion limit
        return None


def parse_float(value: Any) -> float | None:
    """
    Parse a leading decimal number.

    ``"50.5"`` → 50.5, ``"8abc"`` → 8.0, ``""`` → None.
    NaN never comes back; infinities pass through.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        match = _FLOAT_PREFIX.match(value)
        if not match:
            return None
        number = float(match.group(1))
    else:
        return None
    return None if math.isnan(number) else number


def number_or_zero(value: Any) -> float:
    """Settings threshold coercion: anything non-numeric counts as 0."""
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            number = float(text)
        except ValueError:
            return 0.0
    else:
        return 0.0
    return 0.0 if math.isnan(number) else number
