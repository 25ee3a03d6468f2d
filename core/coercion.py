"""Lossy coercion helpers used by the typed option accessors.

Every function here is total: any input produces a value of the promised
type. Strings are read the way form data is usually read, by taking the
leading numeric prefix and ignoring the rest ("42abc" -> 42).
"""

import math
import re
from typing import Any

from .types import Number

TRUTHY_VALUES = frozenset({"yes", "true", "1"})

_NUMERIC_PREFIX = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


def _as_text(value: Any) -> str:
    """Render a raw option value as text for string-based checks."""
    if isinstance(value, bool):
        return "1" if value else ""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    try:
        return str(value)
    except ValueError:
        # int too long for decimal conversion
        return ""


def parse_number(value: Any) -> Number:
    """Parse a raw value into an int or float, preserving which one it is.

    Containers count as 1 when non-empty and 0 otherwise. Anything without
    a numeric prefix parses as 0.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, (str, bytes)):
        match = _NUMERIC_PREFIX.match(_as_text(value))
        if not match:
            return 0
        text = match.group(1)
        if any(marker in text for marker in (".", "e", "E")):
            return float(text)
        try:
            return int(text)
        except ValueError:
            # Digit string over the int conversion limit
            return float(text)
    if isinstance(value, (list, tuple, dict)):
        return 1 if value else 0
    return 0


def to_bool(value: Any) -> bool:
    """Case-insensitive match against yes/true/1."""
    return _as_text(value).lower() in TRUTHY_VALUES


def to_int(value: Any) -> int:
    """Lossy integer parse; floats truncate toward zero, non-numeric is 0."""
    number = parse_number(value)
    if isinstance(number, float):
        if not math.isfinite(number):
            return 0
        return int(number)
    return number


def to_absint(value: Any) -> int:
    """Non-negative integer: integer parse followed by absolute value."""
    return abs(to_int(value))


def to_abs(value: Any) -> Number:
    """Absolute value of the parsed number, int or float as parsed."""
    return abs(parse_number(value))


def to_float(value: Any) -> float:
    """Lossy float parse, non-numeric is 0.0. Ints beyond float range become +-inf."""
    number = parse_number(value)
    try:
        return float(number)
    except OverflowError:
        return math.inf if number > 0 else -math.inf
