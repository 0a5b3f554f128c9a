# File: utils/math_utils.py
"""Math and parsing utilities for Otetsudai.

Pure Python functions with ZERO Home Assistant dependencies.

Functions:
    - parse_amount: Lenient integer parsing for reward amounts
    - round_value: Consistent float rounding
    - calculate_percentage: Percentage of a target with division-by-zero guard
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any

# Module-level logger (no HA dependency)
_LOGGER = logging.getLogger(__name__)

# Default float precision for percentages
DATA_FLOAT_PRECISION = 2

# Optional sign followed by ASCII digits at the start of the string
_LEADING_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_amount(value: Any) -> int | None:
    """Parse a reward amount into an integer.

    Strings are read the way a form field is: surrounding whitespace is
    ignored and the leading integer is used, so "300yen" → 300 and
    "3.7" → 3. Floats are truncated toward zero.

    Args:
        value: Raw amount from a service call or storage

    Returns:
        The integer amount, or None if the value does not start with an integer.

    Examples:
        parse_amount(500) → 500
        parse_amount(" -20 ") → -20
        parse_amount(12.9) → 12
        parse_amount("abc") → None
        parse_amount(True) → None
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT_RE.match(value.strip())
        if match is None:
            return None
        return int(match.group())
    return None


def round_value(value: float, precision: int = DATA_FLOAT_PRECISION) -> float:
    """Round a float to the configured precision."""
    return round(value, precision)


def calculate_percentage(
    current: float,
    target: float,
    precision: int = DATA_FLOAT_PRECISION,
) -> float:
    """Calculate a percentage with proper rounding.

    Returns:
        Percentage with proper rounding, or 0.0 if target is not positive

    Examples:
        calculate_percentage(50, 100) → 50.0
        calculate_percentage(1, 3) → 33.33
        calculate_percentage(5, 0) → 0.0
    """
    if target <= 0:
        return 0.0
    return round_value((current / target) * 100, precision)
