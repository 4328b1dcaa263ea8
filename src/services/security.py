"""Security status display rounding.

EVE shows solar system security with one decimal, but not by plain
rounding: the raw value is truncated to two decimals first, then to one,
and only rounded away from zero when the dropped hundredths reach 0.05.
Tiny positive values always display as 0.1 so that low-sec systems are
never shown as null-sec.

The pipeline stores raw values; these helpers are for consumers that
need the in-game number.
"""

from __future__ import annotations

import math

# Positive raw values below this display as 0.1
NEAR_ZERO_THRESHOLD = 0.05


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def truncate_to_two_digits(value: float) -> float:
    """Truncate toward zero to two decimal places (0.9459 -> 0.94)."""
    return math.trunc(value * 100) / 100


def round_security(value: float) -> float:
    """Round to one decimal place, halves away from zero (0.45 -> 0.5)."""
    return _round_half_away(value * 10) / 10


def get_true_security(security: float) -> float:
    """Return the security status as displayed in game.

    Args:
        security: Raw security status from the SDE.

    Returns:
        Display value with one decimal place.

    Examples:
        >>> get_true_security(0.047)
        0.1
        >>> get_true_security(0.9459)
        0.9
        >>> get_true_security(-0.45)
        -0.5
    """
    if 0 < security < NEAR_ZERO_THRESHOLD:
        return math.ceil(security * 10) / 10

    two_digits = truncate_to_two_digits(security)
    one_digit = math.trunc(two_digits * 10) / 10
    remainder = abs(_round_half_away((two_digits - one_digit) * 100)) / 100

    if remainder < NEAR_ZERO_THRESHOLD:
        return one_digit
    if security >= 0:
        return math.ceil(two_digits * 10) / 10
    return math.floor(two_digits * 10) / 10
