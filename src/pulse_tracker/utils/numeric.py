"""Numeric helpers shared by the scoring engines."""

import math


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Constrain value to the closed range [minimum, maximum]."""
    return max(minimum, min(maximum, value))


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going up, as displayed scores expect.

    The builtin round() uses banker's rounding, so 0.5 would become 0 and
    2.5 would become 2.

    Args:
        value: Value to round
        digits: Number of decimal places to keep

    Returns:
        Rounded value
    """
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor
