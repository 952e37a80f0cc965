"""Rounding and fractional-part helpers shared by the algorithms."""

import math


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    Python's built-in ``round`` uses banker's rounding (``round(2.5) == 2``),
    which would shift pixels on exact half-way samples.

    Examples:
        >>> round_half_away(2.5)
        3
        >>> round_half_away(-2.5)
        -3
        >>> round_half_away(0.49999999999999994)
        0
    """
    floor = math.floor(value)
    diff = value - floor
    if diff > 0.5 or (diff == 0.5 and value > 0):
        return floor + 1
    return floor


def ipart(value: float) -> int:
    """Integer part (floor)."""
    return math.floor(value)


def fpart(value: float) -> float:
    """Fractional part, always in [0, 1)."""
    return value - math.floor(value)


def rfpart(value: float) -> float:
    """One minus the fractional part."""
    return 1.0 - fpart(value)


def sign_step(delta: int) -> int:
    """Unit step towards a delta; zero counts as positive."""
    return 1 if delta >= 0 else -1
