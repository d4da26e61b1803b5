"""Numeric guards shared by the metric calculators."""

import math


def finite_or_zero(value: float) -> float:
    """Replace NaN and +/-Infinity with 0.0."""
    return value if math.isfinite(value) else 0.0


def round_half_away(value: float, places: int = 2) -> float:
    """Round half away from zero (2.5 -> 3, -2.5 -> -3).

    Python's ``round`` uses banker's rounding; reported metrics use the
    conventional rule so that ties do not depend on parity.
    """
    factor = 10**places
    magnitude = math.floor(abs(value) * factor + 0.5) / factor
    return -magnitude if value < 0 else magnitude


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
