"""Rounding helpers.

Schedules round half away from zero for positive values (2.5 -> 3), the
convention shop-floor documents use. Python's built-in ``round`` rounds
half to even and is not used for output values.
"""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up."""
    return math.floor(value + 0.5)


def round_2dp(value: float) -> float:
    """Round to two decimal places, halves rounding up."""
    return math.floor(value * 100 + 0.5) / 100


def clamp_non_negative(value: float) -> float:
    """Clamp a computed length to zero rather than letting it go negative."""
    return max(value, 0.0)


__all__ = ["clamp_non_negative", "round_2dp", "round_half_up"]
