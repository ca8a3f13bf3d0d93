"""Unit conversion helpers.

All internal storage is in millimeters. These helpers convert for display.
"""

from __future__ import annotations

import math
from enum import Enum

MM_PER_INCH = 25.4
MM_PER_FOOT = 304.8
SQMM_PER_SQFT = 92903.04


class DisplayUnit(str, Enum):
    """Units a dimension can be shown in."""

    MM = "mm"
    INCHES = "inches"
    FT_IN = "ft-in"


def mm_to_inches(mm: float) -> float:
    return mm / MM_PER_INCH


def mm_to_ft_in(mm: float) -> tuple[int, float]:
    """Split millimeters into whole feet and remaining inches."""
    total_inches = mm / MM_PER_INCH
    feet = math.floor(total_inches / 12)
    return feet, total_inches % 12


def sqmm_to_sqft(sqmm: float) -> float:
    return sqmm / SQMM_PER_SQFT


def running_feet(mm: float) -> float:
    """Convert a running length in millimeters to feet."""
    return mm / MM_PER_FOOT


def format_dimension(mm: float | None, unit: DisplayUnit = DisplayUnit.MM) -> str:
    """Format a millimeter value for display.

    Examples:
        >>> format_dimension(600)
        '600 mm'
        >>> format_dimension(609.6, DisplayUnit.INCHES)
        '24.00 in'
        >>> format_dimension(762, DisplayUnit.FT_IN)
        '2\\'-6.0"'
    """
    if mm is None:
        return "—"
    if unit == DisplayUnit.INCHES:
        return f"{mm_to_inches(mm):.2f} in"
    if unit == DisplayUnit.FT_IN:
        feet, inches = mm_to_ft_in(mm)
        return f"{feet}'-{inches:.1f}\""
    return f"{math.floor(mm + 0.5)} mm"


def format_area(sqmm: float, unit: DisplayUnit = DisplayUnit.MM) -> str:
    if unit == DisplayUnit.MM:
        return f"{sqmm / 1e6:.4f} m²"
    return f"{sqmm_to_sqft(sqmm):.2f} sqft"


__all__ = [
    "DisplayUnit",
    "format_area",
    "format_dimension",
    "mm_to_ft_in",
    "mm_to_inches",
    "running_feet",
    "sqmm_to_sqft",
]
