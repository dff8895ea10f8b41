"""Length unit conversion and rounding helpers.

All engine arithmetic happens in millimeters. Lengths are converted in on the
way into the packer and back out on the way to the caller.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

MM_PER_FOOT = 304.8


class Unit(str, Enum):
    """Length units accepted for frames and profiles."""

    MILLIMETER = "mm"
    FOOT = "ft"


def to_millimeters(value: float, unit: Unit) -> float:
    """Convert a length in ``unit`` to millimeters."""
    if unit == Unit.FOOT:
        return value * MM_PER_FOOT
    return value


def from_millimeters(value: float, unit: Unit) -> float:
    """Convert a length in millimeters to ``unit``."""
    if unit == Unit.FOOT:
        return value / MM_PER_FOOT
    return value


def convert(value: float, from_unit: Unit, to_unit: Unit) -> float:
    """Convert a length between any two units."""
    if from_unit == to_unit:
        return value
    return from_millimeters(to_millimeters(value, from_unit), to_unit)


def round_half_away(value: float, places: int) -> float:
    """Round to ``places`` decimals, halves away from zero.

    The float is quantized from its shortest decimal representation, so
    ``round_half_away(2.675, 2)`` gives 2.68 where ``round()`` gives 2.67.

    Examples:
        >>> round_half_away(1590.9995, 3)
        1591.0
        >>> round_half_away(-0.25, 1)
        -0.3
    """
    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded)
