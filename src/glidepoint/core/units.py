"""Unit conversion factors.

System units are meters for altitudes and distances. Waypoint files may carry
feet, statute miles or nautical miles; the factors below convert them.

Typical usage example:
    from glidepoint.core.units import Unit, to_sys_unit

    meters = to_sys_unit(1500.0, Unit.FEET)  # 457.2
"""

from enum import Enum


class Unit(Enum):
    """Length units found in waypoint files."""

    METERS = "m"
    FEET = "ft"
    STATUTE_MILES = "ml"
    NAUTICAL_MILES = "nm"


# Multiplier from the unit to meters
_TO_METERS: dict[Unit, float] = {
    Unit.METERS: 1.0,
    Unit.FEET: 0.3048,
    Unit.STATUTE_MILES: 1609.344,
    Unit.NAUTICAL_MILES: 1852.0,
}


def conversion_factor(unit: Unit) -> float:
    """Return the multiplier that converts ``unit`` into system units."""
    return _TO_METERS[unit]


def to_sys_unit(value: float, unit: Unit) -> float:
    """Convert a value expressed in ``unit`` into system units (meters)."""
    return value * _TO_METERS[unit]


def from_sys_unit(value: float, unit: Unit) -> float:
    """Convert a value in system units (meters) into ``unit``."""
    return value / _TO_METERS[unit]
