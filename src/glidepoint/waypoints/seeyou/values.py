"""Numeric values with an optional unit suffix.

Elevations look like ``458.0m`` or ``1500F``; distances like ``1200m``,
``2NM`` or ``1.5ml``. Values without a recognized suffix are meters.
"""

import re
from enum import Enum

from glidepoint.core.units import Unit, to_sys_unit
from glidepoint.waypoints.seeyou.errors import FieldFormatError

# Leading decimal number, same prefix strtod() would consume
_NUMBER = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class ValueDomain(Enum):
    """What a value measures; decides which suffixes are recognized."""

    ELEVATION = "elevation"
    DISTANCE = "distance"


def _split_number(token: str, kind: str) -> tuple[float, str]:
    match = _NUMBER.match(token)
    if not match:
        raise FieldFormatError(kind, token, "no numeric value")
    return float(match.group()), token[match.end():]


def _suffix_unit(suffix: str, domain: ValueDomain) -> Unit:
    if domain is ValueDomain.ELEVATION:
        if suffix[:1] in ("F", "f"):
            return Unit.FEET
        return Unit.METERS

    lowered = suffix.lower()
    if lowered == "ml":
        return Unit.STATUTE_MILES
    if lowered == "nm":
        return Unit.NAUTICAL_MILES
    return Unit.METERS


def parse_unit_value(token: str, domain: ValueDomain) -> float:
    """Parse a number with optional unit suffix into meters.

    Args:
        token: Field text, e.g. "1500F" or "2NM"
        domain: ELEVATION recognizes F/f (feet); DISTANCE recognizes
            ml (statute miles) and nm (nautical miles), case-insensitive

    Returns:
        Value in meters

    Raises:
        FieldFormatError: If the token does not start with a number

    Examples:
        >>> round(parse_unit_value("1500F", ValueDomain.ELEVATION), 1)
        457.2
        >>> parse_unit_value("2NM", ValueDomain.DISTANCE)
        3704.0
    """
    value, suffix = _split_number(token, domain.value)
    return to_sys_unit(value, _suffix_unit(suffix, domain))


def parse_altitude(token: str) -> float:
    """Parse an elevation field into meters."""
    return parse_unit_value(token, ValueDomain.ELEVATION)


def parse_distance(token: str) -> float:
    """Parse a distance field (runway length) into meters."""
    return parse_unit_value(token, ValueDomain.DISTANCE)
