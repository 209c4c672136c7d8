"""Waypoint style codes.

The style column tells what kind of place a waypoint is. Only the codes
relevant for landing are interpreted; every waypoint is a turn point.
"""

import re
from enum import IntEnum

from glidepoint.waypoints.seeyou.errors import FieldFormatError
from glidepoint.waypoints.waypoint import WaypointFlags

_LEADING_INT = re.compile(r"\s*[+-]?\d+")


class WaypointStyle(IntEnum):
    """SeeYou style codes with a landing meaning."""

    NORMAL = 1
    AIRFIELD_GRASS = 2
    OUTLANDING = 3
    GLIDER_SITE = 4
    AIRFIELD_SOLID = 5


AIRPORT_STYLES = frozenset(
    {WaypointStyle.AIRFIELD_GRASS, WaypointStyle.GLIDER_SITE, WaypointStyle.AIRFIELD_SOLID}
)


def parse_style_code(token: str) -> int:
    """Parse the leading integer of a style field.

    Raises:
        FieldFormatError: If the field does not start with an integer
    """
    match = _LEADING_INT.match(token)
    if not match:
        raise FieldFormatError("style", token, "no style code")
    return int(match.group())


def flags_for_style(code: int) -> WaypointFlags:
    """Map a style code to waypoint flags."""
    return WaypointFlags(
        turn_point=True,
        land_point=code == WaypointStyle.OUTLANDING,
        airport=code in AIRPORT_STYLES,
    )


def classify_style(token: str) -> WaypointFlags:
    """Parse a style field into waypoint flags.

    Code 3 marks an outlanding field, codes 2, 4 and 5 an airport. Unknown
    codes only get the turn point flag.

    Raises:
        FieldFormatError: If the field does not start with an integer
    """
    return flags_for_style(parse_style_code(token))
