"""Latitude and longitude fields.

SeeYou writes angles as degrees and decimal minutes packed into one number,
followed by the hemisphere: ``5115.900N`` is 51 degrees 15.900 minutes north,
``00715.900W`` is 7 degrees 15.900 minutes west.
"""

import re

from glidepoint.waypoints.seeyou.errors import FieldFormatError

_LEADING_INT = re.compile(r"\s*[+-]?\d+")
_THOUSANDTHS = re.compile(r"\d{3}(?!\d)")

_NEGATIVE_HEMISPHERES = frozenset("WwSs")


def parse_angle(token: str, is_latitude: bool) -> float:
    """Parse a ``DDDMM.mmmH`` angle into signed decimal degrees.

    Degrees above 90 (latitude) or 180 (longitude) are clamped rather than
    rejected. ``W`` and ``S`` negate the value; any other hemisphere letter,
    or none at all, leaves it positive.

    Args:
        token: Field text
        is_latitude: Selects the degree clamp (90 or 180)

    Returns:
        Angle in decimal degrees

    Raises:
        FieldFormatError: If the integer part is missing or negative, the
            minutes are 60 or more, the decimal point is missing, or the
            fraction is not exactly three digits

    Examples:
        >>> round(parse_angle("5115.900N", True), 3)
        51.265
        >>> round(parse_angle("00715.900W", False), 3)
        -7.265
    """
    kind = "latitude" if is_latitude else "longitude"

    match = _LEADING_INT.match(token)
    if not match:
        raise FieldFormatError(kind, token, "no degrees and minutes")

    packed = int(match.group())
    if packed < 0:
        raise FieldFormatError(kind, token, "negative value")

    degrees, minutes = divmod(packed, 100)
    if minutes >= 60:
        raise FieldFormatError(kind, token, f"{minutes} minutes")

    degrees = min(degrees, 90 if is_latitude else 180)

    pos = match.end()
    if token[pos:pos + 1] != ".":
        raise FieldFormatError(kind, token, "missing decimal point")
    pos += 1

    fraction = _THOUSANDTHS.match(token, pos)
    if not fraction:
        raise FieldFormatError(kind, token, "fraction must have three digits")

    value = degrees + minutes / 60 + int(fraction.group()) / 60000

    if token[fraction.end():fraction.end() + 1] in _NEGATIVE_HEMISPHERES:
        value = -value

    return value
