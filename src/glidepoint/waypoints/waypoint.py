"""Waypoint definition.

This module provides the Waypoint class produced by the file importers,
together with its geographic position and landing classification.
"""

import math
from dataclasses import dataclass, field

RUNWAY_DIRECTION_UNKNOWN = -1


@dataclass(frozen=True)
class GeoPoint:
    """Geographic position in decimal degrees.

    Attributes:
        latitude: Latitude in degrees, positive north
        longitude: Longitude in degrees, positive east
    """

    latitude: float
    longitude: float

    def normalized(self) -> "GeoPoint":
        """Return a copy with longitude wrapped into (-180, 180].

        Latitude is clamped into [-90, 90].
        """
        longitude = math.fmod(self.longitude, 360.0)
        if longitude > 180.0:
            longitude -= 360.0
        elif longitude <= -180.0:
            longitude += 360.0

        latitude = max(-90.0, min(90.0, self.latitude))
        return GeoPoint(latitude, longitude)

    def distance_km(self, other: "GeoPoint") -> float:
        """Great circle distance to another point (Haversine formula)."""
        lat1, lon1 = math.radians(self.latitude), math.radians(self.longitude)
        lat2, lon2 = math.radians(other.latitude), math.radians(other.longitude)

        dlat = lat2 - lat1
        dlon = lon2 - lon1
        a = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
        c = 2 * math.asin(min(1.0, math.sqrt(a)))

        return c * 6371.0  # Earth radius in km

    def __str__(self) -> str:
        ns = "N" if self.latitude >= 0 else "S"
        ew = "E" if self.longitude >= 0 else "W"
        return f"{abs(self.latitude):.5f}{ns} {abs(self.longitude):.5f}{ew}"


@dataclass
class WaypointFlags:
    """Usage flags of a waypoint.

    Attributes:
        turn_point: Usable as a task turn point
        land_point: Outlanding field
        airport: Airfield with a runway
    """

    turn_point: bool = False
    land_point: bool = False
    airport: bool = False

    @property
    def is_landable(self) -> bool:
        """Whether a glider can land there."""
        return self.land_point or self.airport


@dataclass
class Waypoint:
    """Waypoint read from a waypoint file.

    Attributes:
        name: Waypoint name, never empty
        location: Normalized geographic position
        altitude: Elevation in meters, None when unknown
        flags: Turn point and landing classification
        runway_length: Main runway length in meters, 0 if unknown
        runway_direction: Runway direction in degrees (0-359),
            RUNWAY_DIRECTION_UNKNOWN if unknown
        comment: Free text assembled from several source fields
        file_num: Tag of the file the waypoint was read from
        code: Short code (e.g. ICAO identifier)
        country: Country code
        frequency: Radio frequency text
        style: Style code as found in the file, None if missing
        id: Identifier assigned by the waypoint database

    Examples:
        >>> waypoint = Waypoint(
        ...     name="Alpha",
        ...     location=GeoPoint(51.265, -7.265),
        ...     altitude=458.0,
        ...     flags=WaypointFlags(turn_point=True, airport=True),
        ... )
    """

    name: str
    location: GeoPoint
    altitude: float | None = None
    flags: WaypointFlags = field(default_factory=WaypointFlags)
    runway_length: float = 0.0
    runway_direction: int = RUNWAY_DIRECTION_UNKNOWN
    comment: str = ""
    file_num: int = 0
    code: str = ""
    country: str = ""
    frequency: str = ""
    style: int | None = None
    id: int | None = None

    @property
    def is_landable(self) -> bool:
        """Whether the waypoint is an airport or outlanding field."""
        return self.flags.is_landable

    @property
    def has_altitude(self) -> bool:
        """Whether the elevation is known."""
        return self.altitude is not None

    def __str__(self) -> str:
        """Return string representation of waypoint.

        Returns:
            Name, position and elevation if known
        """
        if self.altitude is None:
            return f"{self.name} ({self.location}, elevation unknown)"
        return f"{self.name} ({self.location}, {self.altitude:.0f}m)"
