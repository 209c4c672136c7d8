"""Waypoint model and storage.

Typical usage:
    from glidepoint.waypoints import WaypointDatabase

    db = WaypointDatabase()
    landables = db.landables()
"""

from glidepoint.waypoints.database import WaypointDatabase, WaypointSink
from glidepoint.waypoints.waypoint import (
    RUNWAY_DIRECTION_UNKNOWN,
    GeoPoint,
    Waypoint,
    WaypointFlags,
)

__all__ = [
    "GeoPoint",
    "RUNWAY_DIRECTION_UNKNOWN",
    "Waypoint",
    "WaypointDatabase",
    "WaypointFlags",
    "WaypointSink",
]
