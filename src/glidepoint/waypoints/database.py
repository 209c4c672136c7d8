"""Waypoint database.

Collects the waypoints produced by the file importers, assigns them an
identity and answers simple lookups.

Typical usage:
    db = WaypointDatabase()
    reader.read_file("alps.cup", db)

    home = db.find_by_name("Alpha")
    nearby = db.find_near(home.location, radius_km=50)
"""

import logging
from typing import Protocol

from glidepoint.waypoints.waypoint import GeoPoint, Waypoint

logger = logging.getLogger(__name__)


class WaypointSink(Protocol):
    """Anything that accepts finished waypoints one at a time."""

    def add_waypoint(self, waypoint: Waypoint) -> Waypoint:
        """Take ownership of a waypoint and return the stored instance."""
        ...


class WaypointDatabase:
    """In-memory collection of waypoints.

    Waypoints get an incremental id when added. The file number stored on
    each waypoint keeps track of which file it came from.

    Attributes:
        waypoints: Dictionary mapping id to Waypoint

    Examples:
        >>> db = WaypointDatabase()
        >>> stored = db.add_waypoint(waypoint)
        >>> db.get(stored.id) is stored
        True
    """

    def __init__(self) -> None:
        """Initialize empty waypoint database."""
        self.waypoints: dict[int, Waypoint] = {}
        self._next_id = 1
        logger.debug("Initialized waypoint database")

    def add_waypoint(self, waypoint: Waypoint) -> Waypoint:
        """Add a waypoint to the database.

        Args:
            waypoint: Waypoint to store; the database takes ownership

        Returns:
            The stored waypoint, with its id assigned
        """
        waypoint.id = self._next_id
        self._next_id += 1
        self.waypoints[waypoint.id] = waypoint
        logger.debug("Added waypoint %d: %s", waypoint.id, waypoint)
        return waypoint

    def get(self, waypoint_id: int) -> Waypoint | None:
        """Get waypoint by id, or None if unknown."""
        return self.waypoints.get(waypoint_id)

    def find_by_name(self, name: str) -> Waypoint | None:
        """Find the first waypoint with the given name.

        Args:
            name: Waypoint name (case-sensitive)

        Returns:
            Waypoint if found, None otherwise
        """
        for waypoint in self.waypoints.values():
            if waypoint.name == name:
                return waypoint
        return None

    def find_near(self, location: GeoPoint, radius_km: float) -> list[Waypoint]:
        """Find waypoints within radius of a location.

        Args:
            location: Center of the search
            radius_km: Search radius in kilometers

        Returns:
            Waypoints within radius, sorted by distance (closest first)
        """
        results = []

        for waypoint in self.waypoints.values():
            distance_km = location.distance_km(waypoint.location)
            if distance_km <= radius_km:
                results.append((distance_km, waypoint))

        results.sort(key=lambda x: x[0])
        return [waypoint for _, waypoint in results]

    def landables(self) -> list[Waypoint]:
        """Return all airports and outlanding fields."""
        return [w for w in self.waypoints.values() if w.is_landable]

    def from_file(self, file_num: int) -> list[Waypoint]:
        """Return all waypoints read from the given file."""
        return [w for w in self.waypoints.values() if w.file_num == file_num]

    def remove_file(self, file_num: int) -> int:
        """Remove all waypoints read from the given file.

        Returns:
            Number of waypoints removed
        """
        ids = [wid for wid, w in self.waypoints.items() if w.file_num == file_num]
        for wid in ids:
            del self.waypoints[wid]

        logger.info("Removed %d waypoints of file %d", len(ids), file_num)
        return len(ids)

    def count(self) -> int:
        """Return total number of waypoints in database."""
        return len(self.waypoints)

    def clear(self) -> None:
        """Remove all waypoints from database."""
        self.waypoints.clear()
        logger.info("Cleared waypoint database")
