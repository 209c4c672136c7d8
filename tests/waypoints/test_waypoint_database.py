"""Tests for waypoint database."""

import pytest

from glidepoint.waypoints.database import WaypointDatabase
from glidepoint.waypoints.waypoint import GeoPoint, Waypoint, WaypointFlags


def make_waypoint(name: str, lat: float, lon: float, file_num: int = 1, **flags: bool) -> Waypoint:
    """Create a waypoint for tests."""
    return Waypoint(
        name=name,
        location=GeoPoint(lat, lon),
        flags=WaypointFlags(turn_point=True, **flags),
        file_num=file_num,
    )


@pytest.fixture
def db() -> WaypointDatabase:
    """Database with three waypoints from two files."""
    database = WaypointDatabase()
    database.add_waypoint(make_waypoint("Home", 51.0, 7.0, airport=True))
    database.add_waypoint(make_waypoint("Farm", 51.1, 7.0, land_point=True))
    database.add_waypoint(make_waypoint("Peak", 52.0, 8.0, file_num=2))
    return database


class TestWaypointDatabase:
    """Test WaypointDatabase class."""

    def test_create_empty_database(self) -> None:
        """Test creating an empty database."""
        database = WaypointDatabase()

        assert database.count() == 0

    def test_add_assigns_ids(self) -> None:
        """Test ids are assigned in order."""
        database = WaypointDatabase()

        first = database.add_waypoint(make_waypoint("A", 0.0, 0.0))
        second = database.add_waypoint(make_waypoint("B", 0.0, 0.0))

        assert first.id == 1
        assert second.id == 2
        assert database.get(2) is second

    def test_get_unknown(self, db: WaypointDatabase) -> None:
        """Test unknown id."""
        assert db.get(99) is None

    def test_find_by_name(self, db: WaypointDatabase) -> None:
        """Test lookup by name."""
        assert db.find_by_name("Farm").location == GeoPoint(51.1, 7.0)
        assert db.find_by_name("farm") is None

    def test_find_near_sorted(self, db: WaypointDatabase) -> None:
        """Test proximity search sorted by distance."""
        nearby = db.find_near(GeoPoint(51.09, 7.0), radius_km=20)

        assert [w.name for w in nearby] == ["Farm", "Home"]

    def test_find_near_radius(self, db: WaypointDatabase) -> None:
        """Test proximity search excludes far waypoints."""
        nearby = db.find_near(GeoPoint(51.0, 7.0), radius_km=5)

        assert [w.name for w in nearby] == ["Home"]

    def test_landables(self, db: WaypointDatabase) -> None:
        """Test landable filter."""
        assert {w.name for w in db.landables()} == {"Home", "Farm"}

    def test_from_file(self, db: WaypointDatabase) -> None:
        """Test filter by file number."""
        assert [w.name for w in db.from_file(2)] == ["Peak"]

    def test_remove_file(self, db: WaypointDatabase) -> None:
        """Test removing the waypoints of one file."""
        removed = db.remove_file(1)

        assert removed == 2
        assert db.count() == 1
        assert db.find_by_name("Home") is None

    def test_ids_not_reused(self, db: WaypointDatabase) -> None:
        """Test ids keep increasing after removal."""
        db.remove_file(1)

        waypoint = db.add_waypoint(make_waypoint("New", 0.0, 0.0))

        assert waypoint.id == 4

    def test_clear(self, db: WaypointDatabase) -> None:
        """Test clearing the database."""
        db.clear()

        assert db.count() == 0
