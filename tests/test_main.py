"""Tests for the command line entry point."""

from pathlib import Path

import numpy as np
import pytest

from glidepoint.core.config import ConfigLoader
from glidepoint.main import build_terrain, format_waypoint, main, parse_args
from glidepoint.waypoints.waypoint import GeoPoint, Waypoint, WaypointFlags


@pytest.fixture
def logging_config(tmp_path: Path) -> Path:
    """Logging configuration that writes no log file."""
    path = tmp_path / "logging.yaml"
    path.write_text("combined_log:\n  enabled: false\nconsole:\n  enabled: false\n")
    return path


def run(logging_config: Path, *args: str) -> int:
    """Run main with the test logging configuration."""
    return main(["--logging-config", str(logging_config), *args])


class TestParseArgs:
    """Test argument parsing."""

    def test_defaults(self) -> None:
        """Test defaults for a single file."""
        args = parse_args(["alps.cup"])

        assert args.files == [Path("alps.cup")]
        assert args.file_num == 1
        assert args.elevation is None
        assert not args.no_terrain
        assert not args.list

    def test_requires_file(self) -> None:
        """Test at least one file is required."""
        with pytest.raises(SystemExit):
            parse_args([])


class TestBuildTerrain:
    """Test terrain service construction."""

    def test_empty_config(self) -> None:
        """Test no providers without configuration."""
        service = build_terrain(ConfigLoader(), None)

        assert service.providers == []

    def test_constant_from_config(self) -> None:
        """Test constant elevation from the terrain section."""
        service = build_terrain(ConfigLoader({"terrain": {"constant_elevation_m": 300}}), None)

        assert service.get_elevation(10.0, 10.0) == 300.0

    def test_command_line_overrides_config(self) -> None:
        """Test --elevation wins over the configured constant."""
        service = build_terrain(ConfigLoader({"terrain": {"constant_elevation_m": 300}}), 450.0)

        assert service.get_elevation(10.0, 10.0) == 450.0

    def test_raster_from_config(self, tmp_path: Path) -> None:
        """Test raster grid from the terrain section."""
        grid_path = tmp_path / "grid.npy"
        np.save(grid_path, np.full((2, 2), 800.0))
        config = ConfigLoader(
            {"terrain": {"raster": {"path": str(grid_path), "south": 46.0, "west": 7.0, "cell_size": 1.0}}}
        )

        service = build_terrain(config, None)

        assert service.get_cache_stats()["provider_names"] == ["raster"]
        assert service.get_elevation(46.5, 7.5) == pytest.approx(800.0)


class TestFormatWaypoint:
    """Test listing lines."""

    def test_airport(self) -> None:
        """Test airport with runway."""
        waypoint = Waypoint(
            name="Alpha",
            location=GeoPoint(51.265, -7.265),
            altitude=458.0,
            flags=WaypointFlags(turn_point=True, airport=True),
            runway_length=1200.0,
            runway_direction=90,
            comment="Main field",
            id=1,
        )

        line = format_waypoint(waypoint)

        assert line.startswith("    1 APT Alpha")
        assert "458m  1503ft" in line
        assert "rwy 1200m 090°" in line
        assert line.endswith("  Main field")

    def test_unknown_altitude(self) -> None:
        """Test turn point without elevation."""
        waypoint = Waypoint(name="Tower", location=GeoPoint(51.0, 7.0), id=2)

        line = format_waypoint(waypoint)

        assert " TP  Tower" in line
        assert line.endswith("?")


class TestMain:
    """Test the main entry point."""

    def test_import_sample(self, sample_cup: Path, logging_config: Path, capsys) -> None:
        """Test summary output for the sample file."""
        assert run(logging_config, str(sample_cup)) == 0

        out = capsys.readouterr().out
        assert f"{sample_cup}: 3 accepted, 5 skipped, 2 rejected" in out
        assert "3 waypoints, 2 landable" in out

    def test_list(self, sample_cup: Path, logging_config: Path, capsys) -> None:
        """Test --list prints every waypoint."""
        assert run(logging_config, str(sample_cup), "--list") == 0

        out = capsys.readouterr().out
        assert "APT Alpha" in out
        assert "LND Bravo Farm" in out
        assert "TP  Charlie Church" in out

    def test_elevation_fallback(self, sample_cup: Path, logging_config: Path, capsys) -> None:
        """Test --elevation fills missing elevations."""
        assert run(logging_config, str(sample_cup), "--list", "--elevation", "450") == 0

        church = next(line for line in capsys.readouterr().out.splitlines() if "Charlie" in line)
        assert "450m" in church

    def test_no_terrain(self, sample_cup: Path, logging_config: Path, capsys) -> None:
        """Test --no-terrain leaves missing elevations unknown."""
        assert run(logging_config, str(sample_cup), "--list", "--elevation", "450", "--no-terrain") == 0

        church = next(line for line in capsys.readouterr().out.splitlines() if "Charlie" in line)
        assert "450m" not in church

    def test_multiple_files(self, sample_cup: Path, logging_config: Path, capsys) -> None:
        """Test several files go into one database."""
        assert run(logging_config, str(sample_cup), str(sample_cup)) == 0

        assert "6 waypoints, 4 landable" in capsys.readouterr().out

    def test_missing_file(self, tmp_path: Path, logging_config: Path, capsys) -> None:
        """Test missing input file."""
        assert run(logging_config, str(tmp_path / "none.cup")) == 1

        assert "not found" in capsys.readouterr().err

    def test_bad_config(self, sample_cup: Path, tmp_path: Path, logging_config: Path) -> None:
        """Test invalid import settings."""
        config = tmp_path / "glidepoint.yaml"
        config.write_text("seeyou:\n  max_tokens: 0\n")

        assert run(logging_config, str(sample_cup), "--config", str(config)) == 1

    def test_too_many_rejections(self, sample_cup: Path, tmp_path: Path, logging_config: Path) -> None:
        """Test import stops once the rejection limit is exceeded."""
        config = tmp_path / "glidepoint.yaml"
        config.write_text("seeyou:\n  max_rejections: 1\n")

        assert run(logging_config, str(sample_cup), "--config", str(config)) == 1

    def test_missing_logging_config(self, sample_cup: Path, tmp_path: Path, capsys) -> None:
        """Test unreadable logging configuration."""
        assert main(["--logging-config", str(tmp_path / "none.yaml"), str(sample_cup)]) == 1

        assert "Logging config file not found" in capsys.readouterr().err
