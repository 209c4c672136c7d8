"""GlidePoint - SeeYou waypoint importer.

Command line entry point. Reads one or more SeeYou files into a waypoint
database and prints what was imported.

Typical usage:
    glidepoint-import alps.cup
    glidepoint-import alps.cup jura.cup --config config/glidepoint.yaml --list
    python -m glidepoint.main alps.cup --elevation 450
"""

import argparse
import sys
from pathlib import Path

from glidepoint.core.config import ConfigError, ConfigLoader
from glidepoint.core.logging_system import (
    LoggingError,
    get_logger,
    initialize_logging,
    shutdown_logging,
)
from glidepoint.core.units import Unit, from_sys_unit
from glidepoint.terrain import (
    ConstantElevationProvider,
    ElevationService,
    RasterElevationProvider,
)
from glidepoint.waypoints import RUNWAY_DIRECTION_UNKNOWN, Waypoint, WaypointDatabase
from glidepoint.waypoints.seeyou import (
    ImportAbortedError,
    ImportSettings,
    SeeYouParser,
    SeeYouReader,
)


def build_terrain(config: ConfigLoader, elevation: float | None) -> ElevationService:
    """Create the elevation service from the ``terrain`` configuration section.

    A raster grid, when configured, is queried first; a constant elevation
    (from the command line or ``terrain.constant_elevation_m``) is the last
    resort.
    """
    service = ElevationService()

    raster = config.get("terrain.raster")
    if raster:
        service.add_provider(
            RasterElevationProvider.from_file(
                raster["path"],
                south=raster["south"],
                west=raster["west"],
                cell_size=raster["cell_size"],
                nodata=raster.get("nodata", -32768.0),
            )
        )

    if elevation is None:
        elevation = config.get("terrain.constant_elevation_m")
    if elevation is not None:
        service.add_provider(ConstantElevationProvider(elevation=float(elevation)))

    return service


def format_waypoint(waypoint: Waypoint) -> str:
    """Format a waypoint as one listing line."""
    if waypoint.altitude is None:
        altitude = "    ?"
    else:
        altitude = f"{waypoint.altitude:5.0f}m {from_sys_unit(waypoint.altitude, Unit.FEET):5.0f}ft"

    kind = "APT" if waypoint.flags.airport else "LND" if waypoint.flags.land_point else "TP "
    line = f"{waypoint.id:5d} {kind} {waypoint.name:<20} {waypoint.location} {altitude}"

    if waypoint.runway_length:
        line += f" rwy {waypoint.runway_length:.0f}m"
        if waypoint.runway_direction != RUNWAY_DIRECTION_UNKNOWN:
            line += f" {waypoint.runway_direction:03d}°"
    if waypoint.comment:
        line += f"  {waypoint.comment}"
    return line


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(description="GlidePoint - import SeeYou waypoint files")

    parser.add_argument("files", nargs="+", type=Path, help="SeeYou (.cup) files to import")

    parser.add_argument(
        "--config",
        type=Path,
        help="YAML configuration file (seeyou and terrain sections)",
    )

    parser.add_argument(
        "--logging-config",
        type=Path,
        help="YAML logging configuration file",
    )

    parser.add_argument(
        "--elevation",
        type=float,
        help="Elevation in meters for waypoints without one (e.g., 450)",
    )

    parser.add_argument(
        "--no-terrain",
        action="store_true",
        help="Leave missing elevations unknown instead of looking them up",
    )

    parser.add_argument(
        "--file-num",
        type=int,
        default=1,
        help="File number of the first file; later files count up (default: 1)",
    )

    parser.add_argument(
        "--list",
        action="store_true",
        help="Print every imported waypoint",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success).
    """
    args = parse_args(argv)

    try:
        initialize_logging(args.logging_config, use_platform_dir=args.logging_config is None)
    except LoggingError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    log = get_logger("glidepoint")

    try:
        config = ConfigLoader.load(args.config) if args.config else ConfigLoader()
        settings = ImportSettings.from_config(config)
        if args.no_terrain:
            terrain = None
        else:
            terrain = build_terrain(config, args.elevation)

        reader = SeeYouReader(SeeYouParser(settings, terrain=terrain))
        database = WaypointDatabase()

        for file_num, path in enumerate(args.files, start=args.file_num):
            report = reader.read_file(path, database, file_num=file_num)
            print(f"{path}: {report.summary()}")

        print(f"{database.count()} waypoints, {len(database.landables())} landable")

        if args.list:
            for waypoint in database.waypoints.values():
                print(format_waypoint(waypoint))

        return 0
    except (ConfigError, FileNotFoundError, ImportAbortedError, KeyError, ValueError) as e:
        log.error("Import failed: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 1
    finally:
        shutdown_logging()


if __name__ == "__main__":
    sys.exit(main())
