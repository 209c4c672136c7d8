"""Elevation providers backed by local data.

Typical usage:
    from glidepoint.terrain.raster_provider import RasterElevationProvider

    provider = RasterElevationProvider.from_file(
        "data/terrain/alps.npy", south=45.0, west=5.0, cell_size=1 / 120
    )
    elevation = provider.get_elevation(46.5, 8.0)
"""

import logging
import math
from pathlib import Path

import numpy as np
import numpy.typing as npt

from glidepoint.terrain.elevation_service import IElevationProvider

logger = logging.getLogger(__name__)

DEFAULT_NODATA = -32768.0


class ConstantElevationProvider(IElevationProvider):
    """Provider that returns a constant elevation.

    Useful for testing and for flat areas without terrain data.

    Examples:
        >>> provider = ConstantElevationProvider(elevation=100.0)
        >>> provider.get_elevation(46.5, 8.0)
        100.0
    """

    def __init__(self, elevation: float = 0.0) -> None:
        """Initialize constant elevation provider.

        Args:
            elevation: Constant elevation to return (meters)
        """
        self.elevation = elevation
        logger.info("ConstantElevationProvider initialized (elevation=%.1fm)", elevation)

    def get_name(self) -> str:
        """Get provider name."""
        return "constant"

    def get_elevation(self, latitude: float, longitude: float) -> float:
        """Get constant elevation; coordinates are ignored."""
        return self.elevation


class RasterElevationProvider(IElevationProvider):
    """Elevation provider reading a regular latitude/longitude grid.

    The grid is a 2D array of elevations in meters. Row 0 lies on the
    southern edge and rows advance northwards; column 0 lies on the western
    edge and columns advance eastwards. Both axes use the same cell size in
    degrees. Elevations between grid nodes are interpolated bilinearly.

    Attributes:
        grid: Elevation samples (rows x columns) in meters
        south: Latitude of row 0 in degrees
        west: Longitude of column 0 in degrees
        cell_size: Grid spacing in degrees
        nodata: Sample value marking missing data

    Examples:
        >>> grid = np.array([[100.0, 200.0], [300.0, 400.0]])
        >>> provider = RasterElevationProvider(grid, south=46.0, west=7.0, cell_size=1.0)
        >>> provider.get_elevation(46.5, 7.5)
        250.0
    """

    def __init__(
        self,
        grid: npt.ArrayLike,
        south: float,
        west: float,
        cell_size: float,
        nodata: float = DEFAULT_NODATA,
    ) -> None:
        """Initialize raster provider.

        Args:
            grid: 2D elevation samples in meters
            south: Latitude of the first row in degrees
            west: Longitude of the first column in degrees
            cell_size: Grid spacing in degrees (must be positive)
            nodata: Sample value marking missing data

        Raises:
            ValueError: If the grid is not 2D or the cell size is not positive
        """
        self.grid = np.asarray(grid, dtype=np.float64)
        if self.grid.ndim != 2 or min(self.grid.shape) < 1:
            raise ValueError(f"Elevation grid must be a non-empty 2D array, got shape {self.grid.shape}")
        if cell_size <= 0:
            raise ValueError(f"Cell size must be positive: {cell_size}")

        self.south = south
        self.west = west
        self.cell_size = cell_size
        self.nodata = nodata

        rows, cols = self.grid.shape
        self.north = south + (rows - 1) * cell_size
        self.east = west + (cols - 1) * cell_size
        logger.info(
            "RasterElevationProvider initialized (%dx%d, lat %.3f..%.3f, lon %.3f..%.3f)",
            rows,
            cols,
            self.south,
            self.north,
            self.west,
            self.east,
        )

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        south: float,
        west: float,
        cell_size: float,
        nodata: float = DEFAULT_NODATA,
    ) -> "RasterElevationProvider":
        """Load a grid saved with ``numpy.save``.

        Raises:
            FileNotFoundError: If the grid file does not exist
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Elevation grid not found: {path}")

        return cls(np.load(path), south=south, west=west, cell_size=cell_size, nodata=nodata)

    def get_name(self) -> str:
        """Get provider name."""
        return "raster"

    def covers(self, latitude: float, longitude: float) -> bool:
        """Check whether a coordinate lies inside the grid."""
        return self.south <= latitude <= self.north and self.west <= longitude <= self.east

    def get_elevation(self, latitude: float, longitude: float) -> float:
        """Get interpolated elevation at a coordinate.

        Raises:
            ValueError: If the coordinate lies outside the grid
            RuntimeError: If a surrounding sample holds no data
        """
        if not self.covers(latitude, longitude):
            raise ValueError(f"({latitude}, {longitude}) is outside the elevation grid")

        rows, cols = self.grid.shape
        y = (latitude - self.south) / self.cell_size
        x = (longitude - self.west) / self.cell_size

        row0 = min(int(math.floor(y)), rows - 1)
        col0 = min(int(math.floor(x)), cols - 1)
        row1 = min(row0 + 1, rows - 1)
        col1 = min(col0 + 1, cols - 1)
        fy = y - row0
        fx = x - col0

        cell = self.grid[[row0, row0, row1, row1], [col0, col1, col0, col1]]
        if np.any(cell == self.nodata) or np.any(np.isnan(cell)):
            raise RuntimeError(f"No elevation data at ({latitude}, {longitude})")

        weights = np.array([(1 - fy) * (1 - fx), (1 - fy) * fx, fy * (1 - fx), fy * fx])
        return float(np.dot(cell, weights))
