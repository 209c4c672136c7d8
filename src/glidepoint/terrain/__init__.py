"""Terrain and elevation lookup for waypoints without a surveyed elevation."""

from glidepoint.terrain.elevation_service import (
    ElevationCache,
    ElevationService,
    IElevationProvider,
)
from glidepoint.terrain.raster_provider import (
    ConstantElevationProvider,
    RasterElevationProvider,
)

__all__ = [
    "ConstantElevationProvider",
    "ElevationCache",
    "ElevationService",
    "IElevationProvider",
    "RasterElevationProvider",
]
