"""Elevation service for terrain queries.

Waypoint files do not always carry an elevation. When one is missing the
importer asks this service for the terrain height at the waypoint location.
Multiple providers can be chained; results are cached.

Typical usage:
    from glidepoint.terrain.elevation_service import ElevationService

    service = ElevationService()
    service.add_provider(RasterElevationProvider.from_file("alps.npy", ...))
    elevation = service.lookup_elevation(46.5, 8.0)  # None if unknown
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

logger = logging.getLogger(__name__)


class IElevationProvider(ABC):
    """Abstract interface for elevation data providers.

    Providers return terrain elevation in meters above sea level and raise
    when they have no data for a location.

    Examples:
        >>> class MyProvider(IElevationProvider):
        ...     def get_name(self) -> str:
        ...         return "my_provider"
        ...     def get_elevation(self, latitude: float, longitude: float) -> float:
        ...         return 100.0  # meters
    """

    @abstractmethod
    def get_name(self) -> str:
        """Get provider name.

        Returns:
            Provider identifier (e.g., "raster", "constant")
        """

    @abstractmethod
    def get_elevation(self, latitude: float, longitude: float) -> float:
        """Get elevation at a specific coordinate.

        Args:
            latitude: Latitude in degrees (-90 to 90)
            longitude: Longitude in degrees (-180 to 180)

        Returns:
            Elevation in meters above sea level

        Raises:
            ValueError: If the location is outside the provider's coverage
            RuntimeError: If elevation data is unavailable
        """

    def is_available(self) -> bool:
        """Check if provider is available and functional."""
        return True


class ElevationCache:
    """LRU cache for elevation queries keyed on rounded coordinates.

    Examples:
        >>> cache = ElevationCache(max_size=1000)
        >>> cache.set(46.5, 8.0, 1520.0)
        >>> cache.get(46.5, 8.0)
        1520.0
    """

    def __init__(self, max_size: int = 10000, precision: int = 4) -> None:
        """Initialize elevation cache.

        Args:
            max_size: Maximum number of cached entries
            precision: Decimal places for coordinate rounding (for cache key)
        """
        self.max_size = max_size
        self.precision = precision
        self.cache: dict[tuple[float, float], float] = {}
        self.access_order: list[tuple[float, float]] = []

    def _make_key(self, latitude: float, longitude: float) -> tuple[float, float]:
        return (round(latitude, self.precision), round(longitude, self.precision))

    def get(self, latitude: float, longitude: float) -> float | None:
        """Get cached elevation, or None if not cached."""
        key = self._make_key(latitude, longitude)

        if key in self.cache:
            self.access_order.remove(key)
            self.access_order.append(key)
            return self.cache[key]

        return None

    def set(self, latitude: float, longitude: float, elevation: float) -> None:
        """Cache an elevation, evicting the least recently used entry if full."""
        key = self._make_key(latitude, longitude)

        if len(self.cache) >= self.max_size and key not in self.cache and self.access_order:
            oldest_key = self.access_order.pop(0)
            del self.cache[oldest_key]

        self.cache[key] = elevation

        if key in self.access_order:
            self.access_order.remove(key)
        self.access_order.append(key)

    def clear(self) -> None:
        """Clear all cached elevations."""
        self.cache.clear()
        self.access_order.clear()

    def get_size(self) -> int:
        """Get current cache size."""
        return len(self.cache)


class ElevationService:
    """Elevation service with provider management and caching.

    Providers are queried in the order they were added; the first one that
    answers wins.

    Examples:
        >>> service = ElevationService()
        >>> service.add_provider(ConstantElevationProvider(elevation=250.0))
        >>> service.get_elevation(46.5, 8.0)
        250.0
    """

    def __init__(self, cache_size: int = 10000) -> None:
        """Initialize elevation service.

        Args:
            cache_size: Maximum number of cached elevation queries
        """
        self.providers: list[IElevationProvider] = []
        self.cache = ElevationCache(max_size=cache_size)
        logger.debug("ElevationService initialized (cache_size=%d)", cache_size)

    def add_provider(self, provider: IElevationProvider) -> None:
        """Add an elevation provider at the end of the query order."""
        self.providers.append(provider)
        logger.info("Added elevation provider: %s", provider.get_name())

    def remove_provider(self, provider_name: str) -> None:
        """Remove an elevation provider by name."""
        self.providers = [p for p in self.providers if p.get_name() != provider_name]
        logger.info("Removed elevation provider: %s", provider_name)

    def get_elevation(self, latitude: float, longitude: float) -> float:
        """Get elevation at a specific coordinate.

        Checks cache first, then queries providers in order.

        Args:
            latitude: Latitude in degrees (-90 to 90)
            longitude: Longitude in degrees (-180 to 180)

        Returns:
            Elevation in meters above sea level

        Raises:
            ValueError: If no providers available
            RuntimeError: If all providers fail
        """
        cached_elevation = self.cache.get(latitude, longitude)
        if cached_elevation is not None:
            logger.debug("Cache hit for (%f, %f): %.1fm", latitude, longitude, cached_elevation)
            return cached_elevation

        if not self.providers:
            raise ValueError("No elevation providers available")

        for provider in self.providers:
            if not provider.is_available():
                continue

            try:
                elevation = provider.get_elevation(latitude, longitude)
            except (ValueError, RuntimeError) as e:
                logger.debug(
                    "Provider %s has no elevation for (%f, %f): %s",
                    provider.get_name(),
                    latitude,
                    longitude,
                    e,
                )
                continue

            self.cache.set(latitude, longitude, elevation)
            logger.debug(
                "Provider %s: (%f, %f) = %.1fm",
                provider.get_name(),
                latitude,
                longitude,
                elevation,
            )
            return elevation

        raise RuntimeError(f"All elevation providers failed for ({latitude}, {longitude})")

    def lookup_elevation(self, latitude: float, longitude: float) -> float | None:
        """Get elevation at a coordinate, or None when nobody knows it.

        Same as :meth:`get_elevation` but a missing provider or missing data
        is reported as None instead of an exception.
        """
        try:
            return self.get_elevation(latitude, longitude)
        except (ValueError, RuntimeError):
            return None

    def clear_cache(self) -> None:
        """Clear elevation cache."""
        self.cache.clear()
        logger.info("Elevation cache cleared")

    def get_cache_stats(self) -> dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dictionary with cache size, capacity and provider names
        """
        return {
            "size": self.cache.get_size(),
            "max_size": self.cache.max_size,
            "providers": len(self.providers),
            "provider_names": [p.get_name() for p in self.providers],
        }
