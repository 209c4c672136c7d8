"""Pytest configuration and fixtures for all tests."""

import pytest

from glidepoint.terrain.elevation_service import ElevationService, IElevationProvider
from glidepoint.waypoints.seeyou.parser import SeeYouParser

SAMPLE_CUP = """\
name,code,country,lat,lon,elev,style,rwdir,rwlen,freq,desc
"Alpha",A1,US,5115.900N,00715.900W,458.0m,5,090,1200m,118.500,"Main field"
"Bravo Farm",BRV,US,5120.000N,00700.000W,1500F,3,270,250m,,"Grass, uphill"
"Charlie Church",CHC,US,5110.500N,00730.250W,,1,,,,"Tower"
* comment line
** another comment
"Broken",BRK,US,5199.000N,00700.000W,100m,1,,,,
,NON,US,5100.000N,00700.000W,100m,1,,,,
-----Related Tasks-----
"Task",,,,,,,,,,
"""


class MockElevationProvider(IElevationProvider):
    """Mock elevation provider for testing."""

    def __init__(self, name: str = "mock", elevation: float = 100.0, should_fail: bool = False):
        """Initialize mock provider."""
        self.name = name
        self.elevation = elevation
        self.should_fail = should_fail
        self.query_count = 0

    def get_name(self) -> str:
        """Get provider name."""
        return self.name

    def get_elevation(self, latitude: float, longitude: float) -> float:
        """Get mock elevation."""
        self.query_count += 1

        if self.should_fail:
            raise RuntimeError("Mock provider failure")

        return self.elevation + latitude

    def is_available(self) -> bool:
        """Check if provider is available."""
        return True


@pytest.fixture
def parser() -> SeeYouParser:
    """Parser without terrain lookup."""
    return SeeYouParser()


@pytest.fixture
def terrain_provider() -> MockElevationProvider:
    """Mock provider answering 100m + latitude."""
    return MockElevationProvider()


@pytest.fixture
def terrain(terrain_provider: MockElevationProvider) -> ElevationService:
    """Elevation service backed by the mock provider."""
    service = ElevationService()
    service.add_provider(terrain_provider)
    return service


@pytest.fixture
def sample_cup(tmp_path):
    """Path to a small SeeYou file."""
    path = tmp_path / "sample.cup"
    path.write_text(SAMPLE_CUP, encoding="utf-8")
    return path
