"""Tests for import settings."""

import pytest

from glidepoint.core.config import ConfigError, ConfigLoader
from glidepoint.waypoints.seeyou.settings import ImportSettings


class TestImportSettings:
    """Test ImportSettings."""

    def test_defaults(self) -> None:
        """Test default settings."""
        settings = ImportSettings()

        assert settings.quote_char == '"'
        assert settings.max_tokens == 20
        assert settings.max_line_length == 254
        assert settings.has_header
        assert settings.max_rejections is None
        assert settings.use_terrain

    def test_from_empty_config(self) -> None:
        """Test missing section gives defaults."""
        assert ImportSettings.from_config(ConfigLoader()) == ImportSettings()

    def test_from_config(self) -> None:
        """Test values are read from the seeyou section."""
        config = ConfigLoader({"seeyou": {"quote_char": "'", "max_rejections": 3}})

        settings = ImportSettings.from_config(config)

        assert settings.quote_char == "'"
        assert settings.max_rejections == 3
        assert settings.max_tokens == 20

    def test_from_yaml_file(self, tmp_path) -> None:
        """Test loading settings from a YAML file."""
        path = tmp_path / "glidepoint.yaml"
        path.write_text("seeyou:\n  has_header: false\n  max_line_length: 500\n")

        settings = ImportSettings.from_config(ConfigLoader.load(path))

        assert not settings.has_header
        assert settings.max_line_length == 500

    def test_unknown_key(self) -> None:
        """Test unknown settings are reported."""
        config = ConfigLoader({"seeyou": {"quote": "'"}})

        with pytest.raises(ConfigError, match="quote"):
            ImportSettings.from_config(config)

    def test_section_must_be_mapping(self) -> None:
        """Test a scalar seeyou key is rejected."""
        with pytest.raises(ConfigError):
            ImportSettings.from_config(ConfigLoader({"seeyou": "yes"}))

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"quote_char": "''"},
            {"max_tokens": 0},
            {"max_line_length": 0},
            {"max_rejections": -1},
        ],
    )
    def test_invalid_values(self, kwargs: dict) -> None:
        """Test invalid values raise ConfigError."""
        with pytest.raises(ConfigError):
            ImportSettings(**kwargs)
