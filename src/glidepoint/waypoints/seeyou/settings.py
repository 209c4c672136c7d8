"""Import settings for SeeYou files.

Settings are read from the ``seeyou`` section of the configuration::

    seeyou:
      quote_char: '"'
      max_tokens: 20
      max_line_length: 254
      has_header: true
      encoding: utf-8-sig
      fallback_encoding: latin-1
      max_rejections: null
      use_terrain: true
"""

from dataclasses import dataclass, fields
from typing import Any

from glidepoint.core.config import ConfigError, ConfigLoader
from glidepoint.waypoints.seeyou.tokenizer import MAX_LINE_LENGTH, MAX_TOKENS


@dataclass(frozen=True)
class ImportSettings:
    """Options controlling how SeeYou files are read.

    Attributes:
        quote_char: Character delimiting quoted fields, empty to disable
        max_tokens: Field count above which a record is reported as overflowing
        max_line_length: Longest accepted record in characters
        has_header: Treat the first record of a file as the column header
        encoding: Text encoding tried first
        fallback_encoding: Encoding used when the first one fails to decode
        max_rejections: Abort a file after this many rejected records (None: never)
        use_terrain: Ask the terrain service for missing elevations
    """

    quote_char: str = '"'
    max_tokens: int = MAX_TOKENS
    max_line_length: int = MAX_LINE_LENGTH
    has_header: bool = True
    encoding: str = "utf-8-sig"
    fallback_encoding: str = "latin-1"
    max_rejections: int | None = None
    use_terrain: bool = True

    def __post_init__(self) -> None:
        if len(self.quote_char) > 1:
            raise ConfigError(f"quote_char must be a single character: {self.quote_char!r}")
        if self.max_tokens < 1:
            raise ConfigError(f"max_tokens must be positive: {self.max_tokens}")
        if self.max_line_length < 1:
            raise ConfigError(f"max_line_length must be positive: {self.max_line_length}")
        if self.max_rejections is not None and self.max_rejections < 0:
            raise ConfigError(f"max_rejections must not be negative: {self.max_rejections}")

    @classmethod
    def from_config(cls, config: ConfigLoader) -> "ImportSettings":
        """Build settings from the ``seeyou`` configuration section.

        Missing keys keep their defaults.

        Raises:
            ConfigError: If the section holds unknown keys or invalid values
        """
        section: dict[str, Any] = config.get("seeyou", {}) or {}
        if not isinstance(section, dict):
            raise ConfigError("Configuration key is not a section: seeyou")

        known = {f.name for f in fields(cls)}
        unknown = set(section) - known
        if unknown:
            raise ConfigError(f"Unknown seeyou settings: {', '.join(sorted(unknown))}")

        return cls(**section)
