"""SeeYou record parser.

Turns SeeYou (``.cup``) records into waypoints. Each file is read in its own
session: the caller creates a :class:`ParserState`, feeds every line of the
file through :meth:`SeeYouParser.parse_line` and receives one
:class:`ParseResult` per line.

Typical usage:
    parser = SeeYouParser(terrain=elevation_service)
    state = parser.new_session(file_num=1)

    for line in lines:
        result = parser.parse_line(line, state)
        if result.is_accepted:
            database.add_waypoint(result.waypoint)
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum

from glidepoint.terrain.elevation_service import ElevationService
from glidepoint.waypoints.seeyou.angles import parse_angle
from glidepoint.waypoints.seeyou.errors import FieldFormatError, LineTooLongError
from glidepoint.waypoints.seeyou.header import ColumnField, ColumnMap, map_header
from glidepoint.waypoints.seeyou.settings import ImportSettings
from glidepoint.waypoints.seeyou.style import flags_for_style, parse_style_code
from glidepoint.waypoints.seeyou.tokenizer import tokenize
from glidepoint.waypoints.seeyou.values import parse_altitude, parse_distance
from glidepoint.waypoints.waypoint import (
    RUNWAY_DIRECTION_UNKNOWN,
    GeoPoint,
    Waypoint,
    WaypointFlags,
)

logger = logging.getLogger(__name__)

SECTION_END_MARKER = "-----Related Tasks-----"
EOF_SENTINEL = "\x1a"
COMMENT_PREFIX = "*"

# Runway length bands (meters) used when the style does not say "airport"
LANDPOINT_MIN_RUNWAY = 100.0
AIRPORT_MIN_RUNWAY = 300.0

_LEADING_INT = re.compile(r"\s*[+-]?\d+")


class ParseStatus(Enum):
    """Outcome of parsing one record."""

    ACCEPTED = "accepted"
    SKIPPED = "skipped"
    REJECTED = "rejected"


class RejectReason(Enum):
    """Why a record was rejected."""

    LINE_TOO_LONG = "line_too_long"
    MISSING_REQUIRED_FIELD = "missing_required_field"
    INVALID_COORDINATE = "invalid_coordinate"
    EMPTY_NAME = "empty_name"


@dataclass(frozen=True)
class ParseResult:
    """Result of parsing one record.

    Attributes:
        status: Accepted, skipped or rejected
        waypoint: The new waypoint, for accepted records
        reason: Rejection reason, for rejected records
        detail: Human readable explanation of a rejection
        overflow: The record had more fields than the configured maximum
    """

    status: ParseStatus
    waypoint: Waypoint | None = None
    reason: RejectReason | None = None
    detail: str = ""
    overflow: bool = False

    @classmethod
    def accepted(cls, waypoint: Waypoint, overflow: bool = False) -> "ParseResult":
        return cls(ParseStatus.ACCEPTED, waypoint=waypoint, overflow=overflow)

    @classmethod
    def skipped(cls, overflow: bool = False) -> "ParseResult":
        return cls(ParseStatus.SKIPPED, overflow=overflow)

    @classmethod
    def rejected(cls, reason: RejectReason, detail: str = "", overflow: bool = False) -> "ParseResult":
        return cls(ParseStatus.REJECTED, reason=reason, detail=detail, overflow=overflow)

    @property
    def is_accepted(self) -> bool:
        return self.status is ParseStatus.ACCEPTED

    @property
    def is_skipped(self) -> bool:
        return self.status is ParseStatus.SKIPPED

    @property
    def is_rejected(self) -> bool:
        return self.status is ParseStatus.REJECTED


@dataclass
class ParserState:
    """Per-file parsing state.

    One instance per file being read; never share it between files.

    Attributes:
        column_map: Column layout from the header, canonical until one is seen
        ignore_rest: Set once the task section marker is reached; all
            following records of the file are skipped
        header_seen: Whether the header record has been consumed
        file_num: Tag identifying the file, copied onto every waypoint
    """

    column_map: ColumnMap = field(default_factory=ColumnMap)
    ignore_rest: bool = False
    header_seen: bool = False
    file_num: int = 0

    def apply_header(self, tokens: list[str]) -> ColumnMap:
        """Take the column layout from a header record.

        Also clears ``ignore_rest`` so the state starts over for a new file.
        """
        self.column_map = map_header(tokens)
        self.ignore_rest = False
        self.header_seen = True
        logger.debug("Column layout: %s", self.column_map)
        return self.column_map


def _append(comment: str, text: str) -> str:
    """Append text to a comment with a single space separator."""
    if not text:
        return comment
    if comment:
        return f"{comment} {text}"
    return text


def parse_runway_direction(token: str | None) -> int:
    """Parse a runway direction field into whole degrees.

    360 becomes 0. Missing, non-numeric or out of range values give
    RUNWAY_DIRECTION_UNKNOWN.
    """
    if not token:
        return RUNWAY_DIRECTION_UNKNOWN

    match = _LEADING_INT.match(token)
    if not match:
        return RUNWAY_DIRECTION_UNKNOWN

    direction = int(match.group())
    if direction == 360:
        return 0
    if direction < 0 or direction > 360:
        return RUNWAY_DIRECTION_UNKNOWN
    return direction


class SeeYouParser:
    """Parser for SeeYou waypoint records.

    The parser itself holds no per-file state and can serve several files at
    once, each with its own :class:`ParserState`.

    Attributes:
        settings: Import settings
        terrain: Elevation service asked for waypoints without elevation

    Examples:
        >>> parser = SeeYouParser()
        >>> state = parser.new_session()
        >>> parser.parse_line("name,code,country,lat,lon,elev,style,rwdir,rwlen,freq,desc", state).status
        <ParseStatus.SKIPPED: 'skipped'>
        >>> parser.parse_line("Alpha,A1,US,5115.900N,00715.900W,458.0m,1,,,,", state).waypoint.name
        'Alpha'
    """

    def __init__(
        self,
        settings: ImportSettings | None = None,
        terrain: ElevationService | None = None,
    ) -> None:
        """Initialize parser.

        Args:
            settings: Import settings, defaults if None
            terrain: Elevation lookup for records without a usable elevation
        """
        self.settings = settings or ImportSettings()
        self.terrain = terrain

    def new_session(self, file_num: int = 0) -> ParserState:
        """Create the state for reading one file."""
        return ParserState(file_num=file_num)

    @staticmethod
    def is_blank_or_comment(line: str) -> bool:
        """Whether a line carries no record: blank, EOF sentinel or comment."""
        return (
            not line.strip()
            or line.startswith(EOF_SENTINEL)
            or line.startswith(COMMENT_PREFIX)
        )

    def parse_line(self, line: str, state: ParserState) -> ParseResult:
        """Parse one raw line of a file.

        The first record of a session is taken as the column header when
        ``settings.has_header`` is set; later records go to
        :meth:`parse_record`.

        Args:
            line: Raw line without line terminator
            state: State of the file being read

        Returns:
            Outcome of the line
        """
        if self.is_blank_or_comment(line):
            return ParseResult.skipped()

        if state.ignore_rest:
            return ParseResult.skipped()

        try:
            record = tokenize(
                line,
                quote_char=self.settings.quote_char,
                max_tokens=self.settings.max_tokens,
                max_line_length=self.settings.max_line_length,
            )
        except LineTooLongError as e:
            return ParseResult.rejected(RejectReason.LINE_TOO_LONG, str(e))

        if record.overflow:
            logger.warning(
                "Record has %d fields, more than the maximum of %d: %.40s",
                len(record),
                self.settings.max_tokens,
                line,
            )

        if self.settings.has_header and not state.header_seen:
            state.apply_header(record.fields)
            return ParseResult.skipped(overflow=record.overflow)

        return self.parse_record(record.fields, state.column_map, state, overflow=record.overflow)

    def parse_record(
        self,
        tokens: list[str],
        column_map: ColumnMap,
        state: ParserState,
        overflow: bool = False,
    ) -> ParseResult:
        """Turn the fields of a data record into a waypoint.

        Args:
            tokens: Fields of the record
            column_map: Column layout of the file
            state: State of the file being read; ``ignore_rest`` may be set
            overflow: Passed through to the result

        Returns:
            Accepted result with the waypoint, skipped, or rejected with reason
        """
        if state.ignore_rest:
            return ParseResult.skipped(overflow=overflow)

        if tokens and tokens[0].startswith(SECTION_END_MARKER):
            logger.debug("Task section reached, ignoring remaining records")
            state.ignore_rest = True
            return ParseResult.skipped(overflow=overflow)

        count = len(tokens)
        for column in (ColumnField.NAME, ColumnField.LAT, ColumnField.LON):
            if column_map.index(column) >= count:
                return ParseResult.rejected(
                    RejectReason.MISSING_REQUIRED_FIELD,
                    f"no {column.value} field (record has {count} fields)",
                    overflow,
                )

        try:
            latitude = parse_angle(tokens[column_map.lat], is_latitude=True)
            longitude = parse_angle(tokens[column_map.lon], is_latitude=False)
        except FieldFormatError as e:
            return ParseResult.rejected(RejectReason.INVALID_COORDINATE, str(e), overflow)

        location = GeoPoint(latitude, longitude).normalized()

        name = tokens[column_map.name]
        if not name:
            return ParseResult.rejected(RejectReason.EMPTY_NAME, "empty name", overflow)

        def column_text(column: ColumnField) -> str | None:
            index = column_map.index(column)
            return tokens[index] if index < count else None

        waypoint = Waypoint(
            name=name,
            location=location,
            file_num=state.file_num,
            code=column_text(ColumnField.CODE) or "",
            country=column_text(ColumnField.COUNTRY) or "",
            frequency=column_text(ColumnField.FREQ) or "",
        )

        waypoint.altitude = self._parse_elevation(column_text(ColumnField.ELEV), location)
        waypoint.style, waypoint.flags = self._parse_style(column_text(ColumnField.STYLE))

        runway_length_text = column_text(ColumnField.RWLEN)
        waypoint.runway_length = self._parse_runway_length(runway_length_text)

        if not waypoint.flags.airport:
            if LANDPOINT_MIN_RUNWAY < waypoint.runway_length <= AIRPORT_MIN_RUNWAY:
                waypoint.flags.land_point = True
            if waypoint.runway_length > AIRPORT_MIN_RUNWAY:
                waypoint.flags.airport = True

        runway_direction_text = column_text(ColumnField.RWDIR)
        comment = ""
        if waypoint.is_landable:
            comment = _append(comment, column_text(ColumnField.FREQ) or "")
            if runway_direction_text:
                comment = _append(comment, runway_direction_text) + "°"
            comment = _append(comment, runway_length_text or "")

        waypoint.runway_direction = parse_runway_direction(runway_direction_text)
        waypoint.comment = _append(comment, column_text(ColumnField.DESC) or "")

        return ParseResult.accepted(waypoint, overflow=overflow)

    def _parse_elevation(self, text: str | None, location: GeoPoint) -> float | None:
        if text is not None:
            try:
                return parse_altitude(text)
            except FieldFormatError:
                pass

        if self.terrain is None or not self.settings.use_terrain:
            return None

        elevation = self.terrain.lookup_elevation(location.latitude, location.longitude)
        if elevation is None:
            logger.debug("No terrain elevation at %s", location)
        return elevation

    @staticmethod
    def _parse_style(text: str | None) -> tuple[int | None, WaypointFlags]:
        if text is not None:
            try:
                code = parse_style_code(text)
            except FieldFormatError:
                pass
            else:
                return code, flags_for_style(code)

        return None, WaypointFlags(turn_point=True)

    @staticmethod
    def _parse_runway_length(text: str | None) -> float:
        if text is None:
            return 0.0
        try:
            return parse_distance(text)
        except FieldFormatError:
            return 0.0
