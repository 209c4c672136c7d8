"""SeeYou (.cup) waypoint file support.

Typical usage:
    from glidepoint.waypoints import WaypointDatabase
    from glidepoint.waypoints.seeyou import SeeYouParser, SeeYouReader

    db = WaypointDatabase()
    report = SeeYouReader(SeeYouParser()).read_file("alps.cup", db, file_num=1)
"""

from glidepoint.waypoints.seeyou.angles import parse_angle
from glidepoint.waypoints.seeyou.errors import (
    FieldFormatError,
    ImportAbortedError,
    LineTooLongError,
    SeeYouError,
)
from glidepoint.waypoints.seeyou.header import ColumnField, ColumnMap, map_header
from glidepoint.waypoints.seeyou.parser import (
    ParserState,
    ParseResult,
    ParseStatus,
    RejectReason,
    SeeYouParser,
)
from glidepoint.waypoints.seeyou.reader import ImportReport, SeeYouReader
from glidepoint.waypoints.seeyou.settings import ImportSettings
from glidepoint.waypoints.seeyou.style import WaypointStyle, classify_style
from glidepoint.waypoints.seeyou.tokenizer import TokenizedRecord, tokenize
from glidepoint.waypoints.seeyou.values import (
    ValueDomain,
    parse_altitude,
    parse_distance,
    parse_unit_value,
)

__all__ = [
    "ColumnField",
    "ColumnMap",
    "FieldFormatError",
    "ImportAbortedError",
    "ImportReport",
    "ImportSettings",
    "LineTooLongError",
    "ParseResult",
    "ParseStatus",
    "ParserState",
    "RejectReason",
    "SeeYouError",
    "SeeYouParser",
    "SeeYouReader",
    "TokenizedRecord",
    "ValueDomain",
    "WaypointStyle",
    "classify_style",
    "map_header",
    "parse_altitude",
    "parse_angle",
    "parse_distance",
    "parse_unit_value",
    "tokenize",
]
