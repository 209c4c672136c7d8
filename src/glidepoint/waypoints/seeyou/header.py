"""Column layout of SeeYou files.

The first record of a file names its columns, in any order::

    name,code,country,lat,lon,elev,style,rwdir,rwlen,freq,desc

Columns missing from the header, or files with an unrecognized header,
fall back to the canonical order above.
"""

from dataclasses import dataclass, replace
from enum import Enum


class ColumnField(Enum):
    """Header keywords, in canonical column order."""

    NAME = "name"
    CODE = "code"
    COUNTRY = "country"
    LAT = "lat"
    LON = "lon"
    ELEV = "elev"
    STYLE = "style"
    RWDIR = "rwdir"
    RWLEN = "rwlen"
    FREQ = "freq"
    DESC = "desc"

    @property
    def default_index(self) -> int:
        """Column index used when the header does not mention this field."""
        return _DEFAULT_INDEX[self]


_DEFAULT_INDEX = {column: index for index, column in enumerate(ColumnField)}


@dataclass(frozen=True)
class ColumnMap:
    """Field index of every known column.

    ``ColumnMap()`` is the canonical layout.
    """

    name: int = 0
    code: int = 1
    country: int = 2
    lat: int = 3
    lon: int = 4
    elev: int = 5
    style: int = 6
    rwdir: int = 7
    rwlen: int = 8
    freq: int = 9
    desc: int = 10

    def index(self, column: ColumnField) -> int:
        """Field index of a column."""
        match column:
            case ColumnField.NAME:
                return self.name
            case ColumnField.CODE:
                return self.code
            case ColumnField.COUNTRY:
                return self.country
            case ColumnField.LAT:
                return self.lat
            case ColumnField.LON:
                return self.lon
            case ColumnField.ELEV:
                return self.elev
            case ColumnField.STYLE:
                return self.style
            case ColumnField.RWDIR:
                return self.rwdir
            case ColumnField.RWLEN:
                return self.rwlen
            case ColumnField.FREQ:
                return self.freq
            case ColumnField.DESC:
                return self.desc
        raise ValueError(f"Unknown column: {column!r}")

    def with_index(self, column: ColumnField, index: int) -> "ColumnMap":
        """Copy of the map with one column moved to ``index``."""
        match column:
            case ColumnField.NAME:
                return replace(self, name=index)
            case ColumnField.CODE:
                return replace(self, code=index)
            case ColumnField.COUNTRY:
                return replace(self, country=index)
            case ColumnField.LAT:
                return replace(self, lat=index)
            case ColumnField.LON:
                return replace(self, lon=index)
            case ColumnField.ELEV:
                return replace(self, elev=index)
            case ColumnField.STYLE:
                return replace(self, style=index)
            case ColumnField.RWDIR:
                return replace(self, rwdir=index)
            case ColumnField.RWLEN:
                return replace(self, rwlen=index)
            case ColumnField.FREQ:
                return replace(self, freq=index)
            case ColumnField.DESC:
                return replace(self, desc=index)
        raise ValueError(f"Unknown column: {column!r}")


def map_header(tokens: list[str]) -> ColumnMap:
    """Build the column map from a header record.

    Keywords are matched case-sensitively. Unknown fields are ignored and a
    repeated keyword takes the index of its last occurrence.

    Examples:
        >>> map_header(["lon", "name", "lat"]).lat
        2
    """
    column_map = ColumnMap()

    for index, token in enumerate(tokens):
        try:
            column = ColumnField(token.strip())
        except ValueError:
            continue
        column_map = column_map.with_index(column, index)

    return column_map
