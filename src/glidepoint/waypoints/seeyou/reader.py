"""SeeYou file reader.

Reads a ``.cup`` file line by line, parses each record and hands accepted
waypoints to a sink such as :class:`~glidepoint.waypoints.database.WaypointDatabase`.

Typical usage:
    reader = SeeYouReader(SeeYouParser(terrain=elevation_service))
    report = reader.read_file("data/alps.cup", database, file_num=1)
    print(report.summary())
"""

import logging
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from glidepoint.waypoints.database import WaypointSink
from glidepoint.waypoints.seeyou.errors import ImportAbortedError
from glidepoint.waypoints.seeyou.parser import (
    ParserState,
    ParseStatus,
    RejectReason,
    SeeYouParser,
)

logger = logging.getLogger(__name__)


@dataclass
class ImportReport:
    """Counts of what happened while reading a file.

    Attributes:
        file_num: Tag of the file
        accepted: Number of waypoints handed to the sink
        skipped: Number of blank, comment, header and ignored lines
        rejected: Rejected records by reason
        rejected_lines: Line numbers (1-based) of rejected records
        overflow_lines: Line numbers (1-based) of records with too many fields
    """

    file_num: int = 0
    accepted: int = 0
    skipped: int = 0
    rejected: Counter = field(default_factory=Counter)
    rejected_lines: list[int] = field(default_factory=list)
    overflow_lines: list[int] = field(default_factory=list)

    @property
    def total_rejected(self) -> int:
        """Number of rejected records."""
        return sum(self.rejected.values())

    @property
    def total_lines(self) -> int:
        """Number of lines read."""
        return self.accepted + self.skipped + self.total_rejected

    def summary(self) -> str:
        """One line summary of the import."""
        text = f"{self.accepted} accepted, {self.skipped} skipped, {self.total_rejected} rejected"
        if self.rejected:
            reasons = ", ".join(
                f"{reason.value}={count}"
                for reason, count in sorted(self.rejected.items(), key=lambda x: x[0].value)
            )
            text += f" ({reasons})"
        if self.overflow_lines:
            text += f", {len(self.overflow_lines)} with too many fields"
        return text


class SeeYouReader:
    """Reads SeeYou files into a waypoint sink.

    Every file is read with a fresh :class:`ParserState`, so one reader can be
    used for any number of files.

    Examples:
        >>> reader = SeeYouReader(SeeYouParser())
        >>> db = WaypointDatabase()
        >>> report = reader.read_file("alps.cup", db, file_num=1)
    """

    def __init__(self, parser: SeeYouParser | None = None) -> None:
        """Initialize reader.

        Args:
            parser: Record parser, a default one if None
        """
        self.parser = parser or SeeYouParser()

    def read_lines(
        self,
        lines: Iterable[str],
        sink: WaypointSink,
        file_num: int = 0,
        state: ParserState | None = None,
    ) -> ImportReport:
        """Parse lines and add accepted waypoints to the sink.

        Args:
            lines: Lines of one file, with or without line terminators
            sink: Receiver of accepted waypoints
            file_num: Tag of the file, ignored if a state is given
            state: State to continue from, a new session if None

        Returns:
            Import report

        Raises:
            ImportAbortedError: If more records are rejected than
                ``settings.max_rejections`` allows
        """
        if state is None:
            state = self.parser.new_session(file_num)

        report = ImportReport(file_num=state.file_num)
        max_rejections = self.parser.settings.max_rejections

        for line_number, raw_line in enumerate(lines, start=1):
            line = raw_line.rstrip("\r\n")
            result = self.parser.parse_line(line, state)

            if result.overflow:
                report.overflow_lines.append(line_number)

            if result.status is ParseStatus.ACCEPTED:
                sink.add_waypoint(result.waypoint)
                report.accepted += 1
            elif result.status is ParseStatus.SKIPPED:
                report.skipped += 1
            else:
                self._record_rejection(report, line_number, result.reason, result.detail)
                if max_rejections is not None and report.total_rejected > max_rejections:
                    raise ImportAbortedError(report, max_rejections)

        logger.info("File %d: %s", report.file_num, report.summary())
        return report

    def read_file(self, path: str | Path, sink: WaypointSink, file_num: int = 0) -> ImportReport:
        """Read a SeeYou file into the sink.

        The configured encoding is tried first; on a decoding error the file
        is read again with the fallback encoding.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ImportAbortedError: If too many records are rejected
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Waypoint file not found: {path}")

        settings = self.parser.settings
        try:
            text = path.read_text(encoding=settings.encoding)
        except UnicodeDecodeError as e:
            logger.warning(
                "%s is not valid %s (%s), reading as %s",
                path,
                settings.encoding,
                e.reason,
                settings.fallback_encoding,
            )
            text = path.read_text(encoding=settings.fallback_encoding)

        logger.info("Reading waypoints from %s", path)
        return self.read_lines(text.splitlines(), sink, file_num=file_num)

    @staticmethod
    def _record_rejection(
        report: ImportReport, line_number: int, reason: RejectReason | None, detail: str
    ) -> None:
        report.rejected[reason] += 1
        report.rejected_lines.append(line_number)
        logger.warning("Line %d rejected (%s): %s", line_number, reason.value if reason else "?", detail)
