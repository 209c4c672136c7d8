"""Exceptions raised while reading SeeYou waypoint files."""


class SeeYouError(Exception):
    """Base class for SeeYou import errors."""


class FieldFormatError(SeeYouError, ValueError):
    """Raised when a field does not match its expected micro-format."""

    def __init__(self, kind: str, token: str, problem: str) -> None:
        self.kind = kind
        self.token = token
        self.problem = problem
        super().__init__(f"Invalid {kind} {token!r}: {problem}")


class LineTooLongError(SeeYouError):
    """Raised when a record exceeds the maximum line length."""

    def __init__(self, length: int, limit: int) -> None:
        self.length = length
        self.limit = limit
        super().__init__(f"Line has {length} characters, limit is {limit}")


class ImportAbortedError(SeeYouError):
    """Raised by the reader when a file has more rejected records than allowed."""

    def __init__(self, report, limit: int) -> None:
        self.report = report
        self.limit = limit
        super().__init__(
            f"Import aborted after {report.total_rejected} rejected records (limit {limit})"
        )
