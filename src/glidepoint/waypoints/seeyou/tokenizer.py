"""Field splitting for SeeYou records.

A record is a comma separated list of fields. Fields can be wrapped in a
quote character, inside which commas are literal. Quote characters are
removed and every field is trimmed.

Typical usage:
    record = tokenize('Alpha,A1,US,5115.900N,00715.900W,458.0m,5,090,1200m,118.500,"Main field"')
    record.fields[-1]  # 'Main field'
"""

from dataclasses import dataclass

from glidepoint.waypoints.seeyou.errors import LineTooLongError

MAX_TOKENS = 20
MAX_LINE_LENGTH = 254


@dataclass(frozen=True)
class TokenizedRecord:
    """Fields of one record.

    Attributes:
        fields: All fields in file order
        overflow: True if the record has more fields than the configured
            maximum. The fields are kept; callers decide what to do.
    """

    fields: list[str]
    overflow: bool = False

    def __len__(self) -> int:
        return len(self.fields)


def tokenize(
    line: str,
    quote_char: str = '"',
    max_tokens: int = MAX_TOKENS,
    max_line_length: int = MAX_LINE_LENGTH,
) -> TokenizedRecord:
    """Split a record into fields.

    Args:
        line: Raw record without line terminator
        quote_char: Character delimiting quoted spans, empty to disable quoting
        max_tokens: Number of fields above which the record is flagged as overflowing
        max_line_length: Longest accepted line, in characters

    Returns:
        TokenizedRecord with the trimmed fields

    Raises:
        LineTooLongError: If the line is longer than max_line_length
    """
    if len(line) > max_line_length:
        raise LineTooLongError(len(line), max_line_length)

    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    for ch in line:
        if quote_char and ch == quote_char:
            in_quotes = not in_quotes
        elif ch == "," and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(ch)

    fields.append("".join(current).strip())

    return TokenizedRecord(fields, overflow=len(fields) > max_tokens)
