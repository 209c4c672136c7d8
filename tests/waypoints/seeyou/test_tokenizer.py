"""Tests for SeeYou record tokenizer."""

import pytest

from glidepoint.waypoints.seeyou.errors import LineTooLongError
from glidepoint.waypoints.seeyou.tokenizer import MAX_LINE_LENGTH, TokenizedRecord, tokenize


class TestTokenize:
    """Test field splitting."""

    def test_plain_fields(self) -> None:
        """Test splitting unquoted fields."""
        record = tokenize("a,b,c")

        assert record.fields == ["a", "b", "c"]
        assert not record.overflow

    def test_quoted_comma_is_literal(self) -> None:
        """Test commas inside quotes do not split."""
        record = tokenize('"Grass, uphill",x')

        assert record.fields == ["Grass, uphill", "x"]

    def test_quotes_removed_and_fields_trimmed(self) -> None:
        """Test quote characters are dropped and whitespace trimmed."""
        record = tokenize(' "Alpha" , A1 ,"Main field"')

        assert record.fields == ["Alpha", "A1", "Main field"]

    def test_empty_fields_kept(self) -> None:
        """Test consecutive commas give empty fields."""
        record = tokenize("a,,b,")

        assert record.fields == ["a", "", "b", ""]

    def test_custom_quote_char(self) -> None:
        """Test a different quote character."""
        record = tokenize("'x,y',z", quote_char="'")

        assert record.fields == ["x,y", "z"]

    def test_quoting_disabled(self) -> None:
        """Test empty quote character disables quoting."""
        record = tokenize('"x,y"', quote_char="")

        assert record.fields == ['"x', 'y"']

    def test_end_to_end_record(self) -> None:
        """Test a full SeeYou record."""
        record = tokenize(
            'Alpha,A1,US,5115.900N,00715.900W,458.0m,5,090,1200m,118.500,"Main field"'
        )

        assert len(record) == 11
        assert record.fields[3] == "5115.900N"
        assert record.fields[10] == "Main field"


class TestOverflow:
    """Test reporting of records with too many fields."""

    def test_overflow_keeps_all_fields(self) -> None:
        """Test extra fields are kept and reported."""
        line = ",".join(str(i) for i in range(25))

        record = tokenize(line, max_tokens=20)

        assert record.overflow
        assert len(record.fields) == 25
        assert record.fields[24] == "24"

    def test_exactly_max_tokens_is_not_overflow(self) -> None:
        """Test a record with exactly the maximum field count."""
        line = ",".join("x" * 20)

        record = tokenize(line, max_tokens=20)

        assert not record.overflow

    def test_record_is_immutable(self) -> None:
        """Test TokenizedRecord is frozen."""
        record = TokenizedRecord(["a"])

        with pytest.raises(AttributeError):
            record.overflow = True  # type: ignore[misc]


class TestLineLength:
    """Test line length limit."""

    def test_longest_allowed_line(self) -> None:
        """Test a line at the limit is accepted."""
        record = tokenize("x" * MAX_LINE_LENGTH)

        assert record.fields == ["x" * MAX_LINE_LENGTH]

    def test_line_too_long(self) -> None:
        """Test a line over the limit raises."""
        with pytest.raises(LineTooLongError) as exc_info:
            tokenize("x" * (MAX_LINE_LENGTH + 1))

        assert exc_info.value.length == MAX_LINE_LENGTH + 1
        assert exc_info.value.limit == MAX_LINE_LENGTH

    def test_custom_line_limit(self) -> None:
        """Test configurable line limit."""
        with pytest.raises(LineTooLongError):
            tokenize("abcdef", max_line_length=5)
