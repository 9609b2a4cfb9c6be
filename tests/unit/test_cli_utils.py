"""Unit tests for CLI utility functions."""

import pytest

from hourglass.cli.utils import parse_format_option
from hourglass.domain.models import (
    ClockFormat,
    ClockMode,
    MixedSpecial,
    PrecisionSpecial,
    UnitEntry,
    UnitListFormat,
)


class TestParseFormatOption:
    """Tests for parse_format_option function."""

    def test_clock(self):
        """Test a lone clock token."""
        assert parse_format_option("h:mm") == ClockFormat(mode=ClockMode.HM)
        assert parse_format_option("h:mm:ss") == ClockFormat(mode=ClockMode.HMS)

    def test_units(self):
        """Test optional and required units."""
        assert parse_format_option("d,h!,min!") == UnitListFormat(
            entries=(
                UnitEntry(unit="d"),
                UnitEntry(unit="h", required=True),
                UnitEntry(unit="min", required=True),
            )
        )

    def test_whitespace_and_empty_tokens_ignored(self):
        """Test spaces around tokens and trailing commas."""
        assert parse_format_option(" d , h ,") == UnitListFormat.of("d", "h")

    def test_mixed(self):
        """Test units followed by a clock tail."""
        spec = parse_format_option("d,h:mm")
        assert spec == UnitListFormat.of("d", special=MixedSpecial(mode=ClockMode.HM))

    def test_precision(self):
        """Test a precision token."""
        spec = parse_format_option("h,min,.2")
        assert spec == UnitListFormat.of("h", "min", special=PrecisionSpecial(digits=2))

    @pytest.mark.parametrize(
        "text,message",
        [
            ("", "Empty format"),
            (" , ", "Empty format"),
            ("d,h:mm,.2", "Only one clock tail or precision token"),
            ("d,h:mm,h:mm:ss", "Only one clock tail or precision token"),
            ("d,3h", "Invalid format token"),
            ("d,.x", "Invalid format token"),
            ("d,hh:mm", "Invalid format token"),
            (".2", "Format lists no units"),
        ],
    )
    def test_invalid(self, text, message):
        """Test malformed format options."""
        with pytest.raises(ValueError, match=message):
            parse_format_option(text)
