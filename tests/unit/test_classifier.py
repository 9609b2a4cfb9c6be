"""Unit tests for duration classification."""

import pytest

from hourglass.domain.models import ClockStyle
from hourglass.services.classifier import classify_clock_style, is_duration
from hourglass.services.patterns import PatternRegistry


class TestIsDuration:
    """Tests for is_duration."""

    @pytest.mark.parametrize("value", ["1h", "1:30", "1:02:03", "1y 3d 3h 4min", "3d 13:35"])
    def test_durations(self, registry: PatternRegistry, value: str) -> None:
        """Test recognized forms."""
        assert is_duration(value, registry) is True

    @pytest.mark.parametrize("value", ["45", "abc", "", "3x", "1h30min", "1:5"])
    def test_not_durations(self, registry: PatternRegistry, value: str) -> None:
        """Test bare numbers and junk are not durations."""
        assert is_duration(value, registry) is False

    def test_non_string(self, registry: PatternRegistry) -> None:
        """Test non-strings never raise."""
        assert is_duration(None, registry) is False  # type: ignore[arg-type]


class TestClassifyClockStyle:
    """Tests for classify_clock_style."""

    def test_units_short_circuit(self, registry: PatternRegistry) -> None:
        """Test one unit-bearing item overrides earlier clocks."""
        assert classify_clock_style(["1:30", "2h"], registry) == ClockStyle.UNITS_USED

    def test_mixed_counts_as_units(self, registry: PatternRegistry) -> None:
        """Test mixed items also force UNITS_USED."""
        assert classify_clock_style(["1:02:03", "1d 2:00"], registry) == ClockStyle.UNITS_USED

    def test_hms_detection(self, registry: PatternRegistry) -> None:
        """Test any H:MM:SS item gives CLOCK_HMS."""
        assert classify_clock_style(["1:02:03", "4:05"], registry) == ClockStyle.CLOCK_HMS

    def test_plain_clocks(self, registry: PatternRegistry) -> None:
        """Test H:MM only."""
        assert classify_clock_style(["1:30", "0:45"], registry) == ClockStyle.CLOCK_HM

    def test_empty_batch(self, registry: PatternRegistry) -> None:
        """Test an empty batch is H:MM."""
        assert classify_clock_style([], registry) == ClockStyle.CLOCK_HM

    def test_unrecognized_items_ignored(self, registry: PatternRegistry) -> None:
        """Test junk neither forces units nor seconds."""
        assert classify_clock_style(["abc", "45"], registry) == ClockStyle.CLOCK_HM

    def test_stops_at_first_units_item(self, registry: PatternRegistry) -> None:
        """Test the scan stops once units are seen."""
        seen: list[str] = []

        def items():
            for value in ["1:30", "2h", "1:02:03"]:
                seen.append(value)
                yield value

        assert classify_clock_style(items(), registry) == ClockStyle.UNITS_USED
        assert seen == ["1:30", "2h"]
