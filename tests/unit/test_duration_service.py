"""Unit tests for DurationService."""

import pytest

from hourglass.domain.models import (
    DEFAULT_UNITS,
    ClockFormat,
    ClockMode,
    ClockStyle,
    UnitListFormat,
)
from hourglass.infrastructure.exceptions import FormatSpecError, InvalidFormatError
from hourglass.services import DurationService


class TestDurationService:
    """Tests for the host-facing service."""

    def test_defaults(self, service: DurationService) -> None:
        """Test default units, format and compiled registry."""
        assert service.units == DEFAULT_UNITS
        assert service.registry.units == DEFAULT_UNITS
        assert service.is_stale is False

    def test_to_minutes(self, service: DurationService) -> None:
        """Test parsing through the service."""
        assert service.to_minutes("1h 30min") == 90.0
        assert service.to_minutes("2d 1:30") == 2970.0

    def test_from_minutes_default_format(self, service: DurationService) -> None:
        """Test the default days plus h:mm format."""
        assert service.from_minutes(1470) == "1d 0:30"
        assert service.from_minutes(30) == "0:30"

    def test_from_minutes_with_spec(self, service: DurationService) -> None:
        """Test model and host-shaped specs."""
        assert service.from_minutes(90, ClockFormat(mode=ClockMode.HMS)) == "1:30:00"
        assert service.from_minutes(90, ["h", "min"]) == "1h 30min"
        assert service.from_minutes(90, "h:mm") == "1:30"

    def test_custom_default_format(self) -> None:
        """Test a host-supplied default format."""
        service = DurationService(default_format=["h", ["min", True]])
        assert service.default_format == UnitListFormat.of("h", ("min", True))
        assert service.from_minutes(120) == "2h 0min"

    def test_bad_default_format(self) -> None:
        """Test a malformed default format fails early."""
        with pytest.raises(FormatSpecError):
            DurationService(default_format="hh:mm")

    def test_bad_spec(self, service: DurationService) -> None:
        """Test a malformed spec fails at format time."""
        with pytest.raises(FormatSpecError):
            service.from_minutes(10, ["h", {"special": "bogus"}])

    def test_is_duration(self, service: DurationService) -> None:
        """Test classification helpers."""
        assert service.is_duration("1:30") is True
        assert service.is_duration("45") is False

    def test_classify_clock_style(self, service: DurationService) -> None:
        """Test batch classification."""
        assert service.classify_clock_style(["1:30", "2h"]) == ClockStyle.UNITS_USED

    def test_sum_durations(self, service: DurationService) -> None:
        """Test totals across notations."""
        assert service.sum_durations(["1:30", "2h", "45", 15]) == 270.0
        assert service.sum_durations([]) == 0.0

    def test_sum_durations_invalid(self, service: DurationService) -> None:
        """Test one bad item fails the whole sum."""
        with pytest.raises(InvalidFormatError):
            service.sum_durations(["1h", "soon"])

    def test_reformat(self, service: DurationService) -> None:
        """Test parse and render in one step."""
        assert service.reformat("1:30", ["h", "min"]) == "1h 30min"
        assert service.reformat("1d 30min") == "1d 0:30"


class TestRecompile:
    """Tests for unit table changes and recompilation."""

    def test_changes_wait_for_recompile(self, service: DurationService) -> None:
        """Test a new table is not used until recompile()."""
        service.units = DEFAULT_UNITS.replace("d", 480)

        assert service.is_stale is True
        assert service.to_minutes("1d") == 1440.0

        service.recompile()

        assert service.is_stale is False
        assert service.to_minutes("1d") == 480.0
        assert service.to_minutes("1d", canonical=True) == 1440.0

    def test_new_unit_after_recompile(self, service: DurationService) -> None:
        """Test a unit added by the host becomes parseable."""
        service.units = DEFAULT_UNITS.replace("q", 15)
        assert service.is_duration("2q") is False

        registry = service.recompile()

        assert registry is service.registry
        assert service.is_duration("2q") is True
        assert service.to_minutes("2q") == 30.0
        assert service.from_minutes(45, ["q"]) == "3q"
