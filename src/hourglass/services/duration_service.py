"""Host-facing duration conversion service."""

from collections.abc import Iterable
from typing import Any

from hourglass.domain.models import (
    DEFAULT_FORMAT,
    DEFAULT_UNITS,
    ClockFormat,
    ClockStyle,
    UnitListFormat,
    UnitTable,
    coerce_format_spec,
)
from hourglass.infrastructure.logger import get_logger
from hourglass.services.classifier import classify_clock_style, is_duration
from hourglass.services.formatter import from_minutes
from hourglass.services.parser import to_minutes
from hourglass.services.patterns import PatternRegistry, compile_patterns

logger = get_logger(__name__)


class DurationService:
    """Unit table, compiled patterns and default format in one context.

    ``units`` may be replaced by the host at any time, but parsing,
    classification and formatting keep using the table the current
    registry was compiled from until ``recompile()`` is called. Replace the
    table and recompile in one configuration step before sharing the
    service between threads; nothing here takes a lock.
    """

    def __init__(
        self,
        units: UnitTable = DEFAULT_UNITS,
        default_format: Any = DEFAULT_FORMAT,
    ) -> None:
        """Initialize the service and compile patterns for ``units``.

        Args:
            units: Active unit table
            default_format: Format used by from_minutes when none is given,
                in any shape accepted by coerce_format_spec

        Raises:
            FormatSpecError: If default_format is malformed
        """
        self.units = units
        self.default_format = coerce_format_spec(default_format)
        self.registry: PatternRegistry = compile_patterns(units)

    @property
    def is_stale(self) -> bool:
        """True when ``units`` changed since the last recompile."""
        return self.units != self.registry.units

    def recompile(self) -> PatternRegistry:
        """Rebuild the matchers from the current unit table."""
        self.registry = compile_patterns(self.units)
        return self.registry

    def _check_stale(self) -> None:
        if self.is_stale:
            logger.warning(
                "units_changed_without_recompile",
                compiled=list(self.registry.units.symbols),
                current=list(self.units.symbols),
            )

    def is_duration(self, value: str) -> bool:
        """Return True if ``value`` is any recognized duration form."""
        return is_duration(value, self.registry)

    def to_minutes(self, value: str | int | float, canonical: bool = False) -> float:
        """Convert a duration string to minutes."""
        self._check_stale()
        return to_minutes(value, self.registry, canonical)

    def from_minutes(
        self, minutes: float, spec: Any = None, canonical: bool = False
    ) -> str:
        """Render minutes with ``spec``, or the default format when omitted."""
        self._check_stale()
        fmt: ClockFormat | UnitListFormat = (
            self.default_format if spec is None else coerce_format_spec(spec)
        )
        return from_minutes(minutes, fmt, self.registry.units, canonical)

    def classify_clock_style(self, times: Iterable[str]) -> ClockStyle:
        """Decide whether a batch of durations uses H:MM, H:MM:SS or units."""
        return classify_clock_style(times, self.registry)

    def sum_durations(self, values: Iterable[str | int | float], canonical: bool = False) -> float:
        """Parse every value and return the total in minutes."""
        return sum((self.to_minutes(value, canonical) for value in values), 0.0)

    def reformat(self, value: str, spec: Any = None, canonical: bool = False) -> str:
        """Parse a duration and render it again with ``spec``."""
        return self.from_minutes(self.to_minutes(value, canonical), spec, canonical)
