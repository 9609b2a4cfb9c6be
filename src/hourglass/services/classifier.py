"""Duration string classification."""

from collections.abc import Iterable

from hourglass.domain.models import ClockStyle
from hourglass.services.patterns import PatternRegistry


def is_duration(value: str, registry: PatternRegistry) -> bool:
    """Return True if ``value`` is a unit run, a mixed duration or a clock."""
    if not isinstance(value, str):
        return False
    return bool(
        registry.units_run.match(value)
        or registry.mixed.match(value)
        or registry.clock.match(value)
    )


def classify_clock_style(times: Iterable[str], registry: PatternRegistry) -> ClockStyle:
    """Decide which notation a batch of durations was written in.

    A single unit-bearing item anywhere in the batch makes the result
    UNITS_USED. Otherwise any H:MM:SS item makes it CLOCK_HMS, and a batch
    of plain H:MM items (or an empty one) is CLOCK_HM.
    """
    style = ClockStyle.CLOCK_HM
    for value in times:
        if registry.units_run.match(value) or registry.mixed.match(value):
            return ClockStyle.UNITS_USED
        if registry.clock_hms.match(value):
            style = ClockStyle.CLOCK_HMS
    return style
