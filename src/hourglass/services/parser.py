"""Duration string parser.

Reduces any recognized duration string to a float number of minutes.
Forms are tried in order, each as a whole-string match:

1. Clock: "H:MM" or "H:MM:SS" (hours unbounded)
2. Unit run: "1y 3d 3h 4min", whitespace between number and unit optional
3. Mixed: a unit run followed by a clock tail, e.g. "3d 13:35"
4. Bare number: "45" or "1.5", taken as minutes
"""

from hourglass.domain.models import modifier_of
from hourglass.infrastructure.exceptions import InvalidFormatError, UnknownUnitError
from hourglass.infrastructure.logger import get_logger
from hourglass.services.patterns import (
    BARE_NUMBER_PATTERN,
    LOOSE_TOKEN_PATTERN,
    LOOSE_UNITS_PATTERN,
    PatternRegistry,
)

logger = get_logger(__name__)


def clock_to_minutes(text: str) -> float:
    """Convert an already-matched "H:MM" or "H:MM:SS" string to minutes."""
    hours, minutes, *rest = (int(part) for part in text.split(":"))
    seconds = rest[0] if rest else 0
    return hours * 60 + minutes + seconds / 60.0


def units_to_minutes(text: str, registry: PatternRegistry, canonical: bool = False) -> float:
    """Sum every "number unit" token of an already-matched unit run."""
    minutes = 0.0
    for match in registry.token.finditer(text):
        value, unit = match.group(1), match.group(2)
        minutes += float(value) * modifier_of(unit, registry.units, canonical)
    return minutes


def to_minutes(
    value: str | int | float, registry: PatternRegistry, canonical: bool = False
) -> float:
    """Convert a duration to minutes.

    Args:
        value: Duration string, or a number already expressed in minutes
        registry: Compiled patterns (and the unit table they came from)
        canonical: Resolve units against the canonical table (min, h, d)
            instead of the active one

    Returns:
        Minutes as a float; seconds contribute fractional minutes

    Raises:
        InvalidFormatError: If the string matches no duration form
        UnknownUnitError: If a unit is absent from the selected table

    Examples:
        >>> to_minutes("1:02:30", registry)
        62.5
        >>> to_minutes("2d 1:30", registry)
        2970.0
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    if not isinstance(value, str):
        raise InvalidFormatError(repr(value))

    if registry.clock.match(value):
        return clock_to_minutes(value)

    if registry.units_run.match(value):
        return units_to_minutes(value, registry, canonical)

    mixed = registry.mixed.match(value)
    if mixed:
        units_part, clock_part = mixed.group(1), mixed.group(2)
        return to_minutes(units_part, registry, canonical) + to_minutes(
            clock_part, registry, canonical
        )

    if BARE_NUMBER_PATTERN.match(value):
        return float(value)

    # Shaped like a unit run, so name the unit nobody defined
    if LOOSE_UNITS_PATTERN.match(value):
        for match in LOOSE_TOKEN_PATTERN.finditer(value):
            if match.group(2) not in registry.symbols:
                logger.debug("duration_parse_failed", value=value, unit=match.group(2))
                raise UnknownUnitError(match.group(2), canonical=canonical)

    logger.debug("duration_parse_failed", value=value)
    raise InvalidFormatError(value)
