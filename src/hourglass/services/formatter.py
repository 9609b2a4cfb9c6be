"""Render minutes as duration strings.

Four shapes are supported, selected by the format specification:

- Clock: "H:MM" or "H:MM:SS"
- Unit list: "1d 3h 4min", largest unit first, zero units omitted unless
  marked required
- Mixed: units above one hour followed by a clock tail, e.g. "3d 13:35"
- Precision: a single unit with a fractional value, e.g. "1.50h"
"""

import math

from hourglass.domain.models import (
    ClockFormat,
    ClockMode,
    MixedSpecial,
    PrecisionSpecial,
    UnitEntry,
    UnitListFormat,
    UnitTable,
    modifier_of,
)
from hourglass.infrastructure.exceptions import FormatSpecError


def format_clock(minutes: float, mode: ClockMode = ClockMode.HM) -> str:
    """Render minutes as "H:MM" or "H:MM:SS"; fractions are truncated."""
    if mode == ClockMode.HMS:
        seconds = math.floor(minutes * 60)
        return f"{format_clock(seconds // 60)}:{seconds % 60:02d}"
    whole = math.floor(minutes)
    return f"{whole // 60}:{whole % 60:02d}"


def _sorted_by_modifier(
    entries: tuple[UnitEntry, ...], units: UnitTable, canonical: bool
) -> list[tuple[UnitEntry, float]]:
    pairs = [(entry, modifier_of(entry.unit, units, canonical)) for entry in entries]
    return sorted(pairs, key=lambda pair: pair[1], reverse=True)


def _format_mixed(
    minutes: float,
    spec: UnitListFormat,
    mode: ClockMode,
    units: UnitTable,
    canonical: bool,
) -> str:
    above_hour = [
        (entry, modifier)
        for entry, modifier in _sorted_by_modifier(spec.entries, units, canonical)
        if modifier > 60
    ]
    if not above_hour:
        return format_clock(minutes, mode)
    smallest = min(modifier for _, modifier in above_hour)
    if minutes < smallest:
        return format_clock(minutes, mode)

    units_value = smallest * math.floor(minutes / smallest)
    units_part = _format_units(
        units_value, tuple(entry for entry, _ in above_hour), units, canonical
    )
    return f"{units_part} {format_clock(minutes - units_value, mode)}"


def _format_precision(
    minutes: float, spec: UnitListFormat, digits: int, units: UnitTable, canonical: bool
) -> str:
    ordered = _sorted_by_modifier(spec.entries, units, canonical)
    if not ordered:
        raise FormatSpecError("precision format needs at least one unit")
    entry, modifier = next(
        ((e, m) for e, m in ordered if e.required or m <= minutes),
        ordered[-1],
    )
    return f"{minutes / modifier:.{digits}f}{entry.unit}"


def _format_units(
    minutes: float, entries: tuple[UnitEntry, ...], units: UnitTable, canonical: bool
) -> str:
    ordered = _sorted_by_modifier(entries, units, canonical)
    if not ordered:
        raise FormatSpecError("unit list is empty")

    fragments = []
    remaining = minutes
    for entry, modifier in ordered:
        if modifier <= remaining:
            value = math.floor(remaining / modifier)
            fragments.append(f"{value}{entry.unit}")
            remaining -= value * modifier
        elif entry.required:
            fragments.append(f"0{entry.unit}")
    if not fragments:
        return f"0{ordered[-1][0].unit}"
    return " ".join(fragments)


def from_minutes(
    minutes: float,
    spec: ClockFormat | UnitListFormat,
    units: UnitTable,
    canonical: bool = False,
) -> str:
    """Render ``minutes`` according to ``spec``.

    Args:
        minutes: Duration in minutes; negative values get a leading "-"
        spec: Clock or unit-list format specification
        units: Active unit table used to resolve unit symbols
        canonical: Resolve symbols against the canonical table instead

    Raises:
        FormatSpecError: If the specification is malformed
        UnknownUnitError: If the specification names an unknown unit
    """
    if minutes < 0:
        return "-" + from_minutes(-minutes, spec, units, canonical)

    match spec:
        case ClockFormat(mode=mode):
            return format_clock(minutes, mode)
        case UnitListFormat(special=None):
            return _format_units(minutes, spec.entries, units, canonical)
        case UnitListFormat(special=MixedSpecial(mode=mode)):
            return _format_mixed(minutes, spec, mode, units, canonical)
        case UnitListFormat(special=PrecisionSpecial(digits=digits)):
            if digits < 0:
                raise FormatSpecError(f"precision must be non-negative, got {digits}")
            return _format_precision(minutes, spec, digits, units, canonical)
        case UnitListFormat(special=special):
            raise FormatSpecError(f"unknown special directive: {special!r}")
        case _:
            raise FormatSpecError(f"expected a clock format or a unit list, got {spec!r}")
