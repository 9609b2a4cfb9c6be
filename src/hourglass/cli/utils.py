"""Utility functions for CLI argument parsing and validation.

Format Option Syntax
--------------------
``--format`` (and the HOURGLASS_FORMAT environment variable) take a
comma-separated list of tokens:

- ``h:mm`` or ``h:mm:ss`` on its own: clock notation
- ``d``: optional unit, omitted when its value is zero
- ``d!``: required unit, always shown
- ``h:mm`` / ``h:mm:ss`` after units: mixed notation, units above one hour
  followed by a clock tail
- ``.N``: render a single unit with N decimal places

Examples:
    "h:mm"        -> 1:30
    "d,h!,min!"   -> 1d 0h 30min
    "d,h:mm"      -> 1d 0:30
    "h,min,.2"    -> 1.50h
"""

import re

from hourglass.domain.models import (
    ClockFormat,
    ClockMode,
    MixedSpecial,
    PrecisionSpecial,
    UnitEntry,
    UnitListFormat,
)

UNIT_TOKEN_PATTERN = re.compile(r"^([^\s\d.:!,]+)(!?)$")
PRECISION_TOKEN_PATTERN = re.compile(r"^\.(\d+)$")


def parse_format_option(text: str) -> ClockFormat | UnitListFormat:
    """
    Parse a ``--format`` option value into a format specification.

    Args:
        text: Comma-separated format tokens, e.g. 'd,h:mm' or 'h!,min!'

    Returns:
        ClockFormat or UnitListFormat

    Raises:
        ValueError: If a token is malformed, more than one special token
                   (clock tail or precision) is given, or no unit is listed
                   alongside a special token

    Examples:
        >>> parse_format_option('h:mm')
        ClockFormat(kind='clock', mode=<ClockMode.HM: 'h:mm'>)
        >>> parse_format_option('d,h:mm').special
        MixedSpecial(kind='mixed', mode=<ClockMode.HM: 'h:mm'>)
    """
    tokens = [token.strip() for token in text.split(",") if token.strip()]
    if not tokens:
        raise ValueError("Empty format. Expected e.g. 'h:mm', 'd,h:mm' or 'h!,min!'")

    if len(tokens) == 1 and tokens[0] in {mode.value for mode in ClockMode}:
        return ClockFormat(mode=ClockMode(tokens[0]))

    entries: list[UnitEntry] = []
    special: MixedSpecial | PrecisionSpecial | None = None
    for token in tokens:
        precision = PRECISION_TOKEN_PATTERN.match(token)
        unit = UNIT_TOKEN_PATTERN.match(token)

        if token in {mode.value for mode in ClockMode} or precision:
            if special is not None:
                raise ValueError(f"Only one clock tail or precision token allowed: '{text}'")
            special = (
                PrecisionSpecial(digits=int(precision.group(1)))
                if precision
                else MixedSpecial(mode=ClockMode(token))
            )
        elif unit:
            entries.append(UnitEntry(unit=unit.group(1), required=bool(unit.group(2))))
        else:
            raise ValueError(
                f"Invalid format token: '{token}'. "
                "Expected a unit ('d'), a required unit ('d!'), 'h:mm', 'h:mm:ss' or '.N'"
            )

    if not entries:
        raise ValueError(f"Format lists no units: '{text}'")

    return UnitListFormat(entries=tuple(entries), special=special)
