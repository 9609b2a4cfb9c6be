"""Compiled duration matchers.

A PatternRegistry is an immutable snapshot built from one unit table. The
host recompiles (and swaps in the new registry) whenever it changes the
table; parsing and classification only ever see a consistent snapshot.
"""

import re
from dataclasses import dataclass

from hourglass.domain.models import CANONICAL_UNITS, UnitTable
from hourglass.infrastructure.logger import get_logger

logger = get_logger(__name__)

NUMBER_RE = r"[0-9]+(?:\.[0-9]*)?"
CLOCK_RE = r"[0-9]+(?::[0-9]{2}){1,2}"
BARE_NUMBER_PATTERN = re.compile(rf"\A{NUMBER_RE}\Z")
CLOCK_HMS_ONLY_PATTERN = re.compile(r"\A[0-9]+:[0-9]{2}:[0-9]{2}\Z")

# Any run of letters in unit position; used only to name an unknown unit
_LOOSE_TOKEN_RE = rf"({NUMBER_RE})[ \t]*([^\W\d_]+)"
LOOSE_TOKEN_PATTERN = re.compile(_LOOSE_TOKEN_RE)
LOOSE_UNITS_PATTERN = re.compile(
    rf"\A(?:{_LOOSE_TOKEN_RE})(?:[ \t]+(?:{_LOOSE_TOKEN_RE}))*(?:[ \t]+{CLOCK_RE})?\Z"
)


def symbol_alternation(symbols: set[str] | frozenset[str]) -> str:
    """Build a regex alternation trying longer symbols first.

    Sorting by length keeps "min" from being read as a shorter symbol
    that happens to be its prefix, e.g. "m".
    """
    ordered = sorted(symbols, key=lambda s: (-len(s), s))
    return "|".join(re.escape(s) for s in ordered)


@dataclass(frozen=True)
class PatternRegistry:
    """Matchers derived from a unit table.

    Attributes:
        units: The unit table the patterns were compiled from
        symbols: Canonical plus active unit symbols
        token: One "number unit" token; group 1 is the number, group 2 the unit
        units_run: Whole-string run of tokens separated by whitespace
        clock: Whole-string H:MM or H:MM:SS
        clock_hms: Whole-string H:MM:SS only
        mixed: Unit run, whitespace, clock tail; groups 1 and 2 hold the parts
    """

    units: UnitTable
    symbols: frozenset[str]
    token: re.Pattern[str]
    units_run: re.Pattern[str]
    clock: re.Pattern[str]
    clock_hms: re.Pattern[str]
    mixed: re.Pattern[str]


def compile_patterns(units: UnitTable) -> PatternRegistry:
    """Compile the matchers for ``units`` merged with the canonical units."""
    symbols = frozenset(CANONICAL_UNITS.symbols) | frozenset(units.symbols)
    token_re = rf"({NUMBER_RE})[ \t]*({symbol_alternation(symbols)})"
    # Non-capturing copy so run/mixed groups stay predictable
    bare_token_re = rf"{NUMBER_RE}[ \t]*(?:{symbol_alternation(symbols)})"
    run_re = rf"{bare_token_re}(?:[ \t]+{bare_token_re})*"

    registry = PatternRegistry(
        units=units,
        symbols=symbols,
        token=re.compile(token_re),
        units_run=re.compile(rf"\A{run_re}\Z"),
        clock=re.compile(rf"\A{CLOCK_RE}\Z"),
        clock_hms=CLOCK_HMS_ONLY_PATTERN,
        mixed=re.compile(rf"\A({run_re})[ \t]+({CLOCK_RE})\Z"),
    )
    logger.debug("patterns_compiled", symbol_count=len(symbols))
    return registry
