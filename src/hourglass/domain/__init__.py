"""Domain models for Hourglass."""

from hourglass.domain.models import (
    CANONICAL_UNITS,
    DEFAULT_FORMAT,
    DEFAULT_UNITS,
    ClockFormat,
    ClockMode,
    ClockStyle,
    FormatSpec,
    MixedSpecial,
    PrecisionSpecial,
    UnitDefinition,
    UnitEntry,
    UnitListFormat,
    UnitTable,
    coerce_format_spec,
    modifier_of,
)

__all__ = [
    "CANONICAL_UNITS",
    "DEFAULT_FORMAT",
    "DEFAULT_UNITS",
    "ClockFormat",
    "ClockMode",
    "ClockStyle",
    "FormatSpec",
    "MixedSpecial",
    "PrecisionSpecial",
    "UnitDefinition",
    "UnitEntry",
    "UnitListFormat",
    "UnitTable",
    "coerce_format_spec",
    "modifier_of",
]
