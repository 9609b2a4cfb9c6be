"""Hourglass - convert between duration strings and minutes."""

from hourglass.domain.models import (
    CANONICAL_UNITS,
    DEFAULT_FORMAT,
    DEFAULT_UNITS,
    ClockFormat,
    ClockMode,
    ClockStyle,
    UnitListFormat,
    UnitTable,
)
from hourglass.infrastructure.exceptions import (
    FormatSpecError,
    HourglassError,
    InvalidFormatError,
    UnknownUnitError,
)
from hourglass.services.duration_service import DurationService

__version__ = "0.1.0"

__all__ = [
    "CANONICAL_UNITS",
    "DEFAULT_FORMAT",
    "DEFAULT_UNITS",
    "ClockFormat",
    "ClockMode",
    "ClockStyle",
    "DurationService",
    "FormatSpecError",
    "HourglassError",
    "InvalidFormatError",
    "UnitListFormat",
    "UnitTable",
    "UnknownUnitError",
    "__version__",
]
