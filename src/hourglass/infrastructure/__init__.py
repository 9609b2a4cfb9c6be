"""Infrastructure layer for Hourglass.

ConfigManager lives in ``hourglass.infrastructure.config`` and is not
re-exported here because it depends on the domain and service layers.
"""

from hourglass.infrastructure.exceptions import (
    ConfigError,
    DurationError,
    FormatSpecError,
    HourglassError,
    InvalidFormatError,
    UnknownUnitError,
)
from hourglass.infrastructure.logger import get_logger, setup_logging

__all__ = [
    "ConfigError",
    "DurationError",
    "FormatSpecError",
    "HourglassError",
    "InvalidFormatError",
    "UnknownUnitError",
    "get_logger",
    "setup_logging",
]
