"""Service layer: pattern compilation, parsing, formatting and classification."""

from hourglass.services.classifier import classify_clock_style, is_duration
from hourglass.services.duration_service import DurationService
from hourglass.services.formatter import format_clock, from_minutes
from hourglass.services.parser import to_minutes
from hourglass.services.patterns import PatternRegistry, compile_patterns

__all__ = [
    "DurationService",
    "PatternRegistry",
    "classify_clock_style",
    "compile_patterns",
    "format_clock",
    "from_minutes",
    "is_duration",
    "to_minutes",
]
