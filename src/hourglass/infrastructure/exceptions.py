"""Exception hierarchy for Hourglass duration parsing and formatting."""


class HourglassError(Exception):
    """Base exception for all Hourglass errors."""

    pass


class DurationError(HourglassError):
    """Base error for a duration that cannot be converted.

    Attributes:
        message: Error message describing what went wrong
        remediation: Optional guidance on how to fix the input
    """

    def __init__(self, message: str, remediation: str | None = None):
        """Initialize duration error.

        Args:
            message: Error message
            remediation: Optional remediation guidance
        """
        super().__init__(message)
        self.remediation = remediation

    def __str__(self) -> str:
        """Return formatted error message with remediation if available."""
        if self.remediation:
            return f"{self.args[0]}\n\nRemediation: {self.remediation}"
        return str(self.args[0])


class UnknownUnitError(DurationError):
    """A unit symbol is missing from the selected unit table.

    The canonical table only knows "min", "h" and "d"; the active table is
    whatever the host configured.
    """

    def __init__(self, unit: str, canonical: bool = False):
        table = "canonical" if canonical else "active"
        super().__init__(
            f"Unknown unit: {unit!r} is not in the {table} unit table",
            remediation=(
                "Use a canonical unit (min, h, d)"
                if canonical
                else "Add the unit to the unit table and recompile the patterns"
            ),
        )
        self.unit = unit
        self.canonical = canonical


class InvalidFormatError(DurationError):
    """Input matches none of the clock, unit-run, mixed or bare number forms."""

    def __init__(self, value: str):
        super().__init__(
            f"Invalid duration format: {value!r}",
            remediation="Expected e.g. '1:30', '1:02:30', '1h 30min', '2d 1:30' or '45'",
        )
        self.value = value


class FormatSpecError(HourglassError):
    """A format specification is structurally invalid."""

    def __init__(self, detail: str):
        super().__init__(f"Invalid format specification: {detail}")
        self.detail = detail


class ConfigError(HourglassError):
    """Configuration file or environment value could not be loaded."""

    pass
