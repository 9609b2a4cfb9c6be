"""Core domain models for Hourglass.

Durations are exchanged as a plain float count of minutes. The models here
describe the two pieces of host configuration that give those minutes a
textual shape: the unit table (symbol -> minutes per unit) and the format
specification used to render minutes back into a string.
"""

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from hourglass.infrastructure.exceptions import FormatSpecError, UnknownUnitError

# Minutes per unit
MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR
MINUTES_PER_WEEK = 7 * MINUTES_PER_DAY
MINUTES_PER_MONTH_APPROX = 30 * MINUTES_PER_DAY
MINUTES_PER_YEAR_APPROX = 365.25 * MINUTES_PER_DAY


class UnitDefinition(BaseModel):
    """A named duration multiplier.

    Attributes:
        symbol: Unit symbol as written after a number, e.g. "h" or "min"
        modifier: Minutes per one unit
    """

    model_config = ConfigDict(frozen=True)

    symbol: str = Field(min_length=1)
    modifier: float = Field(gt=0)

    @field_validator("symbol")
    @classmethod
    def validate_symbol(cls, v: str) -> str:
        """Reject symbols that would collide with the number or clock grammar."""
        if any(c.isspace() or c.isdigit() or c in ".:" for c in v):
            raise ValueError(f"Unit symbol {v!r} may not contain digits, whitespace, '.' or ':'")
        return v


class UnitTable(BaseModel):
    """Ordered set of unit definitions with unique symbols."""

    model_config = ConfigDict(frozen=True)

    units: tuple[UnitDefinition, ...] = ()

    @field_validator("units")
    @classmethod
    def validate_unique_symbols(
        cls, v: tuple[UnitDefinition, ...]
    ) -> tuple[UnitDefinition, ...]:
        """Ensure every symbol appears once."""
        seen: set[str] = set()
        for unit in v:
            if unit.symbol in seen:
                raise ValueError(f"Duplicate unit symbol: {unit.symbol!r}")
            seen.add(unit.symbol)
        return v

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, float]) -> "UnitTable":
        """Build a table from a symbol -> modifier mapping, keeping its order."""
        return cls(
            units=tuple(
                UnitDefinition(symbol=symbol, modifier=modifier)
                for symbol, modifier in mapping.items()
            )
        )

    @property
    def symbols(self) -> tuple[str, ...]:
        return tuple(unit.symbol for unit in self.units)

    def __contains__(self, symbol: object) -> bool:
        return any(unit.symbol == symbol for unit in self.units)

    def get(self, symbol: str) -> float | None:
        """Return the modifier for a symbol, or None if it is absent."""
        for unit in self.units:
            if unit.symbol == symbol:
                return unit.modifier
        return None

    def replace(self, symbol: str, modifier: float) -> "UnitTable":
        """Return a copy with the unit redefined, or appended when new."""
        if symbol in self:
            units = tuple(
                UnitDefinition(symbol=symbol, modifier=modifier) if u.symbol == symbol else u
                for u in self.units
            )
        else:
            units = self.units + (UnitDefinition(symbol=symbol, modifier=modifier),)
        return UnitTable(units=units)


CANONICAL_UNITS = UnitTable.from_mapping(
    {"min": 1, "h": MINUTES_PER_HOUR, "d": MINUTES_PER_DAY}
)

DEFAULT_UNITS = UnitTable.from_mapping(
    {
        "min": 1,
        "h": MINUTES_PER_HOUR,
        "d": MINUTES_PER_DAY,
        "w": MINUTES_PER_WEEK,
        "m": MINUTES_PER_MONTH_APPROX,
        "y": MINUTES_PER_YEAR_APPROX,
    }
)


def modifier_of(unit: str, units: UnitTable, canonical: bool = False) -> float:
    """Return minutes per one ``unit``.

    Args:
        unit: Unit symbol
        units: Active unit table
        canonical: Look the unit up in CANONICAL_UNITS instead of ``units``

    Raises:
        UnknownUnitError: If the symbol is absent from the selected table
    """
    table = CANONICAL_UNITS if canonical else units
    modifier = table.get(unit)
    if modifier is None:
        raise UnknownUnitError(unit, canonical=canonical)
    return modifier


class ClockMode(str, Enum):
    """Clock notation flavours."""

    HM = "h:mm"
    HMS = "h:mm:ss"


class ClockStyle(str, Enum):
    """Result of classifying a batch of duration strings."""

    CLOCK_HMS = "h:mm:ss"
    CLOCK_HM = "h:mm"
    UNITS_USED = "units"


class UnitEntry(BaseModel):
    """One unit in a unit-list format; required units are shown even at zero."""

    model_config = ConfigDict(frozen=True)

    unit: str = Field(min_length=1)
    required: bool = False


class MixedSpecial(BaseModel):
    """Render units above one hour, then a clock tail for the remainder."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["mixed"] = "mixed"
    mode: ClockMode = ClockMode.HM


class PrecisionSpecial(BaseModel):
    """Render a single unit with a fractional value."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["precision"] = "precision"
    digits: int = Field(default=0, ge=0)


Special = Annotated[MixedSpecial | PrecisionSpecial, Field(discriminator="kind")]


class ClockFormat(BaseModel):
    """Render minutes as H:MM or H:MM:SS."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["clock"] = "clock"
    mode: ClockMode = ClockMode.HM


class UnitListFormat(BaseModel):
    """Render minutes as a list of "<value><unit>" fragments."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["units"] = "units"
    entries: tuple[UnitEntry, ...] = ()
    special: Special | None = None

    @classmethod
    def of(
        cls,
        *entries: str | tuple[str, bool],
        special: MixedSpecial | PrecisionSpecial | None = None,
    ) -> "UnitListFormat":
        """Shorthand: ``UnitListFormat.of("d", ("h", True), special=...)``."""
        return cls(
            entries=tuple(
                UnitEntry(unit=e) if isinstance(e, str) else UnitEntry(unit=e[0], required=e[1])
                for e in entries
            ),
            special=special,
        )


FormatSpec = Annotated[ClockFormat | UnitListFormat, Field(discriminator="kind")]

_format_spec_adapter: TypeAdapter[ClockFormat | UnitListFormat] = TypeAdapter(FormatSpec)

# Days, then an h:mm clock tail for anything under a day
DEFAULT_FORMAT = UnitListFormat.of("d", special=MixedSpecial(mode=ClockMode.HM))


def _coerce_special(value: Any) -> MixedSpecial | PrecisionSpecial:
    if isinstance(value, bool):
        raise FormatSpecError(f"unknown special directive: {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise FormatSpecError(f"precision must be non-negative, got {value}")
        return PrecisionSpecial(digits=value)
    if isinstance(value, str):
        try:
            return MixedSpecial(mode=ClockMode(value))
        except ValueError:
            pass
    raise FormatSpecError(f"unknown special directive: {value!r}")


def _coerce_entry(item: Any) -> UnitEntry:
    if isinstance(item, str):
        return UnitEntry(unit=item)
    if isinstance(item, Mapping):
        return UnitEntry(**item)
    if isinstance(item, (list, tuple)) and len(item) == 2 and isinstance(item[0], str):
        return UnitEntry(unit=item[0], required=bool(item[1]))
    raise FormatSpecError(f"unrecognized unit entry: {item!r}")


def _coerce_unit_list(items: Iterable[Any]) -> UnitListFormat:
    entries: list[UnitEntry] = []
    special: MixedSpecial | PrecisionSpecial | None = None
    for item in items:
        if isinstance(item, Mapping) and "special" in item:
            if special is not None:
                raise FormatSpecError("at most one special directive is allowed")
            special = _coerce_special(item["special"])
        else:
            entries.append(_coerce_entry(item))
    return UnitListFormat(entries=tuple(entries), special=special)


def coerce_format_spec(raw: Any) -> ClockFormat | UnitListFormat:
    """Turn a host-supplied format description into a FormatSpec.

    Accepted shapes:
        - a ClockFormat or UnitListFormat instance (returned unchanged)
        - "h:mm" or "h:mm:ss"
        - a mapping with a ``kind`` key, validated as a FormatSpec model
        - a list of unit entries, where each item is a unit symbol, a
          ``[unit, required]`` pair, a ``{"unit": ..., "required": ...}``
          mapping, or a ``{"special": "h:mm" | "h:mm:ss" | digits}`` mapping

    Raises:
        FormatSpecError: If the description has none of these shapes
    """
    if isinstance(raw, (ClockFormat, UnitListFormat)):
        return raw
    if isinstance(raw, str):
        try:
            return ClockFormat(mode=ClockMode(raw))
        except ValueError as e:
            raise FormatSpecError(f"unknown clock format: {raw!r}") from e
    try:
        if isinstance(raw, Mapping) and "kind" in raw:
            return _format_spec_adapter.validate_python(raw)
        if isinstance(raw, (list, tuple)):
            return _coerce_unit_list(raw)
    except ValidationError as e:
        raise FormatSpecError(str(e)) from e
    raise FormatSpecError(f"expected a clock format or a list of units, got {raw!r}")
