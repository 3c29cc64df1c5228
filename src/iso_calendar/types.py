"""Shared types: calendar field tuples, Duration, Format and Weekday."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import NamedTuple, Tuple, Union


class Microsecond(NamedTuple):
    """Sub-second value with its display precision.

    ``precision`` is the number of digits shown when formatting and is
    independent of ``value``: ``(0, 3)`` renders as ``.000`` while ``(0, 0)``
    omits the fractional part entirely.
    """

    value: int
    precision: int


class CalendarDate(NamedTuple):
    year: int
    month: int
    day: int


class ClockTime(NamedTuple):
    hour: int
    minute: int
    second: int
    microsecond: Microsecond


class NaiveDateTime(NamedTuple):
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    microsecond: Microsecond

    @property
    def date(self) -> CalendarDate:
        return CalendarDate(self.year, self.month, self.day)

    @property
    def time(self) -> ClockTime:
        return ClockTime(self.hour, self.minute, self.second, self.microsecond)


class DayFraction(NamedTuple):
    """``numerator / denominator`` of one calendar day, always in [0, 1)."""

    numerator: int
    denominator: int


# (days since 0000-01-01, fraction of that day)
IsoDays = Tuple[int, DayFraction]

MicrosecondLike = Union[Microsecond, Tuple[int, int]]


class Format(str, Enum):
    """ISO 8601 textual style: with or without ``-``/``:`` separators."""

    BASIC = "basic"
    EXTENDED = "extended"


class Weekday(str, Enum):
    """Day a week is considered to start on. ``DEFAULT`` is Monday."""

    DEFAULT = "default"
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"


def as_microsecond(microsecond: MicrosecondLike) -> Microsecond:
    """Accept a Microsecond or a plain ``(value, precision)`` pair."""
    if isinstance(microsecond, Microsecond):
        return microsecond
    value, precision = microsecond
    return Microsecond(value, precision)


def as_format(fmt: Format | str) -> Format:
    """Accept a Format or its string value."""
    try:
        return Format(fmt)
    except ValueError:
        raise ValueError(
            f"format must be 'basic' or 'extended', got {fmt!r}"
        ) from None


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Duration:
    """Mixed-unit amount of time. Immutable.

    Calendar units (year, month) have no fixed length and are applied
    separately from the fixed-length units, so a Duration is never reduced
    to a single scalar.
    """

    year: int = 0
    month: int = 0
    week: int = 0
    day: int = 0
    hour: int = 0
    minute: int = 0
    second: int = 0
    microsecond: Microsecond = Microsecond(0, 0)

    def __post_init__(self) -> None:
        for f in fields(self):
            if f.name == "microsecond":
                continue
            value = getattr(self, f.name)
            if not _is_int(value):
                raise TypeError(
                    f"duration unit {f.name!r} must be an integer, got {value!r}"
                )

        ms = self.microsecond
        try:
            ms = as_microsecond(ms)
        except (TypeError, ValueError):
            raise TypeError(
                f"duration microsecond must be a (value, precision) pair, got {ms!r}"
            ) from None
        if not (_is_int(ms.value) and _is_int(ms.precision)):
            raise TypeError(f"duration microsecond must hold integers, got {ms!r}")
        if not 0 <= ms.precision <= 6:
            raise ValueError(
                f"duration microsecond precision must be 0-6, got {ms.precision}"
            )
        object.__setattr__(self, "microsecond", ms)

    @classmethod
    def new(cls, **units) -> Duration:
        """Build a Duration from keyword units, rejecting unknown names."""
        known = [f.name for f in fields(cls)]
        for name in units:
            if name not in known:
                raise ValueError(
                    f"unknown unit {name!r}. Expected "
                    + ", ".join(repr(k) for k in known)
                )
        return cls(**units)

    @classmethod
    def from_iso8601(cls, text: str) -> Duration:
        """Parse a ``P``/``PT`` duration string."""
        from iso_calendar.parser import parse_duration

        return parse_duration(text)

    def to_iso8601(self) -> str:
        from iso_calendar.formatter import duration_to_string

        return duration_to_string(self)

    @property
    def has_calendar_units(self) -> bool:
        """Whether any date-scale unit (year, month, week, day) is non-zero."""
        return any((self.year, self.month, self.week, self.day))

    @property
    def has_time_units(self) -> bool:
        """Whether any sub-day unit is non-zero."""
        return any((self.hour, self.minute, self.second, self.microsecond.value))

    def negate(self) -> Duration:
        """Flip the sign of every unit, keeping the microsecond precision."""
        return Duration(
            year=-self.year,
            month=-self.month,
            week=-self.week,
            day=-self.day,
            hour=-self.hour,
            minute=-self.minute,
            second=-self.second,
            microsecond=Microsecond(-self.microsecond.value, self.microsecond.precision),
        )

    def __neg__(self) -> Duration:
        return self.negate()
