"""Boundary: TimeUnit, integer timestamps to and from calendar fields.

Also holds the fixed clock constants every other module works from.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from iso_calendar.errors import InvalidUnixTime
from iso_calendar.types import IsoDays, Microsecond, NaiveDateTime

# Leap seconds are not modelled: every day has exactly this many seconds.
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR
MICROSECONDS_PER_SECOND = 1_000_000
PARTS_PER_DAY = SECONDS_PER_DAY * MICROSECONDS_PER_SECOND

# Seconds from 0000-01-01T00:00:00 to 1970-01-01T00:00:00.
UNIX_EPOCH_SECONDS = 62_167_219_200

# -9999-01-01T00:00:00 .. 9999-12-31T23:59:59.999999 in Unix microseconds.
_UNIX_START = (315_537_897_600 + UNIX_EPOCH_SECONDS) * -1_000_000
_UNIX_END = 315_569_519_999_999_999 - UNIX_EPOCH_SECONDS * 1_000_000


@dataclass(frozen=True)
class TimeUnit:
    """A subdivision of the second. Immutable.

    ``parts_per_second`` is how many of this unit make up one second;
    all conversions are integer-only.
    """

    parts_per_second: int
    label: str

    def __post_init__(self) -> None:
        if self.parts_per_second <= 0:
            raise ValueError(
                f"parts_per_second must be positive, got {self.parts_per_second}"
            )

    @property
    def parts_per_day(self) -> int:
        return SECONDS_PER_DAY * self.parts_per_second

    @classmethod
    def resolve(cls, unit: UnitLike) -> TimeUnit:
        """Accept a TimeUnit, a unit name, or a positive parts-per-second integer."""
        if isinstance(unit, TimeUnit):
            return unit
        if isinstance(unit, str):
            try:
                return _NAMED_UNITS[unit]
            except KeyError:
                raise ValueError(
                    f"unsupported time unit {unit!r}. Expected one of "
                    f"{sorted(_NAMED_UNITS)} or a positive integer"
                ) from None
        if isinstance(unit, int) and not isinstance(unit, bool) and unit > 0:
            return cls(parts_per_second=unit, label=f"{unit}/s")
        raise ValueError(
            f"unsupported time unit {unit!r}. Expected one of "
            f"{sorted(_NAMED_UNITS)} or a positive integer"
        )


UnitLike = Union[TimeUnit, str, int]

SECOND = TimeUnit(parts_per_second=1, label="second")
MILLISECOND = TimeUnit(parts_per_second=1_000, label="millisecond")
MICROSECOND = TimeUnit(parts_per_second=1_000_000, label="microsecond")
NANOSECOND = TimeUnit(parts_per_second=1_000_000_000, label="nanosecond")

_NAMED_UNITS = {
    u.label: u for u in (SECOND, MILLISECOND, MICROSECOND, NANOSECOND)
}

_PRECISION_BY_PARTS = {1: 0, 10: 1, 100: 2, 1_000: 3, 10_000: 4, 100_000: 5}


def convert_time_unit(value: int, from_unit: UnitLike, to_unit: UnitLike) -> int:
    """Rescale an integer amount between units, flooring when coarsening."""
    source = TimeUnit.resolve(from_unit)
    target = TimeUnit.resolve(to_unit)
    return value * target.parts_per_second // source.parts_per_second


def time_unit_to_precision(unit: UnitLike) -> int:
    """Sub-second digits a unit carries.

    Named units map to their natural precision; integer units always get
    the maximum of 6.
    """
    return {"second": 0, "millisecond": 3}.get(TimeUnit.resolve(unit).label, 6)


def _precision_for_unit(unit: TimeUnit) -> int:
    return _PRECISION_BY_PARTS.get(unit.parts_per_second, 6)


def from_unix(value: int, unit: UnitLike = SECOND) -> NaiveDateTime:
    """Convert a Unix timestamp in ``unit`` to UTC calendar fields.

    Raises InvalidUnixTime outside years -9999..9999.
    """
    from iso_calendar.calendar import date_from_iso_days

    resolved = TimeUnit.resolve(unit)
    total = convert_time_unit(value, resolved, MICROSECOND)
    if not _UNIX_START <= total <= _UNIX_END:
        raise InvalidUnixTime(value=value)

    seconds, microseconds = divmod(total, MICROSECONDS_PER_SECOND)
    days, rest = divmod(UNIX_EPOCH_SECONDS + seconds, SECONDS_PER_DAY)
    hour, rest = divmod(rest, SECONDS_PER_HOUR)
    minute, second = divmod(rest, SECONDS_PER_MINUTE)
    year, month, day = date_from_iso_days(days)
    return NaiveDateTime(
        year, month, day, hour, minute, second,
        Microsecond(microseconds, _precision_for_unit(resolved)),
    )


def iso_days_to_unit(iso_days: IsoDays, unit: UnitLike) -> int:
    """Count of ``unit`` elapsed since 0000-01-01T00:00:00."""
    from iso_calendar.fraction import divide_by_parts_per_day

    days, (parts, parts_per_day) = iso_days
    microseconds = days * PARTS_PER_DAY + divide_by_parts_per_day(parts, parts_per_day)
    return convert_time_unit(microseconds, MICROSECOND, unit)
