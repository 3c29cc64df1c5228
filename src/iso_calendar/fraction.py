"""Day fractions: exact rational time-of-day and the (days, fraction) instant.

A time of day is ``numerator / denominator`` of one day. Clock times use the
microsecond denominator (PARTS_PER_DAY), but fractions at any other
denominator can be combined without rounding: sums are taken over the least
common multiple of both denominators.
"""

from __future__ import annotations

from math import gcd

from iso_calendar.calendar import date_from_iso_days, date_to_iso_days
from iso_calendar.resolution import (
    MICROSECONDS_PER_SECOND,
    PARTS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from iso_calendar.types import (
    ClockTime,
    DayFraction,
    IsoDays,
    Microsecond,
    MicrosecondLike,
    NaiveDateTime,
)


def time_to_day_fraction(
    hour: int, minute: int, second: int, microsecond: MicrosecondLike
) -> DayFraction:
    """Clock time as a fraction of the day over PARTS_PER_DAY.

    >>> time_to_day_fraction(12, 34, 56, (123, 6))
    DayFraction(numerator=45296000123, denominator=86400000000)
    """
    ms_value = microsecond[0]
    combined_seconds = hour * SECONDS_PER_HOUR + minute * SECONDS_PER_MINUTE + second
    return DayFraction(
        combined_seconds * MICROSECONDS_PER_SECOND + ms_value, PARTS_PER_DAY
    )


def divide_by_parts_per_day(parts: int, parts_per_day: int) -> int:
    """Rescale ``parts / parts_per_day`` to whole microseconds of the day."""
    if parts_per_day == PARTS_PER_DAY:
        return parts
    return parts * PARTS_PER_DAY // parts_per_day


def time_from_day_fraction(fraction: tuple[int, int]) -> ClockTime:
    """Clock time for a day fraction, always at microsecond precision 6.

    >>> time_from_day_fraction((1, 2))
    ClockTime(hour=12, minute=0, second=0, microsecond=Microsecond(value=0, precision=6))
    """
    parts, parts_per_day = fraction
    if parts == 0:
        return ClockTime(0, 0, 0, Microsecond(0, 6))

    total = divide_by_parts_per_day(parts, parts_per_day)
    hours, rest = divmod(total, SECONDS_PER_HOUR * MICROSECONDS_PER_SECOND)
    minutes, rest = divmod(rest, SECONDS_PER_MINUTE * MICROSECONDS_PER_SECOND)
    seconds, microseconds = divmod(rest, MICROSECONDS_PER_SECOND)
    return ClockTime(hours, minutes, seconds, Microsecond(microseconds, 6))


def _normalize(days: int, parts: int, parts_per_day: int) -> IsoDays:
    # divmod floors, so the remainder is already in [0, parts_per_day)
    day_delta, parts = divmod(parts, parts_per_day)
    return days + day_delta, DayFraction(parts, parts_per_day)


def add_day_fraction_to_iso_days(iso_days: IsoDays, add: int, add_parts_per_day: int) -> IsoDays:
    """Add ``add / add_parts_per_day`` of a day to an instant, exactly.

    Whole days produced by the addition (in either direction) carry into
    the day count. With differing denominators the result is expressed over
    their least common multiple.

    >>> add_day_fraction_to_iso_days((0, (0, 86400)), -1, 86400)
    (-1, DayFraction(numerator=86399, denominator=86400))
    """
    days, (parts, parts_per_day) = iso_days
    if add_parts_per_day == parts_per_day:
        return _normalize(days, parts + add, parts_per_day)

    divisor = gcd(parts_per_day, add_parts_per_day)
    result_parts = (parts * add_parts_per_day + add * parts_per_day) // divisor
    result_parts_per_day = parts_per_day * add_parts_per_day // divisor
    return _normalize(days, result_parts, result_parts_per_day)


def naive_datetime_to_iso_days(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    microsecond: MicrosecondLike,
) -> IsoDays:
    """
    >>> naive_datetime_to_iso_days(2000, 1, 1, 12, 0, 0, (0, 6))
    (730485, DayFraction(numerator=43200000000, denominator=86400000000))
    """
    return (
        date_to_iso_days(year, month, day),
        time_to_day_fraction(hour, minute, second, microsecond),
    )


def naive_datetime_from_iso_days(iso_days: IsoDays) -> NaiveDateTime:
    days, fraction = iso_days
    year, month, day = date_from_iso_days(days)
    hour, minute, second, microsecond = time_from_day_fraction(fraction)
    return NaiveDateTime(year, month, day, hour, minute, second, microsecond)


def iso_days_to_beginning_of_day(iso_days: IsoDays) -> IsoDays:
    return iso_days[0], DayFraction(0, PARTS_PER_DAY)


def iso_days_to_end_of_day(iso_days: IsoDays) -> IsoDays:
    """Last representable microsecond of the same day."""
    return iso_days[0], DayFraction(PARTS_PER_DAY - 1, PARTS_PER_DAY)


def day_rollover_relative_to_midnight_utc() -> tuple[int, int]:
    """Days in this calendar begin exactly at midnight UTC."""
    return (0, 1)
