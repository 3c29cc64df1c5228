"""Layer 2: calendar-aware shifting of dates, times and datetimes by a Duration.

A shift always runs in two phases, in this order:

1. Calendar phase: ``year * 12 + month`` is applied as one month delta and
   the day is clamped to the length of the target month (Jan 31 + 1 month
   is Feb 28/29).
2. Sub-day phase: ``week * 7 + day`` moves the day count, then hours,
   minutes, seconds and microseconds are added as one exact day fraction,
   carrying into as many extra days as needed.

The result keeps the original sub-second precision unless the duration
carries a non-zero microsecond, in which case the duration's precision wins.
"""

from __future__ import annotations

import logging

from iso_calendar.calendar import date_from_iso_days, date_to_iso_days, days_in_month
from iso_calendar.errors import UnsupportedUnitCombination
from iso_calendar.fraction import (
    add_day_fraction_to_iso_days,
    naive_datetime_from_iso_days,
    time_from_day_fraction,
    time_to_day_fraction,
)
from iso_calendar.resolution import (
    MICROSECONDS_PER_SECOND,
    PARTS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from iso_calendar.types import (
    CalendarDate,
    ClockTime,
    Duration,
    Microsecond,
    MicrosecondLike,
    NaiveDateTime,
    as_microsecond,
)

logger = logging.getLogger(__name__)

_MONTHS_IN_YEAR = 12


def shift_months(date: tuple[int, int, int], months: int) -> CalendarDate:
    """Move by whole months, clamping the day to the target month's length.

    >>> shift_months((2016, 1, 31), 1)
    CalendarDate(year=2016, month=2, day=29)
    """
    year, month, day = date
    total_months = year * _MONTHS_IN_YEAR + month - 1 + months
    new_year, month_index = divmod(total_months, _MONTHS_IN_YEAR)
    new_month = month_index + 1
    return CalendarDate(new_year, new_month, min(day, days_in_month(new_year, new_month)))


def shift_days(date: tuple[int, int, int], days: int) -> CalendarDate:
    return date_from_iso_days(date_to_iso_days(*date) + days)


def _month_delta(duration: Duration) -> int:
    return duration.year * _MONTHS_IN_YEAR + duration.month


def _day_delta(duration: Duration) -> int:
    return duration.week * 7 + duration.day


def _microsecond_delta(duration: Duration) -> int:
    seconds = (
        duration.hour * SECONDS_PER_HOUR
        + duration.minute * SECONDS_PER_MINUTE
        + duration.second
    )
    return seconds * MICROSECONDS_PER_SECOND + duration.microsecond.value


def _result_precision(duration: Duration, microsecond: Microsecond) -> int:
    if duration.microsecond.value != 0:
        return duration.microsecond.precision
    return microsecond.precision


def shift_date(year: int, month: int, day: int, duration: Duration) -> CalendarDate:
    """Shift a date by calendar units (year, month, week, day).

    >>> shift_date(2016, 1, 31, Duration(month=1))
    CalendarDate(year=2016, month=2, day=29)
    >>> shift_date(2016, 1, 31, Duration(year=4, day=1))
    CalendarDate(year=2020, month=2, day=1)

    Raises UnsupportedUnitCombination if any sub-day unit is non-zero.
    """
    if duration.has_time_units:
        logger.debug("Rejected date shift with time units: %r", duration)
        raise UnsupportedUnitCombination(
            "cannot shift date by time scale unit. "
            "Expected year, month, week, day",
            value=duration,
        )

    date = CalendarDate(year, month, day)
    months = _month_delta(duration)
    if months:
        date = shift_months(date, months)
    days = _day_delta(duration)
    if days:
        date = shift_days(date, days)
    return date


def shift_time(
    hour: int,
    minute: int,
    second: int,
    microsecond: MicrosecondLike,
    duration: Duration,
) -> ClockTime:
    """Shift a wall-clock time, wrapping around midnight.

    >>> shift_time(13, 0, 0, (0, 0), Duration(hour=2))
    ClockTime(hour=15, minute=0, second=0, microsecond=Microsecond(value=0, precision=0))

    Raises UnsupportedUnitCombination if any calendar unit is non-zero.
    """
    if duration.has_calendar_units:
        logger.debug("Rejected time shift with calendar units: %r", duration)
        raise UnsupportedUnitCombination(
            "cannot shift time by date scale unit. "
            "Expected hour, minute, second, microsecond",
            value=duration,
        )

    microsecond = as_microsecond(microsecond)
    precision = _result_precision(duration, microsecond)
    delta = _microsecond_delta(duration)
    if delta == 0:
        return ClockTime(hour, minute, second, microsecond._replace(precision=precision))

    fraction = time_to_day_fraction(hour, minute, second, microsecond)
    _days, fraction = add_day_fraction_to_iso_days((0, fraction), delta, PARTS_PER_DAY)
    new_hour, new_minute, new_second, (ms_value, _) = time_from_day_fraction(fraction)
    return ClockTime(
        new_hour, new_minute, new_second,
        Microsecond(ms_value, precision),
    )


def shift_naive_datetime(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    microsecond: MicrosecondLike,
    duration: Duration,
) -> NaiveDateTime:
    """Shift a datetime by any mix of units.

    >>> shift_naive_datetime(2016, 1, 3, 0, 0, 0, (0, 0), Duration(hour=30))[:6]
    (2016, 1, 4, 6, 0, 0)
    """
    microsecond = as_microsecond(microsecond)
    precision = _result_precision(duration, microsecond)

    months = _month_delta(duration)
    if months:
        year, month, day = shift_months((year, month, day), months)

    days = _day_delta(duration)
    delta = _microsecond_delta(duration)
    if days == 0 and delta == 0:
        return NaiveDateTime(
            year, month, day, hour, minute, second,
            microsecond._replace(precision=precision),
        )

    start_days = date_to_iso_days(year, month, day) + days
    iso_days = add_day_fraction_to_iso_days(
        (start_days, time_to_day_fraction(hour, minute, second, microsecond)),
        delta,
        PARTS_PER_DAY,
    )
    if iso_days[0] != start_days:
        logger.debug(
            "Sub-day shift of %sus carried %+d day(s)", delta, iso_days[0] - start_days
        )

    shifted = naive_datetime_from_iso_days(iso_days)
    return shifted._replace(microsecond=shifted.microsecond._replace(precision=precision))
