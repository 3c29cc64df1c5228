"""Layer 1: proleptic Gregorian calendar math over a linear day count.

Day 0 is 0000-01-01. Day 366 is 0001-01-01, the first day of the current
era, and 1970-01-01 is day 719528. The Gregorian leap rules are applied to
every year, including year 0 and negative years.
"""

from __future__ import annotations

from iso_calendar.errors import InvalidDate
from iso_calendar.types import CalendarDate, Weekday

MIN_YEAR = -9999
MAX_YEAR = 9999

# iso day of 0001-01-01
ISO_EPOCH = 366
UNIX_EPOCH_DAYS = 719_528

_DAYS_PER_NONLEAP_YEAR = 365
_DAYS_PER_LEAP_YEAR = 366

# Cumulative days before each month in a non-leap year. Index 0 is unused.
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)

# Added to the day count before taking it mod 7; 0000-01-01 was a Saturday.
_DAY_OF_WEEK_OFFSET = {
    Weekday.DEFAULT: 5,
    Weekday.MONDAY: 5,
    Weekday.TUESDAY: 4,
    Weekday.WEDNESDAY: 3,
    Weekday.THURSDAY: 2,
    Weekday.FRIDAY: 1,
    Weekday.SATURDAY: 0,
    Weekday.SUNDAY: 6,
}


def is_leap_year(year: int) -> bool:
    """Gregorian leap year test, valid for negative years too.

    >>> is_leap_year(2000), is_leap_year(1900), is_leap_year(-4)
    (True, False, True)
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise InvalidDate(f"month must be 1-12, got {month}", value=month)


def days_in_month(year: int, month: int) -> int:
    """Number of days in ``month`` of ``year`` (28..31).

    Raises InvalidDate if month is not in 1-12.
    """
    _check_month(month)
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def months_in_year(year: int) -> int:
    return 12


def days_in_year(year: int) -> int:
    return _DAYS_PER_LEAP_YEAR if is_leap_year(year) else _DAYS_PER_NONLEAP_YEAR


def _leap_day_offset(year: int, month: int) -> int:
    if month < 3:
        return 0
    return 1 if is_leap_year(year) else 0


def _ensure_day_in_month(year: int, month: int, day: int) -> None:
    if day < 1 or day > days_in_month(year, month):
        raise InvalidDate(
            f"invalid date: day {day} does not exist in {year:04d}-{month:02d}",
            value=(year, month, day),
        )


def days_before_year(year: int) -> int:
    """Day count of January 1st of ``year``.

    Python's ``//`` already floors, so one closed form covers positive,
    zero and negative years.
    """
    previous = year - 1
    return (
        previous // 4
        - previous // 100
        + previous // 400
        + previous * _DAYS_PER_NONLEAP_YEAR
        + _DAYS_PER_LEAP_YEAR
    )


def date_to_iso_days(year: int, month: int, day: int) -> int:
    """Days since 0000-01-01. Closed form, no iteration.

    Raises InvalidDate if the day does not exist in that month.
    """
    _ensure_day_in_month(year, month, day)
    return (
        days_before_year(year)
        + _DAYS_BEFORE_MONTH[month]
        + _leap_day_offset(year, month)
        + day
        - 1
    )


def _days_to_year(days: int) -> tuple[int, int]:
    """Split a day count into (year, zero-based day of year)."""
    # 146097 days per 400-year cycle; the estimate is off by at most one year.
    year = days * 400 // 146_097
    while days < days_before_year(year):
        year -= 1
    while days >= days_before_year(year + 1):
        year += 1
    return year, days - days_before_year(year)


def _year_day_to_month_day(year: int, day_of_year: int) -> tuple[int, int]:
    """Map a zero-based day of year to (month, zero-based day of month)."""
    if day_of_year < 31:
        return 1, day_of_year
    extra_day = 1 if is_leap_year(year) else 0
    if day_of_year < 59 + extra_day:
        return 2, day_of_year - 31
    for month in range(12, 2, -1):
        start = _DAYS_BEFORE_MONTH[month] + extra_day
        if day_of_year >= start:
            return month, day_of_year - start
    raise AssertionError(f"unreachable day of year {day_of_year}")


def date_from_iso_days(days: int) -> CalendarDate:
    """Inverse of date_to_iso_days."""
    year, day_of_year = _days_to_year(days)
    month, day = _year_day_to_month_day(year, day_of_year)
    return CalendarDate(year, month, day + 1)


def iso_days_to_day_of_week(iso_days: int, starting_on: Weekday | str = Weekday.DEFAULT) -> int:
    """Weekday number 1..7 of a day count, where 1 is ``starting_on``."""
    try:
        offset = _DAY_OF_WEEK_OFFSET[Weekday(starting_on)]
    except ValueError:
        raise ValueError(
            f"invalid starting weekday {starting_on!r}. Expected one of "
            + ", ".join(w.value for w in Weekday)
        ) from None
    return (iso_days + offset) % 7 + 1


def day_of_week(
    year: int, month: int, day: int, starting_on: Weekday | str = Weekday.DEFAULT
) -> tuple[int, int, int]:
    """Return ``(weekday, 1, 7)``; weekday 1 is the ``starting_on`` day.

    ``Weekday.DEFAULT`` is Monday.

    >>> day_of_week(2016, 10, 31, "monday")
    (1, 1, 7)
    >>> day_of_week(2016, 10, 31, "sunday")
    (2, 1, 7)
    """
    iso_days = date_to_iso_days(year, month, day)
    return iso_days_to_day_of_week(iso_days, starting_on), 1, 7


def day_of_year(year: int, month: int, day: int) -> int:
    """1-based day within the year (1..366)."""
    _ensure_day_in_month(year, month, day)
    return _DAYS_BEFORE_MONTH[month] + _leap_day_offset(year, month) + day


def quarter_of_year(year: int, month: int, day: int) -> int:
    _check_month(month)
    return (month - 1) // 3 + 1


def year_of_era(year: int, month: int | None = None, day: int | None = None) -> tuple[int, int]:
    """Return ``(year_of_era, era)``.

    Era 1 starts at year 1; era 0 covers year 0 and earlier, counted
    backwards so that year 0 is year 1 of era 0. The new year coincides
    with the new era, so ``month`` and ``day`` are accepted but ignored.
    """
    if year >= 1:
        return year, 1
    return abs(year) + 1, 0


def day_of_era(year: int, month: int, day: int) -> tuple[int, int]:
    """Return ``(day_of_era, era)``.

    0001-01-01 is day 1 of era 1; 0000-12-31 is day 1 of era 0, counting
    backwards from there.
    """
    iso_days = date_to_iso_days(year, month, day)
    if year >= 1:
        return iso_days - ISO_EPOCH + 1, 1
    return abs(iso_days - ISO_EPOCH), 0
