"""Field validation for calendar dates and clock times."""

from __future__ import annotations

from iso_calendar.calendar import MAX_YEAR, MIN_YEAR, days_in_month
from iso_calendar.types import MicrosecondLike, _is_int


def validate_date(year: int, month: int, day: int) -> list[str]:
    """Validate date fields. Returns list of error messages (empty = valid).

    Checks:
    - All fields are integers
    - Year is within MIN_YEAR..MAX_YEAR
    - Month is 1-12
    - Day exists in that month of that year
    """
    errors: list[str] = []

    for name, value in (("year", year), ("month", month), ("day", day)):
        if not _is_int(value):
            errors.append(f"{name} must be an integer, got {value!r}")
    if errors:
        return errors

    if not MIN_YEAR <= year <= MAX_YEAR:
        errors.append(f"year must be {MIN_YEAR}..{MAX_YEAR}, got {year}")

    if not 1 <= month <= 12:
        errors.append(f"month must be 1-12, got {month}")
    else:
        max_day = days_in_month(year, month)
        if not 1 <= day <= max_day:
            errors.append(
                f"day must be 1-{max_day} for {year:04d}-{month:02d}, got {day}"
            )

    return errors


def validate_time(
    hour: int, minute: int, second: int, microsecond: MicrosecondLike
) -> list[str]:
    """Validate clock fields. Returns list of error messages.

    Checks:
    - Hour 0-23, minute 0-59, second 0-59 (no leap seconds)
    - Microsecond value 0-999999 with precision 0-6
    """
    errors: list[str] = []

    try:
        ms_value, ms_precision = microsecond
    except (TypeError, ValueError):
        return [f"microsecond must be a (value, precision) pair, got {microsecond!r}"]

    for name, value, high in (
        ("hour", hour, 23),
        ("minute", minute, 59),
        ("second", second, 59),
        ("microsecond", ms_value, 999_999),
        ("microsecond precision", ms_precision, 6),
    ):
        if not _is_int(value):
            errors.append(f"{name} must be an integer, got {value!r}")
        elif not 0 <= value <= high:
            errors.append(f"{name} must be 0-{high}, got {value}")

    return errors


def valid_date(year: int, month: int, day: int) -> bool:
    """Whether the fields form a date of the proleptic Gregorian calendar.

    >>> valid_date(2015, 2, 28), valid_date(2015, 2, 30), valid_date(-1, 12, 31)
    (True, False, True)
    """
    return not validate_date(year, month, day)


def valid_time(hour: int, minute: int, second: int, microsecond: MicrosecondLike) -> bool:
    """Whether the fields form a wall-clock time. Leap seconds are invalid.

    >>> valid_time(10, 50, 25, (3006, 6)), valid_time(23, 59, 60, (0, 0))
    (True, False)
    """
    return not validate_time(hour, minute, second, microsecond)
