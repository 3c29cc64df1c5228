"""ISO 8601 parsing: dates, times, datetimes, UTC offsets and durations.

Fixed-width fields are read with a small table-driven scanner: each layout
is a sequence of digit-run widths and literal separators. Structural
mismatches raise InvalidFormat; text that is well-formed but names an
impossible date or time raises InvalidDate / InvalidTime.

Supported:
    - Dates: [+|-]YYYY-MM-DD (extended) or [+|-]YYYYMMDD (basic)
    - Times: [T]HH:MM:SS or [T]HHMMSS, optional .f/,f fraction (digits past
      the sixth are consumed and dropped), optional offset suffix
    - Datetimes: date, then a space or 'T', then time; both halves in the
      same format
    - Offsets: Z, +HH:MM, +HHMM, +HH (and '-' variants; -00:00 is rejected)
    - Durations: [+|-]P[nY][nM][nW][nD][T[nH][nM][n[.f]S]]
"""

from __future__ import annotations

import logging

from iso_calendar.calendar import date_from_iso_days, date_to_iso_days
from iso_calendar.errors import (
    InvalidDate,
    InvalidDateComponent,
    InvalidDuration,
    InvalidFormat,
    InvalidTime,
    InvalidTimeComponent,
    MissingOffset,
)
from iso_calendar.fraction import (
    add_day_fraction_to_iso_days,
    time_from_day_fraction,
    time_to_day_fraction,
)
from iso_calendar.resolution import SECONDS_PER_DAY
from iso_calendar.schema import validate_date, validate_time
from iso_calendar.types import (
    CalendarDate,
    ClockTime,
    Duration,
    Format,
    Microsecond,
    NaiveDateTime,
    as_format,
)

logger = logging.getLogger(__name__)

_DIGITS = "0123456789"
_DATETIME_SEPARATORS = (" ", "T")

# Ints are runs of that many ASCII digits; strings are literal separators.
_DATE_LAYOUT = {
    Format.BASIC: (4, 2, 2),
    Format.EXTENDED: (4, "-", 2, "-", 2),
}
_TIME_LAYOUT = {
    Format.BASIC: (2, 2, 2),
    Format.EXTENDED: (2, ":", 2, ":", 2),
}

_DATE_UNITS = (("year", "Y"), ("month", "M"), ("week", "W"), ("day", "D"))
_TIME_UNITS = (("hour", "H"), ("minute", "M"), ("second", "S"))

_MAX_PRECISION = 6


# ---------------------------------------------------------------------------
# Scanner primitives
# ---------------------------------------------------------------------------
def _read_digits(text: str, pos: int, count: int) -> int | None:
    """Value of exactly ``count`` ASCII digits at ``pos``, or None."""
    chunk = text[pos:pos + count]
    if len(chunk) != count or any(c not in _DIGITS for c in chunk):
        return None
    return int(chunk)


def _scan(text: str, pos: int, layout: tuple) -> tuple[list[int], int] | None:
    """Match ``layout`` at ``pos``. Returns (digit values, end) or None."""
    values: list[int] = []
    for token in layout:
        if isinstance(token, int):
            value = _read_digits(text, pos, token)
            if value is None:
                return None
            values.append(value)
            pos += token
        else:
            if not text.startswith(token, pos):
                return None
            pos += len(token)
    return values, pos


def _split_sign(text: str) -> tuple[int, str]:
    if text.startswith("-"):
        return -1, text[1:]
    if text.startswith("+"):
        return 1, text[1:]
    return 1, text


def _read_integer(text: str, pos: int) -> tuple[int | None, int]:
    """Optionally signed decimal integer at ``pos``. Returns (value, end)."""
    end = pos
    if text[end:end + 1] in ("+", "-"):
        end += 1
    digits_start = end
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    if end == digits_start:
        return None, pos
    return int(text[pos:end]), end


def _parse_microsecond(text: str, pos: int, source: str) -> tuple[Microsecond, int]:
    """Fractional seconds introduced by '.' or ','.

    Precision is the number of digits consumed, capped at 6.
    """
    if text[pos:pos + 1] not in (".", ","):
        return Microsecond(0, 0), pos

    pos += 1
    start = pos
    while pos < len(text) and text[pos] in _DIGITS:
        pos += 1
    if pos == start:
        raise InvalidFormat(value=source)

    kept = text[start:min(pos, start + _MAX_PRECISION)]
    precision = len(kept)
    return Microsecond(int(kept) * 10 ** (_MAX_PRECISION - precision), precision), pos


def _parse_offset(text: str, pos: int, source: str) -> int | None:
    """UTC offset suffix in seconds; None when absent.

    The suffix must run to the end of ``text``.
    """
    rest = text[pos:]
    if rest == "":
        return None
    if rest == "Z":
        return 0
    if rest == "-00:00":
        raise InvalidFormat("-00:00 is not a valid UTC offset", value=source)

    sign = {"+": 1, "-": -1}.get(rest[0])
    if sign is None:
        raise InvalidFormat(value=source)

    if len(rest) >= 6 and rest[3] == ":":
        hh, mm, tail = rest[1:3], rest[4:6], rest[6:]
    elif len(rest) >= 5:
        hh, mm, tail = rest[1:3], rest[3:5], rest[5:]
    elif len(rest) >= 3:
        hh, mm, tail = rest[1:3], "00", rest[3:]
    else:
        raise InvalidFormat(value=source)

    if not (
        hh[0] in "012" and hh[1] in _DIGITS and mm[0] in "012345" and mm[1] in _DIGITS
    ):
        raise InvalidFormat(value=source)
    hour, minute = int(hh), int(mm)
    if hour >= 24 or tail:
        raise InvalidFormat(value=source)
    return sign * (hour * 60 + minute) * 60


def _check_date(year: int, month: int, day: int, source: str) -> None:
    errors = validate_date(year, month, day)
    if errors:
        raise InvalidDate("; ".join(errors), value=source)


def _check_time(hour: int, minute: int, second: int, microsecond: Microsecond, source: str) -> None:
    errors = validate_time(hour, minute, second, microsecond)
    if errors:
        raise InvalidTime("; ".join(errors), value=source)


# ---------------------------------------------------------------------------
# Dates and times
# ---------------------------------------------------------------------------
def parse_date(text: str, fmt: Format | str = Format.EXTENDED) -> CalendarDate:
    """Parse a calendar date.

    >>> parse_date("2015-01-23")
    CalendarDate(year=2015, month=1, day=23)
    >>> parse_date("-2015-01-23")
    CalendarDate(year=-2015, month=1, day=23)
    >>> parse_date("20150123", "basic")
    CalendarDate(year=2015, month=1, day=23)

    Raises InvalidFormat for "2015-105" or "2015-W16", InvalidDate for
    "2015-01-32".
    """
    fmt = as_format(fmt)
    sign, body = _split_sign(text)
    scanned = _scan(body, 0, _DATE_LAYOUT[fmt])
    if scanned is None or scanned[1] != len(body):
        raise InvalidFormat(value=text)

    (year, month, day), _ = scanned
    year *= sign
    _check_date(year, month, day, text)
    return CalendarDate(year, month, day)


def parse_time(text: str, fmt: Format | str = Format.EXTENDED) -> ClockTime:
    """Parse a wall-clock time. A leading 'T' and any offset are accepted.

    >>> parse_time("23:50:07.0123456")
    ClockTime(hour=23, minute=50, second=7, microsecond=Microsecond(value=12345, precision=6))
    >>> parse_time("T23:50:07Z")
    ClockTime(hour=23, minute=50, second=7, microsecond=Microsecond(value=0, precision=0))
    """
    fmt = as_format(fmt)
    body = text[1:] if text.startswith("T") else text
    scanned = _scan(body, 0, _TIME_LAYOUT[fmt])
    if scanned is None:
        raise InvalidFormat(value=text)

    (hour, minute, second), pos = scanned
    microsecond, pos = _parse_microsecond(body, pos, text)
    _parse_offset(body, pos, text)
    _check_time(hour, minute, second, microsecond, text)
    return ClockTime(hour, minute, second, microsecond)


def _parse_datetime(text: str, fmt: Format) -> tuple[NaiveDateTime, int | None]:
    """Structural datetime match plus validation; offset returned as parsed."""
    sign, body = _split_sign(text)
    date_scan = _scan(body, 0, _DATE_LAYOUT[fmt])
    if date_scan is None:
        raise InvalidFormat(value=text)
    (year, month, day), pos = date_scan

    if body[pos:pos + 1] not in _DATETIME_SEPARATORS:
        raise InvalidFormat(value=text)

    time_scan = _scan(body, pos + 1, _TIME_LAYOUT[fmt])
    if time_scan is None:
        raise InvalidFormat(value=text)
    (hour, minute, second), pos = time_scan

    microsecond, pos = _parse_microsecond(body, pos, text)
    offset = _parse_offset(body, pos, text)

    year *= sign
    _check_date(year, month, day, text)
    _check_time(hour, minute, second, microsecond, text)
    return NaiveDateTime(year, month, day, hour, minute, second, microsecond), offset


def parse_naive_datetime(text: str, fmt: Format | str = Format.EXTENDED) -> NaiveDateTime:
    """Parse a datetime, discarding any offset.

    >>> parse_naive_datetime("2015-01-23 23:50:07-02:30")
    NaiveDateTime(year=2015, month=1, day=23, hour=23, minute=50, second=7, microsecond=Microsecond(value=0, precision=0))
    """
    naive, _offset = _parse_datetime(text, as_format(fmt))
    return naive


def parse_utc_datetime(
    text: str, fmt: Format | str = Format.EXTENDED
) -> tuple[NaiveDateTime, int]:
    """Parse a datetime with an offset and normalise its fields to UTC.

    Returns ``(utc_fields, offset_seconds)``. The shift may cross midnight
    in either direction; the microsecond is carried over untouched.

    >>> parse_utc_datetime("2015-01-23 23:50:07+02:30")[1]
    9000

    Raises MissingOffset when the text has no offset.
    """
    naive, offset = _parse_datetime(text, as_format(fmt))
    if offset == 0:
        return naive, 0
    if offset is None:
        raise MissingOffset(value=text)

    year, month, day, hour, minute, second, microsecond = naive
    fraction = time_to_day_fraction(hour, minute, second, Microsecond(0, 0))
    extra_days, fraction = add_day_fraction_to_iso_days(
        (0, fraction), -offset, SECONDS_PER_DAY
    )
    if extra_days:
        logger.debug(
            "Offset %s moves %r across %+d day(s)", offset, text, extra_days
        )
        year, month, day = date_from_iso_days(
            date_to_iso_days(year, month, day) + extra_days
        )
    hour, minute, second, _ = time_from_day_fraction(fraction)
    return NaiveDateTime(year, month, day, hour, minute, second, microsecond), offset


# ---------------------------------------------------------------------------
# Durations
# ---------------------------------------------------------------------------
def _take_unit(
    allowed: tuple[tuple[str, str], ...], letter: str
) -> tuple[str, tuple[tuple[str, str], ...]] | None:
    """Match ``letter`` against the remaining units.

    Units before the match are dropped too, so each unit appears at most
    once and in ascending order.
    """
    for i, (key, unit) in enumerate(allowed):
        if unit == letter:
            return key, allowed[i + 1:]
    return None


def _parse_duration_time(body: str, pos: int, units: dict, source: str) -> None:
    allowed = _TIME_UNITS
    while pos < len(body):
        number, end = _read_integer(body, pos)
        if number is None:
            raise InvalidTimeComponent(value=source)

        if body[end:end + 1] in (".", ","):
            if _take_unit(allowed, "S") is None:
                raise InvalidTimeComponent(value=source)
            try:
                microsecond, end = _parse_microsecond(body, end, source)
            except InvalidFormat:
                raise InvalidTimeComponent(value=source) from None
            if body[end:] != "S":
                raise InvalidTimeComponent(value=source)
            value = microsecond.value
            # "-0.5" parses as integer 0, so the sign comes from the text
            if body[pos] == "-":
                value = -value
            units["second"] = number
            units["microsecond"] = Microsecond(value, microsecond.precision)
            return

        found = _take_unit(allowed, body[end:end + 1]) if end < len(body) else None
        if found is None:
            raise InvalidTimeComponent(value=source)
        key, allowed = found
        units[key] = number
        pos = end + 1


def _parse_duration_date(body: str, source: str) -> dict:
    units: dict = {}
    allowed = _DATE_UNITS
    pos = 0
    while pos < len(body):
        if body[pos] == "T" and pos + 1 < len(body):
            _parse_duration_time(body, pos + 1, units, source)
            return units

        number, end = _read_integer(body, pos)
        found = None
        if number is not None and end < len(body):
            found = _take_unit(allowed, body[end])
        if found is None:
            raise InvalidDateComponent(value=source)
        key, allowed = found
        units[key] = number
        pos = end + 1
    return units


def parse_duration(text: str) -> Duration:
    """Parse an ISO 8601 duration.

    A leading '-' negates every component, including the fractional
    seconds.

    >>> parse_duration("P1Y2M3DT4H5M6.5S")
    Duration(year=1, month=2, week=0, day=3, hour=4, minute=5, second=6, microsecond=Microsecond(value=500000, precision=1))
    >>> parse_duration("-PT1H").hour
    -1
    """
    if text.startswith("P"):
        sign, body = 1, text[1:]
    elif text.startswith(("+P", "-P")):
        sign, body = (-1 if text[0] == "-" else 1), text[2:]
    else:
        raise InvalidDuration(value=text)
    if not body:
        raise InvalidDuration(value=text)

    units = _parse_duration_date(body, text)
    if sign < 0:
        units = {
            key: (
                Microsecond(-value.value, value.precision)
                if key == "microsecond"
                else -value
            )
            for key, value in units.items()
        }
    return Duration(**units)
