"""ISO 8601 formatting for dates, times, datetimes, offsets and durations.

Output is canonical: datetimes always use the 'T' separator, and the
sub-second part is written with exactly ``precision`` digits, truncated
rather than rounded.
"""

from __future__ import annotations

from iso_calendar.errors import FormatError
from iso_calendar.resolution import MICROSECONDS_PER_SECOND, SECONDS_PER_HOUR
from iso_calendar.schema import validate_date, validate_time
from iso_calendar.types import Duration, Format, MicrosecondLike, as_format, as_microsecond

UTC_ZONE = "Etc/UTC"


def zero_pad(value: int, count: int) -> str:
    """Left-pad with zeros to ``count`` digits; negatives get a leading '-'.

    >>> zero_pad(7, 2), zero_pad(-99, 4)
    ('07', '-0099')
    """
    if value < 0:
        return "-" + zero_pad(-value, count)
    return f"{value:0{count}d}"


def microseconds_to_string(value: int, precision: int) -> str:
    """The first ``precision`` digits of a six-digit microsecond value."""
    if precision == 0:
        return ""
    return zero_pad(value // 10 ** (6 - precision), precision)


def _check_date(year: int, month: int, day: int) -> None:
    errors = validate_date(year, month, day)
    if errors:
        raise FormatError("; ".join(errors), value=(year, month, day))


def _check_time(hour: int, minute: int, second: int, microsecond: MicrosecondLike) -> None:
    errors = validate_time(hour, minute, second, microsecond)
    if errors:
        raise FormatError("; ".join(errors), value=(hour, minute, second, microsecond))


def date_to_string(
    year: int, month: int, day: int, fmt: Format | str = Format.EXTENDED
) -> str:
    """
    >>> date_to_string(2015, 2, 28)
    '2015-02-28'
    >>> date_to_string(-99, 1, 31, "basic")
    '-00990131'
    """
    fmt = as_format(fmt)
    _check_date(year, month, day)
    sep = "-" if fmt is Format.EXTENDED else ""
    return f"{zero_pad(year, 4)}{sep}{zero_pad(month, 2)}{sep}{zero_pad(day, 2)}"


def time_to_string(
    hour: int,
    minute: int,
    second: int,
    microsecond: MicrosecondLike,
    fmt: Format | str = Format.EXTENDED,
) -> str:
    """
    >>> time_to_string(2, 2, 2, (2, 6))
    '02:02:02.000002'
    >>> time_to_string(2, 2, 2, (2, 2))
    '02:02:02.00'
    >>> time_to_string(2, 2, 2, (2, 0), "basic")
    '020202'
    """
    fmt = as_format(fmt)
    _check_time(hour, minute, second, microsecond)
    value, precision = as_microsecond(microsecond)
    sep = ":" if fmt is Format.EXTENDED else ""
    text = f"{zero_pad(hour, 2)}{sep}{zero_pad(minute, 2)}{sep}{zero_pad(second, 2)}"
    if precision > 0:
        text += "." + microseconds_to_string(value, precision)
    return text


def naive_datetime_to_string(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    microsecond: MicrosecondLike,
    fmt: Format | str = Format.EXTENDED,
) -> str:
    """
    >>> naive_datetime_to_string(2015, 2, 28, 1, 2, 3, (4, 6))
    '2015-02-28T01:02:03.000004'
    """
    return (
        date_to_string(year, month, day, fmt)
        + "T"
        + time_to_string(hour, minute, second, microsecond, fmt)
    )


def offset_to_string(
    utc_offset: int,
    std_offset: int,
    time_zone: str,
    fmt: Format | str = Format.EXTENDED,
) -> str:
    """'Z' for UTC itself, otherwise the signed total offset.

    >>> offset_to_string(3600, 3600, "Europe/Berlin")
    '+02:00'
    >>> offset_to_string(-28800, 0, "America/Los_Angeles", "basic")
    '-0800'
    """
    fmt = as_format(fmt)
    if utc_offset == 0 and std_offset == 0 and time_zone == UTC_ZONE:
        return "Z"

    total = utc_offset + std_offset
    seconds = abs(total)
    hour = seconds // SECONDS_PER_HOUR
    minute = seconds % SECONDS_PER_HOUR // 60
    sign = "-" if total < 0 else "+"
    sep = ":" if fmt is Format.EXTENDED else ""
    return f"{sign}{zero_pad(hour, 2)}{sep}{zero_pad(minute, 2)}"


def datetime_to_string(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    microsecond: MicrosecondLike,
    time_zone: str,
    zone_abbr: str,
    utc_offset: int,
    std_offset: int,
    fmt: Format | str = Format.EXTENDED,
) -> str:
    """Datetime with offset; zones other than Etc/UTC append abbreviation and name.

    >>> datetime_to_string(2017, 8, 1, 1, 2, 3, (4, 5), "Etc/UTC", "UTC", 0, 0)
    '2017-08-01T01:02:03.00000Z'
    >>> datetime_to_string(2017, 8, 1, 1, 2, 3, (4, 5), "Europe/Berlin", "CET", 3600, 0)
    '2017-08-01T01:02:03.00000+01:00 CET Europe/Berlin'
    """
    text = naive_datetime_to_string(
        year, month, day, hour, minute, second, microsecond, fmt
    ) + offset_to_string(utc_offset, std_offset, time_zone, fmt)
    if time_zone != UTC_ZONE:
        text += f" {zone_abbr} {time_zone}"
    return text


def utc_datetime_to_string(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    microsecond: MicrosecondLike,
    fmt: Format | str = Format.EXTENDED,
) -> str:
    """
    >>> utc_datetime_to_string(2015, 1, 23, 21, 20, 7, (0, 0))
    '2015-01-23T21:20:07Z'
    """
    return datetime_to_string(
        year, month, day, hour, minute, second, microsecond,
        UTC_ZONE, "UTC", 0, 0, fmt,
    )


def _pair(value: int, unit: str) -> str:
    return f"{value}{unit}" if value else ""


def _second_component(duration: Duration) -> str:
    ms_value, precision = duration.microsecond
    if duration.second == 0 and ms_value == 0:
        return ""
    if precision == 0:
        return f"{duration.second}S"

    total = duration.second * MICROSECONDS_PER_SECOND + ms_value
    seconds, micros = divmod(abs(total), MICROSECONDS_PER_SECOND)
    sign = "-" if total < 0 else ""
    return f"{sign}{seconds}.{microseconds_to_string(micros, precision)}S"


def duration_to_string(duration: Duration) -> str:
    """
    >>> duration_to_string(Duration(year=1, day=3, hour=4, second=6, microsecond=(500000, 1)))
    'P1Y3DT4H6.5S'
    >>> duration_to_string(Duration())
    'PT0S'
    """
    date_part = "".join((
        _pair(duration.year, "Y"),
        _pair(duration.month, "M"),
        _pair(duration.week, "W"),
        _pair(duration.day, "D"),
    ))
    time_part = "".join((
        _pair(duration.hour, "H"),
        _pair(duration.minute, "M"),
        _second_component(duration),
    ))
    if not date_part and not time_part:
        return "PT0S"
    return "P" + date_part + ("T" + time_part if time_part else "")
