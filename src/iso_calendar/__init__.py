"""iso-calendar: Proleptic Gregorian calendar engine with ISO 8601 parsing and formatting."""

from iso_calendar.calendar import (
    date_from_iso_days,
    date_to_iso_days,
    day_of_era,
    day_of_week,
    day_of_year,
    days_in_month,
    days_in_year,
    is_leap_year,
    iso_days_to_day_of_week,
    months_in_year,
    quarter_of_year,
    year_of_era,
)
from iso_calendar.errors import (
    CalendarError,
    FormatError,
    InvalidDate,
    InvalidDateComponent,
    InvalidDuration,
    InvalidFormat,
    InvalidTime,
    InvalidTimeComponent,
    InvalidUnixTime,
    MissingOffset,
    ParseError,
    UnsupportedUnitCombination,
)
from iso_calendar.formatter import (
    date_to_string,
    datetime_to_string,
    duration_to_string,
    naive_datetime_to_string,
    time_to_string,
    utc_datetime_to_string,
)
from iso_calendar.fraction import (
    add_day_fraction_to_iso_days,
    iso_days_to_beginning_of_day,
    iso_days_to_end_of_day,
    naive_datetime_from_iso_days,
    naive_datetime_to_iso_days,
    time_from_day_fraction,
    time_to_day_fraction,
)
from iso_calendar.parser import (
    parse_date,
    parse_duration,
    parse_naive_datetime,
    parse_time,
    parse_utc_datetime,
)
from iso_calendar.resolution import (
    MICROSECOND,
    MILLISECOND,
    NANOSECOND,
    SECOND,
    TimeUnit,
    from_unix,
    iso_days_to_unit,
    time_unit_to_precision,
)
from iso_calendar.schema import valid_date, valid_time
from iso_calendar.shift import shift_date, shift_naive_datetime, shift_time
from iso_calendar.types import (
    CalendarDate,
    ClockTime,
    DayFraction,
    Duration,
    Format,
    Microsecond,
    NaiveDateTime,
    Weekday,
)

__all__ = [
    "CalendarDate",
    "CalendarError",
    "ClockTime",
    "DayFraction",
    "Duration",
    "Format",
    "FormatError",
    "InvalidDate",
    "InvalidDateComponent",
    "InvalidDuration",
    "InvalidFormat",
    "InvalidTime",
    "InvalidTimeComponent",
    "InvalidUnixTime",
    "MICROSECOND",
    "MILLISECOND",
    "Microsecond",
    "MissingOffset",
    "NANOSECOND",
    "NaiveDateTime",
    "ParseError",
    "SECOND",
    "TimeUnit",
    "UnsupportedUnitCombination",
    "Weekday",
    "add_day_fraction_to_iso_days",
    "date_from_iso_days",
    "date_to_iso_days",
    "date_to_string",
    "datetime_to_string",
    "day_of_era",
    "day_of_week",
    "day_of_year",
    "days_in_month",
    "days_in_year",
    "duration_to_string",
    "from_unix",
    "is_leap_year",
    "iso_days_to_beginning_of_day",
    "iso_days_to_day_of_week",
    "iso_days_to_end_of_day",
    "iso_days_to_unit",
    "months_in_year",
    "naive_datetime_from_iso_days",
    "naive_datetime_to_iso_days",
    "naive_datetime_to_string",
    "parse_date",
    "parse_duration",
    "parse_naive_datetime",
    "parse_time",
    "parse_utc_datetime",
    "quarter_of_year",
    "shift_date",
    "shift_naive_datetime",
    "shift_time",
    "time_from_day_fraction",
    "time_to_day_fraction",
    "time_to_string",
    "time_unit_to_precision",
    "utc_datetime_to_string",
    "valid_date",
    "valid_time",
    "year_of_era",
]
