"""Exception hierarchy for the ISO calendar engine.

Every failure carries a ``reason`` tag naming the kind of problem, so callers
can branch on ``err.reason`` the same way they would on an error atom.
"""

from __future__ import annotations


class CalendarError(ValueError):
    """Base class for every calendar engine failure."""

    reason = "calendar_error"

    def __init__(self, message: str | None = None, value: object = None) -> None:
        self.value = value
        if message is None:
            message = self.reason.replace("_", " ")
            if value is not None:
                message = f"{message}: {value!r}"
        super().__init__(message)


class ParseError(CalendarError):
    """Input text does not match an accepted grammar."""

    reason = "parse_error"


class InvalidFormat(ParseError):
    """Raised when the bytes do not match any structural grammar."""

    reason = "invalid_format"


class MissingOffset(ParseError):
    """Raised when an offset is required but the text carries none."""

    reason = "missing_offset"


class InvalidDuration(ParseError):
    """Raised when a duration string is not a ``P``/``PT`` expression."""

    reason = "invalid_duration"


class InvalidDateComponent(InvalidDuration):
    reason = "invalid_date_component"


class InvalidTimeComponent(InvalidDuration):
    reason = "invalid_time_component"


class InvalidDate(CalendarError):
    """Well-formed but numerically impossible date (day 32, month 13)."""

    reason = "invalid_date"


class InvalidTime(CalendarError):
    """Well-formed but numerically impossible time (hour 24, second 60)."""

    reason = "invalid_time"


class FormatError(CalendarError):
    """Raised when fields handed to a formatter are out of range."""

    reason = "invalid_fields"


class UnsupportedUnitCombination(CalendarError):
    """A shift asked for units the value has no position for.

    Shifting a date by hours, or a time by months, is a programming error
    rather than bad input, so callers are not expected to recover from it.
    """

    reason = "unsupported_unit_combination"


class InvalidUnixTime(CalendarError):
    """Unix timestamp outside the representable year range."""

    reason = "invalid_unix_time"


__all__ = [
    "CalendarError",
    "FormatError",
    "InvalidDate",
    "InvalidDateComponent",
    "InvalidDuration",
    "InvalidFormat",
    "InvalidTime",
    "InvalidTimeComponent",
    "InvalidUnixTime",
    "MissingOffset",
    "ParseError",
    "UnsupportedUnitCombination",
]
