"""Tests for exact day fractions and (days, fraction) instants.

Test data loaded from: data/fixtures/scenarios/fraction.json
"""

from __future__ import annotations

import pytest

from conftest import PARTS_PER_DAY, clock, iso_days, load_scenarios, naive

_data = load_scenarios("fraction")


class TestTimeToFraction:
    """Clock time to microsecond day fraction."""

    @pytest.mark.parametrize("spec", _data["to_fraction"], ids=lambda s: s["id"])
    def test_time_to_day_fraction(self, spec):
        """Fraction matches the table."""
        from iso_calendar.fraction import time_to_day_fraction

        result = time_to_day_fraction(*clock(spec["time"]))
        assert result == tuple(spec["expected"])

    def test_precision_does_not_affect_fraction(self):
        """Display precision is ignored."""
        from iso_calendar.fraction import time_to_day_fraction

        assert time_to_day_fraction(1, 0, 0, (0, 0)) == time_to_day_fraction(
            1, 0, 0, (0, 6)
        )


class TestFractionToTime:
    """Day fraction back to clock time."""

    @pytest.mark.parametrize("spec", _data["from_fraction"], ids=lambda s: s["id"])
    def test_time_from_day_fraction(self, spec):
        """Clock time matches the table."""
        from iso_calendar.fraction import time_from_day_fraction

        result = time_from_day_fraction(tuple(spec["fraction"]))
        assert result == clock(spec["expected"])

    def test_result_always_has_full_precision(self):
        """Output precision is always 6."""
        from iso_calendar.fraction import time_from_day_fraction

        assert time_from_day_fraction((1, 3)).microsecond.precision == 6


class TestAddDayFraction:
    """Exact addition with carry/borrow into the day count."""

    @pytest.mark.parametrize("spec", _data["add"], ids=lambda s: s["id"])
    def test_add(self, spec):
        """Sum matches the table."""
        from iso_calendar.fraction import add_day_fraction_to_iso_days

        result = add_day_fraction_to_iso_days(
            iso_days(spec["start"]), spec["add"], spec["add_ppd"]
        )
        assert result == iso_days(spec["expected"]), spec["notes"]

    @pytest.mark.parametrize("spec", _data["add"], ids=lambda s: s["id"])
    def test_result_fraction_in_range(self, spec):
        """Result numerator stays in [0, denominator)."""
        from iso_calendar.fraction import add_day_fraction_to_iso_days

        _days, (parts, parts_per_day) = add_day_fraction_to_iso_days(
            iso_days(spec["start"]), spec["add"], spec["add_ppd"]
        )
        assert 0 <= parts < parts_per_day


class TestNaiveDatetimeIsoDays:
    """Datetime fields to and from (days, fraction)."""

    @pytest.mark.parametrize("spec", _data["naive_to_iso_days"], ids=lambda s: s["id"])
    def test_to_iso_days(self, spec):
        """Fields to iso days."""
        from iso_calendar.fraction import naive_datetime_to_iso_days

        result = naive_datetime_to_iso_days(*naive(spec["datetime"]))
        assert result == iso_days(spec["expected"])

    @pytest.mark.parametrize(
        "spec", _data["naive_from_iso_days"], ids=lambda s: s["id"]
    )
    def test_from_iso_days(self, spec):
        """Iso days to fields."""
        from iso_calendar.fraction import naive_datetime_from_iso_days

        result = naive_datetime_from_iso_days(iso_days(spec["iso_days"]))
        assert result == naive(spec["expected"])


class TestDayBoundaries:
    """First and last instants of a day."""

    def test_beginning_of_day(self):
        """Fraction resets to zero."""
        from iso_calendar.fraction import iso_days_to_beginning_of_day

        assert iso_days_to_beginning_of_day((42, (123, 86400))) == (
            42, (0, PARTS_PER_DAY)
        )

    def test_end_of_day(self):
        """Fraction is one part short of a day."""
        from iso_calendar.fraction import iso_days_to_end_of_day

        assert iso_days_to_end_of_day((42, (0, 86400))) == (
            42, (PARTS_PER_DAY - 1, PARTS_PER_DAY)
        )

    def test_end_of_day_is_last_microsecond(self):
        """End of day reads 23:59:59.999999."""
        from iso_calendar.fraction import iso_days_to_end_of_day, time_from_day_fraction

        _days, fraction = iso_days_to_end_of_day((0, (0, PARTS_PER_DAY)))
        assert time_from_day_fraction(fraction) == (23, 59, 59, (999999, 6))

    def test_rollover_is_midnight(self):
        """Days start at midnight UTC."""
        from iso_calendar.fraction import day_rollover_relative_to_midnight_utc

        assert day_rollover_relative_to_midnight_utc() == (0, 1)


class TestDivideByPartsPerDay:
    """Rescaling fractions to microseconds of the day."""

    def test_native_denominator_unchanged(self):
        """Microsecond denominator passes through."""
        from iso_calendar.fraction import divide_by_parts_per_day

        assert divide_by_parts_per_day(12345, PARTS_PER_DAY) == 12345

    def test_seconds_denominator_scaled(self):
        """Seconds scale up by a million."""
        from iso_calendar.fraction import divide_by_parts_per_day

        assert divide_by_parts_per_day(1, 86400) == 1_000_000

    def test_floors(self):
        """Inexact rescaling floors."""
        from iso_calendar.fraction import divide_by_parts_per_day

        assert divide_by_parts_per_day(1, 7) == PARTS_PER_DAY // 7
