"""Tests for TimeUnit, Unix timestamp conversion and iso-days scalars.

Test data loaded from: data/fixtures/scenarios/resolution.json
"""

from __future__ import annotations

import pytest

from conftest import iso_days, load_scenarios, naive

_data = load_scenarios("resolution")


class TestTimeUnit:
    """Time units, precision and conversion."""

    @pytest.mark.parametrize("spec", _data["precisions"], ids=lambda s: s["id"])
    def test_precision(self, spec):
        """Sub-second digits per unit."""
        from iso_calendar.resolution import time_unit_to_precision

        assert time_unit_to_precision(spec["unit"]) == spec["expected"]

    @pytest.mark.parametrize("spec", _data["conversions"], ids=lambda s: s["id"])
    def test_convert(self, spec):
        """Integer rescale floors."""
        from iso_calendar.resolution import convert_time_unit

        result = convert_time_unit(spec["value"], spec["from"], spec["to"])
        assert result == spec["expected"]

    def test_predefined(self):
        """Predefined units and their sizes."""
        from iso_calendar.resolution import MICROSECOND, MILLISECOND, NANOSECOND, SECOND

        assert [u.parts_per_second for u in (SECOND, MILLISECOND, MICROSECOND, NANOSECOND)] == [
            1, 1_000, 1_000_000, 1_000_000_000,
        ]
        assert SECOND.parts_per_day == 86_400

    def test_resolve_passes_instances_through(self):
        """Instances and names resolve to the predefined unit."""
        from iso_calendar.resolution import MILLISECOND, TimeUnit

        assert TimeUnit.resolve(MILLISECOND) is MILLISECOND
        assert TimeUnit.resolve("millisecond") is MILLISECOND

    def test_resolve_integer(self):
        """Positive ints become ad-hoc units."""
        from iso_calendar.resolution import TimeUnit

        unit = TimeUnit.resolve(10)
        assert unit.parts_per_second == 10
        assert unit.label == "10/s"

    @pytest.mark.parametrize("bad", ["minute", 0, -5, True, 1.5, None])
    def test_rejects_unknown_units(self, bad):
        """Unknown names and non-positive values raise ValueError."""
        from iso_calendar.resolution import TimeUnit

        with pytest.raises(ValueError):
            TimeUnit.resolve(bad)

    def test_rejects_non_positive_construction(self):
        """Zero parts per second is refused."""
        from iso_calendar.resolution import TimeUnit

        with pytest.raises(ValueError, match="positive"):
            TimeUnit(parts_per_second=0, label="never")


class TestFromUnix:
    """Unix timestamps to UTC fields."""

    @pytest.mark.parametrize("spec", _data["from_unix"], ids=lambda s: s["id"])
    def test_from_unix(self, spec):
        """Fields match the table."""
        from iso_calendar.resolution import from_unix

        assert from_unix(spec["value"], spec["unit"]) == naive(spec["expected"])

    def test_default_unit_is_seconds(self):
        """Unit defaults to seconds."""
        from iso_calendar.resolution import from_unix

        assert from_unix(86_400).date == (1970, 1, 2)

    @pytest.mark.parametrize("spec", _data["from_unix_errors"], ids=lambda s: s["id"])
    def test_out_of_range(self, spec):
        """Timestamps outside -9999..9999 raise InvalidUnixTime."""
        from iso_calendar.errors import InvalidUnixTime
        from iso_calendar.resolution import from_unix

        with pytest.raises(InvalidUnixTime) as exc_info:
            from_unix(spec["value"], spec["unit"])
        assert exc_info.value.reason == "invalid_unix_time"


class TestIsoDaysToUnit:
    """Instants as a scalar count of a unit."""

    @pytest.mark.parametrize("spec", _data["iso_days_to_unit"], ids=lambda s: s["id"])
    def test_iso_days_to_unit(self, spec):
        """Count matches the table."""
        from iso_calendar.resolution import iso_days_to_unit

        assert iso_days_to_unit(iso_days(spec["iso_days"]), spec["unit"]) == spec["expected"]

    def test_unix_epoch_matches_constant(self, unix_epoch_days, midnight_fraction):
        """Unix epoch in seconds matches UNIX_EPOCH_SECONDS."""
        from iso_calendar.resolution import UNIX_EPOCH_SECONDS, iso_days_to_unit

        assert iso_days_to_unit((unix_epoch_days, midnight_fraction), "second") == (
            UNIX_EPOCH_SECONDS
        )
