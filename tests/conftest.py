"""Shared test fixtures and data loading for iso-calendar.

All test data lives in data/fixtures/ as JSON files.  This module loads
that data and exposes helper functions + pytest fixtures for the tests.

Anchors: day 0 is 0000-01-01 (a Saturday), day 366 is 0001-01-01 and
day 719528 is the Unix epoch 1970-01-01.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
FIXTURES_DIR = Path(__file__).resolve().parent.parent / "data" / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------
def _load_json(path: Path):
    with open(path) as f:
        return json.load(f)


_reference = _load_json(FIXTURES_DIR / "reference.json")


# ---------------------------------------------------------------------------
# Reference constants derived from reference.json
# ---------------------------------------------------------------------------
PARTS_PER_DAY = _reference["parts_per_day"]
SECONDS_PER_DAY = _reference["seconds_per_day"]

# Anchor lookup:  ANCHORS["unix_epoch"] → {"date": (1970, 1, 1), "iso_days": 719528, ...}
ANCHORS: dict[str, dict] = {}
for _a in _reference["anchors"]:
    ANCHORS[_a["id"]] = {
        "date": tuple(_a["date"]),
        "iso_days": _a["iso_days"],
        "weekday": _a["weekday"],
    }


# ---------------------------------------------------------------------------
# Convenience helpers (importable by test modules)
# ---------------------------------------------------------------------------
def ms(pair: list[int]) -> tuple[int, int]:
    """JSON ``[value, precision]`` → ``(value, precision)``.

    >>> ms([500000, 1])
    (500000, 1)
    """
    return tuple(pair)


def naive(fields: list) -> tuple:
    """JSON ``[y, m, d, h, mi, s, [v, p]]`` → flat field tuple."""
    *head, micro = fields
    return (*head, ms(micro))


def clock(fields: list) -> tuple:
    """JSON ``[h, mi, s, [v, p]]`` → ``(h, mi, s, (v, p))``."""
    *head, micro = fields
    return (*head, ms(micro))


def iso_days(pair: list) -> tuple[int, tuple[int, int]]:
    """JSON ``[days, [numerator, denominator]]`` → iso days tuple.

    >>> iso_days([730485, [0, 86400]])
    (730485, (0, 86400))
    """
    days, (numerator, denominator) = pair
    return days, (numerator, denominator)


def make_duration(units: dict):
    """Build a Duration from a JSON unit mapping."""
    from iso_calendar.types import Duration

    units = dict(units)
    if "microsecond" in units:
        units["microsecond"] = ms(units["microsecond"])
    return Duration.new(**units)


def error_class(reason: str):
    """Exception class whose ``reason`` tag matches ``reason``."""
    from iso_calendar import errors

    for name in errors.__all__:
        cls = getattr(errors, name)
        if cls.reason == reason:
            return cls
    raise KeyError(reason)


# ---------------------------------------------------------------------------
# Scenario loader
# ---------------------------------------------------------------------------
def load_scenarios(name: str):
    """Load a scenario file from data/fixtures/scenarios/{name}.json."""
    return _load_json(SCENARIOS_DIR / f"{name}.json")


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def anchors() -> dict[str, dict]:
    return ANCHORS


@pytest.fixture
def unix_epoch_days() -> int:
    return ANCHORS["unix_epoch"]["iso_days"]


@pytest.fixture
def midnight_fraction() -> tuple[int, int]:
    """Day fraction for 00:00:00 at microsecond resolution."""
    return 0, PARTS_PER_DAY
