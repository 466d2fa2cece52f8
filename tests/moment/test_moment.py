"""
tests/moment/test_moment.py

Covers:
  - Strict construction (invalid date, out of bounds)
  - Lenient navigation: add / from_date leave the date alone past the bounds
  - Time-zone re-basing of the date and bounds
  - Adjacent-date visibility
"""

import datetime as dt
import logging

import pytest

from calendash import InvalidDate, InvalidDirection, InvalidOffsetKey, InvalidTimezone, OutOfBounds
from calendash.dates import TimeZoneAdjuster
from calendash.moment import Moment


# ── Fixtures ──────────────────────────────────────────────────────────────────

def local(*args: int) -> dt.datetime:
    return dt.datetime(*args, tzinfo=dt.timezone.utc).astimezone().replace(tzinfo=None)


@pytest.fixture
def march_bounds() -> dict:
    return {"min": "2025-03-01T00:00:00", "max": "2025-03-31T23:59:59"}


@pytest.fixture
def moment(march_bounds) -> Moment:
    return Moment("2025-03-24T12:00:00", bounds=march_bounds)


# ── Construction ──────────────────────────────────────────────────────────────

class TestConstruction:

    def test_parses_target(self, moment):
        assert moment.date == dt.datetime(2025, 3, 24, 12)

    def test_bounds_resolved(self, moment):
        assert moment.bounds.min == dt.datetime(2025, 3, 1)
        assert moment.bounds.max == dt.datetime(2025, 3, 31, 23, 59, 59)

    def test_defaults_to_now(self):
        before = dt.datetime.now()
        m = Moment()
        assert before <= m.date <= dt.datetime.now()

    def test_invalid_date(self):
        with pytest.raises(InvalidDate, match="Invalid date provided"):
            Moment("invalid-date")

    def test_invalid_bound(self):
        with pytest.raises(InvalidDate):
            Moment("2025-03-24", bounds={"min": "garbage"})

    def test_out_of_bounds(self, march_bounds):
        with pytest.raises(OutOfBounds):
            Moment("2025-04-01T00:00:00", bounds=march_bounds)

    def test_bounds_are_inclusive(self, march_bounds):
        assert Moment("2025-03-31T23:59:59", bounds=march_bounds).date.day == 31

    def test_repr(self, moment):
        assert repr(moment) == (
            "Moment(date=2025-03-24T12:00:00, min=2025-03-01T00:00:00, max=2025-03-31T23:59:59)"
        )


# ── add ───────────────────────────────────────────────────────────────────────

class TestAdd:

    def test_returns_self(self, moment):
        assert moment.add({"days": 1}) is moment

    def test_round_trip(self, moment):
        moment.add({"days": 3}).add({"days": -3})
        assert moment.date == dt.datetime(2025, 3, 24, 12)

    def test_past_max_is_noop(self, moment):
        moment.add({"months": 1})
        assert moment.date == dt.datetime(2025, 3, 24, 12)

    def test_past_min_is_noop(self, moment):
        moment.add({"weeks": -4})
        assert moment.date == dt.datetime(2025, 3, 24, 12)

    def test_noop_is_logged(self, moment, caplog):
        with caplog.at_level(logging.DEBUG, logger="calendash.moment.moment"):
            moment.add({"years": 1})
        assert "out-of-bounds" in caplog.text

    def test_overflow_is_noop(self):
        m = Moment(dt.datetime(2999, 6, 1))
        m.add({"decades": 900})
        assert m.date == dt.datetime(2999, 6, 1)

    def test_invalid_offset_still_raises(self, moment):
        with pytest.raises(InvalidDirection):
            moment.add({"days": "one"})


# ── from_date ─────────────────────────────────────────────────────────────────

class TestFromDate:

    def test_keeps_time_of_day(self, moment):
        moment.from_date("2025-03-02T18:45:00")
        assert moment.date == dt.datetime(2025, 3, 2, 12)

    def test_out_of_bounds_ignored(self, moment):
        moment.from_date("2025-05-01")
        assert moment.date == dt.datetime(2025, 3, 24, 12)

    def test_invalid_raises(self, moment):
        with pytest.raises(InvalidDate):
            moment.from_date("not-a-date")


# ── Time zones ────────────────────────────────────────────────────────────────

class TestZonedDateTime:

    def test_rebases_date(self):
        m = Moment(local(2025, 3, 24, 12))
        m.to_zoned_date_time("America/New_York")
        assert m.date == dt.datetime(2025, 3, 24, 8, 0, 0)

    def test_rebases_bounds(self):
        m = Moment(local(2025, 3, 24, 12))
        m.to_zoned_date_time("America/New_York")
        assert m.bounds.max == dt.datetime(2999, 12, 31, 18, 59, 59)

    @pytest.mark.parametrize("tz", ["Invalid/Zone", "Europe"])
    def test_invalid_zone(self, moment, tz):
        with pytest.raises(InvalidTimezone, match="Invalid time zone provided"):
            moment.to_zoned_date_time(tz)
        assert moment.date == dt.datetime(2025, 3, 24, 12)

    def test_uses_shared_adjuster(self):
        adjuster = TimeZoneAdjuster()
        Moment("2025-03-24", adjuster=adjuster).to_zoned_date_time("Asia/Tokyo")
        assert "Asia/Tokyo" in adjuster


# ── Adjacency ─────────────────────────────────────────────────────────────────

class TestAdjacentVisible:

    def test_within_bounds(self, moment):
        assert moment.is_adjacent_date_visible("days", 1)
        assert moment.is_adjacent_date_visible("weeks", -1)

    def test_outside_bounds(self, moment):
        assert not moment.is_adjacent_date_visible("weeks", 1)
        assert not moment.is_adjacent_date_visible("months", -1)

    def test_does_not_move(self, moment):
        moment.is_adjacent_date_visible("days", 1)
        assert moment.date == dt.datetime(2025, 3, 24, 12)

    def test_beyond_representable_range(self):
        m = Moment(dt.datetime(9995, 6, 1), bounds={"max": "9999-12-31"})
        assert not m.is_adjacent_date_visible("decades", 1)

    def test_bad_key(self, moment):
        with pytest.raises(InvalidOffsetKey):
            moment.is_adjacent_date_visible("hours", 1)
