"""
tests/moment/test_offsets.py

Covers:
  - Each offset unit, forward and backward
  - Day-of-month clamping for year / month / decade steps
  - Mapping order, unknown keys, argument validation
  - Single-step adjacency with direction clamping
"""

import datetime as dt

import pytest

from calendash import InvalidDirection, InvalidInput, InvalidOffsetKey
from calendash.moment import OFFSET_STRATEGIES, add_offset, get_adjacent_date


@pytest.fixture
def base() -> dt.datetime:
    return dt.datetime(2025, 3, 24, 12, 30)


# ── add_offset ────────────────────────────────────────────────────────────────

class TestAddOffset:

    @pytest.mark.parametrize(
        "offsets, expected",
        [
            ({"days": 1}, dt.datetime(2025, 3, 25, 12, 30)),
            ({"days": -24}, dt.datetime(2025, 2, 28, 12, 30)),
            ({"weeks": 2}, dt.datetime(2025, 4, 7, 12, 30)),
            ({"months": 1}, dt.datetime(2025, 4, 24, 12, 30)),
            ({"months": -3}, dt.datetime(2024, 12, 24, 12, 30)),
            ({"months": 12}, dt.datetime(2026, 3, 24, 12, 30)),
            ({"years": -1}, dt.datetime(2024, 3, 24, 12, 30)),
            ({"decades": 1}, dt.datetime(2035, 3, 24, 12, 30)),
        ],
    )
    def test_units(self, base, offsets, expected):
        assert add_offset(base, offsets) == expected

    def test_month_end_clamps(self):
        assert add_offset(dt.datetime(2025, 1, 31), {"months": 1}) == dt.datetime(2025, 2, 28)
        assert add_offset(dt.datetime(2024, 3, 31), {"months": -1}) == dt.datetime(2024, 2, 29)

    def test_leap_day_clamps_on_year_step(self):
        assert add_offset(dt.datetime(2024, 2, 29), {"years": 1}) == dt.datetime(2025, 2, 28)
        assert add_offset(dt.datetime(2024, 2, 29), {"decades": 1}) == dt.datetime(2034, 2, 28)

    def test_applied_in_mapping_order(self):
        start = dt.datetime(2025, 1, 31)
        # Month first clamps to Feb 28, then +1 day is Mar 1.
        assert add_offset(start, {"months": 1, "days": 1}) == dt.datetime(2025, 3, 1)
        # Day first moves to Feb 1, then +1 month is Mar 1.
        assert add_offset(start, {"days": 1, "months": 1}) == dt.datetime(2025, 3, 1)
        assert add_offset(dt.datetime(2025, 1, 30), {"days": 1, "months": 1}) == dt.datetime(2025, 2, 28)

    def test_unknown_keys_ignored(self, base):
        assert add_offset(base, {"hours": 5, "days": 1}) == dt.datetime(2025, 3, 25, 12, 30)
        assert add_offset(base, {}) == base

    def test_integral_float_accepted(self, base):
        assert add_offset(base, {"days": 2.0}) == dt.datetime(2025, 3, 26, 12, 30)

    @pytest.mark.parametrize("value", [1.5, "1", None, True])
    def test_non_integer_rejected(self, base, value):
        with pytest.raises(InvalidDirection):
            add_offset(base, {"days": value})

    @pytest.mark.parametrize("value", [None, 5, "days", [("days", 1)]])
    def test_non_mapping_rejected(self, base, value):
        with pytest.raises(InvalidInput, match="Invalid view offset"):
            add_offset(base, value)

    def test_input_unchanged(self, base):
        before = base
        add_offset(base, {"days": 10})
        assert base == before == dt.datetime(2025, 3, 24, 12, 30)


# ── get_adjacent_date ─────────────────────────────────────────────────────────

class TestAdjacentDate:

    def test_strategy_keys(self):
        assert list(OFFSET_STRATEGIES) == ["decades", "years", "months", "weeks", "days"]

    def test_step_forward_and_back(self, base):
        assert get_adjacent_date(base, "months", 1) == dt.datetime(2025, 4, 24, 12, 30)
        assert get_adjacent_date(base, "weeks", -1) == dt.datetime(2025, 3, 17, 12, 30)

    def test_direction_clamped_to_one_step(self, base):
        assert get_adjacent_date(base, "days", 5) == dt.datetime(2025, 3, 25, 12, 30)
        assert get_adjacent_date(base, "years", -7) == dt.datetime(2024, 3, 24, 12, 30)

    def test_zero_direction_is_identity(self, base):
        assert get_adjacent_date(base, "days", 0) == base

    def test_unknown_key(self, base):
        with pytest.raises(InvalidOffsetKey, match="decades, years, months, weeks, days"):
            get_adjacent_date(base, "hours", 1)

    def test_non_integer_direction(self, base):
        with pytest.raises(InvalidDirection):
            get_adjacent_date(base, "days", "forward")
