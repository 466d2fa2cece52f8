# src/calendash/dates/__init__.py
"""
calendash.dates
~~~~~~~~~~~~~~~

Date primitives shared by the calendar engine.  Dates are naive
``datetime.datetime`` values holding local wall-clock time; epoch
milliseconds are derived from them with local-time interpretation.

Basic usage::

    from calendash.dates import resolve_bounds, to_date, is_within_bounds

    bounds = resolve_bounds({"min": "2025-01-01", "max": "2025-12-31"})
    is_within_bounds(to_date("2025-06-15"), bounds)      # → True

Time-zone adjustment keeps a small per-instance cache of resolved zones::

    from calendash.dates import TimeZoneAdjuster

    adjuster = TimeZoneAdjuster()
    adjuster.adjust(datetime.now(), "America/New_York")
"""

from __future__ import annotations

from calendash.dates.dates import (
    DateBounds,
    DateType,
    Grid,
    clamp,
    create_grid,
    day_key,
    days_in_month,
    from_epoch_ms,
    is_integer,
    is_same_day,
    is_same_decade,
    is_same_month,
    is_same_week,
    is_same_year,
    is_within_bounds,
    replace_clamped,
    resolve_bounds,
    to_date,
    to_epoch_ms,
    week_start,
    weekday,
)
from calendash.dates.timezone import TimeZoneAdjuster, adjust_time_zone

__all__ = [
    "DateBounds",
    "DateType",
    "Grid",
    "TimeZoneAdjuster",
    "adjust_time_zone",
    "clamp",
    "create_grid",
    "day_key",
    "days_in_month",
    "from_epoch_ms",
    "is_integer",
    "is_same_day",
    "is_same_decade",
    "is_same_month",
    "is_same_week",
    "is_same_year",
    "is_within_bounds",
    "replace_clamped",
    "resolve_bounds",
    "to_date",
    "to_epoch_ms",
    "week_start",
    "weekday",
]
