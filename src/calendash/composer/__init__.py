# src/calendash/composer/__init__.py
"""
calendash.composer
~~~~~~~~~~~~~~~~~~

Grid composition for the five calendar views.

Basic usage::

    from datetime import datetime
    from calendash.composer import Composer
    from calendash.middlewares import disable_weekends

    composer = Composer(middlewares=[disable_weekends()])
    month = composer.data("month", datetime(2025, 7, 15))
    month.shape                          # → (6, 7)
    month.cells[0][0].day_of_month       # → 29 (Sunday, June 29)
    month.flags("is_disabled")[:, 0]     # Sundays → all True

Public API
----------
Composer          Builder dispatch + single-entry result cache.
BUILDERS          View name → builder function registry.
is_date_disabled  Bounds + DisablementRule predicate.
"""

from __future__ import annotations

from calendash.composer.builders import BUILDERS, day, decade, month, week, year
from calendash.composer.cells import (
    BuilderContext,
    Day,
    DayCell,
    Decade,
    DecadeCell,
    Month,
    MonthCell,
    ViewData,
    Week,
    WeekCell,
    Year,
    YearCell,
)
from calendash.composer.composer import Composer
from calendash.composer.grid import is_date_disabled

__all__ = [
    "BUILDERS",
    "BuilderContext",
    "Composer",
    "Day",
    "DayCell",
    "Decade",
    "DecadeCell",
    "Month",
    "MonthCell",
    "ViewData",
    "Week",
    "WeekCell",
    "Year",
    "YearCell",
    "day",
    "decade",
    "is_date_disabled",
    "month",
    "week",
    "year",
]
