# src/calendash/calendar/__init__.py
"""
calendash.calendar
~~~~~~~~~~~~~~~~~~

Calendar session facade.  A Calendar keeps a target date and a current view
and returns the grid for that pair, with bounds and disablement rules
applied to every cell.

Basic usage::

    from calendash.calendar import Calendar
    from calendash.middlewares import disable

    cal = Calendar(date="2025-03-24T12:00:00", view="month",
                   middlewares=[disable(weekends=True)])
    cal.data.cells.shape                 # → (6, 7)
    cal.navigate("date", 1).target       # → 2025-04-24 12:00
    cal.navigate("view", 1).view         # → "year"

Public API
----------
Calendar        The main class.
CalendarConfig  Frozen bundle of constructor arguments.
CalendarError   Base exception for all calendar-related errors.
"""

from __future__ import annotations

from calendash._exceptions import CalendarError
from calendash.calendar.calendar import Calendar, CalendarConfig

__all__ = [
    "Calendar",
    "CalendarConfig",
    "CalendarError",
]
