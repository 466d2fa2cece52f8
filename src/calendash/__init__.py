"""
calendash
~~~~~~~~~

Calendar view composition: day, week, month, year and decade grids for a
target date, with inclusive bounds, time-zone re-basing and pluggable
disablement rules, plus date and view navigation.

Subpackages
-----------
calendash.calendar      Calendar facade.
calendash.composer      Grid builders and the single-entry result cache.
calendash.moment        Target date, bounds and offset arithmetic.
calendash.layout        Current view among the visible views.
calendash.middlewares   Middleware and disablement rules.
calendash.dates         Date primitives and time-zone adjustment.
"""

from __future__ import annotations

from calendash._constants import (
    DATE_BOUNDARIES,
    DATE_NAVIGATION_MODE,
    DIRECTION_NEXT,
    DIRECTION_PREV,
    MAX_CACHE_SIZE,
    VIEW_NAVIGATION_MODE,
    VIEWS,
)
from calendash._exceptions import (
    CalendarError,
    InvalidDate,
    InvalidDirection,
    InvalidInput,
    InvalidNavigationMode,
    InvalidOffsetKey,
    InvalidSkipViews,
    InvalidTimeZone,
    InvalidTimezone,
    InvalidView,
    OutOfBounds,
)
from calendash.calendar import Calendar, CalendarConfig
from calendash.composer import Composer
from calendash.dates import DateBounds, TimeZoneAdjuster, adjust_time_zone
from calendash.layout import Layout
from calendash.middlewares import (
    DisablementRule,
    Middleware,
    disable,
    disable_dates,
    disable_weekends,
)
from calendash.moment import Moment

__all__ = [
    "Calendar",
    "CalendarConfig",
    "CalendarError",
    "Composer",
    "DATE_BOUNDARIES",
    "DATE_NAVIGATION_MODE",
    "DIRECTION_NEXT",
    "DIRECTION_PREV",
    "DateBounds",
    "DisablementRule",
    "InvalidDate",
    "InvalidDirection",
    "InvalidInput",
    "InvalidNavigationMode",
    "InvalidOffsetKey",
    "InvalidSkipViews",
    "InvalidTimeZone",
    "InvalidTimezone",
    "InvalidView",
    "Layout",
    "MAX_CACHE_SIZE",
    "Middleware",
    "Moment",
    "OutOfBounds",
    "TimeZoneAdjuster",
    "VIEWS",
    "VIEW_NAVIGATION_MODE",
    "adjust_time_zone",
    "disable",
    "disable_dates",
    "disable_weekends",
]
