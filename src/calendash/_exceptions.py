"""Exception hierarchy shared by every calendash component."""

from __future__ import annotations


class CalendarError(Exception):
    """Base class for all calendash errors."""


class InvalidDate(CalendarError, ValueError):
    """A date input has an unsupported type or cannot be parsed."""


class OutOfBounds(CalendarError, ValueError):
    """The initial target date falls outside the resolved bounds."""


class InvalidTimezone(CalendarError, ValueError):
    """An IANA time-zone identifier is not recognised."""


InvalidTimeZone = InvalidTimezone


class InvalidSkipViews(CalendarError, ValueError):
    """Every view was excluded, leaving nothing to navigate."""


class InvalidDirection(CalendarError, ValueError):
    """A direction or offset value is not an integer."""


class InvalidOffsetKey(CalendarError, ValueError):
    """An offset key has no matching unit strategy."""


class InvalidInput(CalendarError, ValueError):
    """An offsets argument is not a mapping."""


class InvalidView(CalendarError, ValueError):
    """The requested view has no grid builder."""


class InvalidNavigationMode(CalendarError, ValueError):
    """A navigation mode other than ``"date"`` or ``"view"`` was requested."""


__all__ = [
    "CalendarError",
    "InvalidDate",
    "OutOfBounds",
    "InvalidTimezone",
    "InvalidTimeZone",
    "InvalidSkipViews",
    "InvalidDirection",
    "InvalidOffsetKey",
    "InvalidInput",
    "InvalidView",
    "InvalidNavigationMode",
]
