from __future__ import annotations

import datetime as dt
import logging
from typing import Any, Mapping

from calendash._exceptions import CalendarError, InvalidDate, InvalidTimezone, OutOfBounds
from calendash.dates import (
    DateBounds,
    DateType,
    TimeZoneAdjuster,
    is_within_bounds,
    resolve_bounds,
    to_date,
)
from calendash.moment.offsets import add_offset, get_adjacent_date

logger = logging.getLogger(__name__)


class Moment:
    """
    Current target date of a calendar session, constrained to inclusive bounds.

    Construction validates strictly: an unparseable date raises InvalidDate and
    a target outside the bounds raises OutOfBounds.  Navigation afterwards is
    lenient: ``add`` and ``from_date`` leave the date unchanged when the result
    would fall outside the bounds.
    """

    def __init__(
        self,
        target_date: DateType | None = None,
        bounds: DateBounds | Mapping[str, DateType] | None = None,
        adjuster: TimeZoneAdjuster | None = None,
    ) -> None:
        try:
            date = to_date(dt.datetime.now() if target_date is None else target_date)
            resolved = resolve_bounds(bounds)
        except InvalidDate as exc:
            raise InvalidDate(f"Invalid date provided: {exc}") from exc

        if not is_within_bounds(date, resolved):
            raise OutOfBounds(
                f"Target date {date.isoformat()} is outside the bounds "
                f"[{resolved.min.isoformat()}, {resolved.max.isoformat()}]."
            )

        self._date: dt.datetime = date
        self._bounds: DateBounds = resolved
        self._adjuster = TimeZoneAdjuster() if adjuster is None else adjuster

    # ── state ────────────────────────────────────────────────────────────

    @property
    def date(self) -> dt.datetime:
        return self._date

    @property
    def bounds(self) -> DateBounds:
        return self._bounds

    # ── navigation ───────────────────────────────────────────────────────

    def add(self, offsets: Mapping[str, Any]) -> Moment:
        try:
            candidate = add_offset(self._date, offsets)
        except CalendarError:
            raise
        except (OverflowError, ValueError):
            candidate = None

        if candidate is not None and is_within_bounds(candidate, self._bounds):
            self._date = candidate
        else:
            logger.debug("Ignoring out-of-bounds shift of %s by %r", self._date, dict(offsets))
        return self

    def from_date(self, date: DateType) -> Moment:
        """
        Move to the calendar day of ``date``, keeping the current time of day.
        """
        try:
            new_date = to_date(date)
        except InvalidDate as exc:
            raise InvalidDate(f"Invalid date provided: {exc}") from exc

        if is_within_bounds(new_date, self._bounds):
            self._date = self._date.replace(
                year=new_date.year, month=new_date.month, day=new_date.day
            )
        else:
            logger.debug("Ignoring out-of-bounds target date %s", new_date.date())
        return self

    def to_zoned_date_time(self, time_zone: str) -> Moment:
        """Re-base the bounds and the current date onto ``time_zone`` wall-clock time."""
        try:
            bounds = DateBounds(
                min=self._adjuster.adjust(self._bounds.min, time_zone),
                max=self._adjuster.adjust(self._bounds.max, time_zone),
            )
            date = self._adjuster.adjust(self._date, time_zone)
        except CalendarError as exc:
            raise InvalidTimezone(f"Invalid time zone provided: {exc}") from exc

        self._bounds = bounds
        self._date = date
        return self

    def is_adjacent_date_visible(self, offset_key: str, direction: int) -> bool:
        try:
            candidate = get_adjacent_date(self._date, offset_key, direction)
        except CalendarError:
            raise
        except (OverflowError, ValueError):
            return False
        return is_within_bounds(candidate, self._bounds)

    def __repr__(self) -> str:
        return (
            f"Moment(date={self._date.isoformat()}, "
            f"min={self._bounds.min.isoformat()}, "
            f"max={self._bounds.max.isoformat()})"
        )
