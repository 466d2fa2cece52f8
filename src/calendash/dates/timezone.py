from __future__ import annotations

import datetime as dt
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from calendash._constants import MAX_CACHE_SIZE
from calendash._exceptions import InvalidDate, InvalidTimezone


def _resolve_zone(time_zone: str) -> dt.tzinfo:
    if not isinstance(time_zone, str) or not time_zone.strip():
        raise InvalidTimezone(f"Invalid time zone specified: {time_zone!r}")
    try:
        return ZoneInfo(time_zone)
    except (ZoneInfoNotFoundError, ValueError, OSError) as ex:
        raise InvalidTimezone(f"Invalid time zone specified: {time_zone}") from ex


class TimeZoneAdjuster:
    """
    Re-expresses local datetimes as the wall-clock time of another zone.

    Resolved zones are cached per identifier.  The cache holds at most
    ``max_size`` entries; adding one more evicts the oldest insertion.
    """

    def __init__(self, max_size: int = MAX_CACHE_SIZE) -> None:
        if max_size < 1:
            raise ValueError("max_size must be at least 1.")
        self._max_size = max_size
        self._zones: dict[str, dt.tzinfo] = {}

    def zone(self, time_zone: str) -> dt.tzinfo:
        tz = self._zones.get(time_zone)
        if tz is None:
            tz = _resolve_zone(time_zone)
            if len(self._zones) >= self._max_size:
                del self._zones[next(iter(self._zones))]
            self._zones[time_zone] = tz
        return tz

    def adjust(self, date: dt.datetime, time_zone: str) -> dt.datetime:
        """
        Wall-clock components of ``date`` as seen in ``time_zone``, as a naive datetime.

        Naive input is read as local time.  Sub-second precision is dropped.
        """
        if not isinstance(date, dt.datetime):
            raise InvalidDate(f"Expected a datetime to adjust; got {type(date).__name__}.")
        tz = self.zone(time_zone)
        try:
            zoned = date.astimezone(tz)
        except (OverflowError, ValueError, OSError) as ex:
            raise InvalidDate(f"Could not adjust {date!r} to {time_zone}.") from ex
        return zoned.replace(tzinfo=None, microsecond=0)

    @property
    def max_size(self) -> int:
        return self._max_size

    def __len__(self) -> int:
        return len(self._zones)

    def __contains__(self, time_zone: object) -> bool:
        return time_zone in self._zones

    def __repr__(self) -> str:
        return f"TimeZoneAdjuster(max_size={self._max_size}, cached={list(self._zones)})"


def adjust_time_zone(
    date: dt.datetime,
    time_zone: str,
    adjuster: TimeZoneAdjuster | None = None,
) -> dt.datetime:
    """
    One-off adjustment of ``date`` to ``time_zone``.

    Without ``adjuster`` a fresh, empty cache is used for the call; pass a
    shared TimeZoneAdjuster to reuse resolved zones under its size limit.
    """
    if adjuster is None:
        adjuster = TimeZoneAdjuster()
    return adjuster.adjust(date, time_zone)
