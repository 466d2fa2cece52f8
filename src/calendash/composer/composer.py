from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from calendash._exceptions import CalendarError, InvalidDate, InvalidView
from calendash.composer.builders import BUILDERS
from calendash.composer.cells import BuilderContext, ViewData
from calendash.dates import (
    DateBounds,
    DateType,
    TimeZoneAdjuster,
    resolve_bounds,
    to_date,
    to_epoch_ms,
)
from calendash.middlewares import Middleware, coerce_middlewares


@dataclass(frozen=True, slots=True)
class _CacheEntry:
    view: str
    time: int
    data: ViewData


class Composer:
    """
    Builds view data for a (view, target) pair and memoises the last result.

    The cache holds a single entry keyed by view and the target's epoch
    milliseconds: asking again for the same pair returns the very same object,
    anything else rebuilds and replaces it.

    ``today`` pins the clock used for the ``is_current_*`` flags; it is taken
    as wall-clock time already and is not shifted by ``time_zone``.
    """

    def __init__(
        self,
        time_zone: str | None = None,
        bounds: DateBounds | Mapping[str, DateType] | None = None,
        middlewares: Iterable[Any] | None = (),
        today: DateType | None = None,
        adjuster: TimeZoneAdjuster | None = None,
    ) -> None:
        self._adjuster = TimeZoneAdjuster() if adjuster is None else adjuster
        try:
            resolved = resolve_bounds(bounds)
            if today is not None:
                now = to_date(today)
            elif time_zone:
                now = self._adjuster.adjust(dt.datetime.now(), time_zone)
            else:
                now = dt.datetime.now()
            if time_zone:
                resolved = DateBounds(
                    min=self._adjuster.adjust(resolved.min, time_zone),
                    max=self._adjuster.adjust(resolved.max, time_zone),
                )
        except CalendarError as exc:
            raise InvalidDate(f"Invalid date or timezone provided: {exc}") from exc

        self._today: dt.datetime = now
        self._bounds: DateBounds = resolved
        self._middlewares: tuple[Middleware, ...] = coerce_middlewares(middlewares)
        self._cache: _CacheEntry | None = None

    @property
    def today(self) -> dt.datetime:
        return self._today

    @property
    def bounds(self) -> DateBounds:
        return self._bounds

    @property
    def middlewares(self) -> tuple[Middleware, ...]:
        return self._middlewares

    def data(self, view: str, target: dt.datetime) -> ViewData:
        if not isinstance(target, dt.datetime):
            raise InvalidDate("Target date must be a valid datetime.")
        target = to_date(target)
        time = to_epoch_ms(target)

        entry = self._cache
        if (
            entry is not None
            and isinstance(entry.data, ViewData)
            and entry.view == view
            and entry.time == time
        ):
            return entry.data

        builder = BUILDERS.get(view) if isinstance(view, str) else None
        if builder is None:
            raise InvalidView(
                f"Unknown view type {view!r}. Expected one of: {', '.join(BUILDERS)}."
            )

        data = builder(
            BuilderContext(
                target=target,
                today=self._today,
                bounds=self._bounds,
                middlewares=self._middlewares,
            )
        )
        self._cache = _CacheEntry(view=view, time=time, data=data)
        return data

    def __repr__(self) -> str:
        cached = f"({self._cache.view!r}, {self._cache.time})" if self._cache else None
        return (
            f"Composer(today={self._today.isoformat()}, "
            f"middlewares={[mw.name for mw in self._middlewares]}, "
            f"cached={cached})"
        )
