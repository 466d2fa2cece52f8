from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from calendash._constants import (
    DATE_NAVIGATION_MODE,
    DIRECTION_NEXT,
    DIRECTION_PREV,
    VIEW_NAVIGATION_MODE,
    ViewType,
)
from calendash._exceptions import InvalidDirection, InvalidNavigationMode
from calendash.composer import Composer, ViewData
from calendash.dates import DateBounds, DateType, TimeZoneAdjuster, clamp, is_integer
from calendash.layout import Layout
from calendash.moment import Moment


@dataclass(frozen=True)
class CalendarConfig:
    date: DateType | None = None
    bounds: DateBounds | Mapping[str, DateType] | None = None
    view: str | None = None
    time_zone: str | None = None
    skip_views: Sequence[str] = ()
    middlewares: Sequence[Any] = field(default_factory=tuple)
    today: DateType | None = None


class Calendar:
    """
    One calendar session: a Moment (target date), a Layout (current view) and
    a Composer (grid data), sharing a single time-zone adjuster.
    """

    def __init__(
        self,
        date: DateType | None = None,
        bounds: DateBounds | Mapping[str, DateType] | None = None,
        view: str | None = None,
        time_zone: str | None = None,
        skip_views: Sequence[str] = (),
        middlewares: Sequence[Any] | None = (),
        today: DateType | None = None,
    ) -> None:
        self._adjuster = TimeZoneAdjuster()
        self._moment = Moment(date, bounds, adjuster=self._adjuster)
        self._layout = Layout(view, skip_views)
        self._composer = Composer(
            time_zone=time_zone,
            bounds=bounds,
            middlewares=middlewares,
            today=today,
            adjuster=self._adjuster,
        )
        if time_zone:
            self._moment.to_zoned_date_time(time_zone)

    @classmethod
    def from_config(cls, config: CalendarConfig) -> Calendar:
        return cls(
            date=config.date,
            bounds=config.bounds,
            view=config.view,
            time_zone=config.time_zone,
            skip_views=config.skip_views,
            middlewares=config.middlewares,
            today=config.today,
        )

    # ── queries ──────────────────────────────────────────────────────────

    @property
    def view(self) -> ViewType:
        return self._layout.view

    @property
    def target(self) -> dt.datetime:
        return self._moment.date

    @property
    def data(self) -> ViewData:
        return self._composer.data(self._layout.view, self._moment.date)

    @property
    def has_next_date(self) -> bool:
        return self._moment.is_adjacent_date_visible(f"{self._layout.view}s", 1)

    @property
    def has_prev_date(self) -> bool:
        return self._moment.is_adjacent_date_visible(f"{self._layout.view}s", -1)

    @property
    def has_next_view(self) -> bool:
        return self._layout.get_adjacent_view(1) is not None

    @property
    def has_prev_view(self) -> bool:
        return self._layout.get_adjacent_view(-1) is not None

    # ── navigation ───────────────────────────────────────────────────────

    def jump_to_date(self, date: DateType) -> Calendar:
        """Move to the day of ``date``; the view and the time of day are kept."""
        self._moment.from_date(date)
        return self

    def navigate(self, mode: str, direction: int) -> Calendar:
        """
        ``"date"`` mode moves the target one unit of the current view;
        ``"view"`` mode moves to the adjacent visible view.  Only the sign of
        ``direction`` matters.
        """
        if mode == DATE_NAVIGATION_MODE:
            if not is_integer(direction):
                raise InvalidDirection(
                    f"Invalid direction {direction!r}. Expected an integer value of -1 or 1."
                )
            step = int(clamp(direction, DIRECTION_PREV, DIRECTION_NEXT))
            self._moment.add({f"{self._layout.view}s": step})
        elif mode == VIEW_NAVIGATION_MODE:
            self._layout.shift(direction)
        else:
            raise InvalidNavigationMode(
                f"Unsupported navigation mode {mode!r}. "
                f"Expected one of: {DATE_NAVIGATION_MODE}, {VIEW_NAVIGATION_MODE}."
            )
        return self

    def __repr__(self) -> str:
        return f"Calendar(view={self.view!r}, target={self.target.isoformat()})"
