from __future__ import annotations

import datetime as dt
from dataclasses import dataclass

import numpy as np

from calendash.dates import DateBounds, Grid, from_epoch_ms
from calendash.middlewares import Middleware


@dataclass(frozen=True, slots=True)
class BuilderContext:
    target: dt.datetime
    today: dt.datetime
    bounds: DateBounds
    middlewares: tuple[Middleware, ...] = ()


# ── cells ────────────────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class DayCell:
    timestamp: int          # epoch milliseconds
    day_of_month: int
    weekday: int            # Sunday = 0
    month_index: int        # January = 0
    year: int
    is_selected: bool
    is_disabled: bool

    @property
    def date(self) -> dt.datetime:
        return from_epoch_ms(self.timestamp)


@dataclass(frozen=True, slots=True)
class WeekCell(DayCell):
    is_current_day: bool
    is_out_of_range: bool


@dataclass(frozen=True, slots=True)
class MonthCell(DayCell):
    is_current_day: bool
    is_current_week: bool
    is_outside_view: bool


@dataclass(frozen=True, slots=True)
class YearCell:
    timestamp: int
    month_index: int
    year: int
    is_current_month: bool
    is_out_of_range: bool
    is_selected: bool
    is_disabled: bool

    @property
    def date(self) -> dt.datetime:
        return from_epoch_ms(self.timestamp)


@dataclass(frozen=True, slots=True)
class DecadeCell:
    timestamp: int
    year: int
    is_current_year: bool
    is_out_of_range: bool
    is_selected: bool
    is_disabled: bool

    @property
    def date(self) -> dt.datetime:
        return from_epoch_ms(self.timestamp)


# ── view data ────────────────────────────────────────────────────────────────

@dataclass(frozen=True, eq=False)
class ViewData:
    """Grid of cells for one view; ``cells`` is a 2-D object array."""

    cells: Grid

    @property
    def shape(self) -> tuple[int, ...]:
        return self.cells.shape

    @property
    def timestamps(self) -> np.ndarray:
        return np.vectorize(lambda cell: cell.timestamp, otypes=[np.int64])(self.cells)

    def flags(self, name: str) -> np.ndarray:
        """Boolean array of the cell attribute ``name``, e.g. ``"is_disabled"``."""
        return np.vectorize(lambda cell: bool(getattr(cell, name)), otypes=[bool])(self.cells)


@dataclass(frozen=True, eq=False)
class Day(ViewData):
    is_current_day: bool = False


@dataclass(frozen=True, eq=False)
class Week(ViewData):
    is_current_week: bool = False


@dataclass(frozen=True, eq=False)
class Month(ViewData):
    is_current_month: bool = False


@dataclass(frozen=True, eq=False)
class Year(ViewData):
    is_current_year: bool = False


@dataclass(frozen=True, eq=False)
class Decade(ViewData):
    is_current_decade: bool = False
