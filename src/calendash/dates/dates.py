from __future__ import annotations

import calendar
import datetime as dt
import math
import numbers
from dataclasses import dataclass
from typing import Any, Callable, Mapping, TypeVar, Union

import numpy as np

from calendash._constants import DATE_BOUNDARIES
from calendash._exceptions import InvalidDate

T = TypeVar("T")

DateType = Union[str, int, float, dt.date, dt.datetime, np.datetime64]

# Cells are stored in object arrays; rows and columns follow the grid layout.
Grid = np.ndarray

_EPOCH = dt.datetime(1970, 1, 1, tzinfo=dt.timezone.utc)
_ONE_MS = dt.timedelta(milliseconds=1)


@dataclass(frozen=True, slots=True)
class DateBounds:
    """Inclusive ``min``/``max`` range of naive local datetimes."""

    min: dt.datetime
    max: dt.datetime

    def __post_init__(self) -> None:
        if to_epoch_ms(self.min) > to_epoch_ms(self.max):
            raise InvalidDate(
                f"Lower bound {self.min.isoformat()} is after upper bound {self.max.isoformat()}."
            )


# ── conversion ───────────────────────────────────────────────────────────────

def from_epoch_ms(ms: float) -> dt.datetime:
    """Local wall-clock datetime for an epoch-millisecond instant."""
    return _to_local(_EPOCH + dt.timedelta(milliseconds=ms))


def to_epoch_ms(date: dt.datetime) -> int:
    # Naive values are read as local time, matching from_epoch_ms.
    return (date.astimezone(dt.timezone.utc) - _EPOCH) // _ONE_MS


def _to_local(aware: dt.datetime) -> dt.datetime:
    return aware.astimezone().replace(tzinfo=None)


def _parse_iso(text: str) -> dt.datetime:
    s = text.strip()
    if s.endswith(("Z", "z")):
        s = s[:-1] + "+00:00"
    parsed = dt.datetime.fromisoformat(s)
    if parsed.tzinfo is not None:
        return _to_local(parsed)
    return parsed


def to_date(value: Any) -> dt.datetime:
    """
    Convert ``value`` to a naive local datetime.

    Accepts datetimes (naive ones are returned as-is, aware ones converted to
    local wall-clock), dates (local midnight), ISO 8601 strings, epoch
    milliseconds and ``numpy.datetime64`` instants.

    Raises InvalidDate for any other type or for values that do not describe
    a representable instant.
    """
    if isinstance(value, dt.datetime) and value.tzinfo is None:
        return value

    if isinstance(value, np.datetime64):
        if np.isnat(value):
            raise InvalidDate("Could not convert NaT to a date.")
        value = int(value.astype("datetime64[ms]").astype(np.int64))
    elif isinstance(value, bool) or not isinstance(
        value, (str, numbers.Real, dt.date)
    ):
        raise InvalidDate(
            f"Unsupported type for date conversion: {type(value).__name__}. "
            "Expected a datetime, date, string or number."
        )

    try:
        if isinstance(value, dt.datetime):
            return _to_local(value)
        if isinstance(value, dt.date):
            return dt.datetime(value.year, value.month, value.day)
        if isinstance(value, str):
            return _parse_iso(value)
        return from_epoch_ms(float(value))
    except (ValueError, OverflowError, OSError) as exc:
        raise InvalidDate(f"Could not convert {value!r} to a date.") from exc


def resolve_bounds(raw: DateBounds | Mapping[str, DateType] | None = None) -> DateBounds:
    """Normalise raw ``{"min": ..., "max": ...}`` input, filling in the default range."""
    if isinstance(raw, DateBounds):
        return raw
    if raw is None:
        raw = {}
    elif not isinstance(raw, Mapping):
        raise InvalidDate(f"Bounds must be a mapping with 'min'/'max' keys; got {type(raw).__name__}.")

    lower = raw.get("min")
    upper = raw.get("max")
    return DateBounds(
        min=to_date(DATE_BOUNDARIES["min"] if lower is None else lower),
        max=to_date(DATE_BOUNDARIES["max"] if upper is None else upper),
    )


def is_within_bounds(date: dt.datetime, bounds: DateBounds) -> bool:
    ms = to_epoch_ms(date)
    return to_epoch_ms(bounds.min) <= ms <= to_epoch_ms(bounds.max)


# ── calendar components ──────────────────────────────────────────────────────

def weekday(date: dt.date) -> int:
    """Day of week with Sunday = 0 ... Saturday = 6."""
    return (date.weekday() + 1) % 7


def week_start(date: dt.date) -> dt.date:
    """The Sunday on or before ``date``."""
    day = date.date() if isinstance(date, dt.datetime) else date
    return day - dt.timedelta(days=weekday(day))


def day_key(date: dt.date) -> str:
    return f"{date.year:04d}-{date.month:02d}-{date.day:02d}"


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def replace_clamped(date: dt.datetime, year: int, month: int) -> dt.datetime:
    """Move ``date`` to ``year``/``month``, clamping the day to the month's length."""
    return date.replace(
        year=year, month=month, day=min(date.day, days_in_month(year, month))
    )


def is_same_day(a: dt.date, b: dt.date) -> bool:
    return a.year == b.year and a.month == b.month and a.day == b.day


def is_same_week(a: dt.date, b: dt.date) -> bool:
    return week_start(a) == week_start(b)


def is_same_month(a: dt.date, b: dt.date) -> bool:
    return a.year == b.year and a.month == b.month


def is_same_year(a: dt.date, b: dt.date) -> bool:
    return a.year == b.year


def is_same_decade(a: dt.date, b: dt.date) -> bool:
    return a.year // 10 == b.year // 10


# ── numeric / structural helpers ─────────────────────────────────────────────

def is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Integral):
        return True
    if isinstance(value, numbers.Real):
        f = float(value)
        return math.isfinite(f) and f.is_integer()
    return False


def clamp(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)


def create_grid(rows: int, cols: int, builder: Callable[[int, int], T]) -> Grid:
    grid = np.empty((rows, cols), dtype=object)
    for i, j in np.ndindex(rows, cols):
        grid[i, j] = builder(i, j)
    return grid
