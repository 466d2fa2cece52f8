from __future__ import annotations

import datetime as dt
from typing import Any, Callable, Mapping

from calendash._constants import DIRECTION_NEXT, DIRECTION_PREV
from calendash._exceptions import InvalidDirection, InvalidInput, InvalidOffsetKey
from calendash.dates import clamp, is_integer, replace_clamped

OffsetFn = Callable[[dt.datetime, int], dt.datetime]


def _add_months(date: dt.datetime, months: int) -> dt.datetime:
    year, month0 = divmod(date.month - 1 + months, 12)
    return replace_clamped(date, date.year + year, month0 + 1)


def _decades(date: dt.datetime, offset: int) -> dt.datetime:
    return replace_clamped(date, date.year + offset * 10, date.month)


def _years(date: dt.datetime, offset: int) -> dt.datetime:
    return replace_clamped(date, date.year + offset, date.month)


def _months(date: dt.datetime, offset: int) -> dt.datetime:
    return _add_months(date, offset)


def _weeks(date: dt.datetime, offset: int) -> dt.datetime:
    return date + dt.timedelta(days=offset * 7)


def _days(date: dt.datetime, offset: int) -> dt.datetime:
    return date + dt.timedelta(days=offset)


# Unit name (pluralised view) -> pure offset function.  Year and month steps
# clamp the day of month, so Jan 31 + 1 month lands on the last day of Feb.
OFFSET_STRATEGIES: dict[str, OffsetFn] = {
    "decades": _decades,
    "years": _years,
    "months": _months,
    "weeks": _weeks,
    "days": _days,
}


def add_offset(date: dt.datetime, offsets: Mapping[str, Any]) -> dt.datetime:
    """
    Apply every recognised ``{unit: count}`` pair of ``offsets`` to ``date`` in
    mapping order and return the result.  Unknown units are ignored; ``date``
    itself is never modified.
    """
    if not isinstance(offsets, Mapping):
        raise InvalidInput(
            f"Invalid view offset {offsets!r}. Expected a mapping of unit to integer."
        )

    result = date
    for key, offset in offsets.items():
        fn = OFFSET_STRATEGIES.get(key)
        if fn is None:
            continue
        if not is_integer(offset):
            raise InvalidDirection(
                f"Invalid offset {offset!r} for {key!r}. Expected an integer value."
            )
        result = fn(result, int(offset))
    return result


def get_adjacent_date(date: dt.datetime, offset_key: str, direction: int) -> dt.datetime:
    """Step ``date`` by exactly one ``offset_key`` unit in the sign of ``direction``."""
    fn = OFFSET_STRATEGIES.get(offset_key)
    if fn is None:
        raise InvalidOffsetKey(
            f"Invalid offset strategy for key {offset_key!r}. "
            f"Expected one of: {', '.join(OFFSET_STRATEGIES)}"
        )
    if not is_integer(direction):
        raise InvalidDirection(
            f"Invalid direction {direction!r}. Expected an integer value of -1 or 1."
        )
    return fn(date, int(clamp(direction, DIRECTION_PREV, DIRECTION_NEXT)))
