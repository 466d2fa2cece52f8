from __future__ import annotations

import re
from typing import Any, Iterable

from calendash.dates import day_key, weekday
from calendash.middlewares.middleware import DisablementRule, MiddlewareState

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _date_keys(values: Iterable[Any] | None) -> frozenset[str]:
    # Anything that is not a "YYYY-MM-DD" string is silently ignored.
    if values is None or isinstance(values, (str, bytes)):
        return frozenset()
    return frozenset(v for v in values if isinstance(v, str) and _ISO_DATE_RE.match(v))


def _materialise(values: Iterable[Any] | None) -> Any:
    # One pass over generators, shared by the options and the key set.
    if values is None or isinstance(values, (str, bytes)):
        return values
    return tuple(values)


def _is_weekend(state: MiddlewareState) -> bool:
    return weekday(state.date) in (0, 6)


def _options(**kwargs: Any) -> dict[str, Any]:
    return {k: v for k, v in kwargs.items() if v is not None}


def disable(
    dates: Iterable[str] | None = None,
    weekends: bool | None = None,
    exclude: Iterable[str] | None = None,
) -> DisablementRule:
    """
    Disable exact ``dates`` and, optionally, all weekends.

    ``exclude`` only overrides the weekend rule: a date listed in ``dates``
    stays disabled even when it is also excluded.

    Example::

        disable(dates=["2025-12-25"], weekends=True, exclude=["2025-12-28"])
    """
    dates, exclude = _materialise(dates), _materialise(exclude)
    options = _options(dates=dates, weekends=weekends, exclude=exclude)
    date_set = _date_keys(dates)
    exclude_set = _date_keys(exclude) if weekends else frozenset()

    def fn(state: MiddlewareState) -> dict[str, Any]:
        key = day_key(state.date)
        if key in date_set:
            return {"data": {"is_disabled": True}}
        if weekends and _is_weekend(state) and key not in exclude_set:
            return {"data": {"is_disabled": True}}
        return {"data": {"is_disabled": False}}

    return DisablementRule(name="disable", fn=fn, options=options)


def disable_dates(list_of_dates: Iterable[str] | None = None) -> DisablementRule:
    list_of_dates = _materialise(list_of_dates)
    options = _options(list_of_dates=list_of_dates)
    date_set = _date_keys(list_of_dates)

    def fn(state: MiddlewareState) -> dict[str, Any]:
        return {"data": {"is_disabled": day_key(state.date) in date_set}}

    return DisablementRule(name="disableDates", fn=fn, options=options)


def disable_weekends(exclude: Iterable[str] | None = None) -> DisablementRule:
    exclude = _materialise(exclude)
    options = _options(exclude=exclude)
    exclude_set = _date_keys(exclude)

    def fn(state: MiddlewareState) -> dict[str, Any]:
        return {
            "data": {
                "is_disabled": _is_weekend(state) and day_key(state.date) not in exclude_set
            }
        }

    return DisablementRule(name="disableWeekends", fn=fn, options=options)
