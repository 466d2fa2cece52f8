"""
Grid builders, one per view.  Each is a pure function of a BuilderContext;
neither the target nor today is modified.

Grid shapes: day (1, 1), week (1, 7), month (6, 7), year (4, 3), decade (4, 3).
"""

from __future__ import annotations

import datetime as dt
from typing import Any, Callable

from calendash.composer.cells import (
    BuilderContext,
    Day,
    DayCell,
    Decade,
    DecadeCell,
    Month,
    MonthCell,
    ViewData,
    Week,
    WeekCell,
    Year,
    YearCell,
)
from calendash.composer.grid import is_date_disabled
from calendash.dates import (
    create_grid,
    is_same_day,
    is_same_decade,
    is_same_month,
    is_same_week,
    is_same_year,
    replace_clamped,
    to_epoch_ms,
    weekday,
)

Builder = Callable[[BuilderContext], ViewData]


def _day_fields(current: dt.datetime, ctx: BuilderContext) -> dict[str, Any]:
    return {
        "timestamp": to_epoch_ms(current),
        "day_of_month": current.day,
        "weekday": weekday(current),
        "month_index": current.month - 1,
        "year": current.year,
        "is_selected": is_same_day(current, ctx.target),
        "is_disabled": is_date_disabled(current, ctx.bounds, ctx.middlewares),
    }


def day(ctx: BuilderContext) -> Day:
    cell = DayCell(**_day_fields(ctx.target, ctx))
    return Day(
        is_current_day=is_same_day(ctx.target, ctx.today),
        cells=create_grid(1, 1, lambda i, j: cell),
    )


def week(ctx: BuilderContext) -> Week:
    target = ctx.target
    start = target - dt.timedelta(days=weekday(target))

    def build(i: int, j: int) -> WeekCell:
        current = start + dt.timedelta(days=j)
        return WeekCell(
            **_day_fields(current, ctx),
            is_current_day=is_same_day(current, ctx.today),
            is_out_of_range=not is_same_week(current, target),
        )

    return Week(
        is_current_week=is_same_week(target, ctx.today),
        cells=create_grid(1, 7, build),
    )


def month(ctx: BuilderContext) -> Month:
    target = ctx.target
    first = target.replace(day=1)
    # Sunday on or before the 1st, then one day per cell.
    start = first - dt.timedelta(days=weekday(first))

    def build(i: int, j: int) -> MonthCell:
        current = start + dt.timedelta(days=i * 7 + j)
        return MonthCell(
            **_day_fields(current, ctx),
            is_current_day=is_same_day(current, ctx.today),
            is_current_week=is_same_week(current, ctx.today),
            is_outside_view=not is_same_month(current, target),
        )

    return Month(
        is_current_month=is_same_month(target, ctx.today),
        cells=create_grid(6, 7, build),
    )


def year(ctx: BuilderContext) -> Year:
    target = ctx.target

    def build(i: int, j: int) -> YearCell:
        month_index = i * 3 + j
        current = replace_clamped(target, target.year, month_index + 1)
        return YearCell(
            timestamp=to_epoch_ms(current),
            month_index=month_index,
            year=current.year,
            is_current_month=is_same_month(current, ctx.today),
            is_out_of_range=not is_same_year(current, target),
            is_selected=is_same_month(current, target),
            is_disabled=is_date_disabled(current, ctx.bounds, ctx.middlewares),
        )

    return Year(
        is_current_year=is_same_year(target, ctx.today),
        cells=create_grid(4, 3, build),
    )


def decade(ctx: BuilderContext) -> Decade:
    target = ctx.target
    start_year = target.year // 10 * 10

    # Twelve years: the decade itself plus two trailing years flagged out of range.
    def build(i: int, j: int) -> DecadeCell:
        current = replace_clamped(target, start_year + i * 3 + j, target.month)
        return DecadeCell(
            timestamp=to_epoch_ms(current),
            year=current.year,
            is_current_year=is_same_year(current, ctx.today),
            is_out_of_range=not is_same_decade(current, target),
            is_selected=is_same_year(current, target),
            is_disabled=is_date_disabled(current, ctx.bounds, ctx.middlewares),
        )

    return Decade(
        is_current_decade=is_same_decade(target, ctx.today),
        cells=create_grid(4, 3, build),
    )


BUILDERS: dict[str, Builder] = {
    "day": day,
    "week": week,
    "month": month,
    "year": year,
    "decade": decade,
}
