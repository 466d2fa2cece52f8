from __future__ import annotations

import datetime as dt
from typing import Iterable

from calendash.dates import DateBounds, is_within_bounds
from calendash.middlewares import DisablementRule, Middleware


def is_date_disabled(
    date: dt.datetime,
    bounds: DateBounds,
    middlewares: Iterable[Middleware] = (),
) -> bool:
    """
    True when ``date`` is outside ``bounds`` or a DisablementRule disables it.

    Rules are evaluated in order and the first disabling rule wins, so they
    run once per grid cell and must be free of side effects.
    """
    if not is_within_bounds(date, bounds):
        return True
    for mw in middlewares:
        if isinstance(mw, DisablementRule) and mw.evaluate(date):
            return True
    return False
