from __future__ import annotations

from typing import Literal

ViewType = Literal["day", "week", "month", "year", "decade"]
NavigationMode = Literal["date", "view"]

VIEWS: tuple[ViewType, ...] = ("day", "week", "month", "year", "decade")

DIRECTION_NEXT = 1
DIRECTION_PREV = -1
DIRECTION_NAME = {DIRECTION_PREV: "backward", DIRECTION_NEXT: "forward"}

DATE_BOUNDARIES = {
    "min": "1900-01-01T00:01:01.001Z",
    "max": "2999-12-31T23:59:59.999Z",
}

# Resolved time zones kept per TimeZoneAdjuster.
MAX_CACHE_SIZE = 50

DATE_NAVIGATION_MODE = "date"
VIEW_NAVIGATION_MODE = "view"
