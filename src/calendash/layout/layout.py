from __future__ import annotations

import logging
from typing import Iterable

from calendash._constants import DIRECTION_NAME, DIRECTION_NEXT, DIRECTION_PREV, VIEWS, ViewType
from calendash._exceptions import InvalidDirection, InvalidSkipViews
from calendash.dates import clamp, is_integer

logger = logging.getLogger(__name__)


def get_visible_views(skip_views: Iterable[str] = ()) -> tuple[ViewType, ...]:
    skip = set(skip_views)
    return tuple(view for view in VIEWS if view not in skip)


def get_adjacent_view(
    direction: int,
    view: ViewType,
    views: tuple[ViewType, ...],
) -> ViewType | None:
    if not is_integer(direction):
        raise InvalidDirection(
            f"Invalid direction {direction!r}. Expected an integer value of -1 or 1."
        )
    index = views.index(view) + int(clamp(direction, DIRECTION_PREV, DIRECTION_NEXT))
    if 0 <= index < len(views):
        return views[index]
    return None


class Layout:
    """
    Current view among the visible views (all views minus ``skip_views``).

    An unknown or skipped ``view_target`` falls back to the first visible view.
    """

    def __init__(
        self,
        view_target: str | None = None,
        skip_views: Iterable[str] = (),
    ) -> None:
        views = get_visible_views(skip_views)
        if not views:
            raise InvalidSkipViews(
                "All views are excluded via `skip_views`. At least one view must remain available."
            )
        self._visible_views: tuple[ViewType, ...] = views
        self._view: ViewType = next((v for v in views if v == view_target), views[0])

    @property
    def view(self) -> ViewType:
        return self._view

    @property
    def visible_views(self) -> tuple[ViewType, ...]:
        return self._visible_views

    def get_adjacent_view(self, direction: int) -> ViewType | None:
        return get_adjacent_view(direction, self._view, self._visible_views)

    def shift(self, direction: int) -> Layout:
        adjacent = self.get_adjacent_view(direction)
        if adjacent is not None:
            self._view = adjacent
            return self

        if len(self._visible_views) == 1:
            reason = "Only one view is available; cannot shift."
        else:
            step = int(clamp(direction, DIRECTION_PREV, DIRECTION_NEXT))
            reason = f"No view exists in the {DIRECTION_NAME.get(step, 'current')} direction."
        logger.debug(
            "View shift failed: %s (current=%s, direction=%s, visible=%s)",
            reason,
            self._view,
            direction,
            self._visible_views,
        )
        return self

    def __repr__(self) -> str:
        return f"Layout(view={self._view!r}, visible_views={list(self._visible_views)})"
