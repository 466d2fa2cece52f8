from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping

logger = logging.getLogger(__name__)

# Legacy descriptors named with this prefix are treated as disablement rules.
DISABLE_PREFIX = "disable"
LEGACY_DISABLED_KEY = "isDisabled"


@dataclass(frozen=True, slots=True)
class MiddlewareState:
    date: dt.datetime


MiddlewareFn = Callable[[MiddlewareState], Mapping[str, Any]]


@dataclass(frozen=True)
class Middleware:
    """
    Named per-cell hook.  ``fn`` receives a MiddlewareState and returns a
    mapping, usually ``{"data": {...}}``.  Plain middleware is carried along
    for collaborators (e.g. a renderer) and never affects disablement.
    """

    name: str
    fn: MiddlewareFn
    options: Any = None

    def __call__(self, date: dt.datetime) -> Mapping[str, Any]:
        result = self.fn(MiddlewareState(date))
        return result if isinstance(result, Mapping) else {}

    def data(self, date: dt.datetime) -> Mapping[str, Any]:
        data = self(date).get("data")
        return data if isinstance(data, Mapping) else {}


@dataclass(frozen=True)
class DisablementRule(Middleware):
    """
    Middleware whose ``data["is_disabled"]`` marks a date as not selectable.
    Legacy payloads spelling the key ``isDisabled`` are read too.
    """

    def evaluate(self, date: dt.datetime) -> bool:
        data = self.data(date)
        flag = data.get("is_disabled")
        if flag is None:
            flag = data.get(LEGACY_DISABLED_KEY)
        return bool(flag)


def coerce_middleware(entry: Any) -> Middleware | None:
    if isinstance(entry, Middleware):
        return entry
    if not isinstance(entry, Mapping):
        return None
    name, fn = entry.get("name"), entry.get("fn")
    if not isinstance(name, str) or not callable(fn):
        return None
    cls = DisablementRule if name.startswith(DISABLE_PREFIX) else Middleware
    return cls(name=name, fn=fn, options=entry.get("options"))


def coerce_middlewares(entries: Iterable[Any] | None) -> tuple[Middleware, ...]:
    """
    Keep well-formed entries in order: Middleware instances as given, and
    ``{"name": str, "fn": callable, "options": ...}`` mappings converted to
    Middleware (or DisablementRule for names starting with ``"disable"``).
    """
    kept: list[Middleware] = []
    for entry in entries or ():
        mw = coerce_middleware(entry)
        if mw is None:
            logger.debug("Dropping malformed middleware entry %r", entry)
            continue
        kept.append(mw)
    return tuple(kept)
