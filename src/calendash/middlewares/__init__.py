# src/calendash/middlewares/__init__.py
"""
calendash.middlewares
~~~~~~~~~~~~~~~~~~~~~

Per-cell hooks evaluated while grids are built.  Only ``DisablementRule``
entries take part in disablement; plain ``Middleware`` is passed through.

Basic usage::

    from calendash.middlewares import disable

    rule = disable(weekends=True, exclude=["2025-06-08"])
    rule.evaluate(datetime(2025, 6, 8))     # → False (excluded Sunday)
    rule.evaluate(datetime(2025, 7, 26))    # → True  (Saturday)
"""

from __future__ import annotations

from calendash.middlewares.disable import disable, disable_dates, disable_weekends
from calendash.middlewares.middleware import (
    DISABLE_PREFIX,
    DisablementRule,
    Middleware,
    MiddlewareState,
    coerce_middleware,
    coerce_middlewares,
)

__all__ = [
    "DISABLE_PREFIX",
    "DisablementRule",
    "Middleware",
    "MiddlewareState",
    "coerce_middleware",
    "coerce_middlewares",
    "disable",
    "disable_dates",
    "disable_weekends",
]
