# src/calendash/layout/__init__.py
"""
calendash.layout
~~~~~~~~~~~~~~~~

View selection over the fixed order ``day < week < month < year < decade``.

Basic usage::

    from calendash.layout import Layout

    layout = Layout("month", skip_views=["week"])
    layout.get_adjacent_view(-1)     # → "day"
    layout.shift(1).view             # → "year"
"""

from __future__ import annotations

from calendash.layout.layout import Layout, get_adjacent_view, get_visible_views

__all__ = [
    "Layout",
    "get_adjacent_view",
    "get_visible_views",
]
