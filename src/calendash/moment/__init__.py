# src/calendash/moment/__init__.py
"""
calendash.moment
~~~~~~~~~~~~~~~~

Target-date state and unit offset arithmetic.

Basic usage::

    from calendash.moment import Moment

    m = Moment("2025-03-24T12:00:00", bounds={"max": "2025-03-31"})
    m.add({"days": 1}).date                      # → 2025-03-25 12:00
    m.add({"months": 1}).date                    # unchanged, past max
    m.is_adjacent_date_visible("weeks", 1)       # → False

Public API
----------
Moment              Target date + bounds.
add_offset          Apply a ``{unit: count}`` mapping to a date.
get_adjacent_date   Step one unit forward or backward.
OFFSET_STRATEGIES   Unit name → offset function registry.
"""

from __future__ import annotations

from calendash.moment.moment import Moment
from calendash.moment.offsets import OFFSET_STRATEGIES, add_offset, get_adjacent_date

__all__ = [
    "Moment",
    "OFFSET_STRATEGIES",
    "add_offset",
    "get_adjacent_date",
]
