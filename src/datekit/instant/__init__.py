# src/datekit/instant/__init__.py
"""
datekit.instant
~~~~~~~~~~~~~~~

The date engine the calendar utilities run on.  An instant is a NumPy
``datetime64[ms]`` scalar (milliseconds since the epoch); ``NaT`` is the
invalid-date sentinel.  Calendar fields are read in one of two zones: UTC,
or the engine's reference ("local") zone.

Basic usage::

    from dateutil import tz
    from datekit.instant import DateEngine, Zone

    engine = DateEngine(local_zone=tz.tzoffset(None, 3 * 3600))
    t = engine.parse("2024-02-01T15:00:00Z")
    engine.fields(t, Zone.LOCAL).hour               # → 18
    engine.format_locale(t, "M/D/YYYY, h:mm:ss A", Zone.UTC)
    # → '2/1/2024, 3:00:00 PM'

Public API
----------
DateEngine     Parse, construct, inspect, shift and format instants.
Zone           UTC or LOCAL.
Fields         Calendar view of an instant.
InstantError   Raised for input that cannot be read as an instant.
"""

from __future__ import annotations

from datekit.instant._exceptions import InstantError
from datekit.instant.engine import (
    MS_PER_DAY,
    NAT,
    DateEngine,
    Instant,
    InstantLike,
    Zone,
    is_valid,
)
from datekit.instant.formatting import INVALID_DATE, MONTH_NAMES, WEEKDAY_NAMES, Fields

__all__ = [
    "DateEngine",
    "Zone",
    "Fields",
    "Instant",
    "InstantLike",
    "InstantError",
    "is_valid",
    "MS_PER_DAY",
    "NAT",
    "INVALID_DATE",
    "WEEKDAY_NAMES",
    "MONTH_NAMES",
]
