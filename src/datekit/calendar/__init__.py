# src/datekit/calendar/__init__.py
"""
datekit.calendar
~~~~~~~~~~~~~~~~

Stateless calendar utilities: timestamp conversion, week numbers, quarters,
leap years, weekend counts, day counts over periods, next-Friday searches,
fixed-locale formatting and on/off work schedules.

Basic usage::

    from datekit.calendar import get_count_days_in_month, get_work_schedule

    get_count_days_in_month(2, 2024)                 # → 29
    get_work_schedule({"start": "01-01-2024", "end": "15-01-2024"}, 1, 3)
    # → ['01-01-2024', '05-01-2024', '09-01-2024', '13-01-2024']

The free functions run on a default engine bound to the host's local zone.
For a fixed reference zone, build your own instance::

    from dateutil import tz
    from datekit.calendar import CalendarUtils
    from datekit.instant import DateEngine

    utils = CalendarUtils(DateEngine(local_zone=tz.UTC))
    utils.get_quarter("2024-11-10")                  # → 4

Public API
----------
CalendarUtils   The utilities as methods over an injected DateEngine.
Period          Inclusive (start, end) pair of date strings.
CalendarError   Base exception for all calendar-related errors.
ScanLimitError  A bounded forward scan found nothing.
"""

from __future__ import annotations

from datekit.calendar._exceptions import CalendarError, ScanLimitError
from datekit.calendar.calendar import CalendarUtils
from datekit.calendar.period import Period, dmy_to_iso

_default = CalendarUtils()

date_to_timestamp = _default.date_to_timestamp
get_time = _default.get_time
get_day_name = _default.get_day_name
get_next_friday = _default.get_next_friday
get_count_days_in_month = _default.get_count_days_in_month
get_count_days_on_period = _default.get_count_days_on_period
is_date_in_period = _default.is_date_in_period
format_date = _default.format_date
get_count_weekends_in_month = _default.get_count_weekends_in_month
get_week_number_by_date = _default.get_week_number_by_date
get_next_friday_the_13th = _default.get_next_friday_the_13th
get_quarter = _default.get_quarter
get_work_schedule = _default.get_work_schedule
iter_work_schedule = _default.iter_work_schedule
is_leap_year = _default.is_leap_year

__all__ = [
    "CalendarUtils",
    "Period",
    "CalendarError",
    "ScanLimitError",
    "dmy_to_iso",
    "date_to_timestamp",
    "get_time",
    "get_day_name",
    "get_next_friday",
    "get_count_days_in_month",
    "get_count_days_on_period",
    "is_date_in_period",
    "format_date",
    "get_count_weekends_in_month",
    "get_week_number_by_date",
    "get_next_friday_the_13th",
    "get_quarter",
    "get_work_schedule",
    "iter_work_schedule",
    "is_leap_year",
]
