"""
Fixed-locale (en-US) rendering of calendar fields.

Pattern tokens::

    YYYY  year, padded    MMMM  month name       dddd  weekday name
    Y     year
    MM    month, padded   M     month            ddd   weekday, short
    DD    day, padded     D     day
    HH    hour 0-23       H     hour 0-23, bare
    hh    hour 1-12       h     hour 1-12, bare
    mm    minute          ss    second           SSS   millisecond
    A     AM / PM         [..]  literal text
"""

from __future__ import annotations

import re
from typing import Callable, NamedTuple

WEEKDAY_NAMES: tuple[str, ...] = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)
MONTH_NAMES: tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
INVALID_DATE = "Invalid Date"

_TOKEN = re.compile(
    r"\[([^\]]*)\]|YYYY|Y|MMMM|MM|M|dddd|ddd|DD|D|HH|H|hh|h|mm|ss|SSS|A"
)


class Fields(NamedTuple):
    """Calendar view of an instant. ``month`` is 1-based, ``weekday`` 0=Sunday."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    millisecond: int
    weekday: int


def _hour12(f: Fields) -> int:
    return f.hour % 12 or 12


_RENDERERS: dict[str, Callable[[Fields], str]] = {
    "YYYY": lambda f: f"{f.year:04d}",
    "Y":    lambda f: str(f.year),
    "MMMM": lambda f: MONTH_NAMES[f.month - 1],
    "MM":   lambda f: f"{f.month:02d}",
    "M":    lambda f: str(f.month),
    "dddd": lambda f: WEEKDAY_NAMES[f.weekday],
    "ddd":  lambda f: WEEKDAY_NAMES[f.weekday][:3],
    "DD":   lambda f: f"{f.day:02d}",
    "D":    lambda f: str(f.day),
    "HH":   lambda f: f"{f.hour:02d}",
    "H":    lambda f: str(f.hour),
    "hh":   lambda f: f"{_hour12(f):02d}",
    "h":    lambda f: str(_hour12(f)),
    "mm":   lambda f: f"{f.minute:02d}",
    "ss":   lambda f: f"{f.second:02d}",
    "SSS":  lambda f: f"{f.millisecond:03d}",
    "A":    lambda f: "AM" if f.hour < 12 else "PM",
}


def render(fields: Fields, pattern: str) -> str:
    def _sub(match: re.Match[str]) -> str:
        literal = match.group(1)
        if literal is not None:
            return literal
        return _RENDERERS[match.group(0)](fields)

    return _TOKEN.sub(_sub, pattern)
