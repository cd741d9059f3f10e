import logging
import re
from datetime import date, datetime, timedelta, tzinfo
from enum import Enum
from typing import Optional, Union

import numpy as np
from dateutil import parser, tz

from ._exceptions import InstantError
from .formatting import INVALID_DATE, Fields, render

logger = logging.getLogger(__name__)

Instant = np.datetime64
InstantLike = Union[np.datetime64, datetime, date, str]

MS_PER_DAY: int = 86_400_000
NAT: np.datetime64 = np.datetime64("NaT", "ms")

_EPOCH = datetime(1970, 1, 1, tzinfo=tz.UTC)
_ONE_MS = timedelta(milliseconds=1)
# Missing parts of a partially specified string ("Dec 4") are taken from here.
_PARSE_DEFAULT = datetime(2001, 1, 1)
_ISO_DATE_ONLY = re.compile(r"^\d{4}(-\d{2}(-\d{2})?)?$")
# "... GMT+0300 (Moscow Standard Time)": the comment is dropped and the
# GMT/UTC prefix removed, otherwise dateutil reads the offset POSIX-style.
_ZONE_COMMENT = re.compile(r"\s*\([^)]*\)\s*$")
_ZONE_PREFIX = re.compile(r"\b(?:GMT|UTC|UT)(?=[+-]\d)")

_HOUR = 3600
RFC2822_ZONES: dict[str, tzinfo] = {
    "UT": tz.UTC,
    "EST": tz.tzoffset("EST", -5 * _HOUR),
    "EDT": tz.tzoffset("EDT", -4 * _HOUR),
    "CST": tz.tzoffset("CST", -6 * _HOUR),
    "CDT": tz.tzoffset("CDT", -5 * _HOUR),
    "MST": tz.tzoffset("MST", -7 * _HOUR),
    "MDT": tz.tzoffset("MDT", -6 * _HOUR),
    "PST": tz.tzoffset("PST", -8 * _HOUR),
    "PDT": tz.tzoffset("PDT", -7 * _HOUR),
}


class Zone(str, Enum):
    """Which offset calendar fields are read and written in."""

    UTC = "utc"
    LOCAL = "local"


def _from_datetime(value: datetime) -> np.datetime64:
    return np.datetime64((value - _EPOCH) // _ONE_MS, "ms")


def is_valid(instant: np.datetime64) -> bool:
    return not np.isnat(instant)


class DateEngine:
    """
    The date/calendar abstraction every calendar utility runs on.

    Instants are ``datetime64[ms]`` scalars; an unparseable or out-of-range
    value is ``NaT``, which propagates through arithmetic and compares false.
    ``Zone.LOCAL`` reads and writes wall-clock fields in ``local_zone``
    (the host's local zone unless one is injected).
    """

    def __init__(self, local_zone: Optional[tzinfo] = None) -> None:
        self._local_zone: tzinfo = local_zone if local_zone is not None else tz.tzlocal()

    # ── construction ─────────────────────────────────────────────────────

    def parse(self, text: str) -> np.datetime64:
        """
        Parse RFC 2822 / ISO 8601 style strings. Date-only ISO forms are UTC,
        other strings without a zone are wall-clock in the local zone.
        """
        stripped = text.strip()
        try:
            if _ISO_DATE_ONLY.match(stripped):
                value = parser.isoparse(stripped).replace(tzinfo=tz.UTC)
            else:
                cleaned = _ZONE_PREFIX.sub("", _ZONE_COMMENT.sub("", stripped))
                value = parser.parse(cleaned, default=_PARSE_DEFAULT, tzinfos=RFC2822_ZONES)
                if value.tzinfo is None:
                    value = value.replace(tzinfo=self._local_zone)
            return _from_datetime(value)
        except (ValueError, OverflowError) as exc:
            logger.debug("Could not parse %r as a date: %s", text, exc)
            return NAT

    def as_instant(self, value: InstantLike) -> np.datetime64:
        if isinstance(value, np.datetime64):
            return value.astype("datetime64[ms]")
        if isinstance(value, datetime):
            if value.tzinfo is None:
                value = value.replace(tzinfo=self._local_zone)
            return _from_datetime(value)
        if isinstance(value, date):
            return self.from_fields(value.year, value.month, value.day)
        if isinstance(value, str):
            return self.parse(value)
        raise InstantError(f"Cannot interpret {type(value).__name__} as an instant.")

    def from_fields(
        self,
        year: int,
        month: int,
        day: int = 1,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        zone: Union[Zone, str] = Zone.LOCAL,
    ) -> np.datetime64:
        """
        Build an instant from calendar parts. Overflowing parts roll over the
        way a host date does: month 13 is January of the next year, day 0 is
        the last day of the previous month.
        """
        tzone = self._tzinfo(zone)
        year += (month - 1) // 12
        month = (month - 1) % 12 + 1
        try:
            wall = datetime(year, month, 1) + timedelta(
                days=day - 1,
                hours=hour,
                minutes=minute,
                seconds=second,
                milliseconds=millisecond,
            )
        except (ValueError, OverflowError):
            return NAT
        return _from_datetime(wall.replace(tzinfo=tzone))

    # ── field access ─────────────────────────────────────────────────────

    def to_datetime(self, instant: np.datetime64, zone: Union[Zone, str] = Zone.LOCAL) -> datetime:
        if not is_valid(instant):
            raise InstantError("Invalid instant has no calendar representation.")
        ms = int(instant.astype("datetime64[ms]").astype(np.int64))
        return (_EPOCH + timedelta(milliseconds=ms)).astimezone(self._tzinfo(zone))

    def fields(self, instant: np.datetime64, zone: Union[Zone, str] = Zone.LOCAL) -> Fields:
        value = self.to_datetime(instant, zone)
        return Fields(
            year=value.year,
            month=value.month,
            day=value.day,
            hour=value.hour,
            minute=value.minute,
            second=value.second,
            millisecond=value.microsecond // 1000,
            weekday=value.isoweekday() % 7,
        )

    def weekday(self, instant: np.datetime64, zone: Union[Zone, str] = Zone.LOCAL) -> int:
        return self.fields(instant, zone).weekday

    @staticmethod
    def timestamp(instant: np.datetime64) -> Union[int, float]:
        """Epoch milliseconds as an int, or ``nan`` for an invalid instant."""
        if not is_valid(instant):
            return np.nan
        return int(instant.astype("datetime64[ms]").astype(np.int64))

    # ── arithmetic ───────────────────────────────────────────────────────

    def add_days(self, instant: np.datetime64, days: int, zone: Union[Zone, str] = Zone.LOCAL) -> np.datetime64:
        """
        ``Zone.UTC`` adds exact 24h days; ``Zone.LOCAL`` moves the wall-clock
        date and keeps the local time of day across offset changes.
        """
        if self._zone(zone) is Zone.UTC:
            return instant + np.timedelta64(days * MS_PER_DAY, "ms")
        if not is_valid(instant):
            return NAT
        f = self.fields(instant, Zone.LOCAL)
        return self.from_fields(
            f.year, f.month, f.day + days, f.hour, f.minute, f.second, f.millisecond,
            zone=Zone.LOCAL,
        )

    # ── formatting ───────────────────────────────────────────────────────

    def format_locale(self, instant: np.datetime64, pattern: str, zone: Union[Zone, str] = Zone.LOCAL) -> str:
        if not is_valid(instant):
            return INVALID_DATE
        return render(self.fields(instant, zone), pattern)

    # ── zones / repr ─────────────────────────────────────────────────────

    @property
    def local_zone(self) -> tzinfo:
        return self._local_zone

    @staticmethod
    def _zone(zone: Union[Zone, str]) -> Zone:
        try:
            return Zone(zone)
        except ValueError:
            raise InstantError(f"Unknown zone {zone!r}; expected 'utc' or 'local'.") from None

    def _tzinfo(self, zone: Union[Zone, str]) -> tzinfo:
        return tz.UTC if self._zone(zone) is Zone.UTC else self._local_zone

    def __repr__(self) -> str:
        return f"DateEngine(local_zone={self._local_zone!r})"
