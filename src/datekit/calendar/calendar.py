import logging
from typing import Iterator, Optional, Union

import numpy as np

from datekit.instant import (
    INVALID_DATE,
    MS_PER_DAY,
    NAT,
    DateEngine,
    InstantLike,
    Zone,
    is_valid,
)
from ._exceptions import CalendarError, ScanLimitError
from .period import Period, PeriodLike

logger = logging.getLogger(__name__)

_ONE_DAY = np.timedelta64(MS_PER_DAY, "ms")


class CalendarUtils:
    """
    Stateless calendar calculations on top of an injected DateEngine.

    Each method picks UTC or the engine's local zone on purpose; the choice
    is part of its contract and the two are not interchangeable.  Invalid
    dates come back as ``nan`` / ``NaT`` / ``"Invalid Date"`` rather than
    raising.
    """

    # Two years of days; qualifying 13ths are never more than 14 months apart.
    _SCAN_LIMIT_DAYS: int = 366 * 2

    # UTC weekday indices (0=Sun) tested against *local* midnights.  These
    # are Sat+Sun and Friday only when the local zone is east of UTC.
    _WEEKEND_UTC_DAYS: tuple[int, ...] = (5, 6)
    _THE_13TH_UTC_DAY: int = 4

    _QUARTERS: tuple[int, ...] = (1, 1, 1, 2, 2, 2, 3, 3, 3, 4, 4, 4)

    # UTC weekday of Jan 1 → days of the year that belong to week 1.
    _FIRST_WEEK_DAYS: dict[int, int] = {1: 7, 2: 6, 3: 5, 4: 4, 5: 3, 6: 2, 0: 1}

    _TIME_PATTERN = "HH:mm:ss"
    _DAY_NAME_PATTERN = "dddd"
    _DATETIME_PATTERN = "M/D/Y, h:mm:ss A"
    _SCHEDULE_PATTERN = "DD-MM-YYYY"

    def __init__(self, engine: Optional[DateEngine] = None) -> None:
        self._engine: DateEngine = engine if engine is not None else DateEngine()

    # ── conversion / formatting ──────────────────────────────────────────

    def date_to_timestamp(self, date: str) -> Union[int, float]:
        """Milliseconds since the epoch, ``nan`` if the string does not parse."""
        return self._engine.timestamp(self._engine.parse(date))

    def get_time(self, date: InstantLike) -> str:
        """'hh:mm:ss' in the local zone."""
        return self._engine.format_locale(
            self._engine.as_instant(date), self._TIME_PATTERN, Zone.LOCAL
        )

    def get_day_name(self, date: InstantLike) -> str:
        return self._engine.format_locale(
            self._engine.as_instant(date), self._DAY_NAME_PATTERN, Zone.UTC
        )

    def format_date(self, date: InstantLike) -> str:
        """
        'M/D/Y, h:mm:ss AM/PM' (year unpadded) of the UTC wall clock.  The
        instant is rebuilt from its UTC fields first, which drops milliseconds.
        """
        instant = self._engine.as_instant(date)
        if not is_valid(instant):
            return INVALID_DATE
        f = self._engine.fields(instant, Zone.UTC)
        rebuilt = self._engine.from_fields(
            f.year, f.month, f.day, f.hour, f.minute, f.second, zone=Zone.UTC
        )
        return self._engine.format_locale(rebuilt, self._DATETIME_PATTERN, Zone.UTC)

    # ── month / year arithmetic ──────────────────────────────────────────

    @staticmethod
    def get_count_days_in_month(month: int, year: int) -> int:
        first = np.datetime64("1970-01", "M") + ((year - 1970) * 12 + (month - 1))
        days = (first + 1).astype("datetime64[D]") - first.astype("datetime64[D]")
        return int(days.astype(np.int64))

    def get_count_weekends_in_month(self, month: int, year: int) -> int:
        """
        Counts the days whose local midnight falls on UTC weekday 5 or 6.
        East of UTC that is Saturday and Sunday; at or west of UTC it is
        Friday and Saturday.
        """
        after = self._engine.from_fields(year, month + 1, 1, zone=Zone.LOCAL)
        last_day = self._engine.fields(self._engine.add_days(after, -1, Zone.LOCAL), Zone.LOCAL).day
        weekdays = np.array(
            [
                self._engine.weekday(self._engine.from_fields(year, month, day, zone=Zone.LOCAL), Zone.UTC)
                for day in range(1, last_day + 1)
            ],
            dtype=np.int64,
        )
        return int(np.isin(weekdays, self._WEEKEND_UTC_DAYS).sum())

    def is_leap_year(self, date: InstantLike) -> bool:
        instant = self._engine.as_instant(date)
        if not is_valid(instant):
            return False
        year = self._engine.fields(instant, Zone.LOCAL).year
        return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0

    def get_quarter(self, date: InstantLike) -> Union[int, float]:
        instant = self._engine.as_instant(date)
        if not is_valid(instant):
            return np.nan
        return self._QUARTERS[self._engine.fields(instant, Zone.LOCAL).month - 1]

    def get_week_number_by_date(self, date: InstantLike) -> Union[int, float]:
        """
        Week 1 is the week holding January 1; weeks start on Monday.  This is
        not ISO 8601 week numbering.
        """
        instant = self._engine.as_instant(date)
        if not is_valid(instant):
            return np.nan
        year = self._engine.fields(instant, Zone.UTC).year
        jan1 = self._engine.from_fields(year, 1, 1, zone=Zone.LOCAL)
        first_week_days = self._FIRST_WEEK_DAYS[self._engine.weekday(jan1, Zone.UTC)]
        anchor = self._engine.add_days(jan1, -1, Zone.UTC)
        elapsed = (instant - anchor) / _ONE_DAY
        return int(np.ceil((elapsed - first_week_days) / 7)) + 1

    # ── periods ──────────────────────────────────────────────────────────

    def get_count_days_on_period(self, date_start: InstantLike, date_end: InstantLike) -> Union[int, float]:
        """Whole days from start to end counting both ends; half days round up."""
        start = self._engine.as_instant(date_start)
        end = self._engine.as_instant(date_end)
        elapsed = (end - start) / _ONE_DAY
        if np.isnan(elapsed):
            return np.nan
        return int(np.floor(elapsed + 0.5)) + 1

    def is_date_in_period(self, date: InstantLike, period: PeriodLike) -> bool:
        bounds = Period.from_mapping(period)
        check = self._engine.as_instant(date)
        start = self._engine.as_instant(bounds.start)
        end = self._engine.as_instant(bounds.end)
        return bool(start <= check) and bool(check <= end)

    # ── forward search ───────────────────────────────────────────────────

    def get_next_friday(self, date: InstantLike) -> np.datetime64:
        """
        Strictly later Friday, same local time of day.  The weekday is read
        in UTC but the days are added on the local calendar.
        """
        instant = self._engine.as_instant(date)
        if not is_valid(instant):
            return NAT
        day_now = self._engine.weekday(instant, Zone.UTC)
        step = 6 - day_now + 6 if day_now >= 5 else 5 - day_now
        return self._engine.add_days(instant, step, Zone.LOCAL)

    def get_next_friday_the_13th(self, date: InstantLike) -> np.datetime64:
        current = self._engine.as_instant(date)
        if not is_valid(current):
            return NAT
        for _ in range(self._SCAN_LIMIT_DAYS):
            if (
                self._engine.fields(current, Zone.LOCAL).day == 13
                and self._engine.weekday(current, Zone.UTC) == self._THE_13TH_UTC_DAY
            ):
                return current
            current = self._engine.add_days(current, 1, Zone.LOCAL)
        logger.warning(
            "No qualifying 13th within %d days of %s", self._SCAN_LIMIT_DAYS, date
        )
        raise ScanLimitError(
            f"No qualifying 13th found within {self._SCAN_LIMIT_DAYS} days of {date!r}."
        )

    # ── work schedule ────────────────────────────────────────────────────

    def iter_work_schedule(
        self,
        period: PeriodLike,
        count_work_days: int,
        count_off_days: int,
    ) -> Iterator[str]:
        """
        Lazily yield 'DD-MM-YYYY' working days of a repeating
        ``count_work_days`` on / ``count_off_days`` off pattern that starts
        on ``period.start``.  Both period bounds are 'DD-MM-YYYY' and inclusive.
        """
        if max(count_work_days, 0) + count_off_days <= 0:
            raise CalendarError(
                f"Schedule pattern {count_work_days} on / {count_off_days} off never advances."
            )
        bounds = Period.from_mapping(period).to_iso()
        return self._schedule(bounds, count_work_days, count_off_days)

    def _schedule(self, bounds: Period, count_work_days: int, count_off_days: int) -> Iterator[str]:
        start = self._engine.parse(bounds.start)
        end = self._engine.parse(bounds.end)
        if not (is_valid(start) and is_valid(end)):
            return

        # Local midnights of the UTC calendar dates.
        s = self._engine.fields(start, Zone.UTC)
        e = self._engine.fields(end, Zone.UTC)
        cursor = self._engine.from_fields(s.year, s.month, s.day, zone=Zone.LOCAL)
        last = self._engine.from_fields(e.year, e.month, e.day, zone=Zone.LOCAL)

        cursor = self._engine.add_days(cursor, -1, Zone.UTC)
        while cursor < last:
            for _ in range(count_work_days):
                cursor = self._engine.add_days(cursor, 1, Zone.UTC)
                if cursor > last:
                    return
                yield self._engine.format_locale(cursor, self._SCHEDULE_PATTERN, Zone.LOCAL)
            cursor = self._engine.add_days(cursor, count_off_days, Zone.UTC)

    def get_work_schedule(
        self,
        period: PeriodLike,
        count_work_days: int,
        count_off_days: int,
    ) -> list[str]:
        schedule = list(self.iter_work_schedule(period, count_work_days, count_off_days))
        logger.debug(
            "Work schedule %s (%d on / %d off): %d days",
            period, count_work_days, count_off_days, len(schedule),
        )
        return schedule

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def engine(self) -> DateEngine:
        return self._engine

    def __repr__(self) -> str:
        return f"CalendarUtils(engine={self._engine!r})"
