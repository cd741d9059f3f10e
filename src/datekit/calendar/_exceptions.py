class CalendarError(ValueError):
    """Base exception for all calendar-related errors."""


class ScanLimitError(CalendarError):
    """A forward day-by-day scan ran past its iteration cap."""
