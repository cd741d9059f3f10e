from __future__ import annotations

from typing import Any, Mapping, NamedTuple, Union

from ._exceptions import CalendarError


def dmy_to_iso(text: str) -> str:
    """'DD-MM-YYYY' → 'YYYY-MM-DD' (field order reversed, nothing validated)."""
    return "-".join(reversed(text.split("-")))


class Period(NamedTuple):
    """Inclusive (start, end) pair of date strings. ``start <= end`` is not checked."""

    start: str
    end: str

    @classmethod
    def from_mapping(cls, obj: Union["Period", Mapping[str, Any]]) -> "Period":
        if isinstance(obj, Period):
            return obj
        try:
            return cls(obj["start"], obj["end"])
        except (KeyError, TypeError):
            raise CalendarError(
                f"A period needs 'start' and 'end' entries; got {obj!r}."
            ) from None

    def to_iso(self) -> "Period":
        return Period(dmy_to_iso(self.start), dmy_to_iso(self.end))


PeriodLike = Union[Period, Mapping[str, Any]]
