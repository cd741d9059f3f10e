from __future__ import annotations

import pytest

from datekit.instant.formatting import (
    MONTH_NAMES,
    WEEKDAY_NAMES,
    Fields,
    render,
)

# Thursday 2024-02-01 15:04:05.006
AFTERNOON = Fields(2024, 2, 1, 15, 4, 5, 6, 4)
MIDNIGHT = Fields(2024, 1, 1, 0, 0, 0, 0, 1)
NOON = Fields(2024, 1, 1, 12, 0, 0, 0, 1)


@pytest.mark.parametrize(
    "pattern, expected",
    [
        ("YYYY-MM-DD HH:mm:ss.SSS", "2024-02-01 15:04:05.006"),
        ("M/D/YYYY, h:mm:ss A", "2/1/2024, 3:04:05 PM"),
        ("dddd, MMMM D", "Thursday, February 1"),
        ("ddd", "Thu"),
        ("hh A", "03 PM"),
        ("H", "15"),
        ("DD-MM-YYYY", "01-02-2024"),
        ("Y", "2024"),
        ("[Day] D", "Day 1"),
    ],
)
def test_render_tokens(pattern: str, expected: str) -> None:
    assert render(AFTERNOON, pattern) == expected


def test_midnight_is_12_am() -> None:
    assert render(MIDNIGHT, "h:mm A") == "12:00 AM"


def test_noon_is_12_pm() -> None:
    assert render(NOON, "h:mm A") == "12:00 PM"


def test_year_is_zero_padded() -> None:
    assert render(Fields(999, 1, 1, 0, 0, 0, 0, 0), "YYYY") == "0999"


def test_bare_year_is_not_padded() -> None:
    assert render(Fields(999, 1, 1, 0, 0, 0, 0, 0), "M/D/Y") == "1/1/999"


def test_text_without_tokens_passes_through() -> None:
    assert render(AFTERNOON, "@ / , :") == "@ / , :"


def test_name_tables() -> None:
    assert WEEKDAY_NAMES[0] == "Sunday"
    assert WEEKDAY_NAMES[6] == "Saturday"
    assert len(MONTH_NAMES) == 12
