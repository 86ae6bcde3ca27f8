"""Tests for relative date resolution."""

from datetime import date, datetime, timedelta

import pytest

from macrotrack.services.dates import WEEKDAYS, resolve_date
from tests.conftest import NOW

TODAY = NOW.date()


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("ran 2 miles yesterday", date(2025, 11, 11)),
        ("had oats this morning", TODAY),
        ("ran this afternoon", TODAY),
        ("today, not monday", TODAY),
        ("two days ago i had pasta", date(2025, 11, 10)),
        ("2 days ago", date(2025, 11, 10)),
        ("3 days ago i swam", date(2025, 11, 9)),
        ("three days ago", date(2025, 11, 9)),
        ("ate a banana", TODAY),
    ],
)
def test_relative_phrases(text: str, expected: date) -> None:
    assert resolve_date(text, NOW) == expected


def test_yesterday_wins_over_later_phrases() -> None:
    assert resolve_date("yesterday and today", NOW) == date(2025, 11, 11)


def test_day_name_resolves_to_previous_occurrence() -> None:
    assert resolve_date("on monday i ran", NOW) == date(2025, 11, 10)
    assert resolve_date("friday burger", NOW) == date(2025, 11, 7)


def test_same_day_name_means_one_week_back() -> None:
    assert resolve_date("wednesday workout", NOW) == date(2025, 11, 5)


@pytest.mark.parametrize("name", WEEKDAYS)
def test_day_names_are_within_past_week(name: str) -> None:
    for offset in range(7):
        now = NOW + timedelta(days=offset)
        resolved = resolve_date(f"last {name}", now)

        assert now.date() - timedelta(days=7) <= resolved < now.date()


def test_defaults_to_current_date() -> None:
    assert resolve_date("nothing relevant") == datetime.now().date()
