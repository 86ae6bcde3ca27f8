"""Relative date resolution for coach notes."""

from datetime import date, datetime, timedelta

_RELATIVE_PHRASES: tuple[tuple[tuple[str, ...], int], ...] = (
    (("yesterday",), 1),
    (("today", "this morning", "this afternoon"), 0),
    (("two days ago", "2 days ago"), 2),
    (("three days ago", "3 days ago"), 3),
)

WEEKDAYS: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)


def resolve_date(text: str, now: datetime | None = None) -> date:
    """Map relative phrases in lowercased text to a calendar date."""
    today = (now or datetime.now()).date()

    for phrases, days_back in _RELATIVE_PHRASES:
        if any(phrase in text for phrase in phrases):
            return today - timedelta(days=days_back)

    for index, name in enumerate(WEEKDAYS):
        if name in text:
            # A weekday name never means today: same weekday is a week back.
            days_back = (today.weekday() - index) % 7 or 7
            return today - timedelta(days=days_back)

    return today
