"""Single source of "now" so tests can pin the calendar day."""

from datetime import date, datetime

__all__ = ["now", "today"]


def now() -> datetime:
    return datetime.now()


def today() -> date:
    return now().date()
