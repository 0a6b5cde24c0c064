"""Validate user-entered drafts before they reach a collection."""

from datetime import date

from tracker.core.errors import ValidationError
from tracker.core.models import CATEGORIES, PRIORITIES

from .converters import parse_due_date, parse_time

__all__ = ["parse_category", "parse_due", "parse_priority", "parse_reminder_time", "require_text"]


def require_text(value: str | None, field: str) -> str:
    text = (value or "").strip()
    if not text:
        raise ValidationError(f"{field} cannot be empty")
    return text


def _pick(value: str, choices: tuple[str, ...], field: str) -> str:
    wanted = value.strip().lower()
    for choice in choices:
        if choice.lower() == wanted:
            return choice
    raise ValidationError(f"unknown {field} '{value}', expected one of: {', '.join(choices)}")


def parse_category(value: str) -> str:
    return _pick(value, CATEGORIES, "category")


def parse_priority(value: str) -> str:
    return _pick(value, PRIORITIES, "priority")


def parse_due(value: str | date | None) -> date | None:
    if isinstance(value, date):
        return value
    try:
        return parse_due_date(value)
    except (TypeError, ValueError):
        raise ValidationError(f"invalid due date '{value}', use YYYY-MM-DD") from None


def parse_reminder_time(value: str) -> str:
    try:
        return parse_time(value)
    except (TypeError, ValueError):
        raise ValidationError(f"invalid time '{value}', use HH:MM") from None
