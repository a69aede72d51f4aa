"""Time-related helpers."""

from __future__ import annotations

from datetime import UTC, date, datetime, time

_DATE_FORMAT = "%Y-%m-%d"


def utc_now() -> datetime:
    """Return a timezone-aware UTC timestamp."""

    return datetime.now(UTC)


def ensure_utc(value: datetime) -> datetime:
    """Normalize a datetime to UTC."""

    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def to_calendar_date(value: date | datetime) -> date:
    """Collapse a date or datetime to its UTC calendar day."""

    if isinstance(value, datetime):
        return ensure_utc(value).date()
    return value


def utc_midnight(value: date | datetime) -> datetime:
    """Return the UTC-midnight instant for the day containing ``value``."""

    return datetime.combine(to_calendar_date(value), time.min, tzinfo=UTC)


def parse_calendar_date(raw: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` string."""

    text = raw.strip()
    if len(text) != 10:
        msg = f"invalid date {raw!r}: expected YYYY-MM-DD"
        raise ValueError(msg)
    try:
        return datetime.strptime(text, _DATE_FORMAT).date()
    except ValueError as exc:
        msg = f"invalid date {raw!r}: expected YYYY-MM-DD"
        raise ValueError(msg) from exc


def format_calendar_date(value: date | datetime) -> str:
    return to_calendar_date(value).isoformat()
