"""Utility helpers."""

from .time import (
    ensure_utc,
    format_calendar_date,
    parse_calendar_date,
    to_calendar_date,
    utc_midnight,
    utc_now,
)

__all__ = [
    "ensure_utc",
    "format_calendar_date",
    "parse_calendar_date",
    "to_calendar_date",
    "utc_midnight",
    "utc_now",
]
