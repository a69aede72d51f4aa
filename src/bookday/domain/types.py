"""Shared type aliases for the domain layer."""

from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Any, NewType

from pydantic import BeforeValidator, PlainSerializer

from bookday.utils.time import format_calendar_date, parse_calendar_date, to_calendar_date

AppointmentId = NewType("AppointmentId", int)
DateLike = date | datetime


def _coerce_calendar_date(value: Any) -> Any:
    if isinstance(value, str):
        return parse_calendar_date(value)
    if isinstance(value, date):
        return to_calendar_date(value)
    return value


# A day with no time-of-day component, canonicalized to UTC.
CalendarDate = Annotated[
    date,
    BeforeValidator(_coerce_calendar_date),
    PlainSerializer(format_calendar_date, return_type=str),
]

__all__ = [
    "AppointmentId",
    "CalendarDate",
    "DateLike",
]
