"""Errors raised by the booking workflow."""

from __future__ import annotations

from bookday.domain import OutcomeKind


class BookingError(RuntimeError):
    """Base class for booking rejections."""


class InvalidAppointmentError(BookingError):
    """Raised when the booking request is missing required data."""


class DateRejectedError(BookingError):
    """Raised when the visit date fails a business-day rule."""

    kind: OutcomeKind


class PastDateError(DateRejectedError):
    kind = OutcomeKind.PAST_DATE


class WeekendDateError(DateRejectedError):
    kind = OutcomeKind.WEEKEND


class HolidayDateError(DateRejectedError):
    kind = OutcomeKind.HOLIDAY


__all__ = [
    "BookingError",
    "DateRejectedError",
    "HolidayDateError",
    "InvalidAppointmentError",
    "PastDateError",
    "WeekendDateError",
]
