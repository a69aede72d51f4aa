"""Appointment booking workflow exports."""

from .exceptions import (
    BookingError,
    DateRejectedError,
    HolidayDateError,
    InvalidAppointmentError,
    PastDateError,
    WeekendDateError,
)
from .workflow import BookingWorkflow, raise_for_outcome

__all__ = [
    "BookingError",
    "BookingWorkflow",
    "DateRejectedError",
    "HolidayDateError",
    "InvalidAppointmentError",
    "PastDateError",
    "WeekendDateError",
    "raise_for_outcome",
]
