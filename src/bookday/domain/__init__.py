"""Domain models for bookday."""

from .appointment import NAME_MAX_LENGTH, Appointment, AppointmentRequest
from .base import DomainModel, RemoteModel
from .enums import OutcomeKind
from .holiday import Holiday
from .outcome import ValidationOutcome
from .types import AppointmentId, CalendarDate, DateLike

__all__ = [
    "NAME_MAX_LENGTH",
    "Appointment",
    "AppointmentId",
    "AppointmentRequest",
    "CalendarDate",
    "DateLike",
    "DomainModel",
    "Holiday",
    "OutcomeKind",
    "RemoteModel",
    "ValidationOutcome",
]
