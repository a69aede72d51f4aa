"""Custom persistence exceptions."""

from __future__ import annotations


class RepositoryError(RuntimeError):
    """Base class for persistence layer errors."""


class NotFoundError(RepositoryError):
    """Raised when a requested entity is missing."""


class AppointmentNotFoundError(NotFoundError):
    """Raised when no appointment exists for the requested date."""


class DuplicateAppointmentError(RepositoryError):
    """Raised when an appointment already exists for a calendar date."""


__all__ = [
    "AppointmentNotFoundError",
    "DuplicateAppointmentError",
    "NotFoundError",
    "RepositoryError",
]
