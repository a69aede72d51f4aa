"""Persistence layer for appointments."""

from .errors import (
    AppointmentNotFoundError,
    DuplicateAppointmentError,
    NotFoundError,
    RepositoryError,
)
from .interfaces import AppointmentRepository, UnitOfWork
from .memory import InMemoryAppointmentRepository, InMemoryUnitOfWork

__all__ = [
    "AppointmentNotFoundError",
    "AppointmentRepository",
    "DuplicateAppointmentError",
    "InMemoryAppointmentRepository",
    "InMemoryUnitOfWork",
    "NotFoundError",
    "RepositoryError",
    "UnitOfWork",
]
