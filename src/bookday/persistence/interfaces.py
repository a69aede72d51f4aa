"""Persistence layer abstractions for repositories and unit of work."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from types import TracebackType
from typing import Protocol

from bookday.domain import Appointment


class AppointmentRepository(Protocol):
    async def create(self, appointment: Appointment) -> Appointment:
        """Store a new appointment and return it with its id assigned.

        Raises DuplicateAppointmentError when the date is already taken.
        """

    async def get_by_date(self, visit_date: date) -> Appointment | None: ...

    async def exists_for_date(self, visit_date: date) -> bool: ...

    async def list_between(self, start: date, end: date) -> Sequence[Appointment]:
        """Appointments with ``start <= visit_date <= end`` ordered by date."""


class UnitOfWork(Protocol):
    """Transactional boundary for repository operations."""

    appointment_repository: AppointmentRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


__all__ = ["AppointmentRepository", "UnitOfWork"]
