"""In-memory repository implementations for unit testing."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from copy import deepcopy
from dataclasses import dataclass, field
from datetime import date
from types import TracebackType
from typing import TypeVar

from bookday.domain import Appointment, AppointmentId
from bookday.utils.time import utc_now

from .errors import DuplicateAppointmentError
from .interfaces import AppointmentRepository, UnitOfWork

T = TypeVar("T")


def _copy(value: T) -> T:
    return deepcopy(value)


@dataclass
class InMemoryAppointmentRepository(AppointmentRepository):
    _appointments: dict[date, Appointment] = field(default_factory=dict)
    _next_id: int = 1

    async def create(self, appointment: Appointment) -> Appointment:
        if appointment.visit_date in self._appointments:
            msg = f"An appointment already exists for {appointment.visit_date.isoformat()}"
            raise DuplicateAppointmentError(msg)
        now = utc_now()
        stored = appointment.model_copy(
            update={"id": AppointmentId(self._next_id), "created_at": now, "updated_at": now}
        )
        self._appointments[stored.visit_date] = stored
        self._next_id += 1
        return _copy(stored)

    async def get_by_date(self, visit_date: date) -> Appointment | None:
        return _copy(self._appointments.get(visit_date))

    async def exists_for_date(self, visit_date: date) -> bool:
        return visit_date in self._appointments

    async def list_between(self, start: date, end: date) -> Sequence[Appointment]:
        return [
            _copy(self._appointments[day])
            for day in sorted(self._appointments)
            if start <= day <= end
        ]


@dataclass
class InMemoryUnitOfWork(UnitOfWork):
    appointment_repository: InMemoryAppointmentRepository = field(
        default_factory=InMemoryAppointmentRepository
    )
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock)

    async def __aenter__(self) -> InMemoryUnitOfWork:
        await self._lock.acquire()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._lock.release()

    async def commit(self) -> None:
        return None

    async def rollback(self) -> None:
        return None


__all__ = ["InMemoryAppointmentRepository", "InMemoryUnitOfWork"]
