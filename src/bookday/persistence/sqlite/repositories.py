"""SQLite repository implementations."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import UTC, date, datetime

from sqlalchemy import Select, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bookday.domain import Appointment, AppointmentId
from bookday.persistence.errors import DuplicateAppointmentError
from bookday.persistence.interfaces import AppointmentRepository

from .models import AppointmentRecord

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(UTC)


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on the way back out.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def _to_domain(record: AppointmentRecord) -> Appointment:
    return Appointment(
        id=AppointmentId(record.id),
        first_name=record.first_name,
        last_name=record.last_name,
        visit_date=record.visit_date,
        created_at=_as_utc(record.created_at),
        updated_at=_as_utc(record.updated_at),
    )


class SQLiteAppointmentRepository(AppointmentRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, appointment: Appointment) -> Appointment:
        now = _now()
        record = AppointmentRecord(
            first_name=appointment.first_name,
            last_name=appointment.last_name,
            visit_date=appointment.visit_date,
            created_at=now,
            updated_at=now,
        )
        self._session.add(record)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            await self._session.rollback()
            logger.warning(
                "Duplicate appointment rejected by database for %s",
                appointment.visit_date.isoformat(),
            )
            msg = f"An appointment already exists for {appointment.visit_date.isoformat()}"
            raise DuplicateAppointmentError(msg) from exc
        logger.info("Stored appointment %s for %s", record.id, appointment.visit_date.isoformat())
        return _to_domain(record)

    async def get_by_date(self, visit_date: date) -> Appointment | None:
        stmt: Select[tuple[AppointmentRecord]] = select(AppointmentRecord).where(
            AppointmentRecord.visit_date == visit_date
        )
        result = await self._session.execute(stmt)
        record = result.scalar_one_or_none()
        if record is None:
            return None
        return _to_domain(record)

    async def exists_for_date(self, visit_date: date) -> bool:
        stmt = select(func.count()).select_from(AppointmentRecord).where(
            AppointmentRecord.visit_date == visit_date
        )
        result = await self._session.execute(stmt)
        return (result.scalar() or 0) > 0

    async def list_between(self, start: date, end: date) -> Sequence[Appointment]:
        stmt: Select[tuple[AppointmentRecord]] = (
            select(AppointmentRecord)
            .where(AppointmentRecord.visit_date >= start, AppointmentRecord.visit_date <= end)
            .order_by(AppointmentRecord.visit_date)
        )
        result = await self._session.execute(stmt)
        return [_to_domain(record) for record in result.scalars().all()]


__all__ = ["SQLiteAppointmentRepository"]
