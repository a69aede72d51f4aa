"""Appointment booking workflow."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from bookday.domain import Appointment, AppointmentRequest, OutcomeKind, ValidationOutcome
from bookday.holidays import DateChecker, HolidayLookupError
from bookday.persistence import (
    AppointmentNotFoundError,
    DuplicateAppointmentError,
    UnitOfWork,
)

from .exceptions import (
    DateRejectedError,
    HolidayDateError,
    InvalidAppointmentError,
    PastDateError,
    WeekendDateError,
)

UnitOfWorkFactory = Callable[[], UnitOfWork]

_REJECTIONS: dict[OutcomeKind, tuple[type[DateRejectedError], str]] = {
    OutcomeKind.PAST_DATE: (PastDateError, "Visit date cannot be in the past"),
    OutcomeKind.WEEKEND: (WeekendDateError, "Visit date is a weekend"),
    OutcomeKind.HOLIDAY: (HolidayDateError, "Visit date is a public holiday"),
}


def raise_for_outcome(outcome: ValidationOutcome) -> None:
    """Translate a non-valid outcome into the matching exception."""

    if outcome.is_valid:
        return
    if outcome.kind is OutcomeKind.LOOKUP_FAILED:
        if isinstance(outcome.cause, HolidayLookupError):
            raise outcome.cause
        msg = "Holiday lookup failed"
        raise HolidayLookupError(msg) from outcome.cause
    error_type, message = _REJECTIONS[outcome.kind]
    raise error_type(message)


class BookingWorkflow:
    """Validates a visit date, enforces one booking per day and persists it."""

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        date_checker: DateChecker,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._uow_factory = uow_factory
        self._date_checker = date_checker
        self._logger = logger or logging.getLogger(__name__)

    async def create_appointment(self, request: AppointmentRequest) -> Appointment:
        visit = request.visit_date.isoformat()
        self._logger.info(
            "Creating appointment for %s %s on %s",
            request.first_name,
            request.last_name,
            visit,
        )
        if not request.first_name.strip() or not request.last_name.strip():
            self._logger.warning("Invalid appointment request: missing first or last name")
            raise InvalidAppointmentError("Invalid input data")

        outcome = await self._date_checker.validate(request.visit_date)
        if not outcome.is_valid:
            self._logger.warning("Date validation failed for %s: %s", visit, outcome.kind.value)
        raise_for_outcome(outcome)

        async with self._uow_factory() as uow:
            if await uow.appointment_repository.exists_for_date(request.visit_date):
                self._logger.warning("Duplicate appointment attempt for %s", visit)
                raise DuplicateAppointmentError("An appointment already exists for this date")
            appointment = await uow.appointment_repository.create(
                Appointment.from_request(request)
            )
            await uow.commit()

        self._logger.info("Appointment %s created for %s", appointment.id, visit)
        return appointment

    async def get_appointment(self, visit_date: date) -> Appointment:
        async with self._uow_factory() as uow:
            appointment = await uow.appointment_repository.get_by_date(visit_date)
        if appointment is None:
            msg = f"No appointment booked for {visit_date.isoformat()}"
            raise AppointmentNotFoundError(msg)
        return appointment

    async def list_appointments(self, start: date, end: date) -> list[Appointment]:
        async with self._uow_factory() as uow:
            return list(await uow.appointment_repository.list_between(start, end))


__all__ = ["BookingWorkflow", "UnitOfWorkFactory", "raise_for_outcome"]
