"""Appointment aggregate and booking request models."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field, field_validator

from bookday.utils.time import utc_now

from .base import DomainModel
from .types import AppointmentId, CalendarDate

NAME_MAX_LENGTH = 50


class AppointmentRequest(DomainModel):
    """Caller input for booking a visit."""

    first_name: str = Field(max_length=NAME_MAX_LENGTH)
    last_name: str = Field(max_length=NAME_MAX_LENGTH)
    visit_date: CalendarDate

    @field_validator("first_name", "last_name")
    @classmethod
    def _strip_names(cls, value: str) -> str:
        return value.strip()


class Appointment(DomainModel):
    """A booked visit. At most one exists per calendar date."""

    id: AppointmentId | None = None
    first_name: str
    last_name: str
    visit_date: CalendarDate
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @classmethod
    def from_request(cls, request: AppointmentRequest) -> Appointment:
        return cls(
            first_name=request.first_name,
            last_name=request.last_name,
            visit_date=request.visit_date,
        )


__all__ = ["NAME_MAX_LENGTH", "Appointment", "AppointmentRequest"]
