"""Request and response bodies for the HTTP API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from bookday.domain import NAME_MAX_LENGTH, Appointment, AppointmentRequest, CalendarDate


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateAppointmentBody(_CamelModel):
    first_name: str = Field(max_length=NAME_MAX_LENGTH, examples=["John"])
    last_name: str = Field(max_length=NAME_MAX_LENGTH, examples=["Doe"])
    visit_date: CalendarDate = Field(examples=["2025-08-15"])

    def to_request(self) -> AppointmentRequest:
        return AppointmentRequest(
            first_name=self.first_name,
            last_name=self.last_name,
            visit_date=self.visit_date,
        )


class AppointmentResponse(_CamelModel):
    id: int
    first_name: str
    last_name: str
    visit_date: CalendarDate
    created_at: str = Field(examples=["2025-08-15T10:30:00Z"])

    @classmethod
    def from_domain(cls, appointment: Appointment) -> AppointmentResponse:
        return cls(
            id=int(appointment.id or 0),
            first_name=appointment.first_name,
            last_name=appointment.last_name,
            visit_date=appointment.visit_date,
            created_at=appointment.created_at.strftime("%Y-%m-%dT%H:%M:%SZ"),
        )


class ErrorResponse(BaseModel):
    detail: str


__all__ = ["AppointmentResponse", "CreateAppointmentBody", "ErrorResponse"]
