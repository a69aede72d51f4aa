"""FastAPI application exposing appointment booking."""

from __future__ import annotations

import logging
from datetime import date

from fastapi import Depends, FastAPI, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse

from bookday import __version__
from bookday.booking import BookingWorkflow, DateRejectedError, InvalidAppointmentError
from bookday.container import ServiceContainer
from bookday.holidays import HolidayLookupError
from bookday.persistence import AppointmentNotFoundError, DuplicateAppointmentError

from .schemas import AppointmentResponse, CreateAppointmentBody, ErrorResponse

logger = logging.getLogger(__name__)

SERVICE_NAME = "bookday appointment API"
HTTP_422 = 422


def get_workflow(request: Request) -> BookingWorkflow:
    container: ServiceContainer = request.app.state.container
    return container.booking_workflow


def _unprocessable(detail: str) -> JSONResponse:
    return JSONResponse(status_code=HTTP_422, content={"detail": detail})


def create_app(container: ServiceContainer) -> FastAPI:
    """Build the API around an already wired service container."""

    app = FastAPI(title=SERVICE_NAME, version=__version__)
    app.state.container = container

    @app.exception_handler(DateRejectedError)
    async def _date_rejected(_: Request, exc: DateRejectedError) -> JSONResponse:
        return _unprocessable(str(exc))

    @app.exception_handler(InvalidAppointmentError)
    async def _invalid_input(_: Request, exc: InvalidAppointmentError) -> JSONResponse:
        return _unprocessable(str(exc))

    @app.exception_handler(DuplicateAppointmentError)
    async def _duplicate(_: Request, exc: DuplicateAppointmentError) -> JSONResponse:
        return _unprocessable("An appointment already exists for this date")

    @app.exception_handler(HolidayLookupError)
    async def _lookup_failed(_: Request, exc: HolidayLookupError) -> JSONResponse:
        logger.error("Holiday lookup failed while booking: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": f"Internal server error: {exc}"},
        )

    @app.get("/")
    async def root() -> dict[str, str]:
        return {"message": SERVICE_NAME, "version": __version__}

    @app.post(
        "/appointments",
        response_model=AppointmentResponse,
        status_code=status.HTTP_201_CREATED,
        responses={HTTP_422: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def create_appointment(
        body: CreateAppointmentBody,
        workflow: BookingWorkflow = Depends(get_workflow),
    ) -> AppointmentResponse:
        logger.info("Received appointment request for %s", body.visit_date.isoformat())
        appointment = await workflow.create_appointment(body.to_request())
        return AppointmentResponse.from_domain(appointment)

    @app.get("/appointments", response_model=list[AppointmentResponse])
    async def list_appointments(
        start: date = Query(..., description="First visit date (inclusive)"),
        end: date = Query(..., description="Last visit date (inclusive)"),
        workflow: BookingWorkflow = Depends(get_workflow),
    ) -> list[AppointmentResponse]:
        if end < start:
            raise HTTPException(status_code=HTTP_422, detail="end must not be before start")
        appointments = await workflow.list_appointments(start, end)
        return [AppointmentResponse.from_domain(item) for item in appointments]

    @app.get(
        "/appointments/{visit_date}",
        response_model=AppointmentResponse,
        responses={404: {"model": ErrorResponse}},
    )
    async def get_appointment(
        visit_date: date,
        workflow: BookingWorkflow = Depends(get_workflow),
    ) -> AppointmentResponse:
        try:
            appointment = await workflow.get_appointment(visit_date)
        except AppointmentNotFoundError as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
        return AppointmentResponse.from_domain(appointment)

    return app


__all__ = ["create_app", "get_workflow"]
