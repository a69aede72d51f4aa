"""Typer CLI wiring bookday services."""

from __future__ import annotations

import asyncio
import logging
from datetime import date

import typer
from pydantic import ValidationError

from bookday.booking import BookingError
from bookday.domain import AppointmentRequest, OutcomeKind
from bookday.holidays import HolidayLookupError
from bookday.logging_setup import configure_logging
from bookday.persistence import DuplicateAppointmentError
from bookday.utils.time import parse_calendar_date

from .deps import get_container

app = typer.Typer(help="bookday command-line interface")

_OUTCOME_LABELS = {
    OutcomeKind.VALID: "bookable",
    OutcomeKind.PAST_DATE: "rejected: date is in the past",
    OutcomeKind.WEEKEND: "rejected: date is a weekend",
    OutcomeKind.HOLIDAY: "rejected: date is a public holiday",
    OutcomeKind.LOOKUP_FAILED: "unknown: holiday lookup failed",
}


def _parse_date(value: str) -> date:
    try:
        return parse_calendar_date(value)
    except ValueError as exc:
        raise typer.BadParameter("date must be in YYYY-MM-DD format") from exc


@app.callback()
def main() -> None:
    """Configure logging from the resolved settings before any command runs."""

    configure_logging(get_container().settings.log_level_value)


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved application settings."""

    settings = get_container().settings
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("Database URL:\t" + settings.database_url)
    typer.echo("Holiday API:\t" + settings.holiday_api_base)
    typer.echo("Country:\t" + settings.holiday_country_code)
    typer.echo(f"Listen:\t\t{settings.server_host}:{settings.server_port}")


@app.command("check-date")
def check_date(visit_date: str) -> None:
    """Run the business-day rules against a date without booking it."""

    target = _parse_date(visit_date)
    validator = get_container().date_validator
    outcome = asyncio.run(validator.validate(target))
    typer.echo(f"{target.isoformat()}: {_OUTCOME_LABELS[outcome.kind]}")
    if outcome.cause is not None:
        typer.echo(f"Cause: {outcome.cause}")
    if not outcome.is_valid:
        raise typer.Exit(code=1)


@app.command("book")
def book(first_name: str, last_name: str, visit_date: str) -> None:
    """Book an appointment for the given date."""

    target = _parse_date(visit_date)
    workflow = get_container().booking_workflow

    try:
        request = AppointmentRequest(
            first_name=first_name,
            last_name=last_name,
            visit_date=target,
        )
    except ValidationError as exc:
        typer.echo("Booking rejected: Invalid input data")
        raise typer.Exit(code=1) from exc

    try:
        appointment = asyncio.run(workflow.create_appointment(request))
    except (BookingError, DuplicateAppointmentError) as exc:
        typer.echo(f"Booking rejected: {exc}")
        raise typer.Exit(code=1) from exc
    except HolidayLookupError as exc:
        typer.echo(f"Holiday lookup failed: {exc}")
        raise typer.Exit(code=2) from exc

    typer.echo(f"Booked appointment {appointment.id} on {appointment.visit_date.isoformat()}")


@app.command("list")
def list_appointments(start: str, end: str) -> None:
    """List appointments booked between two dates (inclusive)."""

    first = _parse_date(start)
    last = _parse_date(end)
    workflow = get_container().booking_workflow
    appointments = asyncio.run(workflow.list_appointments(first, last))
    if not appointments:
        typer.echo("No appointments found")
        return
    for item in appointments:
        typer.echo(f"{item.visit_date.isoformat()}\t{item.id}\t{item.first_name} {item.last_name}")


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Interface to bind"),
    port: int | None = typer.Option(None, min=1, max=65535, help="Port to listen on"),
) -> None:  # pragma: no cover - blocks on the server loop
    """Run the HTTP API with uvicorn."""

    import uvicorn

    from bookday.api import create_app

    container = get_container()
    settings = container.settings
    uvicorn.run(
        create_app(container),
        host=host or settings.server_host,
        port=port or settings.server_port,
        log_level=logging.getLevelName(settings.log_level_value).lower(),
    )
