"""Service container wiring application components."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from bookday.booking import BookingWorkflow
from bookday.config import AppSettings
from bookday.holidays import DateValidator, HolidayYearCache, NagerHolidayClient
from bookday.persistence import UnitOfWork
from bookday.persistence.sqlite import create_sqlite_unit_of_work_factory

UnitOfWorkFactory = Callable[[], UnitOfWork]


logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContainer:
    """Aggregates the services of one process with shared configuration."""

    settings: AppSettings
    holiday_client: NagerHolidayClient
    holiday_cache: HolidayYearCache
    date_validator: DateValidator
    unit_of_work_factory: UnitOfWorkFactory
    booking_workflow: BookingWorkflow


def _ensure_sqlite_directory(database_url: str) -> None:
    if not database_url.startswith("sqlite"):
        return
    try:
        _, path = database_url.split(":///", maxsplit=1)
    except ValueError:
        return
    if not path or path == ":memory:":
        return
    db_path = Path(path).expanduser()
    db_path.parent.mkdir(parents=True, exist_ok=True)


def build_container(settings: AppSettings | None = None) -> ServiceContainer:
    """Construct the primary service container."""

    resolved_settings = settings or AppSettings.from_env()

    holiday_client = NagerHolidayClient(
        base_url=resolved_settings.holiday_api_base,
        timeout=resolved_settings.holiday_timeout,
    )
    holiday_cache = HolidayYearCache()
    date_validator = DateValidator(
        holiday_client,
        holiday_cache,
        country_code=resolved_settings.holiday_country_code,
    )

    _ensure_sqlite_directory(resolved_settings.database_url)
    unit_of_work_factory = create_sqlite_unit_of_work_factory(resolved_settings.database_url)
    booking_workflow = BookingWorkflow(unit_of_work_factory, date_validator)

    logger.debug(
        "Built container for %s (holidays=%s country=%s)",
        resolved_settings.environment,
        resolved_settings.holiday_api_base,
        resolved_settings.holiday_country_code,
    )
    return ServiceContainer(
        settings=resolved_settings,
        holiday_client=holiday_client,
        holiday_cache=holiday_cache,
        date_validator=date_validator,
        unit_of_work_factory=unit_of_work_factory,
        booking_workflow=booking_workflow,
    )


__all__ = ["ServiceContainer", "build_container"]
