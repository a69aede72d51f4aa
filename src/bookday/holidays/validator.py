"""Appointment date validation backed by a per-year holiday cache."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from bookday.domain import DateLike, ValidationOutcome
from bookday.utils.time import format_calendar_date, to_calendar_date, utc_midnight, utc_now

from .cache import HolidayYearCache
from .exceptions import HolidayLookupError
from .interfaces import HolidaySource

SATURDAY = 5
SUNDAY = 6

Clock = Callable[[], datetime]


class DateValidator:
    """Decides whether a calendar date can take an appointment.

    Rules run cheapest first and stop at the first failure: past dates,
    then weekends, then public holidays. Only the holiday rule touches the
    network, and only when the date's year is not cached yet.
    """

    DEFAULT_COUNTRY_CODE = "GB"

    def __init__(
        self,
        source: HolidaySource,
        cache: HolidayYearCache | None = None,
        *,
        country_code: str = DEFAULT_COUNTRY_CODE,
        clock: Clock = utc_now,
        logger: logging.Logger | None = None,
    ) -> None:
        self._source = source
        self._cache = cache if cache is not None else HolidayYearCache()
        self._country_code = country_code
        self._clock = clock
        self._logger = logger or logging.getLogger(__name__)

    @property
    def country_code(self) -> str:
        return self._country_code

    @property
    def cache(self) -> HolidayYearCache:
        return self._cache

    async def cached_years(self) -> tuple[int, ...]:
        return await self._cache.years()

    async def is_holiday(self, day: DateLike) -> bool:
        target = to_calendar_date(day)
        year = target.year

        holidays = await self._cache.get(year)
        if holidays is not None:
            self._logger.debug("Holiday cache hit for %s", format_calendar_date(target))
            return target in holidays

        # No lock is held while the source is awaited; concurrent misses for
        # the same year may fetch twice and store identical sets.
        self._logger.debug("Holiday cache miss for %d, fetching", year)
        fetched = await self._source.fetch_holidays(year, self._country_code)

        holidays = await self._cache.store(year, (holiday.date for holiday in fetched))
        is_holiday = target in holidays
        self._logger.info(
            "Cached %d holidays for %d (%s is_holiday=%s)",
            len(holidays),
            year,
            format_calendar_date(target),
            is_holiday,
        )
        return is_holiday

    async def validate(self, day: DateLike) -> ValidationOutcome:
        candidate = utc_midnight(day)
        today = utc_midnight(self._clock())
        label = format_calendar_date(candidate)

        if candidate < today:
            self._logger.warning("Rejected appointment date %s: in the past", label)
            return ValidationOutcome.past_date()

        if candidate.weekday() in (SATURDAY, SUNDAY):
            self._logger.warning(
                "Rejected appointment date %s: falls on %s",
                label,
                candidate.strftime("%A"),
            )
            return ValidationOutcome.weekend()

        try:
            holiday = await self.is_holiday(candidate)
        except HolidayLookupError as exc:
            self._logger.debug("Could not check holidays for %s: %s", label, exc)
            return ValidationOutcome.lookup_failed(exc)

        if holiday:
            self._logger.warning("Rejected appointment date %s: public holiday", label)
            return ValidationOutcome.holiday()

        self._logger.debug("Appointment date %s passed validation", label)
        return ValidationOutcome.valid()


__all__ = ["DateValidator"]
