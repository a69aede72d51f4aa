"""Nager.Date-backed public holiday lookup."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from pydantic import TypeAdapter, ValidationError

from bookday.domain import DateLike, Holiday
from bookday.utils.time import to_calendar_date

from .exceptions import HolidayLookupError

_HOLIDAY_LIST = TypeAdapter(list[Holiday])


class NagerHolidayClient:
    """Fetches public holidays from the Nager.Date v3 API.

    Every call is a live request; caching belongs to the caller.
    """

    API_BASE = "https://date.nager.at/api/v3"
    DEFAULT_TIMEOUT = 10.0

    def __init__(
        self,
        *,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        logger: logging.Logger | None = None,
    ) -> None:
        self._base_url = (base_url or self.API_BASE).rstrip("/")
        self._client = client
        self._timeout = timeout
        self._logger = logger or logging.getLogger(__name__)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def fetch_holidays(self, year: int, country_code: str) -> list[Holiday]:
        if year <= 0:
            msg = f"Holiday year must be positive, got {year}"
            raise HolidayLookupError(msg)

        url = f"{self._base_url}/PublicHolidays/{year}/{country_code}"
        self._logger.debug("Fetching public holidays from %s", url)
        async with self._client_scope() as client:
            try:
                response = await client.get(url)
                response.raise_for_status()
            except httpx.TimeoutException as exc:
                self._logger.error("Holiday request to %s timed out: %s", url, exc)
                msg = f"Holiday request for {year}/{country_code} timed out"
                raise HolidayLookupError(msg) from exc
            except httpx.HTTPStatusError as exc:
                self._logger.error(
                    "Holiday API returned status %d for %s",
                    exc.response.status_code,
                    url,
                )
                msg = f"Holiday request failed with status {exc.response.status_code}"
                raise HolidayLookupError(msg) from exc
            except httpx.HTTPError as exc:
                self._logger.error("Holiday request to %s failed: %s", url, exc)
                msg = f"Holiday request for {year}/{country_code} failed"
                raise HolidayLookupError(msg) from exc

            # Redirects and 204s pass raise_for_status; only 200 carries a list.
            if response.status_code != httpx.codes.OK:
                self._logger.error(
                    "Holiday API returned status %d for %s",
                    response.status_code,
                    url,
                )
                msg = f"Holiday request failed with status {response.status_code}"
                raise HolidayLookupError(msg)

            try:
                holidays = _HOLIDAY_LIST.validate_python(response.json())
            except (ValueError, ValidationError) as exc:
                self._logger.error("Unable to decode holiday payload from %s: %s", url, exc)
                msg = f"Holiday payload for {year}/{country_code} is malformed"
                raise HolidayLookupError(msg) from exc

        self._logger.info(
            "Fetched %d public holidays for %s/%d",
            len(holidays),
            country_code,
            year,
        )
        return holidays

    async def is_public_holiday(self, day: DateLike, country_code: str) -> bool:
        """Uncached single-date check; fetches the whole year every call."""

        target = to_calendar_date(day)
        holidays = await self.fetch_holidays(target.year, country_code)
        return any(holiday.date == target for holiday in holidays)

    @asynccontextmanager
    async def _client_scope(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            yield client


__all__ = ["NagerHolidayClient"]
