"""Protocols for holiday sources and date checkers."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from bookday.domain import DateLike, Holiday, ValidationOutcome


class HolidaySource(Protocol):
    """Contract implemented by remote holiday lookups."""

    async def fetch_holidays(self, year: int, country_code: str) -> Sequence[Holiday]:
        """Return every public holiday of ``year`` for ``country_code``."""


class DateChecker(Protocol):
    """Contract the booking workflow relies on to vet appointment dates."""

    async def is_holiday(self, day: DateLike) -> bool:
        """Return True when ``day`` is a public holiday."""

    async def validate(self, day: DateLike) -> ValidationOutcome:
        """Run the full rule chain for a candidate appointment date."""


__all__ = ["DateChecker", "HolidaySource"]
