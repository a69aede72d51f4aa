"""Per-year holiday cache."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

from .locking import ReadWriteLock


class HolidayYearCache:
    """Maps a year to the complete set of its holiday dates.

    A year is either absent or complete: entries are written in one step
    from a successful fetch, possibly empty, and are never evicted.
    """

    def __init__(self) -> None:
        self._years: dict[int, frozenset[date]] = {}
        self._lock = ReadWriteLock()

    async def get(self, year: int) -> frozenset[date] | None:
        """Return the cached holiday set for ``year`` or None when absent."""

        async with self._lock.read():
            return self._years.get(year)

    async def store(self, year: int, holidays: Iterable[date]) -> frozenset[date]:
        """Record the complete holiday set for ``year`` and return it."""

        entry = frozenset(holidays)
        async with self._lock.write():
            self._years[year] = entry
        return entry

    async def years(self) -> tuple[int, ...]:
        async with self._lock.read():
            return tuple(sorted(self._years))

    async def contains(self, year: int) -> bool:
        async with self._lock.read():
            return year in self._years


__all__ = ["HolidayYearCache"]
