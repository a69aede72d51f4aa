"""Holiday lookup, caching and appointment date validation."""

from .cache import HolidayYearCache
from .client import NagerHolidayClient
from .exceptions import HolidayLookupError
from .interfaces import DateChecker, HolidaySource
from .locking import ReadWriteLock
from .validator import DateValidator

__all__ = [
    "DateChecker",
    "DateValidator",
    "HolidayLookupError",
    "HolidaySource",
    "HolidayYearCache",
    "NagerHolidayClient",
    "ReadWriteLock",
]
