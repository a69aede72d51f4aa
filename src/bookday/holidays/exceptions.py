"""Custom exceptions for the holiday subsystem."""

from __future__ import annotations


class HolidayLookupError(RuntimeError):
    """Raised when the remote holiday source cannot supply a year's holidays.

    Timeouts, transport failures, non-200 responses and undecodable payloads
    all surface as this error, chained to the underlying cause.
    """


__all__ = ["HolidayLookupError"]
