"""Enumerations used across the bookday domain layer."""

from __future__ import annotations

from enum import StrEnum


class OutcomeKind(StrEnum):
    """Result categories of the appointment date rule chain."""

    VALID = "valid"
    PAST_DATE = "past_date"
    WEEKEND = "weekend"
    HOLIDAY = "holiday"
    LOOKUP_FAILED = "lookup_failed"


__all__ = ["OutcomeKind"]
