"""Outcome of validating a candidate appointment date."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import OutcomeKind


@dataclass(frozen=True, slots=True)
class ValidationOutcome:
    """Result of the date rule chain.

    ``cause`` is only set for ``OutcomeKind.LOOKUP_FAILED`` and carries the
    holiday lookup failure that prevented a decision.
    """

    kind: OutcomeKind
    cause: Exception | None = None

    @property
    def is_valid(self) -> bool:
        return self.kind is OutcomeKind.VALID

    @classmethod
    def valid(cls) -> ValidationOutcome:
        return cls(OutcomeKind.VALID)

    @classmethod
    def past_date(cls) -> ValidationOutcome:
        return cls(OutcomeKind.PAST_DATE)

    @classmethod
    def weekend(cls) -> ValidationOutcome:
        return cls(OutcomeKind.WEEKEND)

    @classmethod
    def holiday(cls) -> ValidationOutcome:
        return cls(OutcomeKind.HOLIDAY)

    @classmethod
    def lookup_failed(cls, cause: Exception) -> ValidationOutcome:
        return cls(OutcomeKind.LOOKUP_FAILED, cause)


__all__ = ["ValidationOutcome"]
