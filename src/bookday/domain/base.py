"""Core base classes for domain models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable domain model base with strict validation."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_assignment=True)


class RemoteModel(BaseModel):
    """Immutable model decoded from third-party payloads.

    Remote sources add fields over time, so unknown keys are dropped rather
    than rejected. Fields may be populated by alias or by attribute name.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)
