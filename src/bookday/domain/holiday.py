"""Public holiday records returned by the remote holiday source."""

from __future__ import annotations

from pydantic import Field

from .base import RemoteModel
from .types import CalendarDate


class Holiday(RemoteModel):
    """A single public holiday as published by Nager.Date."""

    date: CalendarDate
    name: str = ""
    local_name: str = Field(default="", alias="localName")
    country_code: str = Field(default="", alias="countryCode")
    fixed: bool = False
    global_: bool = Field(default=True, alias="global")
    counties: tuple[str, ...] | None = None
    launch_year: int | None = Field(default=None, alias="launchYear")
    types: tuple[str, ...] = Field(default_factory=tuple)


__all__ = ["Holiday"]
