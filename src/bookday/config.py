"""Lightweight application configuration loader."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def parse_log_level(raw: str) -> int:
    """Map a level name to a logging constant, defaulting to INFO."""

    return _LOG_LEVELS.get(raw.strip().lower(), logging.INFO)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration sourced from environment variables."""

    environment: str = "development"
    database_url: str = "sqlite+aiosqlite:///bookday.db"
    holiday_api_base: str = "https://date.nager.at/api/v3"
    holiday_country_code: str = "GB"
    holiday_timeout: float = 10.0
    log_level: str = "INFO"
    server_host: str = "127.0.0.1"
    server_port: int = 9119

    @property
    def log_level_value(self) -> int:
        return parse_log_level(self.log_level)

    @classmethod
    def from_env(cls) -> AppSettings:
        return cls(
            environment=os.getenv("BOOKDAY_ENV", cls.environment),
            database_url=os.getenv("BOOKDAY_DATABASE_URL", cls.database_url),
            holiday_api_base=os.getenv("BOOKDAY_HOLIDAY_API_BASE") or cls.holiday_api_base,
            holiday_country_code=(
                os.getenv("BOOKDAY_HOLIDAY_COUNTRY") or cls.holiday_country_code
            ).upper(),
            holiday_timeout=_env_float("BOOKDAY_HOLIDAY_TIMEOUT", cls.holiday_timeout),
            log_level=os.getenv("BOOKDAY_LOG_LEVEL", cls.log_level),
            server_host=os.getenv("BOOKDAY_HOST", cls.server_host),
            server_port=_env_int("BOOKDAY_PORT", cls.server_port),
        )


__all__ = ["AppSettings", "parse_log_level"]
