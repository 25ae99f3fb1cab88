from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from nhl_data.ingestion.nhl_client import (
    DEFAULT_BASE_URL,
    DEFAULT_CONNECT_TIMEOUT_SECONDS,
    DEFAULT_READ_TIMEOUT_SECONDS,
    ScheduleFetcher,
)

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///./nhl_data.db"
DEFAULT_SCHEDULE_TIMEZONE = "America/New_York"


@dataclass(frozen=True)
class Settings:
    nhl_api_base_url: str
    connect_timeout_seconds: float
    read_timeout_seconds: float
    database_url: str
    schedule_timezone: str


def _float_env(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %s", name, raw, default)
        return default


def load_settings() -> Settings:
    return Settings(
        nhl_api_base_url=(os.getenv("NHL_API_BASE_URL") or DEFAULT_BASE_URL).rstrip("/"),
        connect_timeout_seconds=_float_env(
            "NHL_API_CONNECT_TIMEOUT_SECONDS", DEFAULT_CONNECT_TIMEOUT_SECONDS
        ),
        read_timeout_seconds=_float_env(
            "NHL_API_READ_TIMEOUT_SECONDS", DEFAULT_READ_TIMEOUT_SECONDS
        ),
        database_url=os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL,
        schedule_timezone=os.getenv("SCHEDULE_TIMEZONE") or DEFAULT_SCHEDULE_TIMEZONE,
    )


def build_fetcher(settings: Settings) -> ScheduleFetcher:
    return ScheduleFetcher(
        settings.nhl_api_base_url,
        connect_timeout=settings.connect_timeout_seconds,
        read_timeout=settings.read_timeout_seconds,
    )
