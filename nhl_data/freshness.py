"""Cache-vs-live decision for a requested schedule date."""

from __future__ import annotations

from datetime import date, datetime
from zoneinfo import ZoneInfo


def _calendar_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def local_today(tz_name: str) -> date:
    return datetime.now(ZoneInfo(tz_name)).date()


def requires_live_fetch(game_date: date | datetime, now: date | datetime) -> bool:
    """True when game_date is today or later relative to now.

    Only calendar dates are compared; time of day never matters. Games on
    earlier dates no longer change and may be served from the store.
    """
    return _calendar_date(game_date) >= _calendar_date(now)
