"""CLI entrypoint: list NHL games for a date through the schedule cache."""

from __future__ import annotations

import argparse
import json
import logging
from datetime import date, datetime

from nhl_data.db import init_db, session_scope
from nhl_data.freshness import local_today
from nhl_data.ingestion.cache import ScheduleCache
from nhl_data.settings import Settings, build_fetcher, load_settings
from nhl_data.store import GameStore


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print NHL games for a date, served from the local store when possible.",
    )

    date_group = parser.add_mutually_exclusive_group()
    date_group.add_argument(
        "--today",
        action="store_true",
        help="Use today's date in SCHEDULE_TIMEZONE (default).",
    )
    date_group.add_argument(
        "--date",
        type=str,
        help="Date to look up in YYYY-MM-DD format.",
    )

    return parser.parse_args(argv)


def resolve_date(raw: str | None, settings: Settings) -> date:
    if not raw:
        return local_today(settings.schedule_timezone)
    try:
        return datetime.strptime(raw.strip(), "%Y-%m-%d").date()
    except ValueError:
        raise SystemExit(f"Invalid date: {raw!r}. Use YYYY-MM-DD.")


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    args = _parse_args(argv)
    settings = load_settings()
    target_date = resolve_date(args.date, settings)

    init_db()
    fetcher = build_fetcher(settings)
    with session_scope() as db:
        cache = ScheduleCache(
            GameStore(db),
            fetcher,
            timezone=settings.schedule_timezone,
        )
        result = cache.lookup(target_date)

    logging.info(
        "Done: date=%s source=%s games=%s",
        target_date,
        result.source,
        len(result.games),
    )
    for game in result.games:
        print(json.dumps(game.to_wire(), ensure_ascii=False))


if __name__ == "__main__":
    main()
