"""Quick probe for NHL schedule availability."""

from __future__ import annotations

import argparse
import logging

from nhl_data.ingestion.nhl_client import FetchFailure
from nhl_data.ingestion.nhl_parser import parse_schedule
from nhl_data.ingestion.run import resolve_date
from nhl_data.settings import build_fetcher, load_settings


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Probe the NHL schedule API for a date and print game counts.",
    )
    parser.add_argument(
        "--date",
        type=str,
        default=None,
        help="Date in YYYY-MM-DD format (default: today).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    args = _parse_args(argv)
    settings = load_settings()
    target_date = resolve_date(args.date, settings)

    raw = build_fetcher(settings).fetch(target_date)
    if isinstance(raw, FetchFailure):
        logging.error("NHL API error: %s", raw.error)
        if raw.status is not None:
            logging.error("Status: %s body=%s", raw.status, raw.body)
        raise SystemExit(1)

    games = parse_schedule(raw)
    on_date = [game for game in games if game.game_date == target_date]
    logging.info(
        "Fetched %s games in schedule window, %s on date=%s",
        len(games),
        len(on_date),
        target_date,
    )
    for game in on_date:
        away = game.away_team.abbrev if game.away_team else "TBD"
        home = game.home_team.abbrev if game.home_team else "TBD"
        logging.info("  %s %s @ %s [%s]", game.id, away, home, game.status)


if __name__ == "__main__":
    main()
