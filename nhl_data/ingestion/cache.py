"""Read-through cache answering "which games are on date D?"."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Literal

from nhl_data.freshness import local_today, requires_live_fetch
from nhl_data.ingestion.mapping import to_external
from nhl_data.ingestion.nhl_client import FetchFailure
from nhl_data.ingestion.nhl_parser import parse_schedule
from nhl_data.ingestion.schema import GameRecord
from nhl_data.ingestion.sync import persist_games
from nhl_data.settings import DEFAULT_SCHEDULE_TIMEZONE

logger = logging.getLogger(__name__)

CacheSource = Literal["cache", "live_persisted", "live"]


@dataclass
class CacheResult:
    source: CacheSource
    games: list[GameRecord] = field(default_factory=list)


def _start_order(game: GameRecord) -> tuple:
    # Same order as store reads: unknown start first, then start time, then id.
    start = game.start_time_utc
    return (start is not None, start.timestamp() if start else 0.0, game.id)


class ScheduleCache:
    def __init__(
        self,
        store,
        fetcher,
        *,
        timezone: str = DEFAULT_SCHEDULE_TIMEZONE,
        clock: Callable[[], date] | None = None,
    ) -> None:
        self.store = store
        self.fetcher = fetcher
        self._clock = clock or (lambda: local_today(timezone))

    def get_games(self, game_date: date) -> list[GameRecord]:
        return self.lookup(game_date).games

    def lookup(self, game_date: date) -> CacheResult:
        if requires_live_fetch(game_date, self._clock()):
            games = self._fetch_live(game_date)
            logger.info("Returning %s live games for %s", len(games), game_date)
            return CacheResult(source="live", games=games)

        stored = self.store.find_games_by_date(game_date)
        if stored:
            games = [to_external(game, game.home_team, game.away_team) for game in stored]
            logger.info("Returning %s cached games for %s", len(games), game_date)
            return CacheResult(source="cache", games=games)

        games = self._fetch_live(game_date)
        if games:
            persist_games(self.store, games)
            logger.info("Saved %s fetched games for %s", len(games), game_date)
        return CacheResult(source="live_persisted", games=games)

    def _fetch_live(self, game_date: date) -> list[GameRecord]:
        raw = self.fetcher.fetch(game_date)
        if isinstance(raw, FetchFailure):
            logger.warning(
                "Serving no games for date=%s after fetch failure url=%s error=%s status=%s",
                game_date,
                raw.url,
                raw.error,
                raw.status,
            )
            return []

        games = parse_schedule(raw)
        on_date = [game for game in games if game.game_date == game_date]
        if len(on_date) != len(games):
            logger.debug(
                "Dropped %s games outside %s from schedule response",
                len(games) - len(on_date),
                game_date,
            )
        on_date.sort(key=_start_order)
        return on_date
