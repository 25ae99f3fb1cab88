"""Persist parsed NHL games into the local store."""

from __future__ import annotations

import logging
from typing import Sequence

from nhl_data.ingestion.mapping import to_persistable
from nhl_data.ingestion.schema import GameRecord
from nhl_data.ingestion.teams import TeamDeduplicator
from nhl_data.models import Game
from nhl_data.store import SyncResult

logger = logging.getLogger(__name__)


def persist_games(store, records: Sequence[GameRecord]) -> SyncResult:
    """Map, deduplicate teams, and upsert one batch of games."""

    result = SyncResult(total_fetched=len(records))
    if not records:
        logger.info("No games to save")
        return result

    logger.info("Saving %s games", len(records))
    teams = TeamDeduplicator(store)
    games: list[Game] = []

    for record in records:
        game, home_team, away_team = to_persistable(record)
        if home_team is not None:
            game.home_team = teams.resolve_team(home_team)
        if away_team is not None:
            game.away_team = teams.resolve_team(away_team)
        games.append(game)

    store.upsert_games(games, result)
    logger.info(
        "Saved games: fetched=%s inserted=%s updated=%s skipped=%s",
        result.total_fetched,
        result.inserted,
        result.updated,
        result.skipped,
    )
    return result
