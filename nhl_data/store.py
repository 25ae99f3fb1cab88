"""Repository for persisted games and teams.

Writes are INSERT ... ON CONFLICT (id) DO UPDATE statements, so two requests
that both missed the cache and write the same game or team ids converge on
one row instead of failing on the primary key. Nothing is committed here;
the caller owns the unit of work.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from nhl_data.ingestion.mapping import GAME_COLUMNS, TEAM_COLUMNS, changed_columns
from nhl_data.models import Game, Team

logger = logging.getLogger(__name__)

_INSERTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


@dataclass
class SyncResult:
    total_fetched: int = 0
    inserted: int = 0
    updated: int = 0
    skipped: int = 0


class GameStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def _insert(self, model):
        dialect = self.db.get_bind().dialect.name
        try:
            insert = _INSERTS[dialect]
        except KeyError:
            raise NotImplementedError(f"No upsert support for dialect {dialect!r}") from None
        return insert(model)

    def find_games_by_date(self, game_date: date) -> list[Game]:
        return (
            self.db.query(Game)
            .filter(Game.game_date == game_date)
            .order_by(Game.start_time_utc.asc().nulls_first(), Game.id.asc())
            .all()
        )

    def find_games_by_ids(self, game_ids: list[int]) -> dict[int, Game]:
        if not game_ids:
            return {}
        rows = self.db.query(Game).filter(Game.id.in_(game_ids)).all()
        return {game.id: game for game in rows}

    def find_team_by_id(self, team_id: int) -> Team | None:
        return self.db.get(Team, team_id)

    def upsert_team(self, team: Team) -> Team:
        """Insert the team or fill its stored row; null fields never erase stored ones."""
        stmt = self._insert(Team).values(
            id=team.id,
            **{column: getattr(team, column) for column in TEAM_COLUMNS},
        )
        updates = {
            column: func.coalesce(stmt.excluded[column], getattr(Team, column))
            for column in TEAM_COLUMNS
        }
        updates["updated_at"] = func.now()
        self.db.execute(stmt.on_conflict_do_update(index_elements=["id"], set_=updates))
        logger.debug("Upserted team id=%s name=%s", team.id, team.name)
        return self.db.get(Team, team.id, populate_existing=True)

    def upsert_games(self, games: Iterable[Game], result: SyncResult | None = None) -> SyncResult:
        """Write a batch of games keyed on their NHL id.

        A repeated id inside one batch is written once, with the last record
        winning. Unchanged rows are counted as skipped and not written.
        """
        result = result or SyncResult()

        batch: dict[int, Game] = {}
        for game in games:
            if game.id in batch:
                logger.warning("Duplicate game id=%s in batch; keeping the last record", game.id)
            batch[game.id] = game
        if not batch:
            return result

        stored = self.find_games_by_ids(list(batch))
        rows = []
        for game_id, game in batch.items():
            existing = stored.get(game_id)
            if existing is None:
                result.inserted += 1
                logger.debug("Inserting game id=%s", game_id)
            elif changed_columns(existing, game, GAME_COLUMNS):
                result.updated += 1
                logger.debug("Updating game id=%s", game_id)
            else:
                result.skipped += 1
                logger.debug("Skipped unchanged game id=%s", game_id)
                continue
            rows.append({"id": game_id, **{column: getattr(game, column) for column in GAME_COLUMNS}})

        if not rows:
            return result

        stmt = self._insert(Game).values(rows)
        updates = {column: stmt.excluded[column] for column in GAME_COLUMNS}
        updates["updated_at"] = func.now()
        self.db.execute(stmt.on_conflict_do_update(index_elements=["id"], set_=updates))

        # Loaded rows still hold their pre-upsert values.
        for existing in stored.values():
            self.db.expire(existing)
        return result
