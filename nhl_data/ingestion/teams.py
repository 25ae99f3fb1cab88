"""Batch-scoped team resolution."""

from __future__ import annotations

import logging
from typing import Iterable

from nhl_data.ingestion.mapping import TEAM_COLUMNS
from nhl_data.models import Team

logger = logging.getLogger(__name__)


class TeamDeduplicator:
    """Resolves each distinct team id to one persisted Team within a batch.

    Several games in a batch usually share a team. Adding a fresh Team for
    each of them would insert the same primary key twice before the batch is
    flushed, so every id is looked up or written exactly once and the resolved
    instance is reused afterwards. Create one instance per batch and discard
    it with the batch.
    """

    def __init__(self, store) -> None:
        self.store = store
        self._resolved: dict[int, Team] = {}

    def resolve_team(self, team: Team) -> Team:
        resolved = self._resolved.get(team.id)
        if resolved is not None:
            return resolved

        stored = self.store.find_team_by_id(team.id)
        if stored is not None:
            for column in TEAM_COLUMNS:
                value = getattr(team, column)
                if value is not None and getattr(stored, column) != value:
                    setattr(stored, column, value)
            resolved = stored
        else:
            resolved = self.store.upsert_team(team)
            logger.debug("Saved new team %s (%s)", team.name, team.id)

        self._resolved[team.id] = resolved
        return resolved

    def resolve(self, teams: Iterable[Team | None]) -> dict[int, Team]:
        for team in teams:
            if team is not None:
                self.resolve_team(team)
        return dict(self._resolved)
