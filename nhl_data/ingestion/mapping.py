"""Conversion between GameRecord and the persisted Game/Team rows."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from nhl_data.ingestion.schema import (
    Clock,
    GameOutcome,
    GameRecord,
    LocalizedName,
    PeriodDescriptor,
    TeamRecord,
    Winner,
)
from nhl_data.models import Game, Team

# Columns written when an incoming row replaces a stored one.
GAME_COLUMNS = (
    "season",
    "game_type",
    "game_date",
    "start_time_utc",
    "venue",
    "neutral_site",
    "eastern_utc_offset",
    "venue_utc_offset",
    "venue_timezone",
    "game_state",
    "game_schedule_state",
    "game_center_link",
    "home_team_id",
    "away_team_id",
    "home_score",
    "away_score",
    "period",
    "period_type",
    "max_regulation_periods",
    "last_period_type",
    "ot_periods",
    "winner_by_period_periods",
    "winner_by_period_outcome",
    "winner_by_game_outcome_periods",
    "winner_by_game_outcome_result",
    "time_remaining",
    "seconds_remaining",
    "clock_running",
    "in_intermission",
)
TEAM_COLUMNS = ("abbrev", "name", "city", "logo")


def _default_value(wrapper: LocalizedName | None) -> str | None:
    if wrapper is None:
        return None
    return wrapper.default


def _wrap(value: str | None) -> LocalizedName | None:
    if value is None:
        return None
    return LocalizedName(default=value)


def _any_present(*values: Any) -> bool:
    return any(value is not None for value in values)


def _ensure_utc(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def team_from_record(record: TeamRecord) -> Team:
    return Team(
        id=record.id,
        abbrev=record.abbrev,
        name=_default_value(record.common_name),
        city=_default_value(record.place_name),
        logo=record.logo,
    )


def to_persistable(record: GameRecord) -> tuple[Game, Team | None, Team | None]:
    """Split a GameRecord into a transient Game and its two teams.

    The teams are returned unlinked; callers attach the deduplicated
    instances to the game.
    """

    period = record.period_descriptor
    outcome = record.game_outcome
    clock = record.clock
    by_period = record.winner_by_period
    by_outcome = record.winner_by_game_outcome
    home = record.home_team
    away = record.away_team

    game = Game(
        id=record.id,
        season=record.season,
        game_type=record.game_type,
        game_date=record.game_date,
        start_time_utc=_ensure_utc(record.start_time_utc),
        venue=_default_value(record.venue),
        neutral_site=record.neutral_site,
        eastern_utc_offset=record.eastern_utc_offset,
        venue_utc_offset=record.venue_utc_offset,
        venue_timezone=record.venue_timezone,
        game_state=record.game_state,
        game_schedule_state=record.game_schedule_state,
        game_center_link=record.game_center_link,
        home_team_id=home.id if home else None,
        away_team_id=away.id if away else None,
        home_score=home.score if home else 0,
        away_score=away.score if away else 0,
        period=period.number if period else None,
        period_type=period.period_type if period else None,
        max_regulation_periods=period.max_regulation_periods if period else None,
        last_period_type=outcome.last_period_type if outcome else None,
        ot_periods=outcome.ot_periods if outcome else None,
        winner_by_period_periods=by_period.periods if by_period else None,
        winner_by_period_outcome=by_period.game_outcome if by_period else None,
        winner_by_game_outcome_periods=by_outcome.periods if by_outcome else None,
        winner_by_game_outcome_result=by_outcome.game_outcome if by_outcome else None,
        time_remaining=clock.time_remaining if clock else None,
        seconds_remaining=clock.seconds_remaining if clock else None,
        clock_running=clock.running if clock else None,
        in_intermission=clock.in_intermission if clock else None,
    )

    home_team = team_from_record(home) if home else None
    away_team = team_from_record(away) if away else None
    return game, home_team, away_team


def _team_to_record(team: Team | None, score: int | None) -> TeamRecord | None:
    if team is None:
        return None
    return TeamRecord(
        id=team.id,
        abbrev=team.abbrev,
        logo=team.logo,
        common_name=_wrap(team.name),
        place_name=_wrap(team.city),
        score=score,
    )


def to_external(game: Game, home: Team | None, away: Team | None) -> GameRecord:
    """Rebuild a GameRecord from stored rows.

    Nested objects are emitted only when at least one of their fields was
    stored, so data that was never present does not reappear as an empty
    object.
    """

    period = None
    if _any_present(game.period, game.period_type, game.max_regulation_periods):
        period = PeriodDescriptor(
            number=game.period,
            period_type=game.period_type,
            max_regulation_periods=game.max_regulation_periods,
        )

    outcome = None
    if _any_present(game.last_period_type, game.ot_periods):
        outcome = GameOutcome(
            last_period_type=game.last_period_type,
            ot_periods=game.ot_periods,
        )

    by_period = None
    if _any_present(game.winner_by_period_periods, game.winner_by_period_outcome):
        by_period = Winner(
            periods=game.winner_by_period_periods,
            game_outcome=game.winner_by_period_outcome,
        )

    by_outcome = None
    if _any_present(game.winner_by_game_outcome_periods, game.winner_by_game_outcome_result):
        by_outcome = Winner(
            periods=game.winner_by_game_outcome_periods,
            game_outcome=game.winner_by_game_outcome_result,
        )

    clock = None
    if _any_present(
        game.time_remaining,
        game.seconds_remaining,
        game.clock_running,
        game.in_intermission,
    ):
        clock = Clock(
            time_remaining=game.time_remaining,
            seconds_remaining=game.seconds_remaining,
            running=game.clock_running,
            in_intermission=game.in_intermission,
        )

    return GameRecord(
        id=game.id,
        season=game.season,
        game_type=game.game_type,
        game_date=game.game_date,
        start_time_utc=_ensure_utc(game.start_time_utc),
        venue=_wrap(game.venue),
        neutral_site=game.neutral_site,
        eastern_utc_offset=game.eastern_utc_offset,
        venue_utc_offset=game.venue_utc_offset,
        venue_timezone=game.venue_timezone,
        game_state=game.game_state,
        game_schedule_state=game.game_schedule_state,
        game_center_link=game.game_center_link,
        home_team=_team_to_record(home, game.home_score),
        away_team=_team_to_record(away, game.away_score),
        period_descriptor=period,
        game_outcome=outcome,
        winner_by_period=by_period,
        winner_by_game_outcome=by_outcome,
        clock=clock,
    )


def changed_columns(stored: Any, incoming: Any, columns: tuple[str, ...]) -> list[str]:
    """Names of the columns whose incoming value differs from the stored one."""
    changed = []
    for column in columns:
        value = getattr(incoming, column)
        current = getattr(stored, column)
        if isinstance(value, datetime) and isinstance(current, datetime):
            if _ensure_utc(current) == _ensure_utc(value):
                continue
        if current != value:
            changed.append(column)
    return changed
