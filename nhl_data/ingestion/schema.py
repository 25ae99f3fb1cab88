"""Data contract for NHL schedule games.

Field aliases follow the upstream camelCase wire format so the same models
validate raw schedule JSON and serialize responses back to that shape.
"""

from datetime import date, datetime, timezone
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

GameStatus = Literal["scheduled", "in_progress", "final", "postponed", "suspended"]

_STATE_TO_STATUS: dict[str, GameStatus] = {
    "FUT": "scheduled",
    "PRE": "scheduled",
    "LIVE": "in_progress",
    "CRIT": "in_progress",
    "FINAL": "final",
    "OFF": "final",
    "PPD": "postponed",
    "SUSP": "suspended",
}


def normalize_game_state(game_state: str | None) -> GameStatus:
    if not isinstance(game_state, str):
        return "scheduled"
    return _STATE_TO_STATUS.get(game_state.strip().upper(), "scheduled")


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class LocalizedName(_WireModel):
    """Upstream ``{"default": "..."}`` wrapper; other locales are ignored."""

    default: Optional[str] = None


class Clock(_WireModel):
    time_remaining: Optional[str] = Field(default=None, alias="timeRemaining")
    seconds_remaining: Optional[int] = Field(default=None, alias="secondsRemaining")
    running: Optional[bool] = None
    in_intermission: Optional[bool] = Field(default=None, alias="inIntermission")


class PeriodDescriptor(_WireModel):
    number: Optional[int] = None
    period_type: Optional[str] = Field(default=None, alias="periodType")
    max_regulation_periods: Optional[int] = Field(
        default=None, alias="maxRegulationPeriods"
    )


class GameOutcome(_WireModel):
    last_period_type: Optional[str] = Field(default=None, alias="lastPeriodType")
    ot_periods: Optional[int] = Field(default=None, alias="otPeriods")


class Winner(_WireModel):
    periods: Optional[list[int]] = None
    game_outcome: Optional[int] = Field(default=None, alias="gameOutcome")


class TeamRecord(_WireModel):
    id: int
    abbrev: Optional[str] = None
    logo: Optional[str] = None
    common_name: Optional[LocalizedName] = Field(default=None, alias="commonName")
    place_name: Optional[LocalizedName] = Field(default=None, alias="placeName")
    score: Optional[int] = None


class GameRecord(_WireModel):
    """
    Normalized game used across fetch -> parse -> DB -> caller.
    """

    # Required fields
    id: int

    # Optional fields
    season: Optional[int] = None
    game_type: Optional[int] = Field(default=None, alias="gameType")
    game_date: Optional[date] = Field(default=None, alias="gameDate")
    start_time_utc: Optional[datetime] = Field(default=None, alias="startTimeUTC")
    venue: Optional[LocalizedName] = None
    neutral_site: Optional[bool] = Field(default=None, alias="neutralSite")
    eastern_utc_offset: Optional[str] = Field(default=None, alias="easternUTCOffset")
    venue_utc_offset: Optional[str] = Field(default=None, alias="venueUTCOffset")
    venue_timezone: Optional[str] = Field(default=None, alias="venueTimezone")
    game_state: Optional[str] = Field(default=None, alias="gameState")
    game_schedule_state: Optional[str] = Field(default=None, alias="gameScheduleState")
    game_center_link: Optional[str] = Field(default=None, alias="gameCenterLink")
    home_team: Optional[TeamRecord] = Field(default=None, alias="homeTeam")
    away_team: Optional[TeamRecord] = Field(default=None, alias="awayTeam")
    period_descriptor: Optional[PeriodDescriptor] = Field(
        default=None, alias="periodDescriptor"
    )
    game_outcome: Optional[GameOutcome] = Field(default=None, alias="gameOutcome")
    winner_by_period: Optional[Winner] = Field(default=None, alias="winnerByPeriod")
    winner_by_game_outcome: Optional[Winner] = Field(
        default=None, alias="winnerByGameOutcome"
    )
    clock: Optional[Clock] = None

    @field_validator("start_time_utc")
    @classmethod
    def start_time_as_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        # Naive timestamps come from stores that drop the offset; they are UTC.
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def status(self) -> GameStatus:
        return normalize_game_state(self.game_state)

    def to_wire(self) -> dict:
        """Camel-cased JSON-ready dict with absent fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
