from sqlalchemy import BigInteger, Boolean, Column, Date, DateTime, ForeignKey, Integer, JSON, String
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
from .db import Base


class Team(Base):
    __tablename__ = "teams"

    # NHL team id, reused across games and seasons
    id = Column(BigInteger, primary_key=True, autoincrement=False)
    abbrev = Column(String, nullable=True)
    name = Column(String, nullable=True)
    city = Column(String, nullable=True)
    logo = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )


class Game(Base):
    __tablename__ = "games"

    # NHL game id, stable across fetches
    id = Column(BigInteger, primary_key=True, autoincrement=False)
    season = Column(Integer, nullable=True)
    game_type = Column(Integer, nullable=True)
    game_date = Column(Date, nullable=True, index=True)
    start_time_utc = Column(DateTime(timezone=True), nullable=True)
    venue = Column(String, nullable=True)
    neutral_site = Column(Boolean, nullable=True)
    eastern_utc_offset = Column(String, nullable=True)
    venue_utc_offset = Column(String, nullable=True)
    venue_timezone = Column(String, nullable=True)
    game_state = Column(String, nullable=True)
    game_schedule_state = Column(String, nullable=True)
    game_center_link = Column(String, nullable=True)

    home_team_id = Column(BigInteger, ForeignKey("teams.id"), nullable=True)
    away_team_id = Column(BigInteger, ForeignKey("teams.id"), nullable=True)
    home_score = Column(Integer, nullable=True)
    away_score = Column(Integer, nullable=True)

    # periodDescriptor
    period = Column(Integer, nullable=True)
    period_type = Column(String, nullable=True)
    max_regulation_periods = Column(Integer, nullable=True)

    # gameOutcome
    last_period_type = Column(String, nullable=True)
    ot_periods = Column(Integer, nullable=True)

    # winnerByPeriod / winnerByGameOutcome
    winner_by_period_periods = Column(JSON(none_as_null=True), nullable=True)
    winner_by_period_outcome = Column(Integer, nullable=True)
    winner_by_game_outcome_periods = Column(JSON(none_as_null=True), nullable=True)
    winner_by_game_outcome_result = Column(Integer, nullable=True)

    # clock, only set while a game is live
    time_remaining = Column(String, nullable=True)
    seconds_remaining = Column(Integer, nullable=True)
    clock_running = Column(Boolean, nullable=True)
    in_intermission = Column(Boolean, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
    )

    home_team = relationship("Team", foreign_keys=[home_team_id])
    away_team = relationship("Team", foreign_keys=[away_team_id])
