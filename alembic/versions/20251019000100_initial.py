"""initial teams and games tables

Revision ID: 20251019000100
Revises:
Create Date: 2025-10-19 00:01:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20251019000100"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "teams",
        sa.Column("id", sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column("abbrev", sa.String(), nullable=True),
        sa.Column("name", sa.String(), nullable=True),
        sa.Column("city", sa.String(), nullable=True),
        sa.Column("logo", sa.String(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=True,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=True,
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "games",
        sa.Column("id", sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column("season", sa.Integer(), nullable=True),
        sa.Column("game_type", sa.Integer(), nullable=True),
        sa.Column("game_date", sa.Date(), nullable=True),
        sa.Column("start_time_utc", sa.DateTime(timezone=True), nullable=True),
        sa.Column("venue", sa.String(), nullable=True),
        sa.Column("neutral_site", sa.Boolean(), nullable=True),
        sa.Column("eastern_utc_offset", sa.String(), nullable=True),
        sa.Column("venue_utc_offset", sa.String(), nullable=True),
        sa.Column("venue_timezone", sa.String(), nullable=True),
        sa.Column("game_state", sa.String(), nullable=True),
        sa.Column("game_schedule_state", sa.String(), nullable=True),
        sa.Column("game_center_link", sa.String(), nullable=True),
        sa.Column("home_team_id", sa.BigInteger(), nullable=True),
        sa.Column("away_team_id", sa.BigInteger(), nullable=True),
        sa.Column("home_score", sa.Integer(), nullable=True),
        sa.Column("away_score", sa.Integer(), nullable=True),
        sa.Column("period", sa.Integer(), nullable=True),
        sa.Column("period_type", sa.String(), nullable=True),
        sa.Column("max_regulation_periods", sa.Integer(), nullable=True),
        sa.Column("last_period_type", sa.String(), nullable=True),
        sa.Column("ot_periods", sa.Integer(), nullable=True),
        sa.Column("time_remaining", sa.String(), nullable=True),
        sa.Column("seconds_remaining", sa.Integer(), nullable=True),
        sa.Column("clock_running", sa.Boolean(), nullable=True),
        sa.Column("in_intermission", sa.Boolean(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=True,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=True,
        ),
        sa.ForeignKeyConstraint(["home_team_id"], ["teams.id"]),
        sa.ForeignKeyConstraint(["away_team_id"], ["teams.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_games_game_date"), "games", ["game_date"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_games_game_date"), table_name="games")
    op.drop_table("games")
    op.drop_table("teams")
