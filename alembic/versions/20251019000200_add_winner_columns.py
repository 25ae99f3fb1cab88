"""add winner columns to games

Revision ID: 20251019000200
Revises: 20251019000100
Create Date: 2025-10-19 00:02:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20251019000200"
down_revision = "20251019000100"
branch_labels = None
depends_on = None


def upgrade() -> None:
    with op.batch_alter_table("games") as batch_op:
        batch_op.add_column(sa.Column("winner_by_period_periods", sa.JSON(), nullable=True))
        batch_op.add_column(sa.Column("winner_by_period_outcome", sa.Integer(), nullable=True))
        batch_op.add_column(sa.Column("winner_by_game_outcome_periods", sa.JSON(), nullable=True))
        batch_op.add_column(sa.Column("winner_by_game_outcome_result", sa.Integer(), nullable=True))


def downgrade() -> None:
    with op.batch_alter_table("games") as batch_op:
        batch_op.drop_column("winner_by_game_outcome_result")
        batch_op.drop_column("winner_by_game_outcome_periods")
        batch_op.drop_column("winner_by_period_outcome")
        batch_op.drop_column("winner_by_period_periods")
