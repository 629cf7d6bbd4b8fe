"""Weight logs + user preferences tables.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # weight_logs — newest-first history, capped in the app
    op.create_table(
        "weight_logs",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("timestamp", sa.BigInteger(), nullable=False),
        sa.Column("weight", sa.Float(), nullable=False),
        sa.Column("unit", sa.String(length=2), nullable=False),
        sa.Column("barbell_id", sa.String(length=16), nullable=False),
        sa.Column("plate_description", sa.String(length=255), nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_weight_logs"),
    )
    op.create_index("ix_weight_logs_timestamp", "weight_logs", ["timestamp"], unique=True)

    # user_preferences — singleton row
    op.create_table(
        "user_preferences",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("unit", sa.String(length=2), nullable=False, server_default="lb"),
        sa.Column("barbell_id", sa.String(length=16), nullable=False, server_default="1"),
        sa.Column("saw_coach_mark", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_user_preferences"),
    )


def downgrade() -> None:
    op.drop_table("user_preferences")
    op.drop_index("ix_weight_logs_timestamp", table_name="weight_logs")
    op.drop_table("weight_logs")
