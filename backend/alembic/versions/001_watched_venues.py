"""Add watched_venues table for cron-scheduled Resy availability checks

Revision ID: 001
Revises:
Create Date: (run alembic upgrade head)

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "watched_venues",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("venue_id", sa.Integer(), nullable=False),
        sa.Column("venue_name", sa.String(255), nullable=False),
        sa.Column("party_size", sa.Integer(), nullable=False, server_default="2"),
        sa.Column("interval_days", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("min_time", sa.String(8), nullable=False),
        sa.Column("max_time", sa.String(8), nullable=False),
        sa.Column("preferred_time", sa.String(8), nullable=True),
        sa.Column("cron", sa.String(64), nullable=False),
        sa.Column("reservation_details_json", sa.Text(), nullable=True),
        sa.Column("booked_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_watched_venues_id", "watched_venues", ["id"], unique=False)
    op.create_index("ix_watched_venues_venue_id", "watched_venues", ["venue_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_watched_venues_venue_id", table_name="watched_venues")
    op.drop_index("ix_watched_venues_id", table_name="watched_venues")
    op.drop_table("watched_venues")
