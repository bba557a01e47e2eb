"""Members table — one row per member version.

Revision ID: 001_members
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_members"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "members",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("member_id", sa.String(64), nullable=False),
        sa.Column("version", sa.Integer, nullable=False),
        sa.Column("first_name", sa.String(100), nullable=True),
        sa.Column("last_name", sa.String(100), nullable=True),
        sa.Column("primary_number", sa.String(32), nullable=True),
        sa.Column("eff_start_date", sa.Date, nullable=True),
        sa.Column("eff_end_date", sa.Date, nullable=True),
        sa.Column("curr_ind", sa.String(1), nullable=True),
        sa.UniqueConstraint(
            "member_id", "version", name="uq_members_member_id_version",
        ),
    )


def downgrade() -> None:
    op.drop_table("members")
