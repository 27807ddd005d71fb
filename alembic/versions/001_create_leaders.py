"""Create leaders table.

Revision ID: 001_leaders
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_leaders"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "leaders",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("first_name", sa.String(200), nullable=False),
        sa.Column("last_name", sa.String(200), nullable=False),
        sa.Column("submitted", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("first_name", "last_name", name="uq_leaders_full_name"),
    )
    op.create_index("ix_leaders_submitted", "leaders", ["submitted", "id"])


def downgrade() -> None:
    op.drop_index("ix_leaders_submitted", table_name="leaders")
    op.drop_table("leaders")
