"""Initial schema — users, clubs.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(200), nullable=True),
        sa.Column("email", sa.String(320), nullable=True, unique=True),
        sa.Column("image", sa.Text, nullable=True),
        sa.Column("password", sa.Text, nullable=True),
        sa.Column("secret", sa.String(255), nullable=True, unique=True),
        sa.Column("permissions", sa.JSON, nullable=False),
        sa.Column("roles", sa.JSON, nullable=False),
    )

    op.create_table(
        "clubs",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("description", sa.String(100), nullable=False),
        sa.Column("linktree", sa.String(100), nullable=False, server_default=""),
        sa.Column(
            "image", sa.String(500), nullable=False,
            server_default="/images/default-club-image.png",
        ),
    )


def downgrade() -> None:
    op.drop_table("clubs")
    op.drop_table("users")
