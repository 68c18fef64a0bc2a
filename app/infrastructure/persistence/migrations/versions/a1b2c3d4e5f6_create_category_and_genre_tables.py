"""create category, genre and genre_category tables

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-19

Catalog aggregates. deleted_at marks inactive rows; genre_category keeps
the ordered category references of a genre.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "a1b2c3d4e5f6"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "category",
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("active", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_category_name", "category", ["name"], unique=False)
    op.create_index("ix_category_deleted_at", "category", ["deleted_at"], unique=False)

    op.create_table(
        "genre",
        sa.Column("id", sa.String(length=64), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_genre_name", "genre", ["name"], unique=False)
    op.create_index("ix_genre_deleted_at", "genre", ["deleted_at"], unique=False)

    op.create_table(
        "genre_category",
        sa.Column("genre_id", sa.String(length=64), nullable=False),
        sa.Column("category_id", sa.String(length=64), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("genre_id", "category_id"),
        sa.ForeignKeyConstraint(["genre_id"], ["genre.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["category_id"], ["category.id"], ondelete="CASCADE"),
    )
    op.create_index(
        "ix_genre_category_category_id",
        "genre_category",
        ["category_id"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index("ix_genre_category_category_id", table_name="genre_category")
    op.drop_table("genre_category")
    op.drop_index("ix_genre_deleted_at", table_name="genre")
    op.drop_index("ix_genre_name", table_name="genre")
    op.drop_table("genre")
    op.drop_index("ix_category_deleted_at", table_name="category")
    op.drop_index("ix_category_name", table_name="category")
    op.drop_table("category")
