"""Initial schema - posts, categories, post_categories.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "posts",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(50), nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("thumbnail_image_key", sa.String(255), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "categories",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(50), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "post_categories",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "post_id", sa.Integer,
            sa.ForeignKey("posts.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column(
            "category_id", sa.Integer,
            sa.ForeignKey("categories.id", ondelete="CASCADE"), nullable=False,
        ),
        *_timestamps(),
    )

    op.create_index("ix_posts_created_at", "posts", ["created_at"])
    op.create_index("ix_post_categories_post_id", "post_categories", ["post_id"])
    op.create_index("ix_post_categories_category_id", "post_categories", ["category_id"])


def downgrade() -> None:
    op.drop_index("ix_post_categories_category_id", table_name="post_categories")
    op.drop_index("ix_post_categories_post_id", table_name="post_categories")
    op.drop_index("ix_posts_created_at", table_name="posts")
    op.drop_table("post_categories")
    op.drop_table("categories")
    op.drop_table("posts")
