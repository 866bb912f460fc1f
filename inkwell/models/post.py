"""Post ORM - a blog article, owner of its category memberships.

Invariants:
    - id is an integer primary key (autoincrement)
    - title <= 50 chars, content <= 1000 chars (schema and form validation enforce)
    - thumbnail_image_key is an opaque storage key, never a URL
    - post_categories ordered by join-row id so membership order is stable

Design Decisions:
    - cascade delete-orphan on post_categories: replacing the list on update
      removes the old join rows without a separate DELETE
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inkwell.db.base import Base


class Post(Base):
    """Blog post aggregate root."""
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(50), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    thumbnail_image_key: Mapped[str | None] = mapped_column(
        String(255), nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    post_categories: Mapped[list["PostCategory"]] = relationship(
        "PostCategory", back_populates="post",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="PostCategory.id",
    )
