"""PostCategory ORM - join row linking one Post to one Category.

Invariants:
    - Existence of a row means the category is a member of the post
    - Both foreign keys cascade on delete; services also delete rows explicitly
      so SQLite (no FK enforcement by default) behaves like PostgreSQL
    - category is eagerly loaded: every post payload embeds its category names
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from inkwell.db.base import Base


class PostCategory(Base):
    __tablename__ = "post_categories"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    post_id: Mapped[int] = mapped_column(
        ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    category_id: Mapped[int] = mapped_column(
        ForeignKey("categories.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    post: Mapped["Post"] = relationship("Post", back_populates="post_categories")
    category: Mapped["Category"] = relationship(
        "Category", lazy="selectin",
    )
