"""ORM Models - SQLAlchemy declarative models for posts, categories and their join.

Invariants:
    - All models inherit from Base (db/base.py)
    - Post is the aggregate root for memberships; Category is independent

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from inkwell.models.post import Post  # noqa: F401
from inkwell.models.category import Category  # noqa: F401
from inkwell.models.post_category import PostCategory  # noqa: F401
