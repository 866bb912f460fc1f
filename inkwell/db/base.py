"""Declarative base shared by the posts, categories and post_categories tables.

Alembic's env.py reads Base.metadata, so every model module must be imported
(inkwell/models/__init__.py does this) before autogenerate runs.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass
