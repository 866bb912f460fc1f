"""Category Repository - persistence for categories.

Invariants:
    - Deleting a category removes its memberships first; the posts remain
    - Missing categories raise ResourceNotFoundError
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.core.domain_types import CategoryId
from inkwell.core.errors import ResourceNotFoundError
from inkwell.models.category import Category
from inkwell.models.post_category import PostCategory
from inkwell.schemas.category import CategoryWrite

logger = logging.getLogger(__name__)


class CategoryRepository:
    """Category CRUD against one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> list[Category]:
        """All categories, newest first."""
        result = await self.db.execute(
            select(Category).order_by(Category.created_at.desc(), Category.id.desc()),
        )
        return list(result.scalars().all())

    async def get(self, category_id: CategoryId) -> Category:
        category = await self.db.get(Category, category_id)
        if category is None:
            raise ResourceNotFoundError("Category", str(category_id))
        return category

    async def create(self, body: CategoryWrite) -> Category:
        category = Category(name=body.name)
        self.db.add(category)
        await self.db.commit()
        await self.db.refresh(category)
        logger.info("Category created", extra={"category_id": category.id})
        return category

    async def update(self, category_id: CategoryId, body: CategoryWrite) -> Category:
        category = await self.get(category_id)
        category.name = body.name
        await self.db.commit()
        await self.db.refresh(category)
        logger.info("Category updated", extra={"category_id": category_id})
        return category

    async def delete(self, category_id: CategoryId) -> None:
        category = await self.get(category_id)
        await self.db.execute(
            delete(PostCategory).where(PostCategory.category_id == category_id),
        )
        await self.db.delete(category)
        await self.db.commit()
        logger.info("Category deleted", extra={"category_id": category_id})
