"""Post Repository - persistence for posts and their category memberships.

Invariants:
    - Every read eager-loads post_categories and each membership's Category
    - Writes verify all referenced category ids exist before touching the post
    - update() replaces the membership set wholesale (delete-orphan drops old rows)
    - Missing posts raise ResourceNotFoundError; callers never see None

Design Decisions:
    - populate_existing on reloads: after a write the identity map still holds
      the pre-commit collections, and the response must show the new ones
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from inkwell.core.domain_types import PostId
from inkwell.core.errors import ResourceNotFoundError, UnknownCategoryError
from inkwell.models.category import Category
from inkwell.models.post import Post
from inkwell.models.post_category import PostCategory
from inkwell.schemas.post import PostWrite

logger = logging.getLogger(__name__)


def _post_query():
    return select(Post).options(
        selectinload(Post.post_categories).selectinload(PostCategory.category),
    )


class PostRepository:
    """Post CRUD against one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> list[Post]:
        """All posts, newest first."""
        result = await self.db.execute(
            _post_query().order_by(Post.created_at.desc(), Post.id.desc()),
        )
        return list(result.scalars().all())

    async def get(self, post_id: PostId, refresh: bool = False) -> Post:
        query = _post_query().where(Post.id == post_id)
        if refresh:
            query = query.execution_options(populate_existing=True)
        result = await self.db.execute(query)
        post = result.scalar_one_or_none()
        if post is None:
            raise ResourceNotFoundError("Post", str(post_id))
        return post

    async def create(self, body: PostWrite) -> Post:
        category_ids = body.category_ids()
        await self._ensure_categories_exist(category_ids)
        post = Post(
            title=body.title,
            content=body.content,
            thumbnail_image_key=body.thumbnail_image_key,
            post_categories=[PostCategory(category_id=cid) for cid in category_ids],
        )
        self.db.add(post)
        await self.db.commit()
        logger.info("Post created", extra={"post_id": post.id})
        return await self.get(PostId(post.id), refresh=True)

    async def update(self, post_id: PostId, body: PostWrite) -> Post:
        post = await self.get(post_id)
        category_ids = body.category_ids()
        await self._ensure_categories_exist(category_ids)
        post.title = body.title
        post.content = body.content
        post.thumbnail_image_key = body.thumbnail_image_key
        post.post_categories = [
            PostCategory(category_id=cid) for cid in category_ids
        ]
        await self.db.commit()
        logger.info("Post updated", extra={"post_id": post_id})
        return await self.get(post_id, refresh=True)

    async def delete(self, post_id: PostId) -> None:
        post = await self.get(post_id)
        await self.db.delete(post)
        await self.db.commit()
        logger.info("Post deleted", extra={"post_id": post_id})

    async def _ensure_categories_exist(self, category_ids: list[int]) -> None:
        if not category_ids:
            return
        result = await self.db.execute(
            select(Category.id).where(Category.id.in_(category_ids)),
        )
        found = set(result.scalars().all())
        missing = [cid for cid in category_ids if cid not in found]
        if missing:
            raise UnknownCategoryError(missing)
