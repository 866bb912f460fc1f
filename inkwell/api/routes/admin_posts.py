"""Admin Post Routes - authenticated CRUD for posts.

Invariants:
    - Every route requires a valid bearer credential (router-level dependency)
    - Request bodies are validated by PostWrite before any persistence call
    - Unknown category ids -> 400, missing post -> 404

Design Decisions:
    - POST returns only the new id: the client navigates to the list and
      refetches, it never renders the create response
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.api.dependencies import require_admin
from inkwell.core.domain_types import PostId
from inkwell.infrastructure.database import get_db
from inkwell.schemas.post import (
    CreatedEnvelope, PostEnvelope, PostListEnvelope, PostResponse,
    PostWrite, StatusEnvelope,
)
from inkwell.services.post_repository import PostRepository

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/admin/posts", tags=["admin-posts"],
    dependencies=[Depends(require_admin)],
)


@router.get("", response_model=PostListEnvelope)
async def list_posts(db: AsyncSession = Depends(get_db)):
    posts = await PostRepository(db).list_all()
    return PostListEnvelope(posts=[PostResponse.model_validate(p) for p in posts])


@router.post(
    "", response_model=CreatedEnvelope, status_code=status.HTTP_201_CREATED,
)
async def create_post(body: PostWrite, db: AsyncSession = Depends(get_db)):
    post = await PostRepository(db).create(body)
    return CreatedEnvelope(id=post.id)


@router.get("/{post_id}", response_model=PostEnvelope)
async def get_post(post_id: int, db: AsyncSession = Depends(get_db)):
    post = await PostRepository(db).get(PostId(post_id))
    return PostEnvelope(post=PostResponse.model_validate(post))


@router.put("/{post_id}", response_model=PostEnvelope)
async def update_post(
    post_id: int, body: PostWrite, db: AsyncSession = Depends(get_db),
):
    post = await PostRepository(db).update(PostId(post_id), body)
    return PostEnvelope(post=PostResponse.model_validate(post))


@router.delete("/{post_id}", response_model=StatusEnvelope)
async def delete_post(post_id: int, db: AsyncSession = Depends(get_db)):
    await PostRepository(db).delete(PostId(post_id))
    return StatusEnvelope()
