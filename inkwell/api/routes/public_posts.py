"""Public Post Routes - unauthenticated read access for the blog front page."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.core.domain_types import PostId
from inkwell.infrastructure.database import get_db
from inkwell.schemas.post import PostEnvelope, PostListEnvelope, PostResponse
from inkwell.services.post_repository import PostRepository

router = APIRouter(prefix="/api/posts", tags=["posts"])


@router.get("", response_model=PostListEnvelope)
async def list_posts(db: AsyncSession = Depends(get_db)):
    posts = await PostRepository(db).list_all()
    return PostListEnvelope(posts=[PostResponse.model_validate(p) for p in posts])


@router.get("/{post_id}", response_model=PostEnvelope)
async def get_post(post_id: int, db: AsyncSession = Depends(get_db)):
    post = await PostRepository(db).get(PostId(post_id))
    return PostEnvelope(post=PostResponse.model_validate(post))
