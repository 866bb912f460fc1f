"""Post Schemas - request and response contracts for the post endpoints.

Invariants:
    - PostWrite.title: 1-50 chars, PostWrite.content: 1-1000 chars, both non-blank
    - PostWrite.thumbnail_image_key is a storage key; URLs are rejected
    - categories may be empty here: the at-least-one rule lives in form validation
    - PostResponse embeds each membership's Category

Design Decisions:
    - categories as [{id}] objects (not bare ints): mirrors the admin client payload
"""

from datetime import datetime
from typing import Literal

from pydantic import Field, field_validator

from inkwell.schemas.common import CamelModel
from inkwell.schemas.category import CategoryResponse


class CategoryRef(CamelModel):
    id: int


class PostWrite(CamelModel):
    """Create/update body: {title, content, thumbnailImageKey, categories: [{id}]}."""
    title: str = Field(min_length=1, max_length=50)
    content: str = Field(min_length=1, max_length=1000)
    thumbnail_image_key: str | None = Field(None, max_length=255)
    categories: list[CategoryRef] = Field(default_factory=list)

    @field_validator("title", "content")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("value cannot be empty or whitespace")
        return v

    @field_validator("thumbnail_image_key")
    @classmethod
    def reject_url(cls, v: str | None) -> str | None:
        if v is not None and "://" in v:
            raise ValueError("thumbnailImageKey must be a storage key, not a URL")
        return v or None

    def category_ids(self) -> list[int]:
        """Distinct category ids in request order."""
        return list(dict.fromkeys(ref.id for ref in self.categories))


class PostCategoryResponse(CamelModel):
    id: int
    post_id: int
    category_id: int
    created_at: datetime
    updated_at: datetime
    category: CategoryResponse


class PostResponse(CamelModel):
    id: int
    title: str
    content: str
    thumbnail_image_key: str | None = None
    created_at: datetime
    updated_at: datetime
    post_categories: list[PostCategoryResponse] = Field(default_factory=list)


class PostEnvelope(CamelModel):
    status: Literal["OK"] = "OK"
    post: PostResponse


class PostListEnvelope(CamelModel):
    status: Literal["OK"] = "OK"
    posts: list[PostResponse]


class CreatedEnvelope(CamelModel):
    """Create response: the new row's id."""
    status: Literal["OK"] = "OK"
    id: int


class StatusEnvelope(CamelModel):
    status: Literal["OK"] = "OK"
