"""Admin Category Routes - authenticated CRUD for categories.

Invariants:
    - Every route requires a valid bearer credential (router-level dependency)
    - Deleting a category detaches it from every post; posts are kept
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from inkwell.api.dependencies import require_admin
from inkwell.core.domain_types import CategoryId
from inkwell.infrastructure.database import get_db
from inkwell.schemas.category import (
    CategoryEnvelope, CategoryListEnvelope, CategoryResponse, CategoryWrite,
)
from inkwell.schemas.post import CreatedEnvelope, StatusEnvelope
from inkwell.services.category_repository import CategoryRepository

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/admin/categories", tags=["admin-categories"],
    dependencies=[Depends(require_admin)],
)


@router.get("", response_model=CategoryListEnvelope)
async def list_categories(db: AsyncSession = Depends(get_db)):
    categories = await CategoryRepository(db).list_all()
    return CategoryListEnvelope(
        categories=[CategoryResponse.model_validate(c) for c in categories],
    )


@router.post(
    "", response_model=CreatedEnvelope, status_code=status.HTTP_201_CREATED,
)
async def create_category(body: CategoryWrite, db: AsyncSession = Depends(get_db)):
    category = await CategoryRepository(db).create(body)
    return CreatedEnvelope(id=category.id)


@router.get("/{category_id}", response_model=CategoryEnvelope)
async def get_category(category_id: int, db: AsyncSession = Depends(get_db)):
    category = await CategoryRepository(db).get(CategoryId(category_id))
    return CategoryEnvelope(category=CategoryResponse.model_validate(category))


@router.put("/{category_id}", response_model=CategoryEnvelope)
async def update_category(
    category_id: int, body: CategoryWrite, db: AsyncSession = Depends(get_db),
):
    category = await CategoryRepository(db).update(CategoryId(category_id), body)
    return CategoryEnvelope(category=CategoryResponse.model_validate(category))


@router.delete("/{category_id}", response_model=StatusEnvelope)
async def delete_category(category_id: int, db: AsyncSession = Depends(get_db)):
    await CategoryRepository(db).delete(CategoryId(category_id))
    return StatusEnvelope()
