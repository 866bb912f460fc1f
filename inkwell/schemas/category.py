"""Category Schemas - request and response contracts for /api/admin/categories.

Invariants:
    - CategoryWrite.name: 1-50 chars, non-blank after strip
"""

from datetime import datetime
from typing import Literal

from pydantic import Field, field_validator

from inkwell.schemas.common import CamelModel


class CategoryWrite(CamelModel):
    """Create/update body: {name}."""
    name: str = Field(min_length=1, max_length=50)

    @field_validator("name")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name cannot be empty or whitespace")
        return v


class CategoryResponse(CamelModel):
    id: int
    name: str
    created_at: datetime
    updated_at: datetime


class CategoryEnvelope(CamelModel):
    status: Literal["OK"] = "OK"
    category: CategoryResponse


class CategoryListEnvelope(CamelModel):
    status: Literal["OK"] = "OK"
    categories: list[CategoryResponse]
