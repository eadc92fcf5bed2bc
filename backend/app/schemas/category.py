"""Category schemas"""

from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator

from backend.app.schemas.common import CamelModel, UTCDateTime


class CategoryResponse(CamelModel):
    id: UUID
    name: str
    slug: str
    description: Optional[str] = None
    icon: str
    color: str
    is_active: bool
    is_featured: bool
    sort_order: int
    job_count: int
    created_at: UTCDateTime
    updated_at: UTCDateTime


class CategoryCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=50)
    description: Optional[str] = Field(None, max_length=500)
    icon: str = Field("briefcase", max_length=50)
    color: str = Field("#667eea", pattern=r"^#[0-9A-Fa-f]{6}$")
    is_active: bool = True
    is_featured: bool = False
    sort_order: int = 0

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("Category name cannot be empty")
        return v.strip()


class CategoryUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=50)
    description: Optional[str] = Field(None, max_length=500)
    icon: Optional[str] = Field(None, max_length=50)
    color: Optional[str] = Field(None, pattern=r"^#[0-9A-Fa-f]{6}$")
    is_active: Optional[bool] = None
    is_featured: Optional[bool] = None
    sort_order: Optional[int] = None


class CategoryBulkUpdate(CamelModel):
    is_active: Optional[bool] = None
    is_featured: Optional[bool] = None
    sort_order: Optional[int] = None
