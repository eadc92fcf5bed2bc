"""FAQ schemas"""

from typing import List, Optional
from uuid import UUID

from pydantic import Field

from backend.app.models.faq import FAQCategory
from backend.app.schemas.common import CamelModel, UTCDateTime


class FAQResponse(CamelModel):
    id: UUID
    question: str
    answer: str
    category: FAQCategory
    tags: List[str]
    is_active: bool
    is_featured: bool
    sort_order: int
    view_count: int
    helpful_count: int
    not_helpful_count: int
    created_by: Optional[UUID] = None
    last_updated_by: Optional[UUID] = None
    created_at: UTCDateTime
    updated_at: UTCDateTime


class FAQCreate(CamelModel):
    question: str = Field(..., min_length=5, max_length=500)
    answer: str = Field(..., min_length=1, max_length=5000)
    category: FAQCategory = FAQCategory.GENERAL
    tags: List[str] = Field(default_factory=list, max_length=20)
    is_active: bool = True
    is_featured: bool = False
    sort_order: int = 0


class FAQUpdate(CamelModel):
    question: Optional[str] = Field(None, min_length=5, max_length=500)
    answer: Optional[str] = Field(None, min_length=1, max_length=5000)
    category: Optional[FAQCategory] = None
    tags: Optional[List[str]] = Field(None, max_length=20)
    is_active: Optional[bool] = None
    is_featured: Optional[bool] = None
    sort_order: Optional[int] = None


class FAQBulkUpdate(CamelModel):
    is_active: Optional[bool] = None
    is_featured: Optional[bool] = None
    sort_order: Optional[int] = None
    category: Optional[FAQCategory] = None
