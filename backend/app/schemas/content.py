"""Content schemas"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from backend.app.models.content import ContentStatus, ContentType
from backend.app.schemas.common import CamelModel, UTCDateTime

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


class ContentResponse(CamelModel):
    id: UUID
    title: str
    slug: str
    type: ContentType
    body: str
    excerpt: Optional[str] = None
    featured_image: Optional[str] = None
    tags: List[str]
    status: ContentStatus
    is_active: bool
    is_featured: bool
    is_public: bool
    publish_date: UTCDateTime
    sort_order: int
    view_count: int
    author_id: Optional[UUID] = None
    last_updated_by: Optional[UUID] = None
    created_at: UTCDateTime
    updated_at: UTCDateTime


class ContentCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    slug: Optional[str] = Field(None, max_length=220, pattern=SLUG_PATTERN)
    type: ContentType = ContentType.PAGE
    body: str = Field(..., min_length=1)
    excerpt: Optional[str] = Field(None, max_length=500)
    featured_image: Optional[str] = Field(None, max_length=500)
    tags: List[str] = Field(default_factory=list, max_length=20)
    status: ContentStatus = ContentStatus.DRAFT
    is_featured: bool = False
    is_public: bool = True
    publish_date: Optional[datetime] = None
    sort_order: int = 0


class ContentUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    slug: Optional[str] = Field(None, max_length=220, pattern=SLUG_PATTERN)
    type: Optional[ContentType] = None
    body: Optional[str] = Field(None, min_length=1)
    excerpt: Optional[str] = Field(None, max_length=500)
    featured_image: Optional[str] = Field(None, max_length=500)
    tags: Optional[List[str]] = Field(None, max_length=20)
    status: Optional[ContentStatus] = None
    is_active: Optional[bool] = None
    is_featured: Optional[bool] = None
    is_public: Optional[bool] = None
    publish_date: Optional[datetime] = None
    sort_order: Optional[int] = None


class ContentBulkUpdate(CamelModel):
    status: Optional[ContentStatus] = None
    is_active: Optional[bool] = None
    is_featured: Optional[bool] = None
    is_public: Optional[bool] = None
    sort_order: Optional[int] = None
