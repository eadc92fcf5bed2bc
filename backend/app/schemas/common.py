"""Response envelope and schemas shared by every resource"""

from datetime import datetime
from typing import Annotated, Any, Dict, Generic, List, Optional, TypeVar
from uuid import UUID

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from backend.app.core.pagination import PageInfo
from backend.app.models.base import ensure_utc

T = TypeVar("T")

# Datetimes read back from SQLite come without tzinfo
UTCDateTime = Annotated[datetime, AfterValidator(ensure_utc)]


class CamelModel(BaseModel):
    """Base schema using camelCase names on the wire"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ErrorDetail(CamelModel):
    field: Optional[str] = None
    message: str
    type: Optional[str] = None


class PaginationMeta(CamelModel):
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    has_next_page: bool
    has_prev_page: bool

    @classmethod
    def from_info(cls, info: PageInfo) -> "PaginationMeta":
        return cls(
            current_page=info.current_page,
            total_pages=info.total_pages,
            total_items=info.total_items,
            items_per_page=info.items_per_page,
            has_next_page=info.has_next_page,
            has_prev_page=info.has_prev_page,
        )


class ApiResponse(CamelModel, Generic[T]):
    """Envelope wrapping every API response"""
    success: bool = True
    message: Optional[str] = None
    data: Optional[T] = None
    pagination: Optional[PaginationMeta] = None
    errors: Optional[List[ErrorDetail]] = None


class BulkUpdateRequest(CamelModel):
    """Apply the same field updates to many rows"""
    ids: List[UUID] = Field(..., min_length=1, max_length=1000)
    updates: Dict[str, Any] = Field(..., min_length=1)


class BulkUpdateResponse(CamelModel):
    matched_count: int
    modified_count: int

