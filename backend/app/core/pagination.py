"""Pagination and sorting shared by every list endpoint"""

import enum
import math
from dataclasses import dataclass
from typing import Callable, Generic, List, Sequence, TypeVar

from fastapi import Query

from backend.app.core.exceptions import ValidationException

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


class SortOrder(str, enum.Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class ListParams:
    """Validated page window and ordering for a list query"""
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    sort_by: str = "createdAt"
    sort_order: SortOrder = SortOrder.DESC

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class PageInfo:
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    has_next_page: bool
    has_prev_page: bool

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "PageInfo":
        total_pages = math.ceil(total / limit) if limit else 0
        return cls(
            current_page=page,
            total_pages=total_pages,
            total_items=total,
            items_per_page=limit,
            has_next_page=page < total_pages,
            has_prev_page=page > 1,
        )


@dataclass
class Page(Generic[T]):
    items: List[T]
    info: PageInfo


def validate_sort_field(sort_by: str, allowed: Sequence[str]) -> str:
    """Reject sort fields outside the resource's allow-list"""
    if sort_by not in allowed:
        raise ValidationException(
            "Validation errors",
            errors=[{
                "field": "sortBy",
                "message": f"Invalid sort field: {sort_by}. Allowed: {', '.join(allowed)}",
                "type": "value_error",
            }],
        )
    return sort_by


def list_params(
    sort_fields: Sequence[str],
    default_sort: str = "createdAt",
    default_order: SortOrder = SortOrder.DESC,
) -> Callable[..., ListParams]:
    """
    Build a FastAPI dependency parsing page/limit/sortBy/sortOrder

    Args:
        sort_fields: Wire names accepted for sortBy
        default_sort: sortBy used when the parameter is omitted
        default_order: sortOrder used when the parameter is omitted

    Returns:
        Dependency callable producing ListParams
    """
    allowed = tuple(sort_fields)

    def dependency(
        page: int = Query(DEFAULT_PAGE, ge=1, description="Page number"),
        limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT, description="Items per page"),
        sort_by: str = Query(default_sort, alias="sortBy"),
        sort_order: SortOrder = Query(default_order, alias="sortOrder"),
    ) -> ListParams:
        validate_sort_field(sort_by, allowed)
        return ListParams(page=page, limit=limit, sort_by=sort_by, sort_order=sort_order)

    return dependency
