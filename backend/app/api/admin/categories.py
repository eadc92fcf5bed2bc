"""Admin category management API endpoints"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.api.deps import bulk_response, get_stats_service, page_response
from backend.app.core.database import get_db
from backend.app.core.logging import get_logger
from backend.app.core.pagination import ListParams, SortOrder, list_params
from backend.app.core.security import PermissionChecker
from backend.app.models.admin import Admin, Permission
from backend.app.models.category import Category
from backend.app.repositories.category_repository import CategoryRepository
from backend.app.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from backend.app.schemas.common import ApiResponse, BulkUpdateRequest, BulkUpdateResponse
from backend.app.services.stats_service import StatsService

logger = get_logger(__name__)

router = APIRouter()

require_manage_categories = PermissionChecker(Permission.MANAGE_CATEGORIES)


@router.get("", response_model=ApiResponse[List[CategoryResponse]])
async def list_categories(
    params: ListParams = Depends(
        list_params(CategoryRepository.sort_fields(), default_sort="sortOrder", default_order=SortOrder.ASC)
    ),
    search: Optional[str] = Query(None, max_length=100),
    is_active: Optional[bool] = Query(None, alias="isActive"),
    current_admin: Admin = Depends(require_manage_categories),
    db: AsyncSession = Depends(get_db)
):
    filters = []
    if is_active is not None:
        filters.append(Category.is_active.is_(is_active))

    page = await CategoryRepository(db).find_page(params, filters, search)
    return page_response(page, CategoryResponse)


@router.get("/stats/overview", response_model=ApiResponse[dict])
async def category_stats(
    current_admin: Admin = Depends(require_manage_categories),
    stats: StatsService = Depends(get_stats_service)
):
    overview = await stats.overview_counts(Category, {
        "total": [],
        "active": [Category.is_active.is_(True)],
        "featured": [Category.is_featured.is_(True)],
        "withJobs": [Category.job_count > 0],
    })
    return ApiResponse(data={"overview": overview})


@router.put("/bulk-update", response_model=ApiResponse[BulkUpdateResponse])
async def bulk_update_categories(
    request: BulkUpdateRequest,
    current_admin: Admin = Depends(require_manage_categories),
    db: AsyncSession = Depends(get_db)
):
    """
    Bulk update categories

    **Allowed fields:** isActive, isFeatured, sortOrder
    """
    result = await CategoryRepository(db).bulk_update(request.ids, request.updates)
    await db.commit()
    return bulk_response(result, "categories")


@router.get("/{category_id}", response_model=ApiResponse[CategoryResponse])
async def get_category(
    category_id: UUID,
    current_admin: Admin = Depends(require_manage_categories),
    db: AsyncSession = Depends(get_db)
):
    category = await CategoryRepository(db).get_or_404(category_id)
    return ApiResponse(data=CategoryResponse.model_validate(category))


@router.post("", response_model=ApiResponse[CategoryResponse], status_code=status.HTTP_201_CREATED)
async def create_category(
    category_data: CategoryCreate,
    current_admin: Admin = Depends(require_manage_categories),
    db: AsyncSession = Depends(get_db)
):
    """Create a category; the slug is derived from the name"""
    category = await CategoryRepository(db).create(category_data.model_dump())
    await db.commit()
    return ApiResponse(message="Category created successfully", data=CategoryResponse.model_validate(category))


@router.put("/{category_id}", response_model=ApiResponse[CategoryResponse])
async def update_category(
    category_id: UUID,
    category_data: CategoryUpdate,
    current_admin: Admin = Depends(require_manage_categories),
    db: AsyncSession = Depends(get_db)
):
    repo = CategoryRepository(db)
    category = await repo.get_or_404(category_id)
    category = await repo.update(category, category_data.model_dump(exclude_none=True))
    await db.commit()
    return ApiResponse(message="Category updated successfully", data=CategoryResponse.model_validate(category))


@router.delete("/{category_id}", response_model=ApiResponse)
async def delete_category(
    category_id: UUID,
    current_admin: Admin = Depends(require_manage_categories),
    db: AsyncSession = Depends(get_db)
):
    """Delete a category; refused while any job references it"""
    repo = CategoryRepository(db)
    category = await repo.get_or_404(category_id)
    await repo.delete(category)
    await db.commit()
    logger.info(f"Admin {current_admin.id} deleted category {category_id}")
    return ApiResponse(message="Category deleted successfully")


@router.patch("/{category_id}/update-job-count", response_model=ApiResponse[CategoryResponse])
async def update_category_job_count(
    category_id: UUID,
    current_admin: Admin = Depends(require_manage_categories),
    db: AsyncSession = Depends(get_db)
):
    """Recount the jobs in a category"""
    repo = CategoryRepository(db)
    category = await repo.refresh_job_count(await repo.get_or_404(category_id))
    await db.commit()
    return ApiResponse(message="Job count updated successfully", data=CategoryResponse.model_validate(category))
