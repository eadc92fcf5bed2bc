"""Admin FAQ management API endpoints"""

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
from backend.app.models.faq import FAQ, FAQCategory
from backend.app.repositories.faq_repository import FAQRepository
from backend.app.schemas.common import ApiResponse, BulkUpdateRequest, BulkUpdateResponse
from backend.app.schemas.faq import FAQCreate, FAQResponse, FAQUpdate
from backend.app.services.stats_service import StatsService

logger = get_logger(__name__)

router = APIRouter()

require_manage_faqs = PermissionChecker(Permission.MANAGE_FAQS)


@router.get("", response_model=ApiResponse[List[FAQResponse]])
async def list_faqs(
    params: ListParams = Depends(
        list_params(FAQRepository.sort_fields(), default_sort="sortOrder", default_order=SortOrder.ASC)
    ),
    search: Optional[str] = Query(None, max_length=100),
    category: Optional[FAQCategory] = None,
    is_active: Optional[bool] = Query(None, alias="isActive"),
    is_featured: Optional[bool] = Query(None, alias="isFeatured"),
    current_admin: Admin = Depends(require_manage_faqs),
    db: AsyncSession = Depends(get_db)
):
    page = await FAQRepository(db).list_faqs(
        params, search=search, category=category, is_active=is_active, is_featured=is_featured
    )
    return page_response(page, FAQResponse)


@router.get("/stats/overview", response_model=ApiResponse[dict])
async def faq_stats(
    current_admin: Admin = Depends(require_manage_faqs),
    stats: StatsService = Depends(get_stats_service)
):
    overview = await stats.overview_counts(FAQ, {
        "total": [],
        "active": [FAQ.is_active.is_(True)],
        "featured": [FAQ.is_featured.is_(True)],
    })
    return ApiResponse(data={
        "overview": overview,
        "byCategory": await stats.count_by_field(FAQ, "category"),
    })


@router.put("/bulk-update", response_model=ApiResponse[BulkUpdateResponse])
async def bulk_update_faqs(
    request: BulkUpdateRequest,
    current_admin: Admin = Depends(require_manage_faqs),
    db: AsyncSession = Depends(get_db)
):
    """
    Bulk update FAQs

    **Allowed fields:** isActive, isFeatured, sortOrder, category
    """
    result = await FAQRepository(db).bulk_update(request.ids, request.updates)
    await db.commit()
    return bulk_response(result, "FAQs")


@router.get("/{faq_id}", response_model=ApiResponse[FAQResponse])
async def get_faq(
    faq_id: UUID,
    current_admin: Admin = Depends(require_manage_faqs),
    db: AsyncSession = Depends(get_db)
):
    faq = await FAQRepository(db).get_or_404(faq_id)
    return ApiResponse(data=FAQResponse.model_validate(faq))


@router.post("", response_model=ApiResponse[FAQResponse], status_code=status.HTTP_201_CREATED)
async def create_faq(
    faq_data: FAQCreate,
    current_admin: Admin = Depends(require_manage_faqs),
    db: AsyncSession = Depends(get_db)
):
    faq = await FAQRepository(db).create({
        **faq_data.model_dump(),
        "created_by": current_admin.id,
        "last_updated_by": current_admin.id,
    })
    await db.commit()
    return ApiResponse(message="FAQ created successfully", data=FAQResponse.model_validate(faq))


@router.put("/{faq_id}", response_model=ApiResponse[FAQResponse])
async def update_faq(
    faq_id: UUID,
    faq_data: FAQUpdate,
    current_admin: Admin = Depends(require_manage_faqs),
    db: AsyncSession = Depends(get_db)
):
    repo = FAQRepository(db)
    faq = await repo.get_or_404(faq_id)
    faq = await repo.update(faq, {
        **faq_data.model_dump(exclude_none=True),
        "last_updated_by": current_admin.id,
    })
    await db.commit()
    return ApiResponse(message="FAQ updated successfully", data=FAQResponse.model_validate(faq))


@router.delete("/{faq_id}", response_model=ApiResponse)
async def delete_faq(
    faq_id: UUID,
    current_admin: Admin = Depends(require_manage_faqs),
    db: AsyncSession = Depends(get_db)
):
    repo = FAQRepository(db)
    await repo.delete(await repo.get_or_404(faq_id))
    await db.commit()
    return ApiResponse(message="FAQ deleted successfully")


@router.patch("/{faq_id}/toggle-status", response_model=ApiResponse[FAQResponse])
async def toggle_faq_status(
    faq_id: UUID,
    current_admin: Admin = Depends(require_manage_faqs),
    db: AsyncSession = Depends(get_db)
):
    repo = FAQRepository(db)
    faq = await repo.get_or_404(faq_id)
    faq = await repo.update(faq, {"is_active": not faq.is_active, "last_updated_by": current_admin.id})
    await db.commit()

    state = "activated" if faq.is_active else "deactivated"
    return ApiResponse(message=f"FAQ {state} successfully", data=FAQResponse.model_validate(faq))


@router.patch("/{faq_id}/toggle-featured", response_model=ApiResponse[FAQResponse])
async def toggle_faq_featured(
    faq_id: UUID,
    current_admin: Admin = Depends(require_manage_faqs),
    db: AsyncSession = Depends(get_db)
):
    repo = FAQRepository(db)
    faq = await repo.get_or_404(faq_id)
    faq = await repo.update(faq, {"is_featured": not faq.is_featured, "last_updated_by": current_admin.id})
    await db.commit()

    state = "featured" if faq.is_featured else "unfeatured"
    return ApiResponse(message=f"FAQ {state} successfully", data=FAQResponse.model_validate(faq))
