"""Admin content management API endpoints"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.api.deps import bulk_response, get_stats_service, page_response
from backend.app.core.database import get_db
from backend.app.core.logging import get_logger
from backend.app.core.pagination import ListParams, list_params
from backend.app.core.security import PermissionChecker
from backend.app.models.admin import Admin, Permission
from backend.app.models.base import utcnow
from backend.app.models.content import Content, ContentStatus, ContentType
from backend.app.repositories.content_repository import ContentRepository
from backend.app.schemas.common import ApiResponse, BulkUpdateRequest, BulkUpdateResponse
from backend.app.schemas.content import ContentCreate, ContentResponse, ContentUpdate
from backend.app.services.stats_service import StatsService

logger = get_logger(__name__)

router = APIRouter()

require_manage_content = PermissionChecker(Permission.MANAGE_CONTENT)


@router.get("", response_model=ApiResponse[List[ContentResponse]])
async def list_content(
    params: ListParams = Depends(list_params(ContentRepository.sort_fields())),
    search: Optional[str] = Query(None, max_length=100),
    type: Optional[ContentType] = None,
    status: Optional[ContentStatus] = None,
    is_active: Optional[bool] = Query(None, alias="isActive"),
    current_admin: Admin = Depends(require_manage_content),
    db: AsyncSession = Depends(get_db)
):
    page = await ContentRepository(db).list_content(
        params, search=search, type=type, status=status, is_active=is_active
    )
    return page_response(page, ContentResponse)


@router.get("/stats/overview", response_model=ApiResponse[dict])
async def content_stats(
    current_admin: Admin = Depends(require_manage_content),
    stats: StatsService = Depends(get_stats_service)
):
    overview = await stats.overview_counts(Content, {
        "total": [],
        "published": [Content.status == ContentStatus.PUBLISHED],
        "draft": [Content.status == ContentStatus.DRAFT],
        "archived": [Content.status == ContentStatus.ARCHIVED],
        "featured": [Content.is_featured.is_(True)],
    })
    return ApiResponse(data={
        "overview": overview,
        "byType": await stats.count_by_field(Content, "type"),
    })


@router.put("/bulk-update", response_model=ApiResponse[BulkUpdateResponse])
async def bulk_update_content(
    request: BulkUpdateRequest,
    current_admin: Admin = Depends(require_manage_content),
    db: AsyncSession = Depends(get_db)
):
    """
    Bulk update content

    **Allowed fields:** status, isActive, isFeatured, isPublic, sortOrder
    """
    result = await ContentRepository(db).bulk_update(request.ids, request.updates)
    await db.commit()
    return bulk_response(result, "content items")


@router.get("/{content_id}", response_model=ApiResponse[ContentResponse])
async def get_content(
    content_id: UUID,
    current_admin: Admin = Depends(require_manage_content),
    db: AsyncSession = Depends(get_db)
):
    content = await ContentRepository(db).get_or_404(content_id)
    return ApiResponse(data=ContentResponse.model_validate(content))


@router.post("", response_model=ApiResponse[ContentResponse], status_code=status.HTTP_201_CREATED)
async def create_content(
    content_data: ContentCreate,
    current_admin: Admin = Depends(require_manage_content),
    db: AsyncSession = Depends(get_db)
):
    """Create a content item; the slug defaults to one derived from the title"""
    content = await ContentRepository(db).create({
        **content_data.model_dump(),
        "author_id": current_admin.id,
        "last_updated_by": current_admin.id,
    })
    await db.commit()
    return ApiResponse(message="Content created successfully", data=ContentResponse.model_validate(content))


@router.put("/{content_id}", response_model=ApiResponse[ContentResponse])
async def update_content(
    content_id: UUID,
    content_data: ContentUpdate,
    current_admin: Admin = Depends(require_manage_content),
    db: AsyncSession = Depends(get_db)
):
    repo = ContentRepository(db)
    content = await repo.get_or_404(content_id)
    content = await repo.update(content, {
        **content_data.model_dump(exclude_none=True),
        "last_updated_by": current_admin.id,
    })
    await db.commit()
    return ApiResponse(message="Content updated successfully", data=ContentResponse.model_validate(content))


@router.delete("/{content_id}", response_model=ApiResponse)
async def delete_content(
    content_id: UUID,
    current_admin: Admin = Depends(require_manage_content),
    db: AsyncSession = Depends(get_db)
):
    repo = ContentRepository(db)
    await repo.delete(await repo.get_or_404(content_id))
    await db.commit()
    return ApiResponse(message="Content deleted successfully")


@router.patch("/{content_id}/publish", response_model=ApiResponse[ContentResponse])
async def publish_content(
    content_id: UUID,
    current_admin: Admin = Depends(require_manage_content),
    db: AsyncSession = Depends(get_db)
):
    """Publish now: status becomes published and the publish date is set to the current time"""
    repo = ContentRepository(db)
    content = await repo.get_or_404(content_id)
    content = await repo.update(content, {
        "status": ContentStatus.PUBLISHED,
        "publish_date": utcnow(),
        "last_updated_by": current_admin.id,
    })
    await db.commit()
    return ApiResponse(message="Content published successfully", data=ContentResponse.model_validate(content))


@router.patch("/{content_id}/archive", response_model=ApiResponse[ContentResponse])
async def archive_content(
    content_id: UUID,
    current_admin: Admin = Depends(require_manage_content),
    db: AsyncSession = Depends(get_db)
):
    repo = ContentRepository(db)
    content = await repo.get_or_404(content_id)
    content = await repo.update(content, {
        "status": ContentStatus.ARCHIVED,
        "last_updated_by": current_admin.id,
    })
    await db.commit()
    return ApiResponse(message="Content archived successfully", data=ContentResponse.model_validate(content))
