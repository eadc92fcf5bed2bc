"""Admin application review API endpoints"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.api.deps import bulk_response, get_stats_service, page_response
from backend.app.core.database import get_db
from backend.app.core.logging import get_logger
from backend.app.core.pagination import ListParams, list_params
from backend.app.core.security import PermissionChecker
from backend.app.models.admin import Admin, Permission
from backend.app.models.application import Application, ApplicationStatus
from backend.app.repositories.application_repository import ApplicationRepository
from backend.app.repositories.job_repository import JobRepository
from backend.app.schemas.application import (
    ApplicationDetailResponse,
    ApplicationNotesUpdate,
    ApplicationStatusUpdate,
)
from backend.app.schemas.common import ApiResponse, BulkUpdateRequest, BulkUpdateResponse
from backend.app.services.application_service import ApplicationService
from backend.app.services.stats_service import StatsService

logger = get_logger(__name__)

router = APIRouter()

require_manage_applications = PermissionChecker(Permission.MANAGE_APPLICATIONS)


async def get_application_service(db: AsyncSession = Depends(get_db)) -> ApplicationService:
    """Dependency to get application service"""
    return ApplicationService(ApplicationRepository(db), JobRepository(db))


@router.get("", response_model=ApiResponse[List[ApplicationDetailResponse]])
async def list_applications(
    params: ListParams = Depends(list_params(ApplicationRepository.sort_fields())),
    search: Optional[str] = Query(None, max_length=100),
    status: Optional[ApplicationStatus] = None,
    job_id: Optional[UUID] = Query(None, alias="jobId"),
    company_id: Optional[UUID] = Query(None, alias="companyId"),
    current_admin: Admin = Depends(require_manage_applications),
    db: AsyncSession = Depends(get_db)
):
    page = await ApplicationRepository(db).list_applications(
        params, search=search, status=status, job_id=job_id, company_id=company_id
    )
    return page_response(page, ApplicationDetailResponse)


@router.get("/stats/overview", response_model=ApiResponse[dict])
async def application_stats(
    current_admin: Admin = Depends(require_manage_applications),
    stats: StatsService = Depends(get_stats_service)
):
    overview = await stats.overview_counts(Application, {
        "total": [],
        **{
            status.value: [Application.status == status]
            for status in ApplicationStatus
        },
    })
    return ApiResponse(data={
        "overview": overview,
        "byStatus": await stats.count_by_field(Application, "status"),
        "monthlyApplications": await stats.monthly_counts(Application, "applied_at", 12),
    })


@router.put("/bulk-update", response_model=ApiResponse[BulkUpdateResponse])
async def bulk_update_applications(
    request: BulkUpdateRequest,
    current_admin: Admin = Depends(require_manage_applications),
    db: AsyncSession = Depends(get_db)
):
    """
    Bulk update applications

    **Allowed fields:** status, notes
    """
    result = await ApplicationRepository(db).bulk_update(request.ids, request.updates)
    await db.commit()
    return bulk_response(result, "applications")


@router.get("/{application_id}", response_model=ApiResponse[ApplicationDetailResponse])
async def get_application(
    application_id: UUID,
    current_admin: Admin = Depends(require_manage_applications),
    db: AsyncSession = Depends(get_db)
):
    application = await ApplicationRepository(db).get_or_404(application_id)
    return ApiResponse(data=ApplicationDetailResponse.model_validate(application))


@router.patch("/{application_id}/status", response_model=ApiResponse[ApplicationDetailResponse])
async def update_application_status(
    application_id: UUID,
    status_update: ApplicationStatusUpdate,
    current_admin: Admin = Depends(require_manage_applications),
    application_service: ApplicationService = Depends(get_application_service),
    db: AsyncSession = Depends(get_db)
):
    """Move an application to a new status; records the reviewing admin and time"""
    application = await ApplicationRepository(db).get_or_404(application_id)
    application = await application_service.update_status(
        application, status_update.status, current_admin.id, status_update.notes
    )
    await db.commit()
    return ApiResponse(
        message="Application status updated successfully",
        data=ApplicationDetailResponse.model_validate(application),
    )


@router.patch("/{application_id}/notes", response_model=ApiResponse[ApplicationDetailResponse])
async def update_application_notes(
    application_id: UUID,
    notes_update: ApplicationNotesUpdate,
    current_admin: Admin = Depends(require_manage_applications),
    db: AsyncSession = Depends(get_db)
):
    repo = ApplicationRepository(db)
    application = await repo.get_or_404(application_id)
    await repo.update(application, {"notes": notes_update.notes})
    await db.commit()
    application = await repo.get_or_404(application_id)
    return ApiResponse(
        message="Application notes updated successfully",
        data=ApplicationDetailResponse.model_validate(application),
    )


@router.delete("/{application_id}", response_model=ApiResponse)
async def delete_application(
    application_id: UUID,
    current_admin: Admin = Depends(require_manage_applications),
    db: AsyncSession = Depends(get_db)
):
    repo = ApplicationRepository(db)
    application = await repo.get_or_404(application_id)
    await repo.delete(application)
    await db.commit()
    logger.info(f"Admin {current_admin.id} deleted application {application_id}")
    return ApiResponse(message="Application deleted successfully")
