"""Portal job application API endpoints"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.api.deps import page_response
from backend.app.core.database import get_db
from backend.app.core.exceptions import AuthorizationException
from backend.app.core.logging import get_logger
from backend.app.core.pagination import ListParams, list_params
from backend.app.core.security import get_current_user, require_employer, require_job_seeker
from backend.app.models.application import ApplicationStatus
from backend.app.models.job import Job
from backend.app.models.user import User
from backend.app.repositories.application_repository import ApplicationRepository
from backend.app.repositories.job_repository import JobRepository
from backend.app.schemas.application import (
    ApplicationCreate,
    ApplicationDetailResponse,
    ApplicationStatusUpdate,
)
from backend.app.schemas.common import ApiResponse
from backend.app.services.application_service import ApplicationService
from backend.app.services.job_service import can_manage_job

logger = get_logger(__name__)

router = APIRouter()


async def get_application_service(db: AsyncSession = Depends(get_db)) -> ApplicationService:
    """Dependency to get application service"""
    return ApplicationService(ApplicationRepository(db), JobRepository(db))


async def get_posted_job(job_id: UUID, user: User, db: AsyncSession) -> Job:
    job = await JobRepository(db).get_or_404(job_id)
    if not can_manage_job(job, user):
        logger.warning(f"User {user.id} attempted to review applications for job {job_id}")
        raise AuthorizationException("Not authorized to manage applications for this job")
    return job


@router.post("", response_model=ApiResponse[ApplicationDetailResponse], status_code=status.HTTP_201_CREATED)
async def apply_for_job(
    application_data: ApplicationCreate,
    current_user: User = Depends(require_job_seeker),
    application_service: ApplicationService = Depends(get_application_service),
    db: AsyncSession = Depends(get_db)
):
    """
    Apply for a job

    **Requirements:**
    - Role must be user or premium
    - Job must be active and before its application deadline
    - One application per job and user; a second attempt returns 400
    """
    data = application_data.model_dump(exclude={"job_id"})
    application = await application_service.apply(current_user, application_data.job_id, data)
    await db.commit()

    return ApiResponse(
        message="Application submitted successfully",
        data=ApplicationDetailResponse.model_validate(application),
    )


@router.get("/my-applications", response_model=ApiResponse[List[ApplicationDetailResponse]])
async def my_applications(
    params: ListParams = Depends(list_params(ApplicationRepository.sort_fields(), default_sort="appliedAt")),
    status: Optional[ApplicationStatus] = None,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    page = await ApplicationRepository(db).list_applications(
        params, status=status, applicant_id=current_user.id
    )
    return page_response(page, ApplicationDetailResponse)


@router.put("/{application_id}/withdraw", response_model=ApiResponse[ApplicationDetailResponse])
async def withdraw_application(
    application_id: UUID,
    current_user: User = Depends(get_current_user),
    application_service: ApplicationService = Depends(get_application_service),
    db: AsyncSession = Depends(get_db)
):
    application = await application_service.withdraw(application_id, current_user)
    await db.commit()

    return ApiResponse(
        message="Application withdrawn successfully",
        data=ApplicationDetailResponse.model_validate(application),
    )


@router.get("/job/{job_id}", response_model=ApiResponse[List[ApplicationDetailResponse]])
async def job_applications(
    job_id: UUID,
    params: ListParams = Depends(list_params(ApplicationRepository.sort_fields(), default_sort="appliedAt")),
    status: Optional[ApplicationStatus] = None,
    current_user: User = Depends(require_employer),
    db: AsyncSession = Depends(get_db)
):
    """
    Applications received for a job

    **Requirements:**
    - Role must be employer or admin
    - Employers only see applications for jobs they posted
    """
    job = await get_posted_job(job_id, current_user, db)
    page = await ApplicationRepository(db).list_applications(params, status=status, job_id=job.id)
    return page_response(page, ApplicationDetailResponse)


@router.put("/{application_id}/status", response_model=ApiResponse[ApplicationDetailResponse])
async def review_application(
    application_id: UUID,
    status_update: ApplicationStatusUpdate,
    current_user: User = Depends(require_employer),
    application_service: ApplicationService = Depends(get_application_service),
    db: AsyncSession = Depends(get_db)
):
    """Move an application for one of the employer's jobs to a new status"""
    application = await ApplicationRepository(db).get_or_404(application_id)
    await get_posted_job(application.job_id, current_user, db)

    application = await application_service.update_status(
        application, status_update.status, notes=status_update.notes
    )
    await db.commit()

    return ApiResponse(
        message="Application status updated successfully",
        data=ApplicationDetailResponse.model_validate(application),
    )
