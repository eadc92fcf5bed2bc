"""Public job browsing and employer job posting API endpoints"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.api.deps import page_response
from backend.app.core.database import get_db
from backend.app.core.exceptions import AuthorizationException, NotFoundException
from backend.app.core.logging import get_logger
from backend.app.core.pagination import ListParams, list_params
from backend.app.core.security import require_employer
from backend.app.models.job import Job, JobStatus, JobType
from backend.app.models.user import ExperienceLevel, User
from backend.app.repositories.category_repository import CategoryRepository
from backend.app.repositories.company_repository import CompanyRepository
from backend.app.repositories.job_repository import JobRepository
from backend.app.schemas.common import ApiResponse
from backend.app.schemas.job import JobCreateRequest, JobResponse, JobUpdateRequest
from backend.app.services.job_service import JobService, can_manage_job

logger = get_logger(__name__)

router = APIRouter()

HIGHLIGHT_LIMIT = 6


def get_job_service(db: AsyncSession = Depends(get_db)) -> JobService:
    """Dependency to get job service"""
    return JobService(JobRepository(db), CompanyRepository(db), CategoryRepository(db))


async def get_managed_job(job_id: UUID, user: User, db: AsyncSession, action: str) -> Job:
    job = await JobRepository(db).get_or_404(job_id)
    if not can_manage_job(job, user):
        logger.warning(f"User {user.id} attempted to {action} job {job_id} they did not post")
        raise AuthorizationException(f"Not authorized to {action} this job")
    return job


@router.get("", response_model=ApiResponse[List[JobResponse]])
async def list_active_jobs(
    params: ListParams = Depends(list_params(JobRepository.sort_fields())),
    search: Optional[str] = Query(None, max_length=100),
    category: Optional[str] = None,
    company: Optional[str] = None,
    job_type: Optional[JobType] = Query(None, alias="jobType"),
    experience: Optional[ExperienceLevel] = None,
    location: Optional[str] = None,
    db: AsyncSession = Depends(get_db)
):
    """
    Browse open jobs

    Only active jobs are listed. Supports the same pagination, sorting and
    filters as the admin listing, except status.
    """
    page = await JobRepository(db).list_jobs(
        params,
        search=search,
        category=category,
        company=company,
        job_type=job_type,
        experience=experience,
        location=location,
        active_only=True,
    )
    return page_response(page, JobResponse)


@router.get("/featured", response_model=ApiResponse[List[JobResponse]])
async def featured_jobs(db: AsyncSession = Depends(get_db)):
    """Newest featured open jobs"""
    criteria = [*JobRepository.filters(active_only=True), Job.is_featured.is_(True)]
    jobs = await JobRepository(db).find_latest(criteria, HIGHLIGHT_LIMIT)
    return ApiResponse(data=[JobResponse.model_validate(job) for job in jobs])


@router.get("/recent", response_model=ApiResponse[List[JobResponse]])
async def recent_jobs(
    limit: int = Query(HIGHLIGHT_LIMIT, ge=1, le=50),
    db: AsyncSession = Depends(get_db)
):
    """Newest open jobs"""
    jobs = await JobRepository(db).find_latest(JobRepository.filters(active_only=True), limit)
    return ApiResponse(data=[JobResponse.model_validate(job) for job in jobs])


@router.get("/{job_id}", response_model=ApiResponse[JobResponse])
async def get_job(job_id: UUID, db: AsyncSession = Depends(get_db)):
    """Get an open job; each call counts as a view"""
    repo = JobRepository(db)
    job = await repo.get_by_id(job_id)
    if job is None or job.status != JobStatus.ACTIVE or not job.is_active:
        raise NotFoundException("Job not found")

    await repo.increment_views(job.id)
    await db.commit()

    job = await repo.get_or_404(job.id)
    return ApiResponse(data=JobResponse.model_validate(job))


@router.post("", response_model=ApiResponse[JobResponse], status_code=status.HTTP_201_CREATED)
async def post_job(
    job_data: JobCreateRequest,
    current_user: User = Depends(require_employer),
    job_service: JobService = Depends(get_job_service),
    db: AsyncSession = Depends(get_db)
):
    """
    Post a job as an employer

    **Requirements:**
    - Role must be employer or admin
    - Company and category are given by name, as in the admin API
    """
    job = await job_service.create_job(job_data.model_dump(), current_user.id, admin_posted=False)
    await db.commit()

    logger.info(f"Employer {current_user.id} posted job {job.id}")
    return ApiResponse(message="Job created successfully", data=JobResponse.model_validate(job))


@router.put("/{job_id}", response_model=ApiResponse[JobResponse])
async def update_posted_job(
    job_id: UUID,
    job_data: JobUpdateRequest,
    current_user: User = Depends(require_employer),
    job_service: JobService = Depends(get_job_service),
    db: AsyncSession = Depends(get_db)
):
    """Update a job the employer posted"""
    job = await get_managed_job(job_id, current_user, db, "update")
    job = await job_service.update_job(job, job_data.model_dump(exclude_none=True))
    await db.commit()

    return ApiResponse(message="Job updated successfully", data=JobResponse.model_validate(job))


@router.delete("/{job_id}", response_model=ApiResponse)
async def delete_posted_job(
    job_id: UUID,
    current_user: User = Depends(require_employer),
    job_service: JobService = Depends(get_job_service),
    db: AsyncSession = Depends(get_db)
):
    """Delete a job the employer posted"""
    job = await get_managed_job(job_id, current_user, db, "delete")
    await job_service.delete_job(job)
    await db.commit()

    logger.info(f"User {current_user.id} deleted job {job_id}")
    return ApiResponse(message="Job deleted successfully")
