"""Admin job management API endpoints"""

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
from backend.app.models.job import Job, JobStatus, JobType
from backend.app.models.user import ExperienceLevel
from backend.app.repositories.category_repository import CategoryRepository
from backend.app.repositories.company_repository import CompanyRepository
from backend.app.repositories.job_repository import JobRepository
from backend.app.schemas.common import ApiResponse, BulkUpdateRequest, BulkUpdateResponse
from backend.app.schemas.job import JobCreateRequest, JobResponse, JobUpdateRequest
from backend.app.services.job_service import JobService
from backend.app.services.stats_service import StatsService

logger = get_logger(__name__)

router = APIRouter()

require_manage_jobs = PermissionChecker(Permission.MANAGE_JOBS)


async def get_job_service(db: AsyncSession = Depends(get_db)) -> JobService:
    """Dependency to get job service"""
    return JobService(JobRepository(db), CompanyRepository(db), CategoryRepository(db))


@router.get("", response_model=ApiResponse[List[JobResponse]])
async def list_jobs(
    params: ListParams = Depends(list_params(JobRepository.sort_fields())),
    search: Optional[str] = Query(None, max_length=100),
    category: Optional[str] = None,
    company: Optional[str] = None,
    status: Optional[JobStatus] = None,
    job_type: Optional[JobType] = Query(None, alias="jobType"),
    experience: Optional[ExperienceLevel] = None,
    location: Optional[str] = None,
    current_admin: Admin = Depends(require_manage_jobs),
    db: AsyncSession = Depends(get_db)
):
    """
    List all jobs, whatever their status

    **Filters:**
    - search: title, description, company or location substring
    - category: category name
    - company, location: substrings
    - status, jobType, experience: exact values
    """
    page = await JobRepository(db).list_jobs(
        params,
        search=search,
        category=category,
        company=company,
        status=status,
        job_type=job_type,
        experience=experience,
        location=location,
    )
    return page_response(page, JobResponse)


@router.get("/stats/overview", response_model=ApiResponse[dict])
async def job_stats(
    current_admin: Admin = Depends(require_manage_jobs),
    stats: StatsService = Depends(get_stats_service)
):
    """Job counts by status, type and category, plus postings per month"""
    overview = await stats.overview_counts(Job, {
        "total": [],
        "active": [Job.status == JobStatus.ACTIVE, Job.is_active.is_(True)],
        "inactive": [Job.status == JobStatus.INACTIVE],
        "expired": [Job.status == JobStatus.EXPIRED],
        "draft": [Job.status == JobStatus.DRAFT],
        "featured": [Job.is_featured.is_(True)],
        "remote": [Job.is_remote.is_(True)],
    })
    return ApiResponse(data={
        "overview": overview,
        "byType": await stats.count_by_field(Job, "job_type"),
        "byCategory": await stats.count_by_field(Job, "category_name"),
        "byExperience": await stats.count_by_field(Job, "experience"),
        "monthlyPostings": await stats.monthly_counts(Job, "created_at", 12),
    })


@router.put("/bulk-update", response_model=ApiResponse[BulkUpdateResponse])
async def bulk_update_jobs(
    request: BulkUpdateRequest,
    current_admin: Admin = Depends(require_manage_jobs),
    db: AsyncSession = Depends(get_db)
):
    """
    Bulk update jobs

    **Allowed fields:** status, isActive, isFeatured, isRemote
    """
    result = await JobRepository(db).bulk_update(request.ids, request.updates)
    await db.commit()
    logger.info(f"Admin {current_admin.id} bulk updated {result.modified_count} jobs")
    return bulk_response(result, "jobs")


@router.get("/{job_id}", response_model=ApiResponse[JobResponse])
async def get_job(
    job_id: UUID,
    current_admin: Admin = Depends(require_manage_jobs),
    db: AsyncSession = Depends(get_db)
):
    job = await JobRepository(db).get_or_404(job_id)
    return ApiResponse(data=JobResponse.model_validate(job))


@router.post("", response_model=ApiResponse[JobResponse], status_code=status.HTTP_201_CREATED)
async def create_job(
    job_data: JobCreateRequest,
    current_admin: Admin = Depends(require_manage_jobs),
    job_service: JobService = Depends(get_job_service),
    db: AsyncSession = Depends(get_db)
):
    """
    Create a job posting

    **Company and category** are given by name. An existing company or
    category is matched ignoring case; otherwise it is created. The job keeps
    a copy of both names.

    **Validation:**
    - Title: 3-100 characters
    - Description: minimum 10 characters
    - Salary range: min cannot exceed max
    """
    logger.info(f"Job creation request from admin {current_admin.id}: {job_data.title}")

    job = await job_service.create_job(job_data.model_dump(), current_admin.id)
    await db.commit()

    return ApiResponse(message="Job created successfully", data=JobResponse.model_validate(job))


@router.put("/{job_id}", response_model=ApiResponse[JobResponse])
async def update_job(
    job_id: UUID,
    job_data: JobUpdateRequest,
    current_admin: Admin = Depends(require_manage_jobs),
    job_service: JobService = Depends(get_job_service),
    db: AsyncSession = Depends(get_db)
):
    """Update a job; a new company or category name rewrites the cached name"""
    job = await JobRepository(db).get_or_404(job_id)
    job = await job_service.update_job(job, job_data.model_dump(exclude_none=True), current_admin.id)
    await db.commit()

    return ApiResponse(message="Job updated successfully", data=JobResponse.model_validate(job))


@router.delete("/{job_id}", response_model=ApiResponse)
async def delete_job(
    job_id: UUID,
    current_admin: Admin = Depends(require_manage_jobs),
    job_service: JobService = Depends(get_job_service),
    db: AsyncSession = Depends(get_db)
):
    job = await JobRepository(db).get_or_404(job_id)
    await job_service.delete_job(job)
    await db.commit()

    logger.info(f"Admin {current_admin.id} deleted job {job_id}")
    return ApiResponse(message="Job deleted successfully")


@router.patch("/{job_id}/toggle-status", response_model=ApiResponse[JobResponse])
async def toggle_job_status(
    job_id: UUID,
    current_admin: Admin = Depends(require_manage_jobs),
    db: AsyncSession = Depends(get_db)
):
    """Flip a job between active and inactive"""
    repo = JobRepository(db)
    job = await repo.get_or_404(job_id)

    activate = not (job.is_active and job.status == JobStatus.ACTIVE)
    job = await repo.update(job, {
        "is_active": activate,
        "status": JobStatus.ACTIVE if activate else JobStatus.INACTIVE,
    })
    await db.commit()

    state = "activated" if activate else "deactivated"
    return ApiResponse(message=f"Job {state} successfully", data=JobResponse.model_validate(job))
