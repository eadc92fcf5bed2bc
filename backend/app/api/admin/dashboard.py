"""Admin dashboard API endpoints"""

import asyncio
import time

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from backend.app.api.deps import get_stats_service
from backend.app.core.database import get_db
from backend.app.core.logging import get_logger
from backend.app.core.security import get_current_admin
from backend.app.models.admin import Admin
from backend.app.models.application import Application, ApplicationStatus
from backend.app.models.base import utcnow
from backend.app.models.category import Category
from backend.app.models.company import Company, CompanyStatus
from backend.app.models.content import Content, ContentStatus
from backend.app.models.job import Job, JobStatus
from backend.app.models.user import User
from backend.app.schemas.application import ApplicationDetailResponse
from backend.app.schemas.common import ApiResponse
from backend.app.schemas.job import JobResponse
from backend.app.schemas.user import UserResponse
from backend.app.services.stats_service import StatsService

logger = get_logger(__name__)

router = APIRouter()

RECENT_ITEMS = 5


@router.get("/stats", response_model=ApiResponse[dict])
async def dashboard_stats(
    current_admin: Admin = Depends(get_current_admin),
    stats: StatsService = Depends(get_stats_service)
):
    """
    Dashboard statistics

    **Returns:**
    - overview: total counts per collection
    - active: active users, jobs and companies
    - monthly: new users, jobs and applications for the last 6 months
    - recent: latest users, jobs and applications
    - analytics: jobs by category and type, applications by status

    Counts that fail to compute are reported as 0.
    """
    collections = {"users": User, "jobs": Job, "companies": Company, "applications": Application, "categories": Category}
    totals = await asyncio.gather(*[stats.count(model) for model in collections.values()])
    overview = dict(zip(collections, totals))

    users_active, jobs_active, companies_active = await asyncio.gather(
        stats.count(User, [User.is_active.is_(True)]),
        stats.count(Job, [Job.status == JobStatus.ACTIVE, Job.is_active.is_(True)]),
        stats.count(Company, [Company.is_active.is_(True)]),
    )
    active = {"users": users_active, "jobs": jobs_active, "companies": companies_active}

    monthly = {
        "users": await stats.monthly_counts(User, "created_at", 6),
        "jobs": await stats.monthly_counts(Job, "created_at", 6),
        "applications": await stats.monthly_counts(Application, "applied_at", 6),
    }

    recent_users, recent_jobs, recent_applications = await asyncio.gather(
        stats.latest(User, RECENT_ITEMS),
        stats.latest(Job, RECENT_ITEMS),
        stats.latest(
            Application, RECENT_ITEMS, selectinload(Application.job), selectinload(Application.applicant)
        ),
    )
    recent = {
        "users": [UserResponse.model_validate(u).model_dump(mode="json", by_alias=True) for u in recent_users],
        "jobs": [JobResponse.model_validate(j).model_dump(mode="json", by_alias=True) for j in recent_jobs],
        "applications": [
            ApplicationDetailResponse.model_validate(a).model_dump(mode="json", by_alias=True)
            for a in recent_applications
        ],
    }

    analytics = {
        "jobsByCategory": await stats.count_by_field(Job, "category_name"),
        "jobsByType": await stats.count_by_field(Job, "job_type"),
        "applicationsByStatus": await stats.count_by_field(Application, "status"),
    }

    return ApiResponse(data={
        "overview": overview,
        "active": active,
        "monthly": monthly,
        "recent": recent,
        "analytics": analytics,
    })


@router.get("/charts", response_model=ApiResponse[dict])
async def dashboard_charts(
    period: int = Query(30, ge=1, le=365, description="Number of days to chart"),
    current_admin: Admin = Depends(get_current_admin),
    stats: StatsService = Depends(get_stats_service)
):
    """Daily new users, jobs and applications over the last `period` days"""
    return ApiResponse(data={
        "period": period,
        "users": await stats.daily_counts(User, "created_at", period),
        "jobs": await stats.daily_counts(Job, "created_at", period),
        "applications": await stats.daily_counts(Application, "applied_at", period),
    })


@router.get("/quick-actions", response_model=ApiResponse[dict])
async def quick_actions(
    current_admin: Admin = Depends(get_current_admin),
    stats: StatsService = Depends(get_stats_service)
):
    """Counts of items waiting for an admin"""
    data = {
        **await stats.overview_counts(Application, {
            "pendingApplications": [Application.status == ApplicationStatus.PENDING],
        }),
        **await stats.overview_counts(Company, {
            "pendingCompanies": [Company.status == CompanyStatus.PENDING],
            "unverifiedCompanies": [Company.is_verified.is_(False)],
        }),
        **await stats.overview_counts(User, {
            "unverifiedUsers": [User.is_verified.is_(False)],
        }),
        **await stats.overview_counts(Job, {
            "draftJobs": [Job.status == JobStatus.DRAFT],
            "expiredJobs": [Job.application_deadline < utcnow(), Job.status == JobStatus.ACTIVE],
        }),
        **await stats.overview_counts(Content, {
            "draftContent": [Content.status == ContentStatus.DRAFT],
        }),
    }
    return ApiResponse(data=data)


@router.get("/system-health", response_model=ApiResponse[dict])
async def system_health(
    request: Request,
    current_admin: Admin = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db)
):
    """Database reachability and latency, uptime and environment"""
    settings = request.app.state.settings

    start = time.perf_counter()
    try:
        await db.execute(text("SELECT 1"))
        database = {"status": "connected", "latencyMs": round((time.perf_counter() - start) * 1000, 2)}
    except Exception as e:
        logger.warning(f"Database health check failed: {str(e)}")
        database = {"status": "disconnected", "latencyMs": None}

    return ApiResponse(data={
        "status": "healthy" if database["status"] == "connected" else "degraded",
        "database": database,
        "uptime": round(time.monotonic() - request.app.state.started_at, 2),
        "environment": settings.ENVIRONMENT,
        "version": settings.APP_VERSION,
        "timestamp": utcnow().isoformat(),
    })
