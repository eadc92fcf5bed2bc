"""Job repository for database operations"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import ColumnElement, func, update

from backend.app.core.logging import get_logger
from backend.app.core.pagination import ListParams, Page
from backend.app.models.job import Job, JobStatus, JobType
from backend.app.models.user import ExperienceLevel
from backend.app.repositories.base_repository import BaseRepository
from backend.app.schemas.job import JobBulkUpdate

logger = get_logger(__name__)


class JobRepository(BaseRepository[Job]):
    """Repository for job-related database operations"""

    model = Job
    label = "Job"
    sort_columns = {
        "createdAt": "created_at",
        "title": "title",
        "company": "company_name",
        "location": "location",
        "status": "status",
    }
    search_columns = ("title", "description", "company_name", "location")
    bulk_update_schema = JobBulkUpdate

    @staticmethod
    def filters(
        category: Optional[str] = None,
        company: Optional[str] = None,
        status: Optional[JobStatus] = None,
        job_type: Optional[JobType] = None,
        experience: Optional[ExperienceLevel] = None,
        location: Optional[str] = None,
        active_only: bool = False
    ) -> List[ColumnElement[bool]]:
        """
        Build WHERE criteria for a job listing

        Args:
            category: Category name, matched ignoring case
            company: Substring of the company name
            status: Exact status
            job_type: Exact employment type
            experience: Exact experience level
            location: Substring of the location
            active_only: Restrict to jobs open to applicants

        Returns:
            List of criteria to AND together
        """
        criteria = []
        if category:
            criteria.append(func.lower(Job.category_name) == category.strip().lower())
        if company:
            criteria.append(Job.company_name.icontains(company, autoescape=True))
        if status:
            criteria.append(Job.status == status)
        if job_type:
            criteria.append(Job.job_type == job_type)
        if experience:
            criteria.append(Job.experience == experience)
        if location:
            criteria.append(Job.location.icontains(location, autoescape=True))
        if active_only:
            criteria.extend([Job.status == JobStatus.ACTIVE, Job.is_active.is_(True)])
        return criteria

    async def list_jobs(
        self,
        params: ListParams,
        search: Optional[str] = None,
        **filters
    ) -> Page[Job]:
        return await self.find_page(params, self.filters(**filters), search)

    async def increment_views(self, job_id: UUID) -> None:
        await self.session.execute(
            update(Job).where(Job.id == job_id).values(views=Job.views + 1)
        )

    async def increment_application_count(self, job_id: UUID) -> None:
        await self.session.execute(
            update(Job).where(Job.id == job_id).values(application_count=Job.application_count + 1)
        )
