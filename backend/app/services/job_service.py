"""Job service for business logic operations"""

from typing import Any, Dict, Optional
from uuid import UUID

from backend.app.core.logging import get_logger
from backend.app.models.job import Job
from backend.app.models.user import User, UserRole
from backend.app.repositories.category_repository import CategoryRepository
from backend.app.repositories.company_repository import CompanyRepository
from backend.app.repositories.job_repository import JobRepository

logger = get_logger(__name__)


def can_manage_job(job: Job, user: User) -> bool:
    """Portal admins manage every job; employers only the jobs they posted"""
    if user.role == UserRole.ADMIN:
        return True
    return not job.is_admin_posted and job.posted_by == user.id


class JobService:
    """Job writes that keep the cached company and category names in step"""

    def __init__(
        self,
        job_repository: JobRepository,
        company_repository: CompanyRepository,
        category_repository: CategoryRepository
    ):
        """
        Initialize job service

        Args:
            job_repository: Job repository
            company_repository: Company repository
            category_repository: Category repository
        """
        self.job_repo = job_repository
        self.company_repo = company_repository
        self.category_repo = category_repository

    async def _resolve_references(self, data: Dict[str, Any], admin_id: Optional[UUID]) -> Dict[str, Any]:
        """Replace company/category names with ids plus cached names; new companies record admin_id"""
        values = dict(data)

        company_name = values.pop("company", None)
        if company_name is not None:
            company = await self.company_repo.get_or_create_by_name(company_name, created_by=admin_id)
            values["company_id"] = company.id
            values["company_name"] = company.name

        category_name = values.pop("category", None)
        if category_name is not None:
            category = await self.category_repo.get_or_create_by_name(category_name)
            values["category_id"] = category.id
            values["category_name"] = category.name

        return values

    async def create_job(self, data: Dict[str, Any], poster_id: UUID, admin_posted: bool = True) -> Job:
        """
        Create a job posted by an admin or by an employer

        Args:
            data: Validated job fields, with company and category given by name
            poster_id: Posting admin, or posting employer when admin_posted is False
            admin_posted: Whether poster_id is an admin

        Returns:
            Created job
        """
        logger.info(f"Creating job: {data.get('title')}")

        values = await self._resolve_references(data, poster_id if admin_posted else None)
        values.update(posted_by=poster_id, is_admin_posted=admin_posted)

        job = await self.job_repo.create(values)
        await self._refresh_counts(job.company_id, job.category_id)
        return job

    async def update_job(self, job: Job, data: Dict[str, Any], admin_id: Optional[UUID] = None) -> Job:
        """
        Update a job; changing its company or category rewrites the cached names

        Returns:
            Updated job
        """
        previous = (job.company_id, job.category_id)
        values = await self._resolve_references(data, admin_id)
        job = await self.job_repo.update(job, values)

        if (job.company_id, job.category_id) != previous:
            await self._refresh_counts(*previous)
            await self._refresh_counts(job.company_id, job.category_id)
        return job

    async def delete_job(self, job: Job) -> None:
        company_id, category_id = job.company_id, job.category_id
        await self.job_repo.delete(job)
        await self._refresh_counts(company_id, category_id)

    async def _refresh_counts(self, company_id: UUID, category_id: UUID) -> None:
        company = await self.company_repo.get_by_id(company_id)
        if company is not None:
            await self.company_repo.refresh_job_count(company)

        category = await self.category_repo.get_by_id(category_id)
        if category is not None:
            await self.category_repo.refresh_job_count(category)
