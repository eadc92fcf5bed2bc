"""Company repository for database operations"""

from typing import Optional

from sqlalchemy import func, select

from backend.app.core.logging import get_logger
from backend.app.models.company import Company
from backend.app.models.job import Job
from backend.app.repositories.base_repository import BaseRepository
from backend.app.schemas.company import CompanyBulkUpdate

logger = get_logger(__name__)


class CompanyRepository(BaseRepository[Company]):
    """Repository for Company CRUD operations"""

    model = Company
    label = "Company"
    sort_columns = {
        "createdAt": "created_at",
        "name": "name",
        "industry": "industry",
        "status": "status",
    }
    search_columns = ("name", "industry", "description")
    bulk_update_schema = CompanyBulkUpdate
    conflict_message = "Company name already exists"

    async def get_by_name(self, name: str) -> Optional[Company]:
        """Get company by name, ignoring case"""
        result = await self.session.execute(
            select(Company).where(func.lower(Company.name) == name.strip().lower())
        )
        return result.scalar_one_or_none()

    async def get_or_create_by_name(self, name: str, created_by=None) -> Company:
        """
        Find a company by case-insensitive name, creating it if absent

        Args:
            name: Company name
            created_by: Admin recorded as creator of a new company

        Returns:
            Existing or newly created company
        """
        company = await self.get_by_name(name)
        if company is None:
            company = await self.create({"name": name.strip(), "created_by": created_by})
            logger.info(f"Created company from job posting: {company.name}")
        return company

    async def refresh_job_count(self, company: Company) -> Company:
        company.job_count = await self.session.scalar(
            select(func.count()).select_from(Job).where(Job.company_id == company.id)
        ) or 0
        await self.flush()
        return company
