"""Application repository for database operations"""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import ColumnElement, Select, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload

from backend.app.core.exceptions import AlreadyAppliedError, ConflictException
from backend.app.core.logging import get_logger
from backend.app.core.pagination import ListParams, Page
from backend.app.models.application import Application, ApplicationStatus
from backend.app.repositories.base_repository import BaseRepository
from backend.app.schemas.application import ApplicationBulkUpdate

logger = get_logger(__name__)


class ApplicationRepository(BaseRepository[Application]):
    """Repository for job applications; reads always load job and applicant"""

    model = Application
    label = "Application"
    sort_columns = {
        "createdAt": "created_at",
        "status": "status",
        "appliedAt": "applied_at",
        "reviewedAt": "reviewed_at",
    }
    search_columns = ("cover_letter", "notes")
    bulk_update_schema = ApplicationBulkUpdate

    def base_query(self) -> Select:
        return select(Application).options(
            selectinload(Application.job),
            selectinload(Application.applicant),
        )

    @staticmethod
    def filters(
        status: Optional[ApplicationStatus] = None,
        job_id: Optional[UUID] = None,
        company_id: Optional[UUID] = None,
        applicant_id: Optional[UUID] = None
    ) -> List[ColumnElement[bool]]:
        criteria = []
        if status:
            criteria.append(Application.status == status)
        if job_id:
            criteria.append(Application.job_id == job_id)
        if company_id:
            criteria.append(Application.company_id == company_id)
        if applicant_id:
            criteria.append(Application.applicant_id == applicant_id)
        return criteria

    async def list_applications(
        self,
        params: ListParams,
        search: Optional[str] = None,
        **filters
    ) -> Page[Application]:
        return await self.find_page(params, self.filters(**filters), search)

    async def get_for_applicant(self, application_id: UUID, applicant_id: UUID) -> Optional[Application]:
        result = await self.session.execute(
            self.base_query().where(
                Application.id == application_id,
                Application.applicant_id == applicant_id,
            )
        )
        return result.scalar_one_or_none()

    async def exists(self, job_id: UUID, applicant_id: UUID) -> bool:
        return await self.count(
            Application.job_id == job_id, Application.applicant_id == applicant_id
        ) > 0

    def conflict_error(self, exc: IntegrityError) -> ConflictException:
        # The only unique constraint on the table is (job_id, applicant_id)
        return AlreadyAppliedError()
