"""Application service for business logic operations"""

from typing import Any, Dict, Optional
from uuid import UUID

from backend.app.core.exceptions import (
    AlreadyAppliedError,
    NotFoundException,
    ValidationException,
)
from backend.app.core.logging import get_logger
from backend.app.models.application import Application, ApplicationStatus
from backend.app.models.base import ensure_utc, utcnow
from backend.app.models.job import JobStatus
from backend.app.models.user import User
from backend.app.repositories.application_repository import ApplicationRepository
from backend.app.repositories.job_repository import JobRepository

logger = get_logger(__name__)

CLOSED_STATUSES = (ApplicationStatus.HIRED, ApplicationStatus.REJECTED, ApplicationStatus.WITHDRAWN)


class ApplicationService:
    """Service for applying to jobs and reviewing applications"""

    def __init__(self, application_repository: ApplicationRepository, job_repository: JobRepository):
        self.application_repo = application_repository
        self.job_repo = job_repository

    async def apply(self, applicant: User, job_id: UUID, data: Dict[str, Any]) -> Application:
        """
        Submit an application for a job

        Args:
            applicant: Authenticated user applying
            job_id: Target job
            data: Cover letter, resume, expected salary and availability

        Returns:
            Created application with job and applicant loaded

        Raises:
            NotFoundException: If the job does not exist
            ValidationException: If the job is closed or past its deadline
            AlreadyAppliedError: If the user already applied to this job
        """
        job = await self.job_repo.get_by_id(job_id)
        if job is None:
            raise NotFoundException("Job not found")

        if job.status != JobStatus.ACTIVE or not job.is_active:
            raise ValidationException("This job is no longer accepting applications")

        deadline = ensure_utc(job.application_deadline)
        if deadline is not None and deadline < utcnow():
            raise ValidationException("Application deadline has passed")

        # Fast path only; the unique constraint decides races
        if await self.application_repo.exists(job.id, applicant.id):
            raise AlreadyAppliedError()

        application = await self.application_repo.create({
            **data,
            "job_id": job.id,
            "applicant_id": applicant.id,
            "company_id": job.company_id,
        })
        await self.job_repo.increment_application_count(job.id)

        logger.info(f"User {applicant.id} applied to job {job.id}")
        return await self.application_repo.get_or_404(application.id)

    async def update_status(
        self,
        application: Application,
        status: ApplicationStatus,
        reviewer_id: Optional[UUID] = None,
        notes: Optional[str] = None
    ) -> Application:
        """Set the review status, recording when and, for admins, who reviewed it"""
        values: Dict[str, Any] = {
            "status": status,
            "reviewed_by": reviewer_id,
            "reviewed_at": utcnow(),
        }
        if notes is not None:
            values["notes"] = notes

        await self.application_repo.update(application, values)
        logger.info(f"Application {application.id} moved to {status.value} by {reviewer_id or 'the job poster'}")
        return await self.application_repo.get_or_404(application.id)

    async def withdraw(self, application_id: UUID, applicant: User) -> Application:
        """
        Withdraw one of the applicant's own applications

        Raises:
            NotFoundException: If the application does not belong to the applicant
            ValidationException: If the application is already closed
        """
        application = await self.application_repo.get_for_applicant(application_id, applicant.id)
        if application is None:
            raise NotFoundException("Application not found")

        if application.status in CLOSED_STATUSES:
            raise ValidationException(f"Cannot withdraw an application that is {application.status.value}")

        await self.application_repo.update(application, {"status": ApplicationStatus.WITHDRAWN, "is_active": False})
        logger.info(f"Application {application.id} withdrawn by {applicant.id}")
        return await self.application_repo.get_or_404(application.id)
