"""Application schemas"""

from typing import Optional
from uuid import UUID

from pydantic import Field

from backend.app.models.application import ApplicationStatus, Availability
from backend.app.schemas.common import CamelModel, UTCDateTime


class ApplicationJobSummary(CamelModel):
    id: UUID
    title: str
    company_name: str
    location: str


class ApplicantSummary(CamelModel):
    id: UUID
    first_name: str
    last_name: str
    email: str


class ApplicationResponse(CamelModel):
    id: UUID
    job_id: UUID
    applicant_id: UUID
    company_id: UUID
    status: ApplicationStatus
    cover_letter: Optional[str] = None
    resume: Optional[str] = None
    expected_salary: Optional[int] = None
    availability: Optional[Availability] = None
    notes: Optional[str] = None
    applied_at: UTCDateTime
    reviewed_at: Optional[UTCDateTime] = None
    reviewed_by: Optional[UUID] = None
    is_active: bool
    created_at: UTCDateTime
    updated_at: UTCDateTime


class ApplicationDetailResponse(ApplicationResponse):
    """Application with its job and applicant loaded"""
    job: Optional[ApplicationJobSummary] = None
    applicant: Optional[ApplicantSummary] = None


class ApplicationCreate(CamelModel):
    job_id: UUID
    cover_letter: Optional[str] = Field(None, max_length=5000)
    resume: Optional[str] = Field(None, max_length=500)
    expected_salary: Optional[int] = Field(None, ge=0)
    availability: Optional[Availability] = None


class ApplicationStatusUpdate(CamelModel):
    status: ApplicationStatus
    notes: Optional[str] = Field(None, max_length=2000)


class ApplicationNotesUpdate(CamelModel):
    notes: str = Field(..., max_length=2000)


class ApplicationBulkUpdate(CamelModel):
    status: Optional[ApplicationStatus] = None
    notes: Optional[str] = Field(None, max_length=2000)
