"""Job schemas for API requests and responses"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field, field_validator, model_validator

from backend.app.models.job import JobStatus, JobType
from backend.app.models.user import EducationLevel, ExperienceLevel
from backend.app.schemas.common import CamelModel, UTCDateTime


def clean_list(values: List[str]) -> List[str]:
    return [value.strip() for value in values if value.strip()]


class JobResponse(CamelModel):
    id: UUID
    title: str
    description: str
    company_id: UUID
    company_name: str
    category_id: UUID
    category_name: str
    job_type: JobType
    experience: ExperienceLevel
    education: EducationLevel
    location: str
    salary_range: str
    min_salary: Optional[int] = None
    max_salary: Optional[int] = None
    currency: str
    skills: List[str]
    requirements: List[str]
    benefits: List[str]
    status: JobStatus
    is_active: bool
    is_featured: bool
    is_remote: bool
    is_admin_posted: bool
    application_deadline: Optional[UTCDateTime] = None
    views: int
    application_count: int
    posted_by: Optional[UUID] = None
    created_at: UTCDateTime
    updated_at: UTCDateTime


class JobCreateRequest(CamelModel):
    """Request schema for creating a job; company and category are given by name"""
    title: str = Field(..., min_length=3, max_length=100, description="Job title")
    description: str = Field(..., min_length=10, description="Job description")
    company: str = Field(..., min_length=1, max_length=100, description="Company name")
    category: str = Field(..., min_length=1, max_length=50, description="Category name")
    job_type: JobType = Field(..., description="Employment type")
    experience: ExperienceLevel = ExperienceLevel.ENTRY
    education: EducationLevel = EducationLevel.ANY
    location: str = Field(..., min_length=1, max_length=255)
    salary_range: str = Field(..., min_length=1, max_length=100)
    min_salary: Optional[int] = Field(None, ge=0)
    max_salary: Optional[int] = Field(None, ge=0)
    currency: str = Field("USD", min_length=3, max_length=10)
    skills: List[str] = Field(default_factory=list, max_length=50)
    requirements: List[str] = Field(default_factory=list, max_length=50)
    benefits: List[str] = Field(default_factory=list, max_length=50)
    status: JobStatus = JobStatus.ACTIVE
    is_featured: bool = False
    is_remote: bool = False
    application_deadline: Optional[datetime] = None

    @field_validator("title", "description", "company", "category", "location")
    @classmethod
    def strip_text(cls, v):
        if not v.strip():
            raise ValueError("Value cannot be empty")
        return v.strip()

    @field_validator("skills", "requirements", "benefits")
    @classmethod
    def clean_items(cls, v):
        return clean_list(v)

    @model_validator(mode="after")
    def validate_salary_range(self):
        if self.min_salary is not None and self.max_salary is not None:
            if self.max_salary < self.min_salary:
                raise ValueError("Maximum salary cannot be less than minimum salary")
        return self


class JobUpdateRequest(CamelModel):
    title: Optional[str] = Field(None, min_length=3, max_length=100)
    description: Optional[str] = Field(None, min_length=10)
    company: Optional[str] = Field(None, min_length=1, max_length=100)
    category: Optional[str] = Field(None, min_length=1, max_length=50)
    job_type: Optional[JobType] = None
    experience: Optional[ExperienceLevel] = None
    education: Optional[EducationLevel] = None
    location: Optional[str] = Field(None, min_length=1, max_length=255)
    salary_range: Optional[str] = Field(None, min_length=1, max_length=100)
    min_salary: Optional[int] = Field(None, ge=0)
    max_salary: Optional[int] = Field(None, ge=0)
    currency: Optional[str] = Field(None, min_length=3, max_length=10)
    skills: Optional[List[str]] = None
    requirements: Optional[List[str]] = None
    benefits: Optional[List[str]] = None
    status: Optional[JobStatus] = None
    is_active: Optional[bool] = None
    is_featured: Optional[bool] = None
    is_remote: Optional[bool] = None
    application_deadline: Optional[datetime] = None

    @field_validator("skills", "requirements", "benefits")
    @classmethod
    def clean_items(cls, v):
        return clean_list(v) if v is not None else v


class JobBulkUpdate(CamelModel):
    status: Optional[JobStatus] = None
    is_active: Optional[bool] = None
    is_featured: Optional[bool] = None
    is_remote: Optional[bool] = None
