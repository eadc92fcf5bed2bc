"""Company schemas"""

from typing import List, Optional
from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from backend.app.models.company import CompanySize, CompanyStatus, CompanyType
from backend.app.schemas.common import CamelModel, UTCDateTime
from backend.app.schemas.job import JobResponse


class CompanyResponse(CamelModel):
    id: UUID
    name: str
    email: Optional[str] = None
    description: Optional[str] = None
    website: Optional[str] = None
    phone: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    industry: Optional[str] = None
    company_size: CompanySize
    type: CompanyType
    founded_year: Optional[int] = None
    status: CompanyStatus
    is_active: bool
    is_verified: bool
    is_featured: bool
    job_count: int
    created_by: Optional[UUID] = None
    created_at: UTCDateTime
    updated_at: UTCDateTime


class CompanyDetailResponse(CompanyResponse):
    """Public company page with its newest open jobs"""
    recent_jobs: List[JobResponse] = []


class CompanyCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    description: Optional[str] = Field(None, max_length=2000)
    website: Optional[str] = Field(None, max_length=500)
    phone: Optional[str] = Field(None, max_length=50)
    city: Optional[str] = Field(None, max_length=100)
    country: Optional[str] = Field(None, max_length=100)
    industry: Optional[str] = Field(None, max_length=100)
    company_size: CompanySize = CompanySize.TINY
    type: CompanyType = CompanyType.PRIVATE
    founded_year: Optional[int] = Field(None, ge=1800, le=2100)
    status: CompanyStatus = CompanyStatus.ACTIVE
    is_verified: bool = False
    is_featured: bool = False

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("Company name cannot be empty")
        return v.strip()


class CompanyUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    description: Optional[str] = Field(None, max_length=2000)
    website: Optional[str] = Field(None, max_length=500)
    phone: Optional[str] = Field(None, max_length=50)
    city: Optional[str] = Field(None, max_length=100)
    country: Optional[str] = Field(None, max_length=100)
    industry: Optional[str] = Field(None, max_length=100)
    company_size: Optional[CompanySize] = None
    type: Optional[CompanyType] = None
    founded_year: Optional[int] = Field(None, ge=1800, le=2100)
    status: Optional[CompanyStatus] = None
    is_active: Optional[bool] = None
    is_verified: Optional[bool] = None
    is_featured: Optional[bool] = None


class CompanyBulkUpdate(CamelModel):
    status: Optional[CompanyStatus] = None
    is_active: Optional[bool] = None
    is_verified: Optional[bool] = None
    is_featured: Optional[bool] = None
