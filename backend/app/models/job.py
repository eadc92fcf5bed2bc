"""Job model"""

from sqlalchemy import (
    Column, String, Text, Boolean, Integer, JSON, ForeignKey, DateTime, Uuid
)
from backend.app.core.database import Base
from backend.app.models.base import TimestampMixin, enum_column
from backend.app.models.user import ExperienceLevel, EducationLevel
import uuid
import enum


class JobType(str, enum.Enum):
    """Job type enumeration"""
    FULL_TIME = "Full time"
    PART_TIME = "Part time"
    CONTRACT = "Contract"
    INTERNSHIP = "Internship"
    FREELANCE = "Freelance"


class JobStatus(str, enum.Enum):
    """Job status enumeration"""
    ACTIVE = "active"
    INACTIVE = "inactive"
    EXPIRED = "expired"
    DRAFT = "draft"


class Job(Base, TimestampMixin):
    """Job posting.

    `company_name` and `category_name` are caches of the referenced rows'
    names. They are written when the job is created or when its company or
    category is changed through a job update, and are not refreshed when the
    company or category itself is renamed.
    """

    __tablename__ = "jobs"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    title = Column(String(100), nullable=False, index=True)
    description = Column(Text, nullable=False)
    company_id = Column(Uuid, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True)
    company_name = Column(String(100), nullable=False)
    category_id = Column(Uuid, ForeignKey("categories.id", ondelete="RESTRICT"), nullable=False, index=True)
    category_name = Column(String(50), nullable=False, index=True)
    job_type = Column(enum_column(JobType), nullable=False)
    experience = Column(enum_column(ExperienceLevel), nullable=False, default=ExperienceLevel.ENTRY)
    education = Column(enum_column(EducationLevel), nullable=False, default=EducationLevel.ANY)
    location = Column(String(255), nullable=False)
    salary_range = Column(String(100), nullable=False)
    min_salary = Column(Integer, nullable=True)
    max_salary = Column(Integer, nullable=True)
    currency = Column(String(10), nullable=False, default="USD")
    skills = Column(JSON, nullable=False, default=list)
    requirements = Column(JSON, nullable=False, default=list)
    benefits = Column(JSON, nullable=False, default=list)
    status = Column(enum_column(JobStatus), nullable=False, default=JobStatus.ACTIVE, index=True)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    is_featured = Column(Boolean, nullable=False, default=False)
    is_remote = Column(Boolean, nullable=False, default=False)
    is_admin_posted = Column(Boolean, nullable=False, default=False)
    application_deadline = Column(DateTime(timezone=True), nullable=True)
    views = Column(Integer, nullable=False, default=0)
    application_count = Column(Integer, nullable=False, default=0)
    posted_by = Column(Uuid, nullable=True)

    def __repr__(self):
        return f"<Job(id={self.id}, title={self.title}, status={self.status})>"
