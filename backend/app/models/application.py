"""Application model"""

from sqlalchemy import (
    Column, String, Text, Boolean, Integer, ForeignKey, DateTime, UniqueConstraint, Uuid
)
from sqlalchemy.orm import relationship
from backend.app.core.database import Base
from backend.app.models.base import TimestampMixin, enum_column, utcnow
import uuid
import enum


class ApplicationStatus(str, enum.Enum):
    """Application status enumeration"""
    PENDING = "pending"
    REVIEWED = "reviewed"
    SHORTLISTED = "shortlisted"
    INTERVIEWED = "interviewed"
    HIRED = "hired"
    REJECTED = "rejected"
    WITHDRAWN = "withdrawn"


class Availability(str, enum.Enum):
    IMMEDIATELY = "immediately"
    TWO_WEEKS = "2-weeks"
    ONE_MONTH = "1-month"
    THREE_MONTHS = "3-months"
    NEGOTIABLE = "negotiable"


class Application(Base, TimestampMixin):
    """A user's application to a job; one per (job, applicant)"""

    __tablename__ = "applications"
    __table_args__ = (
        UniqueConstraint("job_id", "applicant_id", name="uq_applications_job_applicant"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    job_id = Column(Uuid, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    applicant_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    company_id = Column(Uuid, ForeignKey("companies.id", ondelete="CASCADE"), nullable=False, index=True)
    status = Column(
        enum_column(ApplicationStatus), nullable=False, default=ApplicationStatus.PENDING, index=True
    )
    cover_letter = Column(Text, nullable=True)
    resume = Column(String(500), nullable=True)
    expected_salary = Column(Integer, nullable=True)
    availability = Column(enum_column(Availability), nullable=True)
    notes = Column(Text, nullable=True)
    applied_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, index=True)
    reviewed_at = Column(DateTime(timezone=True), nullable=True)
    reviewed_by = Column(Uuid, ForeignKey("admins.id", ondelete="SET NULL"), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)

    # Relationships
    job = relationship("Job", lazy="raise")
    applicant = relationship("User", lazy="raise")

    def __repr__(self):
        return f"<Application(id={self.id}, job_id={self.job_id}, status={self.status})>"
