"""Database models"""

from backend.app.models.base import TimestampMixin
from backend.app.models.admin import Admin, AdminRole, Permission
from backend.app.models.user import User, UserRole, ExperienceLevel, EducationLevel
from backend.app.models.company import Company, CompanySize, CompanyStatus, CompanyType
from backend.app.models.category import Category
from backend.app.models.job import Job, JobStatus, JobType
from backend.app.models.application import Application, ApplicationStatus, Availability
from backend.app.models.faq import FAQ, FAQCategory
from backend.app.models.content import Content, ContentStatus, ContentType

__all__ = [
    "TimestampMixin",
    "Admin",
    "AdminRole",
    "Permission",
    "User",
    "UserRole",
    "ExperienceLevel",
    "EducationLevel",
    "Company",
    "CompanySize",
    "CompanyStatus",
    "CompanyType",
    "Category",
    "Job",
    "JobStatus",
    "JobType",
    "Application",
    "ApplicationStatus",
    "Availability",
    "FAQ",
    "FAQCategory",
    "Content",
    "ContentStatus",
    "ContentType",
]
