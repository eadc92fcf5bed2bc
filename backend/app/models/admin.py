"""Admin model"""

from sqlalchemy import Column, String, Boolean, DateTime, JSON, Uuid
from backend.app.core.database import Base
from backend.app.models.base import TimestampMixin, enum_column
import uuid
import enum


class AdminRole(str, enum.Enum):
    """Admin role enumeration"""
    SUPER_ADMIN = "super_admin"
    ADMIN = "admin"
    MODERATOR = "moderator"


class Permission(str, enum.Enum):
    """Capabilities an admin can be granted"""
    MANAGE_USERS = "manage_users"
    MANAGE_JOBS = "manage_jobs"
    MANAGE_COMPANIES = "manage_companies"
    MANAGE_APPLICATIONS = "manage_applications"
    VIEW_ANALYTICS = "view_analytics"
    MANAGE_ADMINS = "manage_admins"
    MANAGE_CONTENT = "manage_content"
    MANAGE_CATEGORIES = "manage_categories"
    MANAGE_FAQS = "manage_faqs"


class Admin(Base, TimestampMixin):
    """Administrator account for the admin API"""

    __tablename__ = "admins"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(enum_column(AdminRole), nullable=False, default=AdminRole.ADMIN, index=True)
    permissions = Column(JSON, nullable=False, default=list)
    is_active = Column(Boolean, nullable=False, default=True)
    last_login = Column(DateTime(timezone=True), nullable=True)
    phone = Column(String(50), nullable=True)
    department = Column(String(50), nullable=True)
    profile_image = Column(String(500), nullable=True)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self):
        return f"<Admin(id={self.id}, email={self.email}, role={self.role})>"
