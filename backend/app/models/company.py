"""Company model"""

from sqlalchemy import Column, String, Boolean, Integer, Text, ForeignKey, Uuid
from backend.app.core.database import Base
from backend.app.models.base import TimestampMixin, enum_column
import uuid
import enum


class CompanySize(str, enum.Enum):
    TINY = "1-10"
    SMALL = "11-50"
    MEDIUM = "51-200"
    LARGE = "201-500"
    XLARGE = "501-1000"
    ENTERPRISE = "1000+"


class CompanyType(str, enum.Enum):
    PUBLIC = "Public"
    PRIVATE = "Private"
    NON_PROFIT = "Non-profit"
    GOVERNMENT = "Government"


class CompanyStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"
    SUSPENDED = "suspended"


class Company(Base, TimestampMixin):
    """Hiring company"""

    __tablename__ = "companies"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(100), unique=True, nullable=False, index=True)
    email = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    website = Column(String(500), nullable=True)
    phone = Column(String(50), nullable=True)
    city = Column(String(100), nullable=True)
    country = Column(String(100), nullable=True)
    industry = Column(String(100), nullable=True, index=True)
    company_size = Column(enum_column(CompanySize), nullable=False, default=CompanySize.TINY)
    type = Column(enum_column(CompanyType), nullable=False, default=CompanyType.PRIVATE)
    founded_year = Column(Integer, nullable=True)
    status = Column(enum_column(CompanyStatus), nullable=False, default=CompanyStatus.ACTIVE, index=True)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    is_verified = Column(Boolean, nullable=False, default=False, index=True)
    is_featured = Column(Boolean, nullable=False, default=False)
    job_count = Column(Integer, nullable=False, default=0)
    created_by = Column(Uuid, ForeignKey("admins.id", ondelete="SET NULL"), nullable=True)

    def __repr__(self):
        return f"<Company(id={self.id}, name={self.name}, status={self.status})>"
