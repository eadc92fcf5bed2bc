"""User model"""

from sqlalchemy import Column, String, Boolean, DateTime, Integer, Text, Uuid
from backend.app.core.database import Base
from backend.app.models.base import TimestampMixin, enum_column
import uuid
import enum


class UserRole(str, enum.Enum):
    """User role enumeration"""
    USER = "user"
    PREMIUM = "premium"
    EMPLOYER = "employer"
    ADMIN = "admin"


class ExperienceLevel(str, enum.Enum):
    """Experience level enumeration, shared by users and jobs"""
    ENTRY = "Entry Level"
    MID = "Mid Level"
    SENIOR = "Senior Level"
    EXECUTIVE = "Executive"


class EducationLevel(str, enum.Enum):
    HIGH_SCHOOL = "High School"
    ASSOCIATE = "Associate"
    BACHELOR = "Bachelor"
    MASTER = "Master"
    PHD = "PhD"
    ANY = "Any"


class User(Base, TimestampMixin):
    """End user of the public job portal"""

    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(enum_column(UserRole), nullable=False, default=UserRole.USER, index=True)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    is_verified = Column(Boolean, nullable=False, default=False, index=True)
    phone = Column(String(50), nullable=True)
    city = Column(String(100), nullable=True)
    country = Column(String(100), nullable=True)
    bio = Column(Text, nullable=True)
    experience = Column(enum_column(ExperienceLevel), nullable=True, default=ExperienceLevel.ENTRY)
    education = Column(enum_column(EducationLevel), nullable=True, default=EducationLevel.BACHELOR)
    last_login = Column(DateTime(timezone=True), nullable=True)
    login_count = Column(Integer, nullable=False, default=0)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
