"""End user schemas"""

from typing import Optional
from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from backend.app.models.user import EducationLevel, ExperienceLevel, UserRole
from backend.app.schemas.common import CamelModel, UTCDateTime


class UserResponse(CamelModel):
    id: UUID
    first_name: str
    last_name: str
    full_name: str
    email: str
    role: UserRole
    is_active: bool
    is_verified: bool
    phone: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    bio: Optional[str] = None
    experience: Optional[ExperienceLevel] = None
    education: Optional[EducationLevel] = None
    last_login: Optional[UTCDateTime] = None
    login_count: int = 0
    created_at: UTCDateTime
    updated_at: UTCDateTime


class UserCreate(CamelModel):
    """Admin-side user creation"""
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)
    role: UserRole = UserRole.USER
    is_active: bool = True
    is_verified: bool = False
    phone: Optional[str] = Field(None, max_length=50)
    city: Optional[str] = Field(None, max_length=100)
    country: Optional[str] = Field(None, max_length=100)
    experience: Optional[ExperienceLevel] = None
    education: Optional[EducationLevel] = None

    @field_validator("email")
    @classmethod
    def lower_email(cls, v):
        return v.strip().lower()


class UserProfileUpdate(CamelModel):
    """Fields a user may change on their own profile"""
    first_name: Optional[str] = Field(None, min_length=1, max_length=50)
    last_name: Optional[str] = Field(None, min_length=1, max_length=50)
    phone: Optional[str] = Field(None, max_length=50)
    city: Optional[str] = Field(None, max_length=100)
    country: Optional[str] = Field(None, max_length=100)
    bio: Optional[str] = Field(None, max_length=500)
    experience: Optional[ExperienceLevel] = None
    education: Optional[EducationLevel] = None


class UserUpdate(UserProfileUpdate):
    """Admin-side user update"""
    role: Optional[UserRole] = None
    is_active: Optional[bool] = None
    is_verified: Optional[bool] = None


class UserBulkUpdate(CamelModel):
    is_active: Optional[bool] = None
    is_verified: Optional[bool] = None
    role: Optional[UserRole] = None
