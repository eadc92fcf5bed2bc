"""Pydantic schemas for authentication"""

from typing import List, Optional

from pydantic import EmailStr, Field, field_validator

from backend.app.models.admin import AdminRole, Permission
from backend.app.models.user import EducationLevel, ExperienceLevel
from backend.app.schemas.admin import AdminResponse
from backend.app.schemas.common import CamelModel
from backend.app.schemas.user import UserResponse

# bcrypt only looks at the first 72 bytes
PASSWORD_MAX_LENGTH = 72


def normalize_email(value: str) -> str:
    return value.strip().lower()


class LoginRequest(CamelModel):
    """Schema for admin and user login"""
    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LENGTH)

    @field_validator("email")
    @classmethod
    def lower_email(cls, v):
        return normalize_email(v)


class RegisterRequest(CamelModel):
    """Schema for portal registration"""
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=PASSWORD_MAX_LENGTH)
    phone: Optional[str] = Field(None, max_length=50)
    city: Optional[str] = Field(None, max_length=100)
    country: Optional[str] = Field(None, max_length=100)
    experience: Optional[ExperienceLevel] = None
    education: Optional[EducationLevel] = None

    @field_validator("email")
    @classmethod
    def lower_email(cls, v):
        return normalize_email(v)

    @field_validator("first_name", "last_name")
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()


class ChangePasswordRequest(CamelModel):
    current_password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LENGTH)
    new_password: str = Field(..., min_length=6, max_length=PASSWORD_MAX_LENGTH)


class AdminProfileUpdate(CamelModel):
    """Fields an admin may change on their own profile"""
    first_name: Optional[str] = Field(None, min_length=1, max_length=50)
    last_name: Optional[str] = Field(None, min_length=1, max_length=50)
    phone: Optional[str] = Field(None, max_length=50)
    department: Optional[str] = Field(None, max_length=50)
    profile_image: Optional[str] = Field(None, max_length=500)


class AdminAuthData(CamelModel):
    admin: AdminResponse
    token: str


class UserAuthData(CamelModel):
    user: UserResponse
    token: str


class TokenData(CamelModel):
    token: str


class PermissionsData(CamelModel):
    role: AdminRole
    permissions: List[Permission]
