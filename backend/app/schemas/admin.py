"""Admin account schemas"""

from typing import List, Optional
from uuid import UUID

from pydantic import EmailStr, Field, field_validator

from backend.app.models.admin import AdminRole, Permission
from backend.app.schemas.common import CamelModel, UTCDateTime


class AdminResponse(CamelModel):
    """Admin as exposed by the API; never includes the password hash"""
    id: UUID
    first_name: str
    last_name: str
    full_name: str
    email: str
    role: AdminRole
    permissions: List[Permission]
    is_active: bool
    last_login: Optional[UTCDateTime] = None
    phone: Optional[str] = None
    department: Optional[str] = None
    profile_image: Optional[str] = None
    created_at: UTCDateTime
    updated_at: UTCDateTime


class AdminCreate(CamelModel):
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)
    role: AdminRole = AdminRole.ADMIN
    permissions: List[Permission] = Field(default_factory=list)
    phone: Optional[str] = Field(None, max_length=50)
    department: Optional[str] = Field(None, max_length=50)

    @field_validator("email")
    @classmethod
    def lower_email(cls, v):
        return v.strip().lower()

    @field_validator("permissions")
    @classmethod
    def unique_permissions(cls, v):
        return list(dict.fromkeys(v))


class AdminUpdate(CamelModel):
    first_name: Optional[str] = Field(None, min_length=1, max_length=50)
    last_name: Optional[str] = Field(None, min_length=1, max_length=50)
    role: Optional[AdminRole] = None
    permissions: Optional[List[Permission]] = None
    is_active: Optional[bool] = None
    phone: Optional[str] = Field(None, max_length=50)
    department: Optional[str] = Field(None, max_length=50)
    profile_image: Optional[str] = Field(None, max_length=500)
