"""Credential store for admins and end users"""

from typing import Any, ClassVar, Dict, Optional, Union

from passlib.context import CryptContext
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from backend.app.core.exceptions import ConflictException, ValidationException
from backend.app.core.logging import get_logger
from backend.app.models.admin import Admin
from backend.app.models.base import utcnow
from backend.app.models.user import User, UserRole
from backend.app.repositories.base_repository import BaseRepository
from backend.app.schemas.user import UserBulkUpdate

logger = get_logger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

Principal = Union[Admin, User]


class PrincipalRepository(BaseRepository):
    """Shared credential operations for any account table with email/password_hash"""

    conflict_message: ClassVar[str] = "Email already registered"

    @staticmethod
    def hash_password(password: str) -> str:
        """Hash a password using bcrypt"""
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash"""
        return pwd_context.verify(plain_password, hashed_password)

    @staticmethod
    def dummy_verify() -> None:
        """Spend the time of a hash check when there is no account to check against"""
        pwd_context.dummy_verify()

    async def get_by_email(self, email: str) -> Optional[Principal]:
        """
        Get account by email, ignoring case

        Args:
            email: Email address as typed by the client

        Returns:
            Account if found, None otherwise
        """
        result = await self.session.execute(
            select(self.model).where(func.lower(self.model.email) == email.strip().lower())
        )
        return result.scalar_one_or_none()

    async def create_principal(self, data: Dict[str, Any]) -> Principal:
        """
        Create an account, hashing its password

        Args:
            data: Column values; must contain "email" and a plain "password"

        Returns:
            Created account

        Raises:
            ConflictException: If the email is already registered
        """
        values = dict(data)
        values["email"] = values["email"].strip().lower()
        values["password_hash"] = self.hash_password(values.pop("password"))

        if await self.get_by_email(values["email"]) is not None:
            raise self.conflict_error(None)

        return await self.create(values)

    async def change_password(self, principal: Principal, current: str, new: str) -> None:
        if not self.verify_password(current, principal.password_hash):
            raise ValidationException(
                "Current password is incorrect",
                errors=[{"field": "currentPassword", "message": "Current password is incorrect", "type": "value_error"}],
            )
        principal.password_hash = self.hash_password(new)
        await self.flush()
        logger.info(f"Password changed for {self.label.lower()}: {principal.id}")

    async def record_login(self, principal: Principal) -> None:
        """Stamp the last successful login"""
        principal.last_login = utcnow()
        await self.flush()

    def conflict_error(self, exc: Optional[IntegrityError]) -> ConflictException:
        return ConflictException(
            self.conflict_message,
            errors=[{"field": "email", "message": self.conflict_message, "type": "unique"}],
        )


class AdminRepository(PrincipalRepository):
    """Repository for Admin accounts"""

    model = Admin
    label = "Admin"
    sort_columns = {
        "createdAt": "created_at",
        "firstName": "first_name",
        "lastName": "last_name",
        "email": "email",
        "role": "role",
    }
    search_columns = ("first_name", "last_name", "email")


class UserRepository(PrincipalRepository):
    """Repository for portal users"""

    model = User
    label = "User"
    sort_columns = {
        "createdAt": "created_at",
        "firstName": "first_name",
        "lastName": "last_name",
        "email": "email",
        "role": "role",
    }
    search_columns = ("first_name", "last_name", "email")
    bulk_update_schema = UserBulkUpdate

    async def record_login(self, principal: User) -> None:
        principal.last_login = utcnow()
        principal.login_count = (principal.login_count or 0) + 1
        await self.flush()

    async def delete(self, obj: User) -> None:
        if obj.role == UserRole.ADMIN:
            raise ValidationException("Cannot delete admin users")
        await super().delete(obj)
