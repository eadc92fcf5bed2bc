"""Security utilities and dependencies for authentication"""

from typing import Optional, Sequence
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.database import get_db
from backend.app.core.exceptions import (
    AuthorizationException,
    MalformedTokenError,
    MissingTokenError,
    PrincipalInactiveError,
    PrincipalNotFoundError,
)
from backend.app.core.logging import get_logger
from backend.app.models.admin import Admin, AdminRole, Permission
from backend.app.models.user import User, UserRole
from backend.app.repositories.principal_repository import (
    AdminRepository,
    Principal,
    PrincipalRepository,
    UserRepository,
)
from backend.app.services.auth_service import TokenScope, TokenService

logger = get_logger(__name__)

# HTTP Bearer token scheme; a missing header is reported as 401 by the gate
security = HTTPBearer(auto_error=False)


def get_token_service(request: Request) -> TokenService:
    """Dependency returning the application's token service"""
    return request.app.state.token_service


async def authenticate(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials],
    repository: PrincipalRepository,
    scope: TokenScope
) -> Principal:
    """
    Resolve the bearer token on a request to an active principal

    Every request re-verifies the token and re-loads the principal, so a
    deactivation takes effect on the next request.

    Raises:
        MissingTokenError: If there is no bearer token
        ExpiredTokenError: If the token has expired
        MalformedTokenError: If the token is invalid
        PrincipalNotFoundError: If the subject no longer exists
        PrincipalInactiveError: If the subject is deactivated
    """
    if credentials is None or not credentials.credentials:
        raise MissingTokenError()

    principal_id = get_token_service(request).verify(credentials.credentials, scope)
    try:
        principal_uuid = UUID(principal_id)
    except ValueError:
        logger.warning(f"Token subject is not a valid id: {principal_id}")
        raise MalformedTokenError()

    principal = await repository.get_by_id(principal_uuid)
    if principal is None:
        logger.warning(f"{scope.value.capitalize()} not found for token subject: {principal_id}")
        raise PrincipalNotFoundError()

    if not principal.is_active:
        logger.warning(f"Deactivated {scope.value} presented a valid token: {principal_id}")
        raise PrincipalInactiveError()

    request.state.principal = principal
    # Plain copy for logging; the ORM object expires if the session rolls back
    request.state.principal_id = str(principal.id)
    return principal


async def get_current_admin(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db)
) -> Admin:
    """Dependency to get the current authenticated admin"""
    return await authenticate(request, credentials, AdminRepository(db), TokenScope.ADMIN)


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: AsyncSession = Depends(get_db)
) -> User:
    """Dependency to get the current authenticated portal user"""
    return await authenticate(request, credentials, UserRepository(db), TokenScope.USER)


def has_permission(admin: Admin, permission: Permission) -> bool:
    """Super admins hold every permission; others hold what they were granted"""
    if admin.role == AdminRole.SUPER_ADMIN:
        return True
    return permission in (admin.permissions or [])


class RoleChecker:
    """Dependency class for role-based access control over admins"""

    def __init__(self, allowed_roles: Sequence):
        self.allowed_roles = list(allowed_roles)

    def check(self, principal: Principal) -> Principal:
        """
        Check if a principal has one of the allowed roles

        Raises:
            AuthorizationException: If the role is not allowed
        """
        if principal.role not in self.allowed_roles:
            logger.warning(
                f"Principal {principal.id} with role {principal.role.value} "
                f"attempted to access resource requiring roles: {[r.value for r in self.allowed_roles]}"
            )
            raise AuthorizationException(
                f"Insufficient permissions. Required roles: {[r.value for r in self.allowed_roles]}"
            )
        return principal

    def __call__(self, admin: Admin = Depends(get_current_admin)) -> Admin:
        return self.check(admin)


class UserRoleChecker(RoleChecker):
    """Role check over portal users"""

    def __call__(self, user: User = Depends(get_current_user)) -> User:
        return self.check(user)


class PermissionChecker:
    """Dependency class granting access to admins holding one permission"""

    def __init__(self, permission: Permission):
        self.permission = permission

    def __call__(self, admin: Admin = Depends(get_current_admin)) -> Admin:
        if not has_permission(admin, self.permission):
            logger.warning(
                f"Admin {admin.id} with role {admin.role.value} lacks permission {self.permission.value}"
            )
            raise AuthorizationException(f"Permission required: {self.permission.value}")
        return admin


# Pre-defined checkers
require_job_seeker = UserRoleChecker([UserRole.USER, UserRole.PREMIUM])
require_employer = UserRoleChecker([UserRole.EMPLOYER, UserRole.ADMIN])
