"""Admin authentication API endpoints"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.database import get_db
from backend.app.core.logging import get_logger
from backend.app.core.security import get_current_admin, get_token_service
from backend.app.models.admin import Admin, AdminRole, Permission
from backend.app.repositories.principal_repository import AdminRepository
from backend.app.schemas.admin import AdminResponse
from backend.app.schemas.auth import (
    AdminAuthData,
    AdminProfileUpdate,
    ChangePasswordRequest,
    LoginRequest,
    PermissionsData,
    TokenData,
)
from backend.app.schemas.common import ApiResponse
from backend.app.services.auth_service import AuthService, TokenScope, TokenService

logger = get_logger(__name__)

router = APIRouter()


def get_auth_service(token_service: TokenService = Depends(get_token_service)) -> AuthService:
    """Dependency to get auth service"""
    return AuthService(token_service)


@router.post("/login", response_model=ApiResponse[AdminAuthData])
async def login(
    credentials: LoginRequest,
    db: AsyncSession = Depends(get_db),
    auth_service: AuthService = Depends(get_auth_service)
):
    """
    Admin login

    Returns the admin profile and a bearer token valid for the configured
    number of days. Unknown email, wrong password and deactivated account
    all produce the same 401 response.
    """
    admin, token = await auth_service.login(
        AdminRepository(db), credentials.email, credentials.password, TokenScope.ADMIN
    )
    await db.commit()

    return ApiResponse(
        message="Login successful",
        data=AdminAuthData(admin=AdminResponse.model_validate(admin), token=token),
    )


@router.get("/profile", response_model=ApiResponse[AdminResponse])
async def get_profile(current_admin: Admin = Depends(get_current_admin)):
    """Get the authenticated admin's profile"""
    return ApiResponse(data=AdminResponse.model_validate(current_admin))


@router.put("/profile", response_model=ApiResponse[AdminResponse])
async def update_profile(
    profile: AdminProfileUpdate,
    current_admin: Admin = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db)
):
    """Update the authenticated admin's own profile fields"""
    admin = await AdminRepository(db).update(current_admin, profile.model_dump(exclude_none=True))
    await db.commit()

    return ApiResponse(message="Profile updated successfully", data=AdminResponse.model_validate(admin))


@router.put("/change-password", response_model=ApiResponse)
async def change_password(
    passwords: ChangePasswordRequest,
    current_admin: Admin = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db)
):
    """Change password after re-checking the current one"""
    await AdminRepository(db).change_password(
        current_admin, passwords.current_password, passwords.new_password
    )
    await db.commit()

    return ApiResponse(message="Password changed successfully")


@router.post("/logout", response_model=ApiResponse)
async def logout(current_admin: Admin = Depends(get_current_admin)):
    """
    Logout

    Tokens are stateless; the client discards its token. Nothing is revoked
    server-side.
    """
    logger.info(f"Admin logged out: {current_admin.id}")
    return ApiResponse(message="Logout successful")


@router.get("/permissions", response_model=ApiResponse[PermissionsData])
async def get_permissions(current_admin: Admin = Depends(get_current_admin)):
    """List the permissions the authenticated admin effectively holds"""
    if current_admin.role == AdminRole.SUPER_ADMIN:
        permissions = list(Permission)
    else:
        permissions = [Permission(p) for p in current_admin.permissions or []]

    return ApiResponse(data=PermissionsData(role=current_admin.role, permissions=permissions))


@router.post("/refresh", response_model=ApiResponse[TokenData])
async def refresh_token(
    current_admin: Admin = Depends(get_current_admin),
    token_service: TokenService = Depends(get_token_service)
):
    """Issue a fresh token for an authenticated, active admin"""
    token = token_service.issue(current_admin.id, TokenScope.ADMIN)
    return ApiResponse(message="Token refreshed successfully", data=TokenData(token=token))
