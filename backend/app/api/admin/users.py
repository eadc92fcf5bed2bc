"""Admin user management API endpoints"""

from typing import List, Literal, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.api.deps import bulk_response, get_stats_service, page_response
from backend.app.core.database import get_db
from backend.app.core.logging import get_logger
from backend.app.core.pagination import ListParams, list_params
from backend.app.core.security import PermissionChecker
from backend.app.models.admin import Admin, Permission
from backend.app.models.base import utcnow
from backend.app.models.user import User, UserRole
from backend.app.repositories.principal_repository import UserRepository
from backend.app.schemas.common import ApiResponse, BulkUpdateRequest, BulkUpdateResponse
from backend.app.schemas.user import UserCreate, UserResponse, UserUpdate
from backend.app.services.stats_service import StatsService, month_windows

logger = get_logger(__name__)

router = APIRouter()

require_manage_users = PermissionChecker(Permission.MANAGE_USERS)


@router.get("", response_model=ApiResponse[List[UserResponse]])
async def list_users(
    params: ListParams = Depends(list_params(UserRepository.sort_fields())),
    search: Optional[str] = Query(None, max_length=100),
    role: Optional[UserRole] = None,
    status: Optional[Literal["active", "inactive"]] = None,
    verified: Optional[bool] = None,
    current_admin: Admin = Depends(require_manage_users),
    db: AsyncSession = Depends(get_db)
):
    """
    List users

    **Filters:**
    - search: name or email substring
    - role, status (active/inactive), verified
    """
    filters = []
    if role:
        filters.append(User.role == role)
    if status:
        filters.append(User.is_active.is_(status == "active"))
    if verified is not None:
        filters.append(User.is_verified.is_(verified))

    page = await UserRepository(db).find_page(params, filters, search)
    return page_response(page, UserResponse)


@router.get("/stats/overview", response_model=ApiResponse[dict])
async def user_stats(
    current_admin: Admin = Depends(require_manage_users),
    stats: StatsService = Depends(get_stats_service)
):
    """User counts by state and role, plus registrations per month"""
    month_start, _ = month_windows(1, utcnow())[0]
    overview = await stats.overview_counts(User, {
        "total": [],
        "active": [User.is_active.is_(True)],
        "inactive": [User.is_active.is_(False)],
        "verified": [User.is_verified.is_(True)],
        "premium": [User.role == UserRole.PREMIUM],
        "newThisMonth": [User.created_at >= month_start],
    })
    return ApiResponse(data={
        "overview": overview,
        "byRole": await stats.count_by_field(User, "role"),
        "monthlyRegistrations": await stats.monthly_counts(User, "created_at", 12),
    })


@router.put("/bulk-update", response_model=ApiResponse[BulkUpdateResponse])
async def bulk_update_users(
    request: BulkUpdateRequest,
    current_admin: Admin = Depends(require_manage_users),
    db: AsyncSession = Depends(get_db)
):
    """
    Bulk update users

    **Allowed fields:** isActive, isVerified, role
    """
    result = await UserRepository(db).bulk_update(request.ids, request.updates)
    await db.commit()
    logger.info(f"Admin {current_admin.id} bulk updated {result.modified_count} users")
    return bulk_response(result, "users")


@router.get("/{user_id}", response_model=ApiResponse[UserResponse])
async def get_user(
    user_id: UUID,
    current_admin: Admin = Depends(require_manage_users),
    db: AsyncSession = Depends(get_db)
):
    user = await UserRepository(db).get_or_404(user_id)
    return ApiResponse(data=UserResponse.model_validate(user))


@router.post("", response_model=ApiResponse[UserResponse], status_code=status.HTTP_201_CREATED)
async def create_user(
    user_data: UserCreate,
    current_admin: Admin = Depends(require_manage_users),
    db: AsyncSession = Depends(get_db)
):
    user = await UserRepository(db).create_principal(user_data.model_dump())
    await db.commit()
    return ApiResponse(message="User created successfully", data=UserResponse.model_validate(user))


@router.put("/{user_id}", response_model=ApiResponse[UserResponse])
async def update_user(
    user_id: UUID,
    user_data: UserUpdate,
    current_admin: Admin = Depends(require_manage_users),
    db: AsyncSession = Depends(get_db)
):
    repo = UserRepository(db)
    user = await repo.get_or_404(user_id)
    user = await repo.update(user, user_data.model_dump(exclude_none=True))
    await db.commit()
    return ApiResponse(message="User updated successfully", data=UserResponse.model_validate(user))


@router.delete("/{user_id}", response_model=ApiResponse)
async def delete_user(
    user_id: UUID,
    current_admin: Admin = Depends(require_manage_users),
    db: AsyncSession = Depends(get_db)
):
    """Delete a user; accounts with the admin role cannot be deleted"""
    repo = UserRepository(db)
    user = await repo.get_or_404(user_id)
    await repo.delete(user)
    await db.commit()
    logger.info(f"Admin {current_admin.id} deleted user {user_id}")
    return ApiResponse(message="User deleted successfully")
