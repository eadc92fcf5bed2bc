"""Admin account management API endpoints"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.api.deps import page_response
from backend.app.core.database import get_db
from backend.app.core.exceptions import ValidationException
from backend.app.core.logging import get_logger
from backend.app.core.pagination import ListParams, list_params
from backend.app.core.security import PermissionChecker
from backend.app.models.admin import Admin, AdminRole, Permission
from backend.app.repositories.principal_repository import AdminRepository
from backend.app.schemas.admin import AdminCreate, AdminResponse, AdminUpdate
from backend.app.schemas.common import ApiResponse

logger = get_logger(__name__)

router = APIRouter()

require_manage_admins = PermissionChecker(Permission.MANAGE_ADMINS)


@router.get("", response_model=ApiResponse[List[AdminResponse]])
async def list_admins(
    params: ListParams = Depends(list_params(AdminRepository.sort_fields())),
    search: Optional[str] = Query(None, max_length=100),
    role: Optional[AdminRole] = None,
    current_admin: Admin = Depends(require_manage_admins),
    db: AsyncSession = Depends(get_db)
):
    filters = [Admin.role == role] if role else []
    page = await AdminRepository(db).find_page(params, filters, search)
    return page_response(page, AdminResponse)


@router.get("/{admin_id}", response_model=ApiResponse[AdminResponse])
async def get_admin(
    admin_id: UUID,
    current_admin: Admin = Depends(require_manage_admins),
    db: AsyncSession = Depends(get_db)
):
    admin = await AdminRepository(db).get_or_404(admin_id)
    return ApiResponse(data=AdminResponse.model_validate(admin))


@router.post("", response_model=ApiResponse[AdminResponse], status_code=status.HTTP_201_CREATED)
async def create_admin(
    admin_data: AdminCreate,
    current_admin: Admin = Depends(require_manage_admins),
    db: AsyncSession = Depends(get_db)
):
    """
    Create an admin account

    Only a super admin may create another super admin.
    """
    if admin_data.role == AdminRole.SUPER_ADMIN and current_admin.role != AdminRole.SUPER_ADMIN:
        raise ValidationException("Only a super admin can create super admins")

    admin = await AdminRepository(db).create_principal(admin_data.model_dump())
    await db.commit()

    logger.info(f"Admin {current_admin.id} created admin {admin.id} with role {admin.role.value}")
    return ApiResponse(message="Admin created successfully", data=AdminResponse.model_validate(admin))


@router.put("/{admin_id}", response_model=ApiResponse[AdminResponse])
async def update_admin(
    admin_id: UUID,
    admin_data: AdminUpdate,
    current_admin: Admin = Depends(require_manage_admins),
    db: AsyncSession = Depends(get_db)
):
    repo = AdminRepository(db)
    admin = await repo.get_or_404(admin_id)
    updates = admin_data.model_dump(exclude_none=True)

    if admin.id == current_admin.id and ("role" in updates or updates.get("is_active") is False):
        raise ValidationException("You cannot change your own role or deactivate yourself")
    if updates.get("role") == AdminRole.SUPER_ADMIN and current_admin.role != AdminRole.SUPER_ADMIN:
        raise ValidationException("Only a super admin can grant the super admin role")

    admin = await repo.update(admin, updates)
    await db.commit()
    return ApiResponse(message="Admin updated successfully", data=AdminResponse.model_validate(admin))


@router.patch("/{admin_id}/deactivate", response_model=ApiResponse[AdminResponse])
async def deactivate_admin(
    admin_id: UUID,
    current_admin: Admin = Depends(require_manage_admins),
    db: AsyncSession = Depends(get_db)
):
    """Deactivate an admin; their outstanding tokens stop working on the next request"""
    if admin_id == current_admin.id:
        raise ValidationException("You cannot deactivate yourself")

    repo = AdminRepository(db)
    admin = await repo.update(await repo.get_or_404(admin_id), {"is_active": False})
    await db.commit()
    return ApiResponse(message="Admin deactivated successfully", data=AdminResponse.model_validate(admin))


@router.delete("/{admin_id}", response_model=ApiResponse)
async def delete_admin(
    admin_id: UUID,
    current_admin: Admin = Depends(require_manage_admins),
    db: AsyncSession = Depends(get_db)
):
    if admin_id == current_admin.id:
        raise ValidationException("You cannot delete yourself")

    repo = AdminRepository(db)
    admin = await repo.get_or_404(admin_id)
    if admin.role == AdminRole.SUPER_ADMIN and current_admin.role != AdminRole.SUPER_ADMIN:
        raise ValidationException("Only a super admin can delete super admins")

    await repo.delete(admin)
    await db.commit()
    logger.info(f"Admin {current_admin.id} deleted admin {admin_id}")
    return ApiResponse(message="Admin deleted successfully")
