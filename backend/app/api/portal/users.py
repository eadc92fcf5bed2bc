"""Portal user profile API endpoints"""

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.database import get_db
from backend.app.core.exceptions import NotFoundException
from backend.app.core.security import get_current_user
from backend.app.models.user import User
from backend.app.repositories.application_repository import ApplicationRepository
from backend.app.repositories.principal_repository import UserRepository
from backend.app.schemas.application import ApplicationDetailResponse
from backend.app.schemas.common import ApiResponse
from backend.app.schemas.user import UserProfileUpdate, UserResponse

router = APIRouter()


@router.get("/profile", response_model=ApiResponse[UserResponse])
async def get_profile(current_user: User = Depends(get_current_user)):
    return ApiResponse(data=UserResponse.model_validate(current_user))


@router.put("/profile", response_model=ApiResponse[UserResponse])
async def update_profile(
    profile: UserProfileUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Update the authenticated user's own profile; role and status are not editable here"""
    user = await UserRepository(db).update(current_user, profile.model_dump(exclude_none=True))
    await db.commit()
    return ApiResponse(message="Profile updated successfully", data=UserResponse.model_validate(user))


@router.get("/applications/{application_id}", response_model=ApiResponse[ApplicationDetailResponse])
async def get_own_application(
    application_id: UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """One of the authenticated user's applications; anyone else's reads as not found"""
    application = await ApplicationRepository(db).get_for_applicant(application_id, current_user.id)
    if application is None:
        raise NotFoundException("Application not found")
    return ApiResponse(data=ApplicationDetailResponse.model_validate(application))
