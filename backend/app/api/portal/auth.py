"""Portal authentication API endpoints"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.database import get_db
from backend.app.core.logging import get_logger
from backend.app.core.security import get_current_user, get_token_service
from backend.app.models.user import User
from backend.app.repositories.principal_repository import UserRepository
from backend.app.schemas.auth import LoginRequest, RegisterRequest, TokenData, UserAuthData
from backend.app.schemas.common import ApiResponse
from backend.app.schemas.user import UserResponse
from backend.app.services.auth_service import AuthService, TokenScope, TokenService

logger = get_logger(__name__)

router = APIRouter()


def get_auth_service(token_service: TokenService = Depends(get_token_service)) -> AuthService:
    """Dependency to get auth service"""
    return AuthService(token_service)


@router.post("/register", response_model=ApiResponse[UserAuthData], status_code=status.HTTP_201_CREATED)
async def register(
    user_data: RegisterRequest,
    db: AsyncSession = Depends(get_db),
    token_service: TokenService = Depends(get_token_service)
):
    """
    Register a new job seeker

    **Requirements:**
    - Email must be unique (compared ignoring case)
    - Password must be at least 6 characters

    **Returns:**
    - The created user and a bearer token
    """
    user = await UserRepository(db).create_principal(user_data.model_dump(exclude_none=True))
    await db.commit()

    token = token_service.issue(user.id, TokenScope.USER)
    logger.info(f"User registered: {user.id}")

    return ApiResponse(
        message="User registered successfully",
        data=UserAuthData(user=UserResponse.model_validate(user), token=token),
    )


@router.post("/login", response_model=ApiResponse[UserAuthData])
async def login(
    credentials: LoginRequest,
    db: AsyncSession = Depends(get_db),
    auth_service: AuthService = Depends(get_auth_service)
):
    """Login with email and password; every failure is the same 401"""
    user, token = await auth_service.login(
        UserRepository(db), credentials.email, credentials.password, TokenScope.USER
    )
    await db.commit()

    return ApiResponse(
        message="Login successful",
        data=UserAuthData(user=UserResponse.model_validate(user), token=token),
    )


@router.get("/me", response_model=ApiResponse[UserResponse])
async def get_me(current_user: User = Depends(get_current_user)):
    """Get the authenticated user's profile"""
    return ApiResponse(data=UserResponse.model_validate(current_user))


@router.post("/refresh", response_model=ApiResponse[TokenData])
async def refresh_token(
    current_user: User = Depends(get_current_user),
    token_service: TokenService = Depends(get_token_service)
):
    token = token_service.issue(current_user.id, TokenScope.USER)
    return ApiResponse(message="Token refreshed successfully", data=TokenData(token=token))
