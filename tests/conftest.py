"""Pytest configuration and shared fixtures"""

from typing import AsyncGenerator, Optional
from uuid import uuid4

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.core.config import Settings
from backend.app.main import create_app
from backend.app.models.admin import Admin, AdminRole
from backend.app.models.job import Job, JobType
from backend.app.models.user import User, UserRole
from backend.app.repositories.category_repository import CategoryRepository
from backend.app.repositories.company_repository import CompanyRepository
from backend.app.repositories.job_repository import JobRepository
from backend.app.repositories.principal_repository import AdminRepository, UserRepository
from backend.app.services.auth_service import TokenScope, TokenService
from backend.app.services.job_service import JobService

TEST_PASSWORD = "testpassword123"
TEST_SECRET_KEY = "test-secret-key-for-jobportal-tests"


def make_settings(database_url: str, **overrides) -> Settings:
    values = {
        "DATABASE_URL": database_url,
        "SECRET_KEY": TEST_SECRET_KEY,
        "RATE_LIMIT_PER_MINUTE": 10_000,
        "AUTH_RATE_LIMIT_PER_MINUTE": 10_000,
        "LOG_LEVEL": "WARNING",
        "LOG_FORMAT": "text",
        "ENVIRONMENT": "test",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway SQLite database"""
    return make_settings(f"sqlite+aiosqlite:///{tmp_path / 'test_jobportal.db'}")


@pytest.fixture
def token_service(test_settings) -> TokenService:
    return TokenService(test_settings)


@pytest.fixture
async def app(test_settings):
    """Application with its schema created"""
    application = create_app(test_settings)
    await application.state.database.create_all()
    yield application
    await application.state.database.drop_all()
    await application.state.database.dispose()


@pytest.fixture
async def client(app) -> AsyncGenerator[httpx.AsyncClient, None]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture
async def db_session(app) -> AsyncGenerator[AsyncSession, None]:
    """Session on the application's database, independent of any request"""
    async with app.state.database.session_factory() as session:
        yield session


async def create_test_admin(
    db_session: AsyncSession,
    role: AdminRole = AdminRole.SUPER_ADMIN,
    permissions: Optional[list] = None,
    email: Optional[str] = None,
    is_active: bool = True,
) -> Admin:
    """Create an admin whose password is TEST_PASSWORD"""
    admin = await AdminRepository(db_session).create_principal({
        "first_name": "Test",
        "last_name": "Admin",
        "email": email or f"admin_{uuid4().hex[:8]}@example.com",
        "password": TEST_PASSWORD,
        "role": role,
        "permissions": [p.value for p in permissions or []],
        "is_active": is_active,
    })
    await db_session.commit()
    return admin


async def create_test_user(
    db_session: AsyncSession,
    role: UserRole = UserRole.USER,
    email: Optional[str] = None,
    is_active: bool = True,
) -> User:
    """Create a portal user whose password is TEST_PASSWORD"""
    user = await UserRepository(db_session).create_principal({
        "first_name": "Test",
        "last_name": "User",
        "email": email or f"user_{uuid4().hex[:8]}@example.com",
        "password": TEST_PASSWORD,
        "role": role,
        "is_active": is_active,
    })
    await db_session.commit()
    return user


async def create_test_job(
    db_session: AsyncSession,
    admin: Admin,
    title: str = "Backend Engineer",
    company: str = "Acme Corp",
    category: str = "Engineering",
    **overrides,
) -> Job:
    """Create a job through the job service so counts and cached names are set"""
    service = JobService(JobRepository(db_session), CompanyRepository(db_session), CategoryRepository(db_session))
    data = {
        "title": title,
        "description": "Build and operate backend services.",
        "company": company,
        "category": category,
        "job_type": JobType.FULL_TIME,
        "location": "Remote",
        "salary_range": "$100k - $130k",
        **overrides,
    }
    job = await service.create_job(data, admin.id)
    await db_session.commit()
    return job


def get_auth_headers(app, principal, scope: TokenScope) -> dict:
    """Bearer header for a principal, signed with the application's token service"""
    token = app.state.token_service.issue(principal.id, scope)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def super_admin(db_session) -> Admin:
    return await create_test_admin(db_session, role=AdminRole.SUPER_ADMIN)


@pytest.fixture
def admin_headers(app, super_admin) -> dict:
    return get_auth_headers(app, super_admin, TokenScope.ADMIN)


@pytest.fixture
async def job_seeker(db_session) -> User:
    return await create_test_user(db_session)


@pytest.fixture
def user_headers(app, job_seeker) -> dict:
    return get_auth_headers(app, job_seeker, TokenScope.USER)
