"""Unit tests for the login flow and password handling"""

import pytest

from backend.app.core.exceptions import ConflictException, InvalidCredentialsError, ValidationException
from backend.app.models.admin import AdminRole
from backend.app.repositories.principal_repository import (
    AdminRepository,
    PrincipalRepository,
    UserRepository,
)
from backend.app.services.auth_service import AuthService, TokenScope
from tests.conftest import TEST_PASSWORD, create_test_admin, create_test_user


@pytest.fixture
def auth_service(token_service) -> AuthService:
    return AuthService(token_service)


class TestLogin:
    """Unit tests for AuthService.login"""

    async def test_successful_login_returns_token_for_principal(self, db_session, auth_service, token_service):
        admin = await create_test_admin(db_session, email="owner@example.com")

        principal, token = await auth_service.login(
            AdminRepository(db_session), "owner@example.com", TEST_PASSWORD, TokenScope.ADMIN
        )

        assert principal.id == admin.id
        assert token_service.verify(token, TokenScope.ADMIN) == str(admin.id)

    async def test_email_match_ignores_case(self, db_session, auth_service):
        await create_test_admin(db_session, email="mixed@example.com")

        principal, _ = await auth_service.login(
            AdminRepository(db_session), "MiXeD@Example.COM", TEST_PASSWORD, TokenScope.ADMIN
        )
        assert principal.email == "mixed@example.com"

    async def test_login_records_last_login(self, db_session, auth_service):
        admin = await create_test_admin(db_session)
        assert admin.last_login is None

        principal, _ = await auth_service.login(
            AdminRepository(db_session), admin.email, TEST_PASSWORD, TokenScope.ADMIN
        )
        assert principal.last_login is not None

    async def test_user_login_counts_logins(self, db_session, auth_service):
        user = await create_test_user(db_session)

        for _ in range(2):
            principal, _ = await auth_service.login(
                UserRepository(db_session), user.email, TEST_PASSWORD, TokenScope.USER
            )
        assert principal.login_count == 2

    async def test_unknown_email_rejected(self, db_session, auth_service):
        with pytest.raises(InvalidCredentialsError) as exc_info:
            await auth_service.login(
                AdminRepository(db_session), "nobody@example.com", TEST_PASSWORD, TokenScope.ADMIN
            )
        assert exc_info.value.status_code == 401

    async def test_failures_are_indistinguishable(self, db_session, auth_service):
        """Unknown email, wrong password and deactivated account give the same error"""
        active = await create_test_admin(db_session)
        inactive = await create_test_admin(db_session, is_active=False)
        repo = AdminRepository(db_session)

        messages = []
        for email, password in [
            ("missing@example.com", TEST_PASSWORD),
            (active.email, "wrong-password"),
            (inactive.email, TEST_PASSWORD),
        ]:
            with pytest.raises(InvalidCredentialsError) as exc_info:
                await auth_service.login(repo, email, password, TokenScope.ADMIN)
            messages.append((exc_info.value.status_code, exc_info.value.message))

        assert len(set(messages)) == 1

    async def test_failed_login_does_not_touch_last_login(self, db_session, auth_service):
        admin = await create_test_admin(db_session)

        with pytest.raises(InvalidCredentialsError):
            await auth_service.login(AdminRepository(db_session), admin.email, "nope", TokenScope.ADMIN)

        reloaded = await AdminRepository(db_session).get_by_id(admin.id)
        assert reloaded.last_login is None

    async def test_admin_credentials_do_not_open_portal(self, db_session, auth_service):
        admin = await create_test_admin(db_session, role=AdminRole.ADMIN)

        with pytest.raises(InvalidCredentialsError):
            await auth_service.login(UserRepository(db_session), admin.email, TEST_PASSWORD, TokenScope.USER)


class TestPrincipalRepository:
    """Unit tests for account creation and password changes"""

    async def test_duplicate_email_rejected_ignoring_case(self, db_session):
        await create_test_user(db_session, email="taken@example.com")

        with pytest.raises(ConflictException) as exc_info:
            await create_test_user(db_session, email="TAKEN@example.com")

        assert exc_info.value.message == "Email already registered"
        assert exc_info.value.errors[0]["field"] == "email"

    async def test_email_stored_lower_case(self, db_session):
        user = await create_test_user(db_session, email="Upper.Case@Example.com")
        assert user.email == "upper.case@example.com"

    async def test_password_is_hashed(self, db_session):
        user = await create_test_user(db_session)
        assert user.password_hash != TEST_PASSWORD
        assert PrincipalRepository.verify_password(TEST_PASSWORD, user.password_hash)

    async def test_change_password_requires_current_password(self, db_session):
        admin = await create_test_admin(db_session)
        repo = AdminRepository(db_session)

        with pytest.raises(ValidationException) as exc_info:
            await repo.change_password(admin, "not-the-password", "new-password-1")
        assert exc_info.value.errors[0]["field"] == "currentPassword"

        await repo.change_password(admin, TEST_PASSWORD, "new-password-1")
        assert repo.verify_password("new-password-1", admin.password_hash)
        assert not repo.verify_password(TEST_PASSWORD, admin.password_hash)


class TestPasswordHashingEdgeCases:
    """Unit tests for password hashing edge cases"""

    def test_special_characters_password(self):
        """Test password with special characters"""
        special_password = "p@$$w0rd!#%&*()[]{}|\\:;\"'<>,.?/~`"
        hashed = PrincipalRepository.hash_password(special_password)
        assert PrincipalRepository.verify_password(special_password, hashed)

    def test_unicode_password(self):
        """Test password with unicode characters"""
        unicode_password = "пароль密码"
        hashed = PrincipalRepository.hash_password(unicode_password)
        assert PrincipalRepository.verify_password(unicode_password, hashed)

    def test_password_case_sensitivity(self):
        """Test that password verification is case-sensitive"""
        hashed = PrincipalRepository.hash_password("Password123")
        assert not PrincipalRepository.verify_password("password123", hashed)

    def test_same_password_hashes_differently(self):
        first = PrincipalRepository.hash_password("repeatable")
        second = PrincipalRepository.hash_password("repeatable")
        assert first != second
