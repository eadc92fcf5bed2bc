"""Unit tests for permission and role checks"""

import uuid

import pytest

from backend.app.core.exceptions import AuthorizationException
from backend.app.core.security import PermissionChecker, RoleChecker, UserRoleChecker, has_permission
from backend.app.models.admin import Admin, AdminRole, Permission
from backend.app.models.user import User, UserRole


def make_admin(role: AdminRole, permissions=()) -> Admin:
    return Admin(
        id=uuid.uuid4(),
        first_name="Test",
        last_name="Admin",
        email="checks@example.com",
        role=role,
        permissions=[p.value for p in permissions],
    )


class TestHasPermission:

    @pytest.mark.parametrize("permission", list(Permission))
    def test_super_admin_holds_every_permission(self, permission):
        assert has_permission(make_admin(AdminRole.SUPER_ADMIN), permission)

    def test_admin_holds_only_granted_permissions(self):
        admin = make_admin(AdminRole.ADMIN, [Permission.MANAGE_JOBS])

        assert has_permission(admin, Permission.MANAGE_JOBS)
        assert not has_permission(admin, Permission.MANAGE_USERS)

    def test_moderator_without_grants_holds_nothing(self):
        moderator = make_admin(AdminRole.MODERATOR)
        assert not any(has_permission(moderator, p) for p in Permission)


class TestPermissionChecker:

    def test_granted_permission_passes_admin_through(self):
        admin = make_admin(AdminRole.ADMIN, [Permission.MANAGE_FAQS])
        assert PermissionChecker(Permission.MANAGE_FAQS)(admin) is admin

    def test_missing_permission_is_forbidden(self):
        admin = make_admin(AdminRole.ADMIN, [Permission.MANAGE_FAQS])

        with pytest.raises(AuthorizationException) as exc_info:
            PermissionChecker(Permission.MANAGE_CONTENT)(admin)
        assert exc_info.value.status_code == 403


class TestRoleChecker:

    def test_allowed_role_passes(self):
        admin = make_admin(AdminRole.SUPER_ADMIN)
        assert RoleChecker([AdminRole.SUPER_ADMIN])(admin) is admin

    def test_disallowed_role_is_forbidden(self):
        with pytest.raises(AuthorizationException):
            RoleChecker([AdminRole.SUPER_ADMIN])(make_admin(AdminRole.MODERATOR))

    @pytest.mark.parametrize("role,allowed", [
        (UserRole.USER, True),
        (UserRole.PREMIUM, True),
        (UserRole.EMPLOYER, False),
        (UserRole.ADMIN, False),
    ])
    def test_job_seeker_roles(self, role, allowed):
        user = User(id=uuid.uuid4(), first_name="A", last_name="B", email="seeker@example.com", role=role)
        checker = UserRoleChecker([UserRole.USER, UserRole.PREMIUM])

        if allowed:
            assert checker(user) is user
        else:
            with pytest.raises(AuthorizationException):
                checker(user)
