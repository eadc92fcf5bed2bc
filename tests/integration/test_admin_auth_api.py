"""Integration tests for admin authentication endpoints"""

from datetime import timedelta

import pytest

from backend.app.models.admin import AdminRole, Permission
from backend.app.repositories.principal_repository import AdminRepository
from backend.app.services.auth_service import TokenScope
from tests.conftest import TEST_PASSWORD, create_test_admin, create_test_user, get_auth_headers

LOGIN_URL = "/api/admin/auth/login"
PROFILE_URL = "/api/admin/auth/profile"


class TestAdminLogin:
    """Integration tests for POST /api/admin/auth/login"""

    async def test_login_success(self, client, db_session):
        admin = await create_test_admin(db_session, email="login@example.com")

        response = await client.post(LOGIN_URL, json={"email": "login@example.com", "password": TEST_PASSWORD})

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["data"]["admin"]["id"] == str(admin.id)
        assert body["data"]["admin"]["lastLogin"] is not None
        assert "passwordHash" not in body["data"]["admin"]
        assert body["data"]["token"]

    async def test_login_token_opens_profile(self, client, db_session):
        await create_test_admin(db_session, email="token@example.com")
        login = await client.post(LOGIN_URL, json={"email": "token@example.com", "password": TEST_PASSWORD})
        token = login.json()["data"]["token"]

        response = await client.get(PROFILE_URL, headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 200
        assert response.json()["data"]["email"] == "token@example.com"

    async def test_login_email_ignores_case(self, client, db_session):
        await create_test_admin(db_session, email="case@example.com")

        response = await client.post(LOGIN_URL, json={"email": "CASE@Example.com", "password": TEST_PASSWORD})
        assert response.status_code == 200

    async def test_login_failures_are_uniform(self, client, db_session):
        """Unknown email, wrong password and deactivated account look identical"""
        active = await create_test_admin(db_session)
        inactive = await create_test_admin(db_session, is_active=False)

        responses = [
            await client.post(LOGIN_URL, json={"email": "ghost@example.com", "password": TEST_PASSWORD}),
            await client.post(LOGIN_URL, json={"email": active.email, "password": "wrong-password"}),
            await client.post(LOGIN_URL, json={"email": inactive.email, "password": TEST_PASSWORD}),
        ]

        assert {r.status_code for r in responses} == {401}
        assert len({r.json()["message"] for r in responses}) == 1

    async def test_login_missing_fields(self, client):
        response = await client.post(LOGIN_URL, json={"email": "someone@example.com"})

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert any(error["field"] == "password" for error in body["errors"])

    async def test_user_cannot_login_as_admin(self, client, db_session):
        user = await create_test_user(db_session)

        response = await client.post(LOGIN_URL, json={"email": user.email, "password": TEST_PASSWORD})
        assert response.status_code == 401


class TestAdminAuthGate:
    """Integration tests for the bearer token gate on admin endpoints"""

    async def test_missing_token(self, client):
        response = await client.get(PROFILE_URL)

        assert response.status_code == 401
        assert response.json()["success"] is False

    async def test_garbage_token(self, client):
        response = await client.get(PROFILE_URL, headers={"Authorization": "Bearer not-a-token"})
        assert response.status_code == 401

    async def test_expired_token(self, app, client, super_admin):
        token = app.state.token_service.issue(super_admin.id, TokenScope.ADMIN, expires_delta=timedelta(seconds=-5))

        response = await client.get(PROFILE_URL, headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["message"] == "Token has expired"

    async def test_user_token_rejected(self, app, client, job_seeker):
        headers = get_auth_headers(app, job_seeker, TokenScope.USER)

        response = await client.get(PROFILE_URL, headers=headers)
        assert response.status_code == 401

    async def test_deactivated_admin_token_stops_working(self, client, db_session, admin_headers, super_admin):
        assert (await client.get(PROFILE_URL, headers=admin_headers)).status_code == 200

        repo = AdminRepository(db_session)
        await repo.update(await repo.get_by_id(super_admin.id), {"is_active": False})
        await db_session.commit()

        response = await client.get(PROFILE_URL, headers=admin_headers)
        assert response.status_code == 401
        assert response.json()["message"] == "Account is deactivated"

    async def test_deleted_admin_token_rejected(self, client, db_session, admin_headers, super_admin):
        repo = AdminRepository(db_session)
        await repo.delete(await repo.get_by_id(super_admin.id))
        await db_session.commit()

        response = await client.get(PROFILE_URL, headers=admin_headers)
        assert response.status_code == 401


class TestAdminProfile:
    """Integration tests for profile, password, permissions and refresh"""

    async def test_update_profile(self, client, admin_headers):
        response = await client.put(
            PROFILE_URL, headers=admin_headers, json={"firstName": "Grace", "department": "Ops"}
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["firstName"] == "Grace"
        assert data["fullName"] == "Grace Admin"
        assert data["department"] == "Ops"

    async def test_change_password(self, client, admin_headers, super_admin):
        wrong = await client.put(
            "/api/admin/auth/change-password",
            headers=admin_headers,
            json={"currentPassword": "nope", "newPassword": "brand-new-pass"},
        )
        assert wrong.status_code == 400

        response = await client.put(
            "/api/admin/auth/change-password",
            headers=admin_headers,
            json={"currentPassword": TEST_PASSWORD, "newPassword": "brand-new-pass"},
        )
        assert response.status_code == 200

        old = await client.post(LOGIN_URL, json={"email": super_admin.email, "password": TEST_PASSWORD})
        new = await client.post(LOGIN_URL, json={"email": super_admin.email, "password": "brand-new-pass"})
        assert old.status_code == 401
        assert new.status_code == 200

    async def test_super_admin_permissions(self, client, admin_headers):
        response = await client.get("/api/admin/auth/permissions", headers=admin_headers)

        data = response.json()["data"]
        assert data["role"] == "super_admin"
        assert set(data["permissions"]) == {p.value for p in Permission}

    async def test_granted_permissions(self, app, client, db_session):
        admin = await create_test_admin(db_session, role=AdminRole.ADMIN, permissions=[Permission.MANAGE_JOBS])
        headers = get_auth_headers(app, admin, TokenScope.ADMIN)

        response = await client.get("/api/admin/auth/permissions", headers=headers)
        assert response.json()["data"]["permissions"] == ["manage_jobs"]

    async def test_refresh_and_logout(self, client, admin_headers):
        refresh = await client.post("/api/admin/auth/refresh", headers=admin_headers)
        assert refresh.status_code == 200
        new_headers = {"Authorization": f"Bearer {refresh.json()['data']['token']}"}

        assert (await client.get(PROFILE_URL, headers=new_headers)).status_code == 200
        assert (await client.post("/api/admin/auth/logout", headers=admin_headers)).status_code == 200


@pytest.mark.parametrize("path", [
    "/api/admin/users",
    "/api/admin/jobs",
    "/api/admin/companies",
    "/api/admin/categories",
    "/api/admin/applications",
    "/api/admin/faqs",
    "/api/admin/content",
    "/api/admin/admins",
])
async def test_admin_lists_require_permission(app, client, db_session, path):
    moderator = await create_test_admin(db_session, role=AdminRole.MODERATOR)
    headers = get_auth_headers(app, moderator, TokenScope.ADMIN)

    response = await client.get(path, headers=headers)

    assert response.status_code == 403
    assert response.json()["success"] is False
