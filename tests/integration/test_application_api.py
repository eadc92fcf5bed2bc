"""Integration tests for applying to jobs and reviewing applications"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from sqlalchemy import func, select

from backend.app.models.application import Application
from backend.app.models.job import JobStatus
from backend.app.models.user import UserRole
from backend.app.repositories.application_repository import ApplicationRepository
from backend.app.repositories.job_repository import JobRepository
from backend.app.services.auth_service import TokenScope
from tests.conftest import create_test_job, create_test_user, get_auth_headers

APPLY_URL = "/api/applications"


async def count_applications(db_session) -> int:
    return await db_session.scalar(select(func.count()).select_from(Application))


class TestApply:

    async def test_apply(self, client, db_session, super_admin, user_headers, job_seeker):
        job = await create_test_job(db_session, super_admin)

        response = await client.post(
            APPLY_URL,
            headers=user_headers,
            json={"jobId": str(job.id), "coverLetter": "I would love to join.", "availability": "2-weeks"},
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["status"] == "pending"
        assert data["applicantId"] == str(job_seeker.id)
        assert data["companyId"] == str(job.company_id)
        assert data["job"]["title"] == "Backend Engineer"
        assert data["applicant"]["email"] == job_seeker.email

        reloaded = await JobRepository(db_session).get_by_id(job.id)
        assert reloaded.application_count == 1

    async def test_duplicate_application_rejected(self, client, db_session, super_admin, user_headers):
        job = await create_test_job(db_session, super_admin)
        payload = {"jobId": str(job.id)}

        first = await client.post(APPLY_URL, headers=user_headers, json=payload)
        second = await client.post(APPLY_URL, headers=user_headers, json=payload)

        assert first.status_code == 201
        assert second.status_code == 400
        assert second.json()["message"] == "You have already applied for this job"
        assert await count_applications(db_session) == 1

    async def test_concurrent_duplicate_rejected_by_constraint(
        self, client, db_session, super_admin, user_headers, monkeypatch
    ):
        """Without the pre-check the unique constraint still yields a 400"""
        async def never_applied(self, job_id, applicant_id):
            return False

        monkeypatch.setattr(ApplicationRepository, "exists", never_applied)
        job = await create_test_job(db_session, super_admin)
        payload = {"jobId": str(job.id)}

        first = await client.post(APPLY_URL, headers=user_headers, json=payload)
        second = await client.post(APPLY_URL, headers=user_headers, json=payload)

        assert first.status_code == 201
        assert second.status_code == 400
        assert second.json() == {"success": False, "message": "You have already applied for this job"}
        assert await count_applications(db_session) == 1

    async def test_unknown_job(self, client, user_headers):
        response = await client.post(APPLY_URL, headers=user_headers, json={"jobId": str(uuid4())})
        assert response.status_code == 404

    async def test_closed_job(self, client, db_session, super_admin, user_headers):
        job = await create_test_job(db_session, super_admin, status=JobStatus.INACTIVE)

        response = await client.post(APPLY_URL, headers=user_headers, json={"jobId": str(job.id)})

        assert response.status_code == 400
        assert await count_applications(db_session) == 0

    async def test_deadline_passed(self, client, db_session, super_admin, user_headers):
        job = await create_test_job(
            db_session, super_admin, application_deadline=datetime.now(timezone.utc) - timedelta(days=1)
        )

        response = await client.post(APPLY_URL, headers=user_headers, json={"jobId": str(job.id)})

        assert response.status_code == 400
        assert response.json()["message"] == "Application deadline has passed"

    async def test_employer_cannot_apply(self, app, client, db_session, super_admin):
        employer = await create_test_user(db_session, role=UserRole.EMPLOYER)
        job = await create_test_job(db_session, super_admin)

        response = await client.post(
            APPLY_URL, headers=get_auth_headers(app, employer, TokenScope.USER), json={"jobId": str(job.id)}
        )
        assert response.status_code == 403

    async def test_requires_authentication(self, client, db_session, super_admin):
        job = await create_test_job(db_session, super_admin)

        response = await client.post(APPLY_URL, json={"jobId": str(job.id)})
        assert response.status_code == 401


class TestMyApplications:

    async def test_lists_only_own_applications(self, app, client, db_session, super_admin, user_headers):
        job = await create_test_job(db_session, super_admin)
        other = await create_test_user(db_session)
        await client.post(APPLY_URL, headers=user_headers, json={"jobId": str(job.id)})
        await client.post(
            APPLY_URL, headers=get_auth_headers(app, other, TokenScope.USER), json={"jobId": str(job.id)}
        )

        response = await client.get(f"{APPLY_URL}/my-applications", headers=user_headers)

        assert response.status_code == 200
        assert response.json()["pagination"]["totalItems"] == 1

    async def test_withdraw(self, client, db_session, super_admin, user_headers):
        job = await create_test_job(db_session, super_admin)
        created = await client.post(APPLY_URL, headers=user_headers, json={"jobId": str(job.id)})
        application_id = created.json()["data"]["id"]

        response = await client.put(f"{APPLY_URL}/{application_id}/withdraw", headers=user_headers)
        assert response.status_code == 200
        assert response.json()["data"]["status"] == "withdrawn"

        again = await client.put(f"{APPLY_URL}/{application_id}/withdraw", headers=user_headers)
        assert again.status_code == 400

    async def test_cannot_withdraw_someone_elses(self, app, client, db_session, super_admin, user_headers):
        job = await create_test_job(db_session, super_admin)
        created = await client.post(APPLY_URL, headers=user_headers, json={"jobId": str(job.id)})
        other = await create_test_user(db_session)

        response = await client.put(
            f"{APPLY_URL}/{created.json()['data']['id']}/withdraw",
            headers=get_auth_headers(app, other, TokenScope.USER),
        )
        assert response.status_code == 404


class TestAdminApplications:

    async def test_review_flow(self, client, db_session, super_admin, admin_headers, user_headers):
        job = await create_test_job(db_session, super_admin)
        created = await client.post(APPLY_URL, headers=user_headers, json={"jobId": str(job.id)})
        application_id = created.json()["data"]["id"]

        response = await client.patch(
            f"/api/admin/applications/{application_id}/status",
            headers=admin_headers,
            json={"status": "shortlisted", "notes": "Strong profile"},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["status"] == "shortlisted"
        assert data["notes"] == "Strong profile"
        assert data["reviewedBy"] == str(super_admin.id)
        assert data["reviewedAt"] is not None

    async def test_list_and_filter(self, client, db_session, super_admin, admin_headers, user_headers):
        job = await create_test_job(db_session, super_admin)
        await client.post(APPLY_URL, headers=user_headers, json={"jobId": str(job.id)})

        pending = await client.get("/api/admin/applications", headers=admin_headers, params={"status": "pending"})
        hired = await client.get("/api/admin/applications", headers=admin_headers, params={"status": "hired"})

        assert pending.json()["pagination"]["totalItems"] == 1
        assert hired.json()["data"] == []

    async def test_stats(self, client, db_session, super_admin, admin_headers, user_headers):
        job = await create_test_job(db_session, super_admin)
        await client.post(APPLY_URL, headers=user_headers, json={"jobId": str(job.id)})

        response = await client.get("/api/admin/applications/stats/overview", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["data"]["overview"]["total"] == 1
