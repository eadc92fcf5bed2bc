"""Integration tests for employers posting jobs and reviewing their applicants"""

import pytest

from backend.app.models.user import UserRole
from backend.app.services.auth_service import TokenScope
from tests.conftest import create_test_job, create_test_user, get_auth_headers

JOBS_URL = "/api/jobs"

JOB_POSTING = {
    "title": "Frontend Developer",
    "description": "Build the candidate-facing web app.",
    "company": "Initech",
    "category": "Engineering",
    "jobType": "Full time",
    "location": "Austin",
    "salaryRange": "$90k - $110k",
}


@pytest.fixture
async def employer(db_session):
    return await create_test_user(db_session, role=UserRole.EMPLOYER)


@pytest.fixture
def employer_headers(app, employer) -> dict:
    return get_auth_headers(app, employer, TokenScope.USER)


@pytest.fixture
async def rival_headers(app, db_session) -> dict:
    rival = await create_test_user(db_session, role=UserRole.EMPLOYER)
    return get_auth_headers(app, rival, TokenScope.USER)


async def post_job(client, headers, **overrides) -> dict:
    response = await client.post(JOBS_URL, headers=headers, json={**JOB_POSTING, **overrides})
    assert response.status_code == 201
    return response.json()["data"]


class TestEmployerJobs:

    async def test_employer_posts_job(self, client, employer, employer_headers):
        job = await post_job(client, employer_headers)

        assert job["isAdminPosted"] is False
        assert job["postedBy"] == str(employer.id)
        assert job["companyName"] == "Initech"

        listing = await client.get(JOBS_URL)
        assert [j["title"] for j in listing.json()["data"]] == ["Frontend Developer"]

    async def test_job_seeker_cannot_post(self, client, user_headers):
        response = await client.post(JOBS_URL, headers=user_headers, json=JOB_POSTING)
        assert response.status_code == 403

    async def test_posting_requires_authentication(self, client):
        response = await client.post(JOBS_URL, json=JOB_POSTING)
        assert response.status_code == 401

    async def test_owner_updates_and_deletes(self, client, employer_headers):
        job = await post_job(client, employer_headers)

        updated = await client.put(f"{JOBS_URL}/{job['id']}", headers=employer_headers, json={"location": "Dallas"})
        assert updated.status_code == 200
        assert updated.json()["data"]["location"] == "Dallas"

        deleted = await client.delete(f"{JOBS_URL}/{job['id']}", headers=employer_headers)
        assert deleted.status_code == 200
        assert (await client.get(f"{JOBS_URL}/{job['id']}")).status_code == 404

    async def test_other_employer_cannot_touch_job(self, client, employer_headers, rival_headers):
        job = await post_job(client, employer_headers)

        updated = await client.put(f"{JOBS_URL}/{job['id']}", headers=rival_headers, json={"location": "Dallas"})
        deleted = await client.delete(f"{JOBS_URL}/{job['id']}", headers=rival_headers)

        assert updated.status_code == 403
        assert updated.json()["message"] == "Not authorized to update this job"
        assert deleted.status_code == 403

    async def test_employer_cannot_edit_admin_posted_job(self, client, db_session, super_admin, employer_headers):
        job = await create_test_job(db_session, super_admin)

        response = await client.put(f"{JOBS_URL}/{job.id}", headers=employer_headers, json={"location": "Dallas"})
        assert response.status_code == 403

    async def test_portal_admin_manages_any_job(self, app, client, db_session, employer_headers):
        job = await post_job(client, employer_headers)
        portal_admin = await create_test_user(db_session, role=UserRole.ADMIN)

        response = await client.delete(
            f"{JOBS_URL}/{job['id']}", headers=get_auth_headers(app, portal_admin, TokenScope.USER)
        )
        assert response.status_code == 200


class TestEmployerApplications:

    async def test_list_and_review_applicants(self, client, employer_headers, user_headers, job_seeker):
        job = await post_job(client, employer_headers)
        applied = await client.post("/api/applications", headers=user_headers, json={"jobId": job["id"]})
        application_id = applied.json()["data"]["id"]

        listing = await client.get(f"/api/applications/job/{job['id']}", headers=employer_headers)
        assert listing.status_code == 200
        assert [a["applicantId"] for a in listing.json()["data"]] == [str(job_seeker.id)]

        reviewed = await client.put(
            f"/api/applications/{application_id}/status",
            headers=employer_headers,
            json={"status": "shortlisted", "notes": "Strong portfolio"},
        )
        assert reviewed.status_code == 200
        data = reviewed.json()["data"]
        assert data["status"] == "shortlisted"
        assert data["reviewedBy"] is None
        assert data["reviewedAt"] is not None

        filtered = await client.get(
            f"/api/applications/job/{job['id']}", headers=employer_headers, params={"status": "pending"}
        )
        assert filtered.json()["data"] == []

    async def test_other_employer_cannot_review(self, client, employer_headers, rival_headers, user_headers):
        job = await post_job(client, employer_headers)
        applied = await client.post("/api/applications", headers=user_headers, json={"jobId": job["id"]})
        application_id = applied.json()["data"]["id"]

        listing = await client.get(f"/api/applications/job/{job['id']}", headers=rival_headers)
        reviewed = await client.put(
            f"/api/applications/{application_id}/status", headers=rival_headers, json={"status": "rejected"}
        )

        assert listing.status_code == 403
        assert listing.json()["message"] == "Not authorized to manage applications for this job"
        assert reviewed.status_code == 403

    async def test_job_seeker_cannot_list_applicants(self, client, employer_headers, user_headers):
        job = await post_job(client, employer_headers)

        response = await client.get(f"/api/applications/job/{job['id']}", headers=user_headers)
        assert response.status_code == 403
