"""Integration tests for companies and categories, admin and public"""

from uuid import uuid4

from backend.app.models.job import JobStatus
from backend.app.repositories.category_repository import CategoryRepository
from backend.app.repositories.company_repository import CompanyRepository
from tests.conftest import create_test_job


class TestDuplicateNames:

    async def test_duplicate_company_name(self, client, admin_headers):
        payload = {"name": "Globex", "city": "Springfield"}

        first = await client.post("/api/admin/companies", headers=admin_headers, json=payload)
        second = await client.post("/api/admin/companies", headers=admin_headers, json=payload)

        assert first.status_code == 201
        assert second.status_code == 400
        assert second.json() == {"success": False, "message": "Company name already exists"}

        listing = await client.get("/api/admin/companies", headers=admin_headers)
        assert [c["name"] for c in listing.json()["data"]] == ["Globex"]

    async def test_duplicate_category_name(self, client, admin_headers):
        payload = {"name": "Design"}

        first = await client.post("/api/admin/categories", headers=admin_headers, json=payload)
        second = await client.post("/api/admin/categories", headers=admin_headers, json=payload)

        assert first.status_code == 201
        assert second.status_code == 400
        assert second.json() == {"success": False, "message": "Category name already exists"}


class TestPortalCompanies:

    async def test_only_active_companies_listed(self, client, db_session, super_admin):
        await create_test_job(db_session, super_admin, company="Acme Corp")
        await CompanyRepository(db_session).create({"name": "Shut Down Ltd", "is_active": False})
        await db_session.commit()

        response = await client.get("/api/companies")

        assert response.status_code == 200
        assert [c["name"] for c in response.json()["data"]] == ["Acme Corp"]

    async def test_location_filter(self, client, db_session):
        repo = CompanyRepository(db_session)
        await repo.create({"name": "Northwind", "city": "Oslo", "country": "Norway"})
        await repo.create({"name": "Southwind", "city": "Lima", "country": "Peru"})
        await db_session.commit()

        response = await client.get("/api/companies", params={"location": "norway"})

        assert [c["name"] for c in response.json()["data"]] == ["Northwind"]

    async def test_top_companies_by_job_count(self, client, db_session, super_admin):
        await create_test_job(db_session, super_admin, title="One", company="Small Co")
        await create_test_job(db_session, super_admin, title="Two", company="Big Co")
        await create_test_job(db_session, super_admin, title="Three", company="Big Co")

        response = await client.get("/api/companies/top")

        assert response.status_code == 200
        data = response.json()["data"]
        assert [c["name"] for c in data] == ["Big Co", "Small Co"]
        assert data[0]["jobCount"] == 2

    async def test_detail_includes_open_jobs(self, client, db_session, super_admin):
        job = await create_test_job(db_session, super_admin, title="Open role")
        await create_test_job(db_session, super_admin, title="Closed role", status=JobStatus.EXPIRED)

        response = await client.get(f"/api/companies/{job.company_id}")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["name"] == "Acme Corp"
        assert [j["title"] for j in data["recentJobs"]] == ["Open role"]

    async def test_inactive_or_unknown_company_not_found(self, client, db_session):
        company = await CompanyRepository(db_session).create({"name": "Hidden Inc", "is_active": False})
        await db_session.commit()

        hidden = await client.get(f"/api/companies/{company.id}")
        unknown = await client.get(f"/api/companies/{uuid4()}")

        assert hidden.status_code == 404
        assert hidden.json()["message"] == "Company not found"
        assert unknown.status_code == 404


class TestPortalCategories:

    async def test_active_categories_in_sort_order(self, client, db_session):
        repo = CategoryRepository(db_session)
        await repo.create({"name": "Marketing", "sort_order": 2})
        await repo.create({"name": "Engineering", "sort_order": 1})
        await repo.create({"name": "Retired", "is_active": False})
        await db_session.commit()

        response = await client.get("/api/categories")

        assert response.status_code == 200
        assert [c["name"] for c in response.json()["data"]] == ["Engineering", "Marketing"]

    async def test_category_jobs_by_slug(self, client, db_session, super_admin):
        await create_test_job(db_session, super_admin, title="Data Engineer", category="Data Science")
        await create_test_job(db_session, super_admin, title="Stale role", category="Data Science",
                              status=JobStatus.INACTIVE)
        await create_test_job(db_session, super_admin, title="Designer", category="Design")

        response = await client.get("/api/categories/data-science")

        assert response.status_code == 200
        assert [j["title"] for j in response.json()["data"]] == ["Data Engineer"]

    async def test_unknown_category(self, client):
        response = await client.get("/api/categories/nothing-here")

        assert response.status_code == 404
        assert response.json()["message"] == "Category not found"
