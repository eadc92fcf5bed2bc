"""Integration tests for rate limiting"""

import httpx
import pytest

from backend.app.core.middleware import RateLimitMiddleware
from backend.app.main import create_app
from tests.conftest import make_settings


@pytest.fixture
async def limited_client(tmp_path):
    app = create_app(make_settings(
        f"sqlite+aiosqlite:///{tmp_path / 'limited.db'}",
        RATE_LIMIT_PER_MINUTE=3,
        AUTH_RATE_LIMIT_PER_MINUTE=2,
    ))
    await app.state.database.create_all()
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    await app.state.database.dispose()


class TestRateLimiting:

    async def test_general_limit(self, limited_client):
        responses = [await limited_client.get("/api/faqs") for _ in range(4)]

        assert [r.status_code for r in responses] == [200, 200, 200, 429]
        assert responses[0].headers["X-RateLimit-Remaining"] == "2"
        assert responses[-1].json()["success"] is False

    async def test_login_has_stricter_limit(self, limited_client):
        payload = {"email": "nobody@example.com", "password": "whatever"}
        responses = [await limited_client.post("/api/admin/auth/login", json=payload) for _ in range(3)]

        assert [r.status_code for r in responses] == [401, 401, 429]

    async def test_health_is_exempt(self, limited_client):
        responses = [await limited_client.get("/health") for _ in range(10)]
        assert all(r.status_code == 200 for r in responses)


class TestRateLimitWindow:

    @pytest.fixture
    def limiter(self):
        return RateLimitMiddleware(app=None, requests_per_minute=2)

    def test_window_slides(self, limiter):
        assert limiter._hit("10.0.0.1", 2, now=1000.0) == 1
        assert limiter._hit("10.0.0.1", 2, now=1010.0) == 0
        assert limiter._hit("10.0.0.1", 2, now=1020.0) is None
        assert limiter._hit("10.0.0.1", 2, now=1061.0) == 0

    def test_idle_clients_are_forgotten(self, limiter):
        limiter._hit("10.0.0.1", 2, now=1000.0)
        limiter._hit("10.0.0.2", 2, now=1030.0)

        limiter._hit("10.0.0.3", 2, now=1075.0)

        assert set(limiter.request_counts) == {"10.0.0.2", "10.0.0.3"}
