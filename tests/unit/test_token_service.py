"""Unit tests for token issuing and verification"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from backend.app.core.exceptions import ExpiredTokenError, MalformedTokenError
from backend.app.services.auth_service import TokenScope, TokenService
from tests.conftest import TEST_SECRET_KEY, make_settings


@pytest.fixture
def tokens() -> TokenService:
    return TokenService(make_settings("sqlite+aiosqlite:///:memory:"))


class TestTokenService:
    """Unit tests for TokenService"""

    def test_issue_and_verify(self, tokens):
        """A freshly issued token verifies to the principal it was issued for"""
        principal_id = uuid.uuid4()
        token = tokens.issue(principal_id, TokenScope.ADMIN)

        assert tokens.verify(token, TokenScope.ADMIN) == str(principal_id)

    def test_token_carries_scope_and_expiry(self, tokens):
        token = tokens.issue(uuid.uuid4(), TokenScope.USER)
        payload = jwt.decode(token, TEST_SECRET_KEY, algorithms=["HS256"])

        assert payload["scope"] == "user"
        lifetime = payload["exp"] - payload["iat"]
        assert lifetime == int(timedelta(days=7).total_seconds())

    def test_tokens_for_same_principal_are_distinct(self, tokens):
        principal_id = uuid.uuid4()
        assert tokens.issue(principal_id, TokenScope.USER) != tokens.issue(principal_id, TokenScope.USER)

    def test_expired_token_rejected(self, tokens):
        """Test that expired tokens are properly rejected"""
        token = tokens.issue(uuid.uuid4(), TokenScope.ADMIN, expires_delta=timedelta(seconds=-10))

        with pytest.raises(ExpiredTokenError):
            tokens.verify(token, TokenScope.ADMIN)

    def test_invalid_signature_rejected(self, tokens):
        """Test that tokens signed with another secret are rejected"""
        token = jwt.encode(
            {
                "sub": str(uuid.uuid4()),
                "scope": "admin",
                "exp": datetime.now(timezone.utc) + timedelta(hours=1),
            },
            "wrong-secret",
            algorithm="HS256"
        )

        with pytest.raises(MalformedTokenError):
            tokens.verify(token, TokenScope.ADMIN)

    def test_user_token_rejected_for_admin_scope(self, tokens):
        """A portal token must never open the admin API"""
        token = tokens.issue(uuid.uuid4(), TokenScope.USER)

        with pytest.raises(MalformedTokenError):
            tokens.verify(token, TokenScope.ADMIN)

    def test_missing_subject_rejected(self, tokens):
        token = jwt.encode(
            {"scope": "admin", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
            TEST_SECRET_KEY,
            algorithm="HS256"
        )

        with pytest.raises(MalformedTokenError):
            tokens.verify(token, TokenScope.ADMIN)

    @pytest.mark.parametrize("token", ["not.a.token", "invalid", "a.b", "a.b.c.d"])
    def test_malformed_token(self, tokens, token):
        """Test that malformed tokens are rejected"""
        with pytest.raises(MalformedTokenError):
            tokens.verify(token, TokenScope.USER)

    def test_secret_rotation_invalidates_tokens(self, tokens):
        token = tokens.issue(uuid.uuid4(), TokenScope.ADMIN)
        rotated = TokenService(make_settings("sqlite+aiosqlite:///:memory:", SECRET_KEY="rotated-secret"))

        with pytest.raises(MalformedTokenError):
            rotated.verify(token, TokenScope.ADMIN)
