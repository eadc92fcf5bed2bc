"""Property-based tests for tokens and permissions

Property 1: Tokens verify to the principal they were issued for
Property 2: Tokens never cross scopes
Property 3: Permission grants are exact, super admins hold all
"""

import uuid

import pytest
from hypothesis import given, strategies as st
from hypothesis import settings as hypothesis_settings

from backend.app.core.exceptions import MalformedTokenError
from backend.app.core.security import has_permission
from backend.app.models.admin import Admin, AdminRole, Permission
from backend.app.services.auth_service import TokenScope, TokenService
from tests.conftest import make_settings

token_service = TokenService(make_settings("sqlite+aiosqlite:///:memory:"))


class TestTokenProperties:
    """Property tests for TokenService"""

    @hypothesis_settings(max_examples=50)
    @given(principal_id=st.uuids(), scope=st.sampled_from(list(TokenScope)))
    def test_property_1_token_round_trip(self, principal_id, scope):
        """
        Property 1: For any principal id and scope, verifying an issued
        token in the same scope returns that id.
        """
        token = token_service.issue(principal_id, scope)
        assert token_service.verify(token, scope) == str(principal_id)

    @hypothesis_settings(max_examples=50)
    @given(principal_id=st.uuids())
    def test_property_2_scopes_do_not_cross(self, principal_id):
        """
        Property 2: An admin token is never accepted as a user token and
        vice versa.
        """
        admin_token = token_service.issue(principal_id, TokenScope.ADMIN)
        user_token = token_service.issue(principal_id, TokenScope.USER)

        with pytest.raises(MalformedTokenError):
            token_service.verify(admin_token, TokenScope.USER)
        with pytest.raises(MalformedTokenError):
            token_service.verify(user_token, TokenScope.ADMIN)

    @hypothesis_settings(max_examples=30)
    @given(principal_id=st.uuids(), count=st.integers(min_value=2, max_value=5))
    def test_tokens_are_unique(self, principal_id, count):
        tokens = {token_service.issue(principal_id, TokenScope.USER) for _ in range(count)}
        assert len(tokens) == count

    @hypothesis_settings(max_examples=50)
    @given(garbage=st.text(alphabet=st.characters(min_codepoint=32, max_codepoint=126), max_size=200))
    def test_arbitrary_strings_rejected(self, garbage):
        with pytest.raises(MalformedTokenError):
            token_service.verify(garbage, TokenScope.ADMIN)


class TestPermissionProperties:
    """Property tests for has_permission"""

    @hypothesis_settings(max_examples=50)
    @given(
        role=st.sampled_from([AdminRole.ADMIN, AdminRole.MODERATOR]),
        granted=st.sets(st.sampled_from(list(Permission))),
    )
    def test_property_3_grants_are_exact(self, role, granted):
        """
        Property 3: A non-super admin holds exactly the permissions granted
        to it.
        """
        admin = Admin(id=uuid.uuid4(), role=role, permissions=[p.value for p in granted])

        held = {p for p in Permission if has_permission(admin, p)}
        assert held == granted

    @hypothesis_settings(max_examples=20)
    @given(granted=st.sets(st.sampled_from(list(Permission))))
    def test_super_admin_holds_everything(self, granted):
        admin = Admin(id=uuid.uuid4(), role=AdminRole.SUPER_ADMIN, permissions=[p.value for p in granted])
        assert all(has_permission(admin, p) for p in Permission)
