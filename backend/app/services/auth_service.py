"""Token issuing/verification and the login flow"""

import enum
import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple, Union

from jose import ExpiredSignatureError, JWTError, jwt

from backend.app.core.config import Settings
from backend.app.core.exceptions import (
    ExpiredTokenError,
    InvalidCredentialsError,
    MalformedTokenError,
)
from backend.app.core.logging import get_logger
from backend.app.repositories.principal_repository import Principal, PrincipalRepository

logger = get_logger(__name__)


class TokenScope(str, enum.Enum):
    """Which principal collection a token's subject belongs to"""
    ADMIN = "admin"
    USER = "user"


class TokenService:
    """Issues and verifies signed bearer tokens.

    Tokens are stateless: nothing is persisted, so a token stays valid until
    its expiry unless the secret is rotated or the principal is deactivated.
    """

    def __init__(self, settings: Settings):
        self.secret_key = settings.SECRET_KEY
        self.algorithm = settings.ALGORITHM
        self.expire_delta = timedelta(days=settings.TOKEN_EXPIRE_DAYS)

    def issue(
        self,
        principal_id: Union[str, uuid.UUID],
        scope: TokenScope,
        expires_delta: Optional[timedelta] = None
    ) -> str:
        """
        Generate a signed token for a principal

        Args:
            principal_id: Admin or user ID
            scope: Principal collection the ID refers to
            expires_delta: Optional custom lifetime

        Returns:
            JWT token string
        """
        issued_at = datetime.now(timezone.utc)
        expire = issued_at + (expires_delta if expires_delta is not None else self.expire_delta)

        to_encode = {
            "sub": str(principal_id),
            "scope": scope.value,
            "iat": issued_at,
            "exp": expire,
            "jti": uuid.uuid4().hex,
        }

        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str, scope: TokenScope) -> str:
        """
        Verify a token and return the principal ID it was issued for

        Raises:
            ExpiredTokenError: If the token's expiry has passed
            MalformedTokenError: If the signature, structure or claims are invalid
        """
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            raise ExpiredTokenError()
        except JWTError as e:
            logger.warning(f"Token verification failed: {str(e)}")
            raise MalformedTokenError()

        principal_id = payload.get("sub")
        if not principal_id:
            raise MalformedTokenError("Invalid token format")

        if payload.get("scope") != scope.value:
            logger.warning(f"Token scope mismatch: expected {scope.value}, got {payload.get('scope')}")
            raise MalformedTokenError()

        return principal_id


class AuthService:
    """Login flow shared by admins and end users"""

    def __init__(self, token_service: TokenService):
        self.token_service = token_service

    async def login(
        self,
        repository: PrincipalRepository,
        email: str,
        password: str,
        scope: TokenScope
    ) -> Tuple[Principal, str]:
        """
        Authenticate by email and password and issue a token

        Every failed check raises the same InvalidCredentialsError so callers
        cannot tell an unknown email from a wrong password or a disabled
        account.

        Returns:
            The principal and a freshly issued token
        """
        principal = await repository.get_by_email(email)

        if principal is None:
            repository.dummy_verify()
            logger.warning(f"Login rejected: no {scope.value} account for {email.lower()}")
            raise InvalidCredentialsError()

        if not principal.is_active:
            logger.warning(f"Login rejected: {scope.value} account {principal.id} is deactivated")
            raise InvalidCredentialsError()

        if not repository.verify_password(password, principal.password_hash):
            logger.warning(f"Login rejected: wrong password for {scope.value} account {principal.id}")
            raise InvalidCredentialsError()

        await repository.record_login(principal)
        token = self.token_service.issue(principal.id, scope)

        logger.info(f"{scope.value.capitalize()} logged in: {principal.id}")
        return principal, token
