"""Custom exception classes"""

from typing import Any, Optional


class JobPortalException(Exception):
    """Base exception for the job portal"""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        errors: Optional[list[dict[str, Any]]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.errors = errors or []
        super().__init__(self.message)


class ValidationException(JobPortalException):
    """Exception for validation errors"""

    def __init__(self, message: str, errors: Optional[list[dict[str, Any]]] = None):
        super().__init__(message, status_code=400, errors=errors)


class AuthenticationException(JobPortalException):
    """Exception for authentication errors"""

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message, status_code=401)


class MissingTokenError(AuthenticationException):
    def __init__(self, message: str = "Authorization header with Bearer token is required"):
        super().__init__(message)


class ExpiredTokenError(AuthenticationException):
    def __init__(self, message: str = "Token has expired"):
        super().__init__(message)


class MalformedTokenError(AuthenticationException):
    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class PrincipalNotFoundError(AuthenticationException):
    def __init__(self, message: str = "Account not found"):
        super().__init__(message)


class PrincipalInactiveError(AuthenticationException):
    def __init__(self, message: str = "Account is deactivated"):
        super().__init__(message)


class InvalidCredentialsError(AuthenticationException):
    """Login failure; the message never says which check failed"""

    def __init__(self):
        super().__init__("Invalid credentials")


class AuthorizationException(JobPortalException):
    """Exception for authorization errors"""

    def __init__(self, message: str = "Insufficient permissions"):
        super().__init__(message, status_code=403)


class NotFoundException(JobPortalException):
    """Exception for resource not found errors"""

    def __init__(self, message: str):
        super().__init__(message, status_code=404)


class ConflictException(JobPortalException):
    """Exception for uniqueness violations"""

    def __init__(self, message: str, errors: Optional[list[dict[str, Any]]] = None):
        super().__init__(message, status_code=400, errors=errors)


class AlreadyAppliedError(ConflictException):
    def __init__(self):
        super().__init__("You have already applied for this job")


class RateLimitException(JobPortalException):
    """Exception for rate limit errors"""

    def __init__(self, message: str = "Too many requests, please try again later"):
        super().__init__(message, status_code=429)
