"""Custom middleware for FastAPI application"""

import time
import uuid
from typing import Callable, Optional, Sequence
from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from backend.app.core.exceptions import RateLimitException
from backend.app.core.logging import get_logger

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tag each request with an id, reusing the caller's X-Request-ID when sent"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request with status, duration and the authenticated principal"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        context = {
            "request_id": getattr(request.state, "request_id", "unknown"),
            "method": request.method,
            "path": request.url.path,
            "client": request.client.host if request.client else "unknown",
        }

        try:
            response = await call_next(request)
        except Exception as e:
            context["duration_ms"] = round((time.perf_counter() - start_time) * 1000, 2)
            logger.error(f"Request failed: {str(e)}", extra=context, exc_info=True)
            raise

        context.update(
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            principal_id=getattr(request.state, "principal_id", None),
        )
        logger.info(f"{request.method} {request.url.path} {response.status_code}", extra=context)
        return response


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Simple in-memory sliding-window rate limiting per client IP

    Login and registration paths get their own, stricter window.
    """

    exempt_paths = ("/health", "/test", "/", "/docs", "/redoc", "/openapi.json", "/api/openapi.json")

    def __init__(
        self,
        app: ASGIApp,
        requests_per_minute: int = 100,
        auth_requests_per_minute: int = 5,
        auth_paths: Sequence[str] = ()
    ):
        super().__init__(app)
        self.requests_per_minute = requests_per_minute
        self.auth_requests_per_minute = auth_requests_per_minute
        self.auth_paths = tuple(auth_paths)
        self.request_counts: dict[str, list[float]] = {}
        self.last_prune = 0.0

    def _prune(self, now: float) -> None:
        """Forget clients with no request inside the window"""
        idle = [key for key, times in self.request_counts.items() if not times or now - times[-1] >= 60]
        for key in idle:
            del self.request_counts[key]
        self.last_prune = now

    def _hit(self, key: str, limit: int, now: float) -> Optional[int]:
        """Record a request; returns remaining quota, or None if over the limit"""
        if now - self.last_prune >= 60:
            self._prune(now)

        recent = [t for t in self.request_counts.get(key, []) if now - t < 60]
        if len(recent) >= limit:
            self.request_counts[key] = recent
            return None
        recent.append(now)
        self.request_counts[key] = recent
        return limit - len(recent)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.url.path
        if path in self.exempt_paths:
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        if request.method == "POST" and path in self.auth_paths:
            key, limit = f"auth:{client_ip}", self.auth_requests_per_minute
        else:
            key, limit = client_ip, self.requests_per_minute

        remaining = self._hit(key, limit, time.time())
        if remaining is None:
            logger.warning(
                f"Rate limit exceeded for client: {client_ip}",
                extra={"client_ip": client_ip, "path": path}
            )
            return JSONResponse(
                status_code=429,
                content={"success": False, "message": RateLimitException().message},
                headers={"X-RateLimit-Limit": str(limit), "Retry-After": "60"},
            )

        response = await call_next(request)

        response.headers["X-RateLimit-Limit"] = str(limit)
        response.headers["X-RateLimit-Remaining"] = str(remaining)

        return response
