"""FastAPI application entry point"""

import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from backend.app.api import health
from backend.app.api.admin import (
    admins as admin_admins,
    applications as admin_applications,
    auth as admin_auth,
    categories as admin_categories,
    companies as admin_companies,
    content as admin_content,
    dashboard as admin_dashboard,
    faqs as admin_faqs,
    jobs as admin_jobs,
    users as admin_users,
)
from backend.app.api.portal import (
    applications as portal_applications,
    auth as portal_auth,
    categories as portal_categories,
    companies as portal_companies,
    content as portal_content,
    faqs as portal_faqs,
    jobs as portal_jobs,
    users as portal_users,
)
from backend.app.core.config import Settings, get_settings
from backend.app.core.database import Database
from backend.app.core.exceptions import JobPortalException
from backend.app.core.logging import get_logger, setup_logging
from backend.app.core.middleware import (
    LoggingMiddleware,
    RateLimitMiddleware,
    RequestIDMiddleware,
)
from backend.app.services.auth_service import TokenService

logger = get_logger(__name__)


def error_body(message: str, errors: Optional[list] = None) -> dict:
    body = {"success": False, "message": message}
    if errors:
        body["errors"] = errors
    return body


def register_exception_handlers(app: FastAPI) -> None:
    """Translate every exception into the {success: false, message, errors} body"""

    @app.exception_handler(JobPortalException)
    async def job_portal_exception_handler(request: Request, exc: JobPortalException):
        request_id = getattr(request.state, "request_id", "unknown")

        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={"request_id": request_id, "status_code": exc.status_code, "errors": exc.errors},
        )

        return JSONResponse(status_code=exc.status_code, content=error_body(exc.message, exc.errors))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle request validation errors as 400 with one entry per field"""
        request_id = getattr(request.state, "request_id", "unknown")

        errors = [
            {
                "field": ".".join(str(part) for part in error["loc"] if part not in ("body", "query", "path")),
                "message": error["msg"],
                "type": error["type"],
            }
            for error in exc.errors()
        ]
        logger.warning("Validation error", extra={"request_id": request_id, "errors": errors})

        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body("Validation errors", errors),
        )

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        """Constraint violations that no repository translated"""
        request_id = getattr(request.state, "request_id", "unknown")

        logger.warning(f"Database integrity error: {exc.orig}", extra={"request_id": request_id})

        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body("Duplicate or conflicting value"),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle all other exceptions"""
        request_id = getattr(request.state, "request_id", "unknown")

        logger.error(
            f"Unhandled exception: {str(exc)}",
            extra={"request_id": request_id},
            exc_info=True
        )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body("Internal server error"),
        )


def register_routers(app: FastAPI, settings: Settings) -> None:
    admin_prefix = f"{settings.API_PREFIX}/admin"
    app.include_router(admin_auth.router, prefix=f"{admin_prefix}/auth", tags=["Admin Auth"])
    app.include_router(admin_dashboard.router, prefix=f"{admin_prefix}/dashboard", tags=["Dashboard"])
    app.include_router(admin_users.router, prefix=f"{admin_prefix}/users", tags=["Users"])
    app.include_router(admin_jobs.router, prefix=f"{admin_prefix}/jobs", tags=["Jobs"])
    app.include_router(admin_companies.router, prefix=f"{admin_prefix}/companies", tags=["Companies"])
    app.include_router(admin_categories.router, prefix=f"{admin_prefix}/categories", tags=["Categories"])
    app.include_router(admin_applications.router, prefix=f"{admin_prefix}/applications", tags=["Applications"])
    app.include_router(admin_faqs.router, prefix=f"{admin_prefix}/faqs", tags=["FAQs"])
    app.include_router(admin_content.router, prefix=f"{admin_prefix}/content", tags=["Content"])
    app.include_router(admin_admins.router, prefix=f"{admin_prefix}/admins", tags=["Admins"])

    api = settings.API_PREFIX
    app.include_router(portal_auth.router, prefix=f"{api}/auth", tags=["Portal Auth"])
    app.include_router(portal_users.router, prefix=f"{api}/users", tags=["Portal Users"])
    app.include_router(portal_jobs.router, prefix=f"{api}/jobs", tags=["Portal Jobs"])
    app.include_router(portal_companies.router, prefix=f"{api}/companies", tags=["Portal Companies"])
    app.include_router(portal_categories.router, prefix=f"{api}/categories", tags=["Portal Categories"])
    app.include_router(portal_applications.router, prefix=f"{api}/applications", tags=["Portal Applications"])
    app.include_router(portal_faqs.router, prefix=f"{api}/faqs", tags=["Portal FAQs"])
    app.include_router(portal_content.router, prefix=f"{api}/content", tags=["Portal Content"])

    app.include_router(health.router, tags=["Health"])


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application

    Args:
        settings: Configuration; read from the environment when omitted

    Returns:
        Configured FastAPI application holding its own database and token service
    """
    settings = settings or get_settings()
    setup_logging(settings)

    database = Database(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
        logger.info(f"Environment: {settings.ENVIRONMENT}")
        if settings.DATABASE_CREATE_ALL:
            await database.create_all()
        yield
        logger.info("Shutting down application")
        await database.dispose()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="""
## Job Portal API

Admin API for managing users, jobs, companies, categories, applications,
FAQs and content, and a public portal API for job seekers.

### Authentication

Include the token returned by a login endpoint in the `Authorization`
header: `Bearer <token>`. Admin tokens are only accepted by `/api/admin`
endpoints and user tokens only by the portal endpoints.

### Rate Limiting

API requests are rate-limited to {rate_limit} requests per minute per IP
address, and login/registration to {auth_limit}.
        """.format(
            rate_limit=settings.RATE_LIMIT_PER_MINUTE,
            auth_limit=settings.AUTH_RATE_LIMIT_PER_MINUTE,
        ),
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.database = database
    app.state.token_service = TokenService(settings)
    app.state.started_at = time.monotonic()

    # Last added is outermost: CORS, then request id, logging, rate limiting
    app.add_middleware(
        RateLimitMiddleware,
        requests_per_minute=settings.RATE_LIMIT_PER_MINUTE,
        auth_requests_per_minute=settings.AUTH_RATE_LIMIT_PER_MINUTE,
        auth_paths=(
            f"{settings.API_PREFIX}/admin/auth/login",
            f"{settings.API_PREFIX}/auth/login",
            f"{settings.API_PREFIX}/auth/register",
        ),
    )
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    register_routers(app, settings)

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "status": "running",
        }

    return app


app = create_app()
