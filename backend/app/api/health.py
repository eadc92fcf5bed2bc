"""Liveness endpoints"""

import time

from fastapi import APIRouter, Request

from backend.app.models.base import utcnow

router = APIRouter()


def health_payload(request: Request) -> dict:
    settings = request.app.state.settings
    return {
        "success": True,
        "message": f"{settings.APP_NAME} is running",
        "uptime": round(time.monotonic() - request.app.state.started_at, 2),
        "environment": settings.ENVIRONMENT,
        "version": settings.APP_VERSION,
        "timestamp": utcnow().isoformat(),
    }


@router.get("/health")
async def health_check(request: Request):
    """Health check endpoint"""
    return health_payload(request)


@router.get("/test")
async def test_endpoint(request: Request):
    """Connectivity check used by the admin frontend"""
    return health_payload(request)
