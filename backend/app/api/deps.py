"""Dependencies and response helpers shared by the API routers"""

from typing import Type

from fastapi import Depends
from pydantic import BaseModel

from backend.app.core.database import Database, get_database
from backend.app.core.pagination import Page
from backend.app.repositories.base_repository import BulkUpdateResult
from backend.app.schemas.common import ApiResponse, BulkUpdateResponse, PaginationMeta
from backend.app.services.stats_service import StatsService


def get_stats_service(database: Database = Depends(get_database)) -> StatsService:
    """Dependency to get the statistics service"""
    return StatsService(database.session_factory)


def page_response(page: Page, schema: Type[BaseModel], message: str = None) -> ApiResponse:
    """Wrap a page of rows in the response envelope"""
    return ApiResponse(
        message=message,
        data=[schema.model_validate(item) for item in page.items],
        pagination=PaginationMeta.from_info(page.info),
    )


def bulk_response(result: BulkUpdateResult, label: str) -> ApiResponse[BulkUpdateResponse]:
    return ApiResponse(
        message=f"{result.modified_count} {label} updated successfully",
        data=BulkUpdateResponse(
            matched_count=result.matched_count,
            modified_count=result.modified_count,
        ),
    )
