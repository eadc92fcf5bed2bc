"""Public content API endpoints"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.api.deps import page_response
from backend.app.core.database import get_db
from backend.app.core.exceptions import NotFoundException
from backend.app.core.pagination import ListParams, list_params
from backend.app.models.content import ContentType
from backend.app.repositories.content_repository import ContentRepository
from backend.app.schemas.common import ApiResponse
from backend.app.schemas.content import ContentResponse

router = APIRouter()


@router.get("", response_model=ApiResponse[List[ContentResponse]])
async def list_published_content(
    params: ListParams = Depends(list_params(ContentRepository.sort_fields(), default_sort="publishDate")),
    search: Optional[str] = Query(None, max_length=100),
    type: Optional[ContentType] = None,
    db: AsyncSession = Depends(get_db)
):
    """Published, public content"""
    page = await ContentRepository(db).list_content(params, search=search, type=type, published_only=True)
    return page_response(page, ContentResponse)


@router.get("/type/{type}", response_model=ApiResponse[ContentResponse])
async def get_content_by_type(type: ContentType, db: AsyncSession = Depends(get_db)):
    """Latest published item of a type, such as the about or terms page"""
    content = await ContentRepository(db).get_published_by_type(type)
    if content is None:
        raise NotFoundException("Content not found")
    return ApiResponse(data=ContentResponse.model_validate(content))


@router.get("/{slug}", response_model=ApiResponse[ContentResponse])
async def get_published_content(slug: str, db: AsyncSession = Depends(get_db)):
    """Get published content by slug; each call counts as a view"""
    repo = ContentRepository(db)
    content = await repo.get_published_by_slug(slug)
    if content is None:
        raise NotFoundException("Content not found")

    await repo.increment_views(content.id)
    await db.commit()

    content = await repo.get_or_404(content.id)
    return ApiResponse(data=ContentResponse.model_validate(content))
