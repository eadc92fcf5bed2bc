"""Public FAQ API endpoints"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.api.deps import page_response
from backend.app.core.database import get_db
from backend.app.core.exceptions import NotFoundException
from backend.app.core.pagination import ListParams, SortOrder, list_params
from backend.app.models.faq import FAQCategory
from backend.app.repositories.faq_repository import FAQRepository
from backend.app.schemas.common import ApiResponse
from backend.app.schemas.faq import FAQResponse

router = APIRouter()


@router.get("", response_model=ApiResponse[List[FAQResponse]])
async def list_public_faqs(
    params: ListParams = Depends(
        list_params(FAQRepository.sort_fields(), default_sort="sortOrder", default_order=SortOrder.ASC)
    ),
    search: Optional[str] = Query(None, max_length=100),
    category: Optional[FAQCategory] = None,
    featured: Optional[bool] = None,
    db: AsyncSession = Depends(get_db)
):
    """Active FAQs, optionally by category or featured flag"""
    page = await FAQRepository(db).list_faqs(
        params, search=search, category=category, is_active=True, is_featured=featured
    )
    return page_response(page, FAQResponse)


@router.get("/{faq_id}", response_model=ApiResponse[FAQResponse])
async def get_public_faq(faq_id: UUID, db: AsyncSession = Depends(get_db)):
    faq = await FAQRepository(db).get_by_id(faq_id)
    if faq is None or not faq.is_active:
        raise NotFoundException("FAQ not found")
    return ApiResponse(data=FAQResponse.model_validate(faq))
