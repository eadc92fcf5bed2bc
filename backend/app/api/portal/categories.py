"""Public category API endpoints"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.api.deps import page_response
from backend.app.core.database import get_db
from backend.app.core.exceptions import NotFoundException
from backend.app.core.pagination import ListParams, SortOrder, list_params
from backend.app.models.category import Category
from backend.app.repositories.category_repository import CategoryRepository
from backend.app.repositories.job_repository import JobRepository
from backend.app.schemas.category import CategoryResponse
from backend.app.schemas.common import ApiResponse
from backend.app.schemas.job import JobResponse

router = APIRouter()


@router.get("", response_model=ApiResponse[List[CategoryResponse]])
async def list_active_categories(
    params: ListParams = Depends(
        list_params(CategoryRepository.sort_fields(), default_sort="sortOrder", default_order=SortOrder.ASC)
    ),
    db: AsyncSession = Depends(get_db)
):
    """Active categories with their job counts"""
    page = await CategoryRepository(db).find_page(params, [Category.is_active.is_(True)])
    return page_response(page, CategoryResponse)


@router.get("/{slug}", response_model=ApiResponse[List[JobResponse]])
async def category_jobs(
    slug: str,
    params: ListParams = Depends(list_params(JobRepository.sort_fields())),
    db: AsyncSession = Depends(get_db)
):
    """Open jobs in an active category, newest first"""
    category = await CategoryRepository(db).get_by_slug(slug)
    if category is None or not category.is_active:
        raise NotFoundException("Category not found")

    page = await JobRepository(db).list_jobs(params, category=category.name, active_only=True)
    return page_response(page, JobResponse)
