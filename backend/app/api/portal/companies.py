"""Public company API endpoints"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.api.deps import page_response
from backend.app.core.database import get_db
from backend.app.core.exceptions import NotFoundException
from backend.app.core.pagination import ListParams, list_params
from backend.app.models.company import Company, CompanySize
from backend.app.models.job import Job
from backend.app.repositories.company_repository import CompanyRepository
from backend.app.repositories.job_repository import JobRepository
from backend.app.schemas.common import ApiResponse
from backend.app.schemas.company import CompanyDetailResponse, CompanyResponse
from backend.app.schemas.job import JobResponse

router = APIRouter()

TOP_COMPANIES = 6
RECENT_JOBS = 5


@router.get("", response_model=ApiResponse[List[CompanyResponse]])
async def list_active_companies(
    params: ListParams = Depends(list_params(CompanyRepository.sort_fields())),
    search: Optional[str] = Query(None, max_length=100),
    industry: Optional[str] = None,
    size: Optional[CompanySize] = None,
    location: Optional[str] = None,
    verified: Optional[bool] = None,
    db: AsyncSession = Depends(get_db)
):
    """Active companies, optionally by industry, size, city or country, and verification"""
    filters = [Company.is_active.is_(True)]
    if industry:
        filters.append(Company.industry.icontains(industry, autoescape=True))
    if size:
        filters.append(Company.company_size == size)
    if location:
        filters.append(
            Company.city.icontains(location, autoescape=True)
            | Company.country.icontains(location, autoescape=True)
        )
    if verified:
        filters.append(Company.is_verified.is_(True))

    page = await CompanyRepository(db).find_page(params, filters, search)
    return page_response(page, CompanyResponse)


@router.get("/top", response_model=ApiResponse[List[CompanyResponse]])
async def top_companies(db: AsyncSession = Depends(get_db)):
    """Active companies with the most jobs"""
    companies = await CompanyRepository(db).find_latest(
        [Company.is_active.is_(True)], TOP_COMPANIES, Company.job_count.desc(), Company.created_at.desc()
    )
    return ApiResponse(data=[CompanyResponse.model_validate(company) for company in companies])


@router.get("/{company_id}", response_model=ApiResponse[CompanyDetailResponse])
async def get_company(company_id: UUID, db: AsyncSession = Depends(get_db)):
    """Get an active company with its newest open jobs"""
    company = await CompanyRepository(db).get_by_id(company_id)
    if company is None or not company.is_active:
        raise NotFoundException("Company not found")

    jobs = await JobRepository(db).find_latest(
        [Job.company_id == company.id, *JobRepository.filters(active_only=True)], RECENT_JOBS
    )
    detail = CompanyDetailResponse.model_validate(company)
    detail.recent_jobs = [JobResponse.model_validate(job) for job in jobs]
    return ApiResponse(data=detail)
