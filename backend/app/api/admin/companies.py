"""Admin company management API endpoints"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from backend.app.api.deps import bulk_response, get_stats_service, page_response
from backend.app.core.database import get_db
from backend.app.core.logging import get_logger
from backend.app.core.pagination import ListParams, list_params
from backend.app.core.security import PermissionChecker
from backend.app.models.admin import Admin, Permission
from backend.app.models.company import Company, CompanyStatus
from backend.app.repositories.company_repository import CompanyRepository
from backend.app.schemas.common import ApiResponse, BulkUpdateRequest, BulkUpdateResponse
from backend.app.schemas.company import CompanyCreate, CompanyResponse, CompanyUpdate
from backend.app.services.stats_service import StatsService

logger = get_logger(__name__)

router = APIRouter()

require_manage_companies = PermissionChecker(Permission.MANAGE_COMPANIES)


@router.get("", response_model=ApiResponse[List[CompanyResponse]])
async def list_companies(
    params: ListParams = Depends(list_params(CompanyRepository.sort_fields())),
    search: Optional[str] = Query(None, max_length=100),
    status: Optional[CompanyStatus] = None,
    industry: Optional[str] = None,
    verified: Optional[bool] = None,
    current_admin: Admin = Depends(require_manage_companies),
    db: AsyncSession = Depends(get_db)
):
    filters = []
    if status:
        filters.append(Company.status == status)
    if industry:
        filters.append(Company.industry.icontains(industry, autoescape=True))
    if verified is not None:
        filters.append(Company.is_verified.is_(verified))

    page = await CompanyRepository(db).find_page(params, filters, search)
    return page_response(page, CompanyResponse)


@router.get("/stats/overview", response_model=ApiResponse[dict])
async def company_stats(
    current_admin: Admin = Depends(require_manage_companies),
    stats: StatsService = Depends(get_stats_service)
):
    overview = await stats.overview_counts(Company, {
        "total": [],
        "active": [Company.is_active.is_(True)],
        "verified": [Company.is_verified.is_(True)],
        "featured": [Company.is_featured.is_(True)],
        "pending": [Company.status == CompanyStatus.PENDING],
        "suspended": [Company.status == CompanyStatus.SUSPENDED],
    })
    return ApiResponse(data={
        "overview": overview,
        "byIndustry": await stats.count_by_field(Company, "industry"),
        "bySize": await stats.count_by_field(Company, "company_size"),
        "monthlyRegistrations": await stats.monthly_counts(Company, "created_at", 12),
    })


@router.put("/bulk-update", response_model=ApiResponse[BulkUpdateResponse])
async def bulk_update_companies(
    request: BulkUpdateRequest,
    current_admin: Admin = Depends(require_manage_companies),
    db: AsyncSession = Depends(get_db)
):
    """
    Bulk update companies

    **Allowed fields:** status, isActive, isVerified, isFeatured
    """
    result = await CompanyRepository(db).bulk_update(request.ids, request.updates)
    await db.commit()
    return bulk_response(result, "companies")


@router.get("/{company_id}", response_model=ApiResponse[CompanyResponse])
async def get_company(
    company_id: UUID,
    current_admin: Admin = Depends(require_manage_companies),
    db: AsyncSession = Depends(get_db)
):
    company = await CompanyRepository(db).get_or_404(company_id)
    return ApiResponse(data=CompanyResponse.model_validate(company))


@router.post("", response_model=ApiResponse[CompanyResponse], status_code=status.HTTP_201_CREATED)
async def create_company(
    company_data: CompanyCreate,
    current_admin: Admin = Depends(require_manage_companies),
    db: AsyncSession = Depends(get_db)
):
    """Create a company; names are unique"""
    company = await CompanyRepository(db).create({
        **company_data.model_dump(),
        "created_by": current_admin.id,
    })
    await db.commit()
    return ApiResponse(message="Company created successfully", data=CompanyResponse.model_validate(company))


@router.put("/{company_id}", response_model=ApiResponse[CompanyResponse])
async def update_company(
    company_id: UUID,
    company_data: CompanyUpdate,
    current_admin: Admin = Depends(require_manage_companies),
    db: AsyncSession = Depends(get_db)
):
    """
    Update a company

    Renaming a company does not rewrite the company name cached on its jobs.
    """
    repo = CompanyRepository(db)
    company = await repo.get_or_404(company_id)
    company = await repo.update(company, company_data.model_dump(exclude_none=True))
    await db.commit()
    return ApiResponse(message="Company updated successfully", data=CompanyResponse.model_validate(company))


@router.delete("/{company_id}", response_model=ApiResponse)
async def delete_company(
    company_id: UUID,
    current_admin: Admin = Depends(require_manage_companies),
    db: AsyncSession = Depends(get_db)
):
    repo = CompanyRepository(db)
    company = await repo.get_or_404(company_id)
    await repo.delete(company)
    await db.commit()
    logger.info(f"Admin {current_admin.id} deleted company {company_id}")
    return ApiResponse(message="Company deleted successfully")


@router.patch("/{company_id}/toggle-verification", response_model=ApiResponse[CompanyResponse])
async def toggle_company_verification(
    company_id: UUID,
    current_admin: Admin = Depends(require_manage_companies),
    db: AsyncSession = Depends(get_db)
):
    repo = CompanyRepository(db)
    company = await repo.get_or_404(company_id)
    company = await repo.update(company, {"is_verified": not company.is_verified})
    await db.commit()

    state = "verified" if company.is_verified else "unverified"
    return ApiResponse(message=f"Company {state} successfully", data=CompanyResponse.model_validate(company))
