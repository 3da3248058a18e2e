"""
api/routes/companies.py
-----------------------
Company management endpoints.

GET    /companies                     List companies (search / status filter)
GET    /companies/{company_id}        Fetch one company
POST   /companies                     Create a company
PATCH  /companies/{company_id}        Partial update
DELETE /companies/{company_id}        Delete (409 while dependents exist)
POST   /companies/{company_id}/suspend    Suspend
POST   /companies/{company_id}/unsuspend  Reactivate
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from iomad_admin.dependencies import IdentityDep, ServiceDep, get_current_identity
from iomad_admin.schemas.company import CompanyCreate, CompanyRead, CompanyUpdate
from iomad_admin.services.filters import CompanyStatus, filter_companies

router = APIRouter(
    prefix="/companies",
    tags=["Companies"],
    dependencies=[Depends(get_current_identity)],
)


@router.get(
    "",
    response_model=list[CompanyRead],
    summary="List companies, newest first",
)
async def list_companies(
    service: ServiceDep,
    search: Optional[str] = Query(default=None, max_length=255,
                                  description="Matches name, shortname or city"),
    status_filter: CompanyStatus = Query(default=CompanyStatus.all, alias="status"),
) -> list[CompanyRead]:
    rows = await service.companies.list()
    return [CompanyRead.model_validate(r) for r in filter_companies(rows, search, status_filter)]


@router.get(
    "/{company_id}",
    response_model=CompanyRead,
    summary="Get a company by id",
)
async def get_company(company_id: str, service: ServiceDep) -> CompanyRead:
    return CompanyRead.model_validate(await service.companies.get(company_id))


@router.post(
    "",
    response_model=CompanyRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a company",
)
async def create_company(
    body: CompanyCreate,
    service: ServiceDep,
    identity: IdentityDep,
) -> CompanyRead:
    return CompanyRead.model_validate(await service.companies.create(body, actor=identity))


@router.patch(
    "/{company_id}",
    response_model=CompanyRead,
    summary="Update selected company fields",
)
async def update_company(
    company_id: str,
    body: CompanyUpdate,
    service: ServiceDep,
    identity: IdentityDep,
) -> CompanyRead:
    return CompanyRead.model_validate(
        await service.companies.update(company_id, body, actor=identity)
    )


@router.delete(
    "/{company_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a company",
)
async def delete_company(company_id: str, service: ServiceDep, identity: IdentityDep) -> None:
    """
    Users, courses, departments and licenses are not removed first; the
    delete fails with 409 while any of them still reference the company.
    """
    await service.companies.delete(company_id, actor=identity)


@router.post(
    "/{company_id}/suspend",
    response_model=CompanyRead,
    summary="Suspend a company",
)
async def suspend_company(company_id: str, service: ServiceDep, identity: IdentityDep) -> CompanyRead:
    return CompanyRead.model_validate(
        await service.companies.suspend(company_id, True, actor=identity)
    )


@router.post(
    "/{company_id}/unsuspend",
    response_model=CompanyRead,
    summary="Reactivate a suspended company",
)
async def unsuspend_company(company_id: str, service: ServiceDep, identity: IdentityDep) -> CompanyRead:
    return CompanyRead.model_validate(
        await service.companies.suspend(company_id, False, actor=identity)
    )
