"""
api/routes/licenses.py
----------------------
License endpoints. Licenses are returned with company and course embedded.

GET   /licenses                 List licenses (?company_id=)
GET   /licenses/{license_id}    Fetch one license
POST  /licenses                 Create a license
PATCH /licenses/{license_id}    Partial update
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from iomad_admin.dependencies import IdentityDep, ServiceDep, get_current_identity
from iomad_admin.schemas.license import LicenseCreate, LicenseRead, LicenseUpdate

router = APIRouter(
    prefix="/licenses",
    tags=["Licenses"],
    dependencies=[Depends(get_current_identity)],
)


@router.get("", response_model=list[LicenseRead], summary="List licenses, newest first")
async def list_licenses(
    service: ServiceDep,
    company_id: Optional[str] = Query(default=None, description="Only licenses of this company"),
) -> list[LicenseRead]:
    return [LicenseRead.model_validate(r) for r in await service.licenses.list(company_id=company_id)]


@router.get("/{license_id}", response_model=LicenseRead, summary="Get a license by id")
async def get_license(license_id: str, service: ServiceDep) -> LicenseRead:
    return LicenseRead.model_validate(await service.licenses.get(license_id))


@router.post(
    "",
    response_model=LicenseRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a license",
)
async def create_license(body: LicenseCreate, service: ServiceDep, identity: IdentityDep) -> LicenseRead:
    return LicenseRead.model_validate(await service.licenses.create(body, actor=identity))


@router.patch("/{license_id}", response_model=LicenseRead, summary="Update selected license fields")
async def update_license(
    license_id: str,
    body: LicenseUpdate,
    service: ServiceDep,
    identity: IdentityDep,
) -> LicenseRead:
    return LicenseRead.model_validate(
        await service.licenses.update(license_id, body, actor=identity)
    )
