"""
api/routes/departments.py
-------------------------
Department endpoints.

GET   /departments                    List departments (?company_id=)
GET   /departments/{department_id}    Fetch one department
POST  /departments                    Create a department
PATCH /departments/{department_id}    Partial update
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from iomad_admin.dependencies import IdentityDep, ServiceDep, get_current_identity
from iomad_admin.schemas.department import DepartmentCreate, DepartmentRead, DepartmentUpdate

router = APIRouter(
    prefix="/departments",
    tags=["Departments"],
    dependencies=[Depends(get_current_identity)],
)


@router.get("", response_model=list[DepartmentRead], summary="List departments, newest first")
async def list_departments(
    service: ServiceDep,
    company_id: Optional[str] = Query(default=None, description="Only departments of this company"),
) -> list[DepartmentRead]:
    rows = await service.departments.list(company_id=company_id)
    return [DepartmentRead.model_validate(r) for r in rows]


@router.get("/{department_id}", response_model=DepartmentRead, summary="Get a department by id")
async def get_department(department_id: str, service: ServiceDep) -> DepartmentRead:
    return DepartmentRead.model_validate(await service.departments.get(department_id))


@router.post(
    "",
    response_model=DepartmentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a department",
)
async def create_department(
    body: DepartmentCreate,
    service: ServiceDep,
    identity: IdentityDep,
) -> DepartmentRead:
    return DepartmentRead.model_validate(await service.departments.create(body, actor=identity))


@router.patch(
    "/{department_id}",
    response_model=DepartmentRead,
    summary="Update selected department fields",
)
async def update_department(
    department_id: str,
    body: DepartmentUpdate,
    service: ServiceDep,
    identity: IdentityDep,
) -> DepartmentRead:
    return DepartmentRead.model_validate(
        await service.departments.update(department_id, body, actor=identity)
    )
