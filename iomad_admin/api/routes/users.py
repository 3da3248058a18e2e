"""
api/routes/users.py
-------------------
User management endpoints. Every user is returned with its company.

GET   /users               List users (?company_id=, ?search=)
GET   /users/{user_id}     Fetch one user
POST  /users               Create a user
PATCH /users/{user_id}     Partial update
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from iomad_admin.dependencies import IdentityDep, ServiceDep, get_current_identity
from iomad_admin.schemas.user import UserCreate, UserRead, UserUpdate
from iomad_admin.services.filters import filter_users

router = APIRouter(
    prefix="/users",
    tags=["Users"],
    dependencies=[Depends(get_current_identity)],
)


@router.get(
    "",
    response_model=list[UserRead],
    summary="List users, newest first",
)
async def list_users(
    service: ServiceDep,
    company_id: Optional[str] = Query(default=None, description="Only users of this company"),
    search: Optional[str] = Query(default=None, max_length=255,
                                  description="Matches first/last name, email or username"),
) -> list[UserRead]:
    rows = await service.users.list(company_id=company_id)
    return [UserRead.model_validate(r) for r in filter_users(rows, search)]


@router.get("/{user_id}", response_model=UserRead, summary="Get a user by id")
async def get_user(user_id: str, service: ServiceDep) -> UserRead:
    return UserRead.model_validate(await service.users.get(user_id))


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
)
async def create_user(body: UserCreate, service: ServiceDep, identity: IdentityDep) -> UserRead:
    return UserRead.model_validate(await service.users.create(body, actor=identity))


@router.patch("/{user_id}", response_model=UserRead, summary="Update selected user fields")
async def update_user(
    user_id: str,
    body: UserUpdate,
    service: ServiceDep,
    identity: IdentityDep,
) -> UserRead:
    return UserRead.model_validate(await service.users.update(user_id, body, actor=identity))
