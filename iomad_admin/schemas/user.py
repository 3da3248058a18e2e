"""
schemas/user.py
---------------
Pydantic models for console users (learners, managers).
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from iomad_admin.schemas.common import PartialUpdate
from iomad_admin.schemas.company import CompanyRead


class UserCreate(BaseModel):
    username: str = Field(..., min_length=1, max_length=100, examples=["jdoe"])
    email: EmailStr
    firstname: str = Field(..., min_length=1, max_length=100)
    lastname: str = Field(..., min_length=1, max_length=100)
    company_id: str = Field(..., description="UUID of the owning company")
    department: Optional[str] = Field(default=None, max_length=255)
    manager_id: Optional[str] = None
    suspended: bool = False


class UserUpdate(PartialUpdate):
    nullable_fields = frozenset({"department", "manager_id"})

    username: Optional[str] = Field(default=None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    firstname: Optional[str] = Field(default=None, min_length=1, max_length=100)
    lastname: Optional[str] = Field(default=None, min_length=1, max_length=100)
    company_id: Optional[str] = None
    department: Optional[str] = Field(default=None, max_length=255)
    manager_id: Optional[str] = None
    suspended: Optional[bool] = None


class UserRead(BaseModel):
    id: str
    username: str
    email: str
    firstname: str
    lastname: str
    company_id: str
    department: Optional[str] = None
    manager_id: Optional[str] = None
    suspended: bool
    created_at: datetime
    updated_at: datetime
    company: Optional[CompanyRead] = None

    model_config = {"from_attributes": True}
