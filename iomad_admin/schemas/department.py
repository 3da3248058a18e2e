"""
schemas/department.py
---------------------
Pydantic models for Department.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from iomad_admin.schemas.common import PartialUpdate
from iomad_admin.schemas.company import CompanyRead


class DepartmentCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, examples=["Sales"])
    shortname: str = Field(..., min_length=1, max_length=100, examples=["sales"])
    company_id: str
    parent_id: Optional[str] = Field(default=None, description="Parent department, None for a root")


class DepartmentUpdate(PartialUpdate):
    nullable_fields = frozenset({"parent_id"})

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    shortname: Optional[str] = Field(default=None, min_length=1, max_length=100)
    company_id: Optional[str] = None
    parent_id: Optional[str] = None


class DepartmentRead(BaseModel):
    id: str
    name: str
    shortname: str
    company_id: str
    parent_id: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    company: Optional[CompanyRead] = None

    model_config = {"from_attributes": True}
