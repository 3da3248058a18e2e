"""
schemas/license.py
------------------
Pydantic models for License.

`used` is not checked against `allocation`; over-allocation is visible
to the console but never rejected.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from iomad_admin.schemas.common import PartialUpdate
from iomad_admin.schemas.company import CompanyRead
from iomad_admin.schemas.course import CourseRead


class LicenseCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, examples=["2026 safety seats"])
    company_id: str
    course_id: str
    allocation: int = Field(..., ge=0)
    used: int = Field(default=0, ge=0)
    valid_from: datetime
    valid_to: datetime


class LicenseUpdate(PartialUpdate):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    company_id: Optional[str] = None
    course_id: Optional[str] = None
    allocation: Optional[int] = Field(default=None, ge=0)
    used: Optional[int] = Field(default=None, ge=0)
    valid_from: Optional[datetime] = None
    valid_to: Optional[datetime] = None


class LicenseRead(BaseModel):
    id: str
    name: str
    company_id: str
    course_id: str
    allocation: int
    used: int
    valid_from: datetime
    valid_to: datetime
    created_at: datetime
    updated_at: datetime
    company: Optional[CompanyRead] = None
    course: Optional[CourseRead] = None

    model_config = {"from_attributes": True}
