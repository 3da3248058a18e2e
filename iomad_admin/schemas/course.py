"""
schemas/course.py
-----------------
Pydantic models for Course.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from iomad_admin.schemas.common import PartialUpdate
from iomad_admin.schemas.company import CompanyRead


class CourseCreate(BaseModel):
    fullname: str = Field(..., min_length=1, max_length=255, examples=["Workplace Safety 101"])
    shortname: str = Field(..., min_length=1, max_length=100, examples=["ws101"])
    summary: str = ""
    company_id: str
    category_id: str
    visible: bool = True


class CourseUpdate(PartialUpdate):
    fullname: Optional[str] = Field(default=None, min_length=1, max_length=255)
    shortname: Optional[str] = Field(default=None, min_length=1, max_length=100)
    summary: Optional[str] = None
    company_id: Optional[str] = None
    category_id: Optional[str] = None
    visible: Optional[bool] = None


class CourseRead(BaseModel):
    id: str
    fullname: str
    shortname: str
    summary: str
    company_id: str
    category_id: str
    visible: bool
    created_at: datetime
    updated_at: datetime
    company: Optional[CompanyRead] = None

    model_config = {"from_attributes": True}
