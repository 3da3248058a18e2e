"""
schemas/company.py
------------------
Pydantic request/response models for Company.

Naming convention:
  CompanyCreate  → inbound POST body
  CompanyUpdate  → inbound PATCH body (partial)
  CompanyRead    → outbound response body
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from iomad_admin.schemas.common import PartialUpdate


class CompanyTheme(str, Enum):
    default = "default"
    corporate = "corporate"
    education = "education"
    healthcare = "healthcare"
    technology = "technology"


def _check_logo_url(v: Optional[str]) -> Optional[str]:
    if v is None:
        return None
    v = v.strip()
    if not v:
        return None
    if not v.startswith(("http://", "https://")):
        raise ValueError("logo_url must be a valid http(s) URL")
    return v


class CompanyCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, examples=["Acme Learning"])
    shortname: str = Field(..., min_length=1, max_length=100, examples=["acme"])
    city: str = Field(..., min_length=1, max_length=120, examples=["Lisbon"])
    country: str = Field(..., min_length=1, max_length=100, examples=["PT"])
    theme: CompanyTheme = Field(..., description="Console theme applied to the company's users")
    logo_url: Optional[str] = Field(default=None, max_length=1024)
    suspended: bool = False

    model_config = {"use_enum_values": True}

    @field_validator("name", "shortname", "city", "country")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()

    @field_validator("logo_url")
    @classmethod
    def check_logo_url(cls, v: Optional[str]) -> Optional[str]:
        return _check_logo_url(v)


class CompanyUpdate(PartialUpdate):
    nullable_fields = frozenset({"logo_url"})

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    shortname: Optional[str] = Field(default=None, min_length=1, max_length=100)
    city: Optional[str] = Field(default=None, min_length=1, max_length=120)
    country: Optional[str] = Field(default=None, min_length=1, max_length=100)
    theme: Optional[CompanyTheme] = None
    logo_url: Optional[str] = Field(default=None, max_length=1024)
    suspended: Optional[bool] = None

    @field_validator("logo_url")
    @classmethod
    def check_logo_url(cls, v: Optional[str]) -> Optional[str]:
        return _check_logo_url(v)


class CompanyRead(BaseModel):
    id: str
    name: str
    shortname: str
    city: str
    country: str
    theme: str
    logo_url: Optional[str] = None
    suspended: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
