"""
models/company.py
-----------------
Company (tenant) ORM model.

Every user, course, department and license belongs to exactly one company.
The `suspended` flag is the only lifecycle state besides deletion.
"""

from typing import Optional

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from iomad_admin.db.base import Base, TimestampMixin, UUIDPrimaryKey


class Company(Base, UUIDPrimaryKey, TimestampMixin):
    __tablename__ = "companies"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    shortname: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    city: Mapped[str] = mapped_column(String(120), nullable=False, default="")
    country: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    theme: Mapped[str] = mapped_column(String(50), nullable=False, default="default")
    logo_url: Mapped[Optional[str]] = mapped_column(String(1024))
    suspended: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<Company id={self.id} shortname={self.shortname}>"
