"""
models/department.py
--------------------
Department tree inside a company.

parent_id points at another department; acyclicity is not enforced.
"""

from typing import Optional

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from iomad_admin.db.base import Base, TimestampMixin, UUIDPrimaryKey


class Department(Base, UUIDPrimaryKey, TimestampMixin):
    __tablename__ = "departments"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    shortname: Mapped[str] = mapped_column(String(100), nullable=False)
    company_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("companies.id"),
        nullable=False,
        index=True,
    )
    parent_id: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey("departments.id")
    )

    def __repr__(self) -> str:
        return f"<Department id={self.id} shortname={self.shortname}>"
