"""
models/course.py
----------------
Course owned by a company.
"""

from sqlalchemy import Boolean, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from iomad_admin.db.base import Base, TimestampMixin, UUIDPrimaryKey


class Course(Base, UUIDPrimaryKey, TimestampMixin):
    __tablename__ = "courses"

    fullname: Mapped[str] = mapped_column(String(255), nullable=False)
    shortname: Mapped[str] = mapped_column(String(100), nullable=False)
    summary: Mapped[str] = mapped_column(Text, nullable=False, default="")
    company_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("companies.id"),
        nullable=False,
        index=True,
    )
    category_id: Mapped[str] = mapped_column(String(36), nullable=False)
    visible: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    def __repr__(self) -> str:
        return f"<Course id={self.id} shortname={self.shortname}>"
