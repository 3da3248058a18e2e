"""
models/__init__.py
------------------
Re-export all models so create_tables.py (and Alembic's env.py) can import
Base and discover all tables via a single import:

    from iomad_admin.models import Base
"""

from iomad_admin.db.base import Base
from iomad_admin.models.activity_log import ActivityLog
from iomad_admin.models.company import Company
from iomad_admin.models.course import Course
from iomad_admin.models.department import Department
from iomad_admin.models.license import License
from iomad_admin.models.user import User

# Table name → model, the registry the SQLAlchemy store resolves tables with
MODELS_BY_TABLE = {
    model.__tablename__: model
    for model in (Company, User, Course, Department, License, ActivityLog)
}

__all__ = [
    "Base",
    "ActivityLog",
    "Company",
    "Course",
    "Department",
    "License",
    "User",
    "MODELS_BY_TABLE",
]
