# tests/conftest.py
import os
from datetime import datetime, timedelta, timezone

# ---- Test configuration must be in place before the app modules are imported
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./iomad_admin_test.db")
os.environ.setdefault("APP_ENV", "test")

import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from iomad_admin.core.security import Identity
from iomad_admin.models import Base
from iomad_admin.schemas.company import CompanyCreate
from iomad_admin.schemas.course import CourseCreate
from iomad_admin.schemas.department import DepartmentCreate
from iomad_admin.schemas.license import LicenseCreate
from iomad_admin.schemas.user import UserCreate
from iomad_admin.services.admin_service import AdminService
from iomad_admin.store.memory import InMemoryStore
from iomad_admin.store.sqlalchemy_store import SqlAlchemyStore


@pytest.fixture
def actor():
    return Identity(user_id="admin-1", company_id="platform")


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def service(store):
    return AdminService(store, recent_activity_limit=10)


@pytest.fixture
async def sql_store(tmp_path):
    """SqlAlchemyStore over a throwaway SQLite file with foreign keys enforced."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'store.db'}")

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield SqlAlchemyStore(async_sessionmaker(engine, expire_on_commit=False, autoflush=False))
    await engine.dispose()


# ---- Payload factories
def company_data(**overrides) -> CompanyCreate:
    fields = {
        "name": "Acme Learning",
        "shortname": "acme",
        "city": "Lisbon",
        "country": "PT",
        "theme": "corporate",
    }
    fields.update(overrides)
    return CompanyCreate(**fields)


def user_data(company_id: str, **overrides) -> UserCreate:
    fields = {
        "username": "jdoe",
        "email": "jdoe@acme-learning.com",
        "firstname": "Jane",
        "lastname": "Doe",
        "company_id": company_id,
    }
    fields.update(overrides)
    return UserCreate(**fields)


def course_data(company_id: str, **overrides) -> CourseCreate:
    fields = {
        "fullname": "Workplace Safety 101",
        "shortname": "ws101",
        "summary": "Basics",
        "company_id": company_id,
        "category_id": "cat-1",
    }
    fields.update(overrides)
    return CourseCreate(**fields)


def department_data(company_id: str, **overrides) -> DepartmentCreate:
    fields = {"name": "Sales", "shortname": "sales", "company_id": company_id}
    fields.update(overrides)
    return DepartmentCreate(**fields)


def license_data(company_id: str, course_id: str, **overrides) -> LicenseCreate:
    start = datetime(2026, 1, 1, tzinfo=timezone.utc)
    fields = {
        "name": "2026 seats",
        "company_id": company_id,
        "course_id": course_id,
        "allocation": 25,
        "valid_from": start,
        "valid_to": start + timedelta(days=365),
    }
    fields.update(overrides)
    return LicenseCreate(**fields)


@pytest.fixture
def payloads():
    """Factories for valid create bodies, overridable per field."""

    class Payloads:
        company = staticmethod(company_data)
        user = staticmethod(user_data)
        course = staticmethod(course_data)
        department = staticmethod(department_data)
        license = staticmethod(license_data)

    return Payloads
