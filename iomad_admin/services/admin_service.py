"""
services/admin_service.py
-------------------------
Single entry point the HTTP layer talks to: one service group per entity,
all sharing the same store and audit trail.

    service = AdminService(store)
    await service.companies.suspend(company_id, True, actor=identity)
    await service.dashboard.get_stats()
"""

from typing import Optional

from iomad_admin.core.config import settings
from iomad_admin.services.activity_service import ActivityService
from iomad_admin.services.company_service import CompanyService
from iomad_admin.services.course_service import CourseService
from iomad_admin.services.dashboard_service import DashboardService
from iomad_admin.services.department_service import DepartmentService
from iomad_admin.services.license_service import LicenseService
from iomad_admin.services.user_service import UserService
from iomad_admin.store.base import Store


class AdminService:

    def __init__(self, store: Store, recent_activity_limit: Optional[int] = None) -> None:
        self.store = store
        self.activity = ActivityService(store)
        self.companies = CompanyService(store, self.activity)
        self.users = UserService(store, self.activity)
        self.courses = CourseService(store, self.activity)
        self.departments = DepartmentService(store, self.activity)
        self.licenses = LicenseService(store, self.activity)
        self.dashboard = DashboardService(
            store,
            self.activity,
            recent_limit=(
                settings.RECENT_ACTIVITY_LIMIT if recent_activity_limit is None else recent_activity_limit
            ),
        )
