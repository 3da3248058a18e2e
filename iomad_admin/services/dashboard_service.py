"""
services/dashboard_service.py
-----------------------------
Overview counters for the console landing page.

The five reads are issued concurrently and are not taken from one
snapshot: under concurrent writes the counts may disagree with each other
or with the activity list.
"""

import asyncio
from typing import Any, Dict

from iomad_admin.core.logging import get_logger
from iomad_admin.services.activity_service import ActivityService
from iomad_admin.store.base import Store

logger = get_logger(__name__)


class DashboardService:

    def __init__(self, store: Store, activity: ActivityService, recent_limit: int = 10) -> None:
        self._store = store
        self._activity = activity
        self._recent_limit = recent_limit

    async def get_stats(self) -> Dict[str, Any]:
        companies, users, courses, licenses, recent = await asyncio.gather(
            self._store.select("companies", columns=("id", "suspended"), order_by=None),
            self._store.select("users", columns=("id",), order_by=None),
            self._store.select("courses", columns=("id",), order_by=None),
            self._store.select("licenses", columns=("id",), order_by=None),
            self._activity.recent(self._recent_limit),
        )

        suspended = sum(1 for company in companies if company["suspended"])
        stats = {
            "total_companies": len(companies),
            "total_users": len(users),
            "total_courses": len(courses),
            "total_licenses": len(licenses),
            "active_companies": len(companies) - suspended,
            "suspended_companies": suspended,
            "recent_activity": recent,
        }
        logger.debug(
            "Dashboard stats computed",
            companies=stats["total_companies"],
            users=stats["total_users"],
        )
        return stats
