"""
api/routes/dashboard.py
-----------------------
GET /dashboard/stats  Company/user/course/license counters and the most
                      recent audit-trail entries.
"""

from fastapi import APIRouter, Depends

from iomad_admin.dependencies import ServiceDep, get_current_identity
from iomad_admin.schemas.activity import DashboardStats

router = APIRouter(
    prefix="/dashboard",
    tags=["Dashboard"],
    dependencies=[Depends(get_current_identity)],
)


@router.get("/stats", response_model=DashboardStats, summary="Console overview counters")
async def dashboard_stats(service: ServiceDep) -> DashboardStats:
    return DashboardStats.model_validate(await service.dashboard.get_stats())
