"""
schemas/activity.py
-------------------
Audit-trail rows and the dashboard summary that embeds the latest of them.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from iomad_admin.schemas.company import CompanyRead
from iomad_admin.schemas.user import UserRead


class ActivityLogRead(BaseModel):
    id: str
    action: str
    entity_type: str
    entity_id: str
    user_id: str
    company_id: Optional[str] = None
    details: Dict[str, Any]
    created_at: datetime
    user: Optional[UserRead] = None
    company: Optional[CompanyRead] = None

    model_config = {"from_attributes": True}


class DashboardStats(BaseModel):
    total_companies: int
    total_users: int
    total_courses: int
    total_licenses: int
    active_companies: int
    suspended_companies: int
    recent_activity: List[ActivityLogRead]
