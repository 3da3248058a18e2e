"""
models/activity_log.py
----------------------
Append-only audit trail: who did what, when, to which entity.

Carries no foreign keys: a row outlives the company it mentions, and the
acting user may exist only in the auth provider.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import JSON, DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from iomad_admin.db.base import Base, UUIDPrimaryKey, utcnow


class ActivityLog(Base, UUIDPrimaryKey):
    __tablename__ = "activity_logs"

    # create | update | delete | suspend | unsuspend
    action: Mapped[str] = mapped_column(String(50), nullable=False, index=True)

    # company | user | course | department | license
    entity_type: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    entity_id: Mapped[str] = mapped_column(String(36), nullable=False)

    user_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    company_id: Mapped[Optional[str]] = mapped_column(String(36), index=True)
    details: Mapped[Dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<ActivityLog {self.action} {self.entity_type}:{self.entity_id}>"
