"""
services/activity_service.py
----------------------------
Append-only audit trail.

The acting identity is an explicit argument: when it is None nothing is
written and nothing is raised, so anonymous mutations leave no trace.
"""

from typing import Any, List, Mapping, Optional, Union

from iomad_admin.core.logging import get_logger
from iomad_admin.core.security import Identity
from iomad_admin.store.base import Embed, Row, Store

logger = get_logger(__name__)

ACTIVITY_EMBEDS = (
    Embed("user", "users", "user_id"),
    Embed("company", "companies", "company_id"),
)


class ActivityService:

    table = "activity_logs"

    def __init__(self, store: Store) -> None:
        self._store = store

    async def log_activity(
        self,
        action: str,
        entity_type: str,
        entity_id: str,
        details: Union[str, Mapping[str, Any]],
        actor: Optional[Identity],
    ) -> Optional[Row]:
        """
        Insert one audit row and return it, or return None without writing
        when there is no acting identity.

        A plain-text `details` is stored as {"message": details}; a mapping
        is stored as given.
        """
        if actor is None:
            logger.debug(
                "Activity not logged: no acting identity",
                action=action,
                entity_type=entity_type,
                entity_id=entity_id,
            )
            return None

        row = await self._store.insert(
            self.table,
            {
                "action": action,
                "entity_type": entity_type,
                "entity_id": entity_id,
                "user_id": actor.user_id,
                "company_id": actor.company_id,
                "details": {"message": details} if isinstance(details, str) else details,
            },
        )
        logger.info(
            "Activity logged",
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            user_id=actor.user_id,
        )
        return row

    async def recent(self, limit: int) -> List[Row]:
        """Newest audit rows first, with the acting user and company embedded."""
        return await self._store.select(self.table, embeds=ACTIVITY_EMBEDS, limit=limit)
