"""
services/entity_service.py
--------------------------
Generic list/get/create/update for one table, plus the audit discipline
every mutation follows:

  - exactly one mutation and exactly one audit row per public call
  - on a transactional store both run in one transaction, so a failed
    audit write rolls the mutation back and the error reaches the caller
  - on a non-transactional store the audit write is best-effort: its
    failure is logged and the committed mutation is still returned

Store errors are never translated here; they propagate unchanged.
"""

from typing import Any, Awaitable, Callable, List, Mapping, Optional, Tuple, TypeVar

from pydantic import BaseModel

from iomad_admin.core.logging import get_logger
from iomad_admin.core.security import Identity
from iomad_admin.db.base import utcnow
from iomad_admin.schemas.common import PartialUpdate
from iomad_admin.services.activity_service import ActivityService
from iomad_admin.store.base import Embed, Row, Store
from iomad_admin.store.exceptions import StoreError

logger = get_logger(__name__)

T = TypeVar("T")

COMPANY_EMBED = Embed("company", "companies", "company_id")
COURSE_EMBED = Embed("course", "courses", "course_id")


class EntityService:

    table: str
    entity_type: str
    label: str
    embeds: Tuple[Embed, ...] = ()

    def __init__(self, store: Store, activity: ActivityService) -> None:
        self._store = store
        self._activity = activity

    # ── Reads ─────────────────────────────────────────────────────────────────

    async def list(self, company_id: Optional[str] = None) -> List[Row]:
        """All rows newest first, optionally only those of one company."""
        filters = {"company_id": company_id} if company_id else None
        return await self._store.select(self.table, filters=filters, embeds=self.embeds)

    async def get(self, record_id: str) -> Row:
        return await self._store.get(self.table, record_id, embeds=self.embeds)

    # ── Mutations ─────────────────────────────────────────────────────────────

    async def create(self, data: BaseModel, actor: Optional[Identity]) -> Row:
        row = await self._audited(
            lambda: self._store.insert(self.table, data.model_dump(), embeds=self.embeds),
            action="create",
            message=f"{self.label} created",
            actor=actor,
        )
        logger.info("Record created", entity_type=self.entity_type, entity_id=row["id"])
        return row

    async def update(self, record_id: str, data: PartialUpdate, actor: Optional[Identity]) -> Row:
        row = await self._audited(
            lambda: self._patch(record_id, data.changes()),
            action="update",
            message=f"{self.label} updated",
            actor=actor,
            entity_id=record_id,
        )
        logger.info("Record updated", entity_type=self.entity_type, entity_id=record_id)
        return row

    async def _patch(self, record_id: str, changes: Mapping[str, Any]) -> Row:
        patch = {**changes, "updated_at": utcnow()}
        return await self._store.update(self.table, record_id, patch, embeds=self.embeds)

    async def _audited(
        self,
        mutation: Callable[[], Awaitable[T]],
        action: str,
        message: str,
        actor: Optional[Identity],
        entity_id: Optional[str] = None,
    ) -> T:
        async with self._store.transaction():
            result = await mutation()
            await self._audit(action, entity_id or result["id"], message, actor)
        return result

    async def _audit(
        self,
        action: str,
        entity_id: str,
        message: str,
        actor: Optional[Identity],
    ) -> None:
        if self._store.transactional:
            await self._activity.log_activity(action, self.entity_type, entity_id, message, actor)
            return
        try:
            await self._activity.log_activity(action, self.entity_type, entity_id, message, actor)
        except StoreError as exc:
            logger.warning(
                "Audit write failed after committed mutation",
                action=action,
                entity_type=self.entity_type,
                entity_id=entity_id,
                error=str(exc),
            )
