"""
services/company_service.py
---------------------------
Company management.

Suspension is the only lifecycle transition besides deletion. Deleting a
company does not touch its users, courses, departments or licenses; the
store's foreign keys decide whether the delete is allowed.
"""

from typing import List, Optional

from iomad_admin.core.logging import get_logger
from iomad_admin.core.security import Identity
from iomad_admin.services.entity_service import EntityService
from iomad_admin.store.base import Row

logger = get_logger(__name__)


class CompanyService(EntityService):

    table = "companies"
    entity_type = "company"
    label = "Company"

    async def list(self) -> List[Row]:
        return await self._store.select(self.table)

    async def delete(self, record_id: str, actor: Optional[Identity]) -> None:
        await self._audited(
            lambda: self._delete(record_id),
            action="delete",
            message="Company deleted",
            actor=actor,
            entity_id=record_id,
        )
        logger.info("Company deleted", company_id=record_id)

    async def _delete(self, record_id: str) -> Row:
        await self._store.delete(self.table, record_id)
        return {"id": record_id}

    async def suspend(self, record_id: str, suspended: bool, actor: Optional[Identity]) -> Row:
        """
        Set the suspended flag. Audited once, as 'suspend' or 'unsuspend';
        no separate 'update' row is written.
        """
        action = "suspend" if suspended else "unsuspend"
        row = await self._audited(
            lambda: self._patch(record_id, {"suspended": suspended}),
            action=action,
            message=f"Company {action}ed",
            actor=actor,
            entity_id=record_id,
        )
        logger.info("Company suspension changed", company_id=record_id, suspended=suspended)
        return row
