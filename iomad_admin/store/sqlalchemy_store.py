"""
store/sqlalchemy_store.py
-------------------------
Store adapter over async SQLAlchemy.

Session handling:
  - Inside transaction() every call shares one session; the session-level
    transaction commits when the block exits and rolls back on any error.
  - Outside a transaction each call opens its own short-lived session, so
    reads can be issued concurrently (AsyncSession itself is not safe for
    concurrent use).

One instance is created per request; it is not shared between tasks that
run transactions.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Iterable, List, Mapping, Optional, Sequence

from sqlalchemy import Column, delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from iomad_admin.core.logging import get_logger
from iomad_admin.models import MODELS_BY_TABLE
from iomad_admin.store.base import APPEND_ONLY_TABLES, STORE_ASSIGNED, Embed, Row, Store
from iomad_admin.store.exceptions import IntegrityViolation, RecordNotFound, StoreError

logger = get_logger(__name__)


def _translate(exc: SQLAlchemyError) -> StoreError:
    if isinstance(exc, IntegrityError):
        return IntegrityViolation(str(exc.orig))
    return StoreError(str(exc))


class SqlAlchemyStore(Store):

    transactional = True

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

    # ── Sessions ──────────────────────────────────────────────────────────────

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        if self._session is not None:
            # Nested blocks join the outer transaction
            yield
            return
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    self._session = session
                    try:
                        yield
                    finally:
                        self._session = None
        except SQLAlchemyError as exc:
            logger.error("Transaction failed", error=str(exc))
            raise _translate(exc) from exc

    @asynccontextmanager
    async def _session_scope(self) -> AsyncIterator[AsyncSession]:
        if self._session is not None:
            yield self._session
            return
        async with self._session_factory() as session:
            async with session.begin():
                yield session

    # ── Schema helpers ────────────────────────────────────────────────────────

    @staticmethod
    def _model(table: str):
        try:
            return MODELS_BY_TABLE[table]
        except KeyError:
            raise StoreError(f"Unknown table '{table}'") from None

    @staticmethod
    def _column(model, name: str) -> Column:
        try:
            return model.__table__.c[name]
        except KeyError:
            raise StoreError(f"Unknown column '{model.__tablename__}.{name}'") from None

    def _values(self, model, values: Mapping[str, Any]) -> Dict[str, Any]:
        for name in values:
            self._column(model, name)
        return dict(values)

    # ── Store interface ───────────────────────────────────────────────────────

    async def select(
        self,
        table: str,
        filters: Optional[Mapping[str, Any]] = None,
        embeds: Sequence[Embed] = (),
        columns: Optional[Sequence[str]] = None,
        order_by: Optional[str] = "created_at",
        descending: bool = True,
        limit: Optional[int] = None,
    ) -> List[Row]:
        model = self._model(table)
        if columns:
            stmt = select(*(self._column(model, name) for name in columns))
        else:
            stmt = select(model)
        for name, value in (filters or {}).items():
            stmt = stmt.where(self._column(model, name) == value)
        if order_by:
            column = self._column(model, order_by)
            stmt = stmt.order_by(column.desc() if descending else column.asc())
        if limit is not None:
            stmt = stmt.limit(limit)

        try:
            async with self._session_scope() as session:
                result = await session.execute(stmt)
                if columns:
                    rows = [dict(mapping) for mapping in result.mappings().all()]
                else:
                    rows = [obj.to_dict() for obj in result.scalars().all()]
        except SQLAlchemyError as exc:
            raise _translate(exc) from exc
        return await self.attach_embeds(rows, embeds)

    async def get(self, table: str, record_id: str, embeds: Sequence[Embed] = ()) -> Row:
        model = self._model(table)
        try:
            async with self._session_scope() as session:
                obj = await session.get(model, record_id)
                if obj is None:
                    raise RecordNotFound(table, record_id)
                row = obj.to_dict()
        except SQLAlchemyError as exc:
            raise _translate(exc) from exc
        return (await self.attach_embeds([row], embeds))[0]

    async def insert(self, table: str, row: Mapping[str, Any], embeds: Sequence[Embed] = ()) -> Row:
        model = self._model(table)
        values = {k: v for k, v in self._values(model, row).items() if k not in STORE_ASSIGNED}
        try:
            async with self._session_scope() as session:
                obj = model(**values)
                session.add(obj)
                await session.flush()
                await session.refresh(obj)
                stored = obj.to_dict()
        except SQLAlchemyError as exc:
            raise _translate(exc) from exc
        return (await self.attach_embeds([stored], embeds))[0]

    async def update(
        self,
        table: str,
        record_id: str,
        patch: Mapping[str, Any],
        embeds: Sequence[Embed] = (),
    ) -> Row:
        model = self._model(table)
        if table in APPEND_ONLY_TABLES:
            raise StoreError(f"Table '{table}' is append-only")
        values = self._values(model, patch)
        if "id" in values:
            raise StoreError("Primary key cannot be changed")
        try:
            async with self._session_scope() as session:
                obj = await session.get(model, record_id)
                if obj is None:
                    raise RecordNotFound(table, record_id)
                for name, value in values.items():
                    setattr(obj, name, value)
                await session.flush()
                await session.refresh(obj)
                row = obj.to_dict()
        except SQLAlchemyError as exc:
            raise _translate(exc) from exc
        return (await self.attach_embeds([row], embeds))[0]

    async def delete(self, table: str, record_id: str) -> None:
        model = self._model(table)
        if table in APPEND_ONLY_TABLES:
            raise StoreError(f"Table '{table}' is append-only")
        try:
            async with self._session_scope() as session:
                result = await session.execute(delete(model).where(model.id == record_id))
                if result.rowcount == 0:
                    raise RecordNotFound(table, record_id)
        except SQLAlchemyError as exc:
            raise _translate(exc) from exc

    async def fetch_by_ids(self, table: str, ids: Iterable[str]) -> Dict[str, Row]:
        model = self._model(table)
        try:
            async with self._session_scope() as session:
                result = await session.execute(select(model).where(model.id.in_(list(ids))))
                return {obj.id: obj.to_dict() for obj in result.scalars().all()}
        except SQLAlchemyError as exc:
            raise _translate(exc) from exc
