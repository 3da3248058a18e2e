"""
store/memory.py
---------------
Dict-backed Store used by the test-suite and for local demos.

The table layout, column defaults and foreign keys are read from the ORM
metadata, so this adapter rejects the same writes the database would:
unknown columns, duplicate values in unique columns, dangling references on
insert/update, and deletes that would orphan dependent rows.

transaction() snapshots all tables and restores them if the block raises.
The rollback restores every table, including writes other callers made
while the block ran, so one store instance serves one caller at a time.
Pass transactional=False to get a store whose writes are never rolled back.
"""

import copy
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Iterable, List, Mapping, Optional, Sequence

from iomad_admin.db.base import generate_uuid, utcnow
from iomad_admin.models import MODELS_BY_TABLE
from iomad_admin.store.base import APPEND_ONLY_TABLES, STORE_ASSIGNED, Embed, Row, Store
from iomad_admin.store.exceptions import IntegrityViolation, RecordNotFound, StoreError


def _foreign_keys() -> Dict[str, Dict[str, str]]:
    """table → {column: referenced table}"""
    return {
        table: {fk.parent.name: fk.column.table.name for fk in model.__table__.foreign_keys}
        for table, model in MODELS_BY_TABLE.items()
    }


class InMemoryStore(Store):

    def __init__(self, transactional: bool = True) -> None:
        self.transactional = transactional
        self.tables: Dict[str, Dict[str, Row]] = {table: {} for table in MODELS_BY_TABLE}
        self._foreign_keys = _foreign_keys()
        self._in_transaction = False

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        if not self.transactional or self._in_transaction:
            yield
            return
        snapshot = copy.deepcopy(self.tables)
        self._in_transaction = True
        try:
            yield
        except BaseException:
            self.tables.clear()
            self.tables.update(snapshot)
            raise
        finally:
            self._in_transaction = False

    # ── Schema helpers ────────────────────────────────────────────────────────

    def _table(self, table: str) -> Dict[str, Row]:
        try:
            return self.tables[table]
        except KeyError:
            raise StoreError(f"Unknown table '{table}'") from None

    @staticmethod
    def _check_columns(table: str, names: Iterable[str]) -> None:
        known = MODELS_BY_TABLE[table].__table__.c
        for name in names:
            if name not in known:
                raise StoreError(f"Unknown column '{table}.{name}'")

    @staticmethod
    def _defaults(table: str) -> Row:
        defaults: Row = {}
        for column in MODELS_BY_TABLE[table].__table__.columns:
            default = column.default
            if default is None:
                defaults[column.name] = None
            elif default.is_callable:
                defaults[column.name] = default.arg(None)
            else:
                defaults[column.name] = default.arg
        return defaults

    def _check_references(self, table: str, row: Mapping[str, Any]) -> None:
        for column, target in self._foreign_keys[table].items():
            value = row.get(column)
            if value is not None and value not in self.tables[target]:
                raise IntegrityViolation(
                    f"{table}.{column}={value!r} references a missing row in '{target}'"
                )

    def _check_unique(self, table: str, row: Mapping[str, Any], record_id: Optional[str] = None) -> None:
        for column in MODELS_BY_TABLE[table].__table__.columns:
            value = row.get(column.name)
            if not column.unique or value is None:
                continue
            for key, other in self.tables[table].items():
                if key != record_id and other.get(column.name) == value:
                    raise IntegrityViolation(f"{table}.{column.name}={value!r} already exists")

    def _check_not_referenced(self, table: str, record_id: str) -> None:
        for child, references in self._foreign_keys.items():
            for column, target in references.items():
                if target != table:
                    continue
                if any(row.get(column) == record_id for row in self.tables[child].values()):
                    raise IntegrityViolation(
                        f"'{table}' row {record_id} is still referenced from {child}.{column}"
                    )

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
        source = self._table(table)
        filters = filters or {}
        self._check_columns(table, list(filters) + list(columns or []) + ([order_by] if order_by else []))

        # Newest insert first, so equal sort keys keep the newest row on top
        rows = list(source.values())
        if descending:
            rows.reverse()
        rows = [row for row in rows if all(row.get(k) == v for k, v in filters.items())]
        if order_by:
            rows.sort(
                key=lambda row: (row.get(order_by) is not None, row.get(order_by)),
                reverse=descending,
            )
        if limit is not None:
            rows = rows[:limit]
        if columns:
            rows = [{name: row.get(name) for name in columns} for row in rows]
        return await self.attach_embeds(copy.deepcopy(rows), embeds)

    async def get(self, table: str, record_id: str, embeds: Sequence[Embed] = ()) -> Row:
        source = self._table(table)
        if record_id not in source:
            raise RecordNotFound(table, record_id)
        return (await self.attach_embeds([copy.deepcopy(source[record_id])], embeds))[0]

    async def insert(self, table: str, row: Mapping[str, Any], embeds: Sequence[Embed] = ()) -> Row:
        source = self._table(table)
        self._check_columns(table, row)
        stored = self._defaults(table)
        stored.update({k: copy.deepcopy(v) for k, v in row.items() if k not in STORE_ASSIGNED})
        self._check_references(table, stored)
        self._check_unique(table, stored)

        now = utcnow()
        stored["id"] = generate_uuid()
        for column in ("created_at", "updated_at"):
            if column in stored:
                stored[column] = now
        source[stored["id"]] = stored
        return await self.get(table, stored["id"], embeds)

    async def update(
        self,
        table: str,
        record_id: str,
        patch: Mapping[str, Any],
        embeds: Sequence[Embed] = (),
    ) -> Row:
        source = self._table(table)
        if table in APPEND_ONLY_TABLES:
            raise StoreError(f"Table '{table}' is append-only")
        self._check_columns(table, patch)
        if "id" in patch:
            raise StoreError("Primary key cannot be changed")
        if record_id not in source:
            raise RecordNotFound(table, record_id)

        updated = {**source[record_id], **copy.deepcopy(dict(patch))}
        self._check_references(table, updated)
        self._check_unique(table, updated, record_id)
        source[record_id] = updated
        return await self.get(table, record_id, embeds)

    async def delete(self, table: str, record_id: str) -> None:
        source = self._table(table)
        if table in APPEND_ONLY_TABLES:
            raise StoreError(f"Table '{table}' is append-only")
        if record_id not in source:
            raise RecordNotFound(table, record_id)
        self._check_not_referenced(table, record_id)
        del source[record_id]

    async def fetch_by_ids(self, table: str, ids: Iterable[str]) -> Dict[str, Row]:
        source = self._table(table)
        return {key: copy.deepcopy(source[key]) for key in ids if key in source}
