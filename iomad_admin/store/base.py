"""
store/base.py
-------------
Abstract table-oriented store the services talk to.

Implementations:
  - SqlAlchemyStore (async SQLAlchemy, PostgreSQL in production)
  - InMemoryStore   (dict-backed, tests and local demos)

Rows travel as plain dicts keyed by column name. Related rows are pulled in
through explicit Embed specifications rather than table-name conventions:

    Embed("company", "companies", "company_id")

puts the `companies` row whose id equals row["company_id"] under
row["company"] (None when the reference dangles or is empty).
"""

from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, AsyncIterator, Dict, Iterable, List, Mapping, Optional, Sequence

Row = Dict[str, Any]

# Columns the store fills in itself; caller-supplied values are discarded
STORE_ASSIGNED = ("id", "created_at", "updated_at")

# Audit tables only ever grow
APPEND_ONLY_TABLES = frozenset({"activity_logs"})


@dataclass(frozen=True)
class Embed:
    name: str
    table: str
    foreign_key: str


class Store(ABC):
    """
    Interface for CRUD access to the console's tables.

    All methods raise StoreError (or a subclass) on failure.
    """

    # Whether transaction() really makes the enclosed calls atomic
    transactional: bool = False

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """Group calls so they commit or roll back together, where supported."""
        yield

    @abstractmethod
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
        """Rows matching every equality filter, sorted, optionally limited."""
        ...

    @abstractmethod
    async def get(self, table: str, record_id: str, embeds: Sequence[Embed] = ()) -> Row:
        """One row by primary key. Raises RecordNotFound."""
        ...

    @abstractmethod
    async def insert(self, table: str, row: Mapping[str, Any], embeds: Sequence[Embed] = ()) -> Row:
        """Insert a row; the store assigns id, created_at and updated_at."""
        ...

    @abstractmethod
    async def update(
        self,
        table: str,
        record_id: str,
        patch: Mapping[str, Any],
        embeds: Sequence[Embed] = (),
    ) -> Row:
        """Apply a partial update and return the full row. Raises RecordNotFound."""
        ...

    @abstractmethod
    async def delete(self, table: str, record_id: str) -> None:
        """Delete one row. Raises RecordNotFound when nothing matched."""
        ...

    @abstractmethod
    async def fetch_by_ids(self, table: str, ids: Iterable[str]) -> Dict[str, Row]:
        """Rows of `table` whose id is in `ids`, keyed by id."""
        ...

    async def attach_embeds(self, rows: List[Row], embeds: Sequence[Embed]) -> List[Row]:
        for embed in embeds:
            keys = {row[embed.foreign_key] for row in rows if row.get(embed.foreign_key)}
            related = await self.fetch_by_ids(embed.table, keys) if keys else {}
            for row in rows:
                row[embed.name] = related.get(row.get(embed.foreign_key))
        return rows
