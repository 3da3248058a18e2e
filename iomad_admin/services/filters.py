"""
services/filters.py
-------------------
Search and status narrowing applied to already-fetched list results.

Matching is a case-insensitive substring test over a fixed set of text
columns; an empty search term matches everything.
"""

from enum import Enum
from typing import Iterable, List, Optional, Sequence

from iomad_admin.store.base import Row

COMPANY_SEARCH_FIELDS = ("name", "shortname", "city")
USER_SEARCH_FIELDS = ("firstname", "lastname", "email", "username")


class CompanyStatus(str, Enum):
    all = "all"
    active = "active"
    suspended = "suspended"


def matches_search(row: Row, term: Optional[str], fields: Sequence[str]) -> bool:
    if not term:
        return True
    needle = term.lower()
    return any(needle in (row.get(field) or "").lower() for field in fields)


def filter_companies(
    rows: Iterable[Row],
    search: Optional[str] = None,
    status: CompanyStatus = CompanyStatus.all,
) -> List[Row]:
    status = CompanyStatus(status)
    return [
        row for row in rows
        if matches_search(row, search, COMPANY_SEARCH_FIELDS)
        and (
            status is CompanyStatus.all
            or (status is CompanyStatus.suspended) == bool(row["suspended"])
        )
    ]


def filter_users(rows: Iterable[Row], search: Optional[str] = None) -> List[Row]:
    return [row for row in rows if matches_search(row, search, USER_SEARCH_FIELDS)]
