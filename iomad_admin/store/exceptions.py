"""
store/exceptions.py
-------------------
Errors raised by store adapters.

Every failure of the underlying database surfaces as a StoreError (or a
subclass); adapters chain the original driver exception as __cause__.
Services never translate them, they propagate to the caller unchanged.
"""


class StoreError(Exception):
    """A query or mutation against the data store failed."""


class RecordNotFound(StoreError):
    """No row with the given primary key exists."""

    def __init__(self, table: str, record_id: str):
        self.table = table
        self.record_id = record_id
        super().__init__(f"No row in '{table}' with id '{record_id}'")


class IntegrityViolation(StoreError):
    """A foreign-key or uniqueness constraint rejected the write."""
