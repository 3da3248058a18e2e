"""
schemas/common.py
-----------------
Shared base for PATCH request bodies.

Only the fields a client actually sent are applied, so an update never
resets untouched columns. Sending an explicit null is only allowed for
columns that are nullable in the database.
"""

from typing import Any, ClassVar, Dict, FrozenSet

from pydantic import BaseModel, model_validator


class PartialUpdate(BaseModel):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    model_config = {"use_enum_values": True}

    @model_validator(mode="after")
    def reject_nulls(self):
        for name in self.model_fields_set:
            if getattr(self, name) is None and name not in self.nullable_fields:
                raise ValueError(f"'{name}' cannot be null")
        return self

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)
