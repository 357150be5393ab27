from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..value_objects.ids import CategoryId


class Category(BaseModel):
    id: CategoryId = Field(..., description="Identifier, unique within a category store")
    name: str = Field(..., description="Display name")
    created_at: str = Field(..., description="Creation timestamp, ISO-8601 by convention")

    model_config = ConfigDict(frozen=True)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


def new_category(id: int, name: str, created_at: str) -> Category:
    """Build a category value. No field is validated here; stores check on insert."""
    return Category(id=CategoryId(id), name=name, created_at=created_at)
