from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..value_objects.enums import Priority
from ..value_objects.ids import CategoryId, TaskId


class Task(BaseModel):
    id: TaskId = Field(..., description="Identifier, unique within a task store")
    title: str = Field(..., description="Short title")
    description: str = Field("", description="Free text description")
    priority: str = Field(..., description="Priority label, see Priority")
    category_id: CategoryId | None = Field(
        default=None, description="Weak reference to Category.id, if any"
    )
    is_complete: bool = Field(default=False, description="Completion flag")
    created_at: str = Field(..., description="Creation timestamp, ISO-8601 by convention")

    model_config = ConfigDict(frozen=True)

    @property
    def priority_level(self) -> Optional[Priority]:
        return Priority.parse(self.priority)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


def new_task(
    id: int,
    title: str,
    description: str,
    priority: str,
    category_id: int | None,
    is_complete: bool,
    created_at: str,
) -> Task:
    """Build a task value.

    Mirrors :func:`new_category`: the arguments are taken as given (empty
    title, unknown priority and dangling ``category_id`` included). The
    owning :class:`~todo_backend.repositories.memory.TaskStorage` is where
    those are rejected.
    """
    return Task(
        id=TaskId(id),
        title=title,
        description=description,
        priority=priority,
        category_id=CategoryId(category_id) if category_id is not None else None,
        is_complete=is_complete,
        created_at=created_at,
    )
