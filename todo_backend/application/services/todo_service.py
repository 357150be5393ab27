from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone
from typing import Callable, Iterable, Optional

from todo_backend.domain.entities import Category, Task, new_category, new_task
from todo_backend.domain.errors import StoreError
from todo_backend.domain.value_objects.enums import Priority
from todo_backend.repositories.memory import (
    CategoryStorage,
    TaskStorage,
    new_category_storage,
    new_task_storage,
)

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """Render ``moment`` as ``YYYY-MM-DDTHH:MM:SSZ`` in UTC."""
    if moment.tzinfo is None:
        raise ValueError("timestamp must be timezone-aware")
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class TodoService:
    """Create, change and query tasks and categories held in memory.

    - Owns one :class:`CategoryStorage` and one :class:`TaskStorage` bound to it,
      so task category references are always checked.
    - Allocates identifiers (``max(id) + 1``) and stamps ``created_at`` from ``clock``.
    - Domain failures are returned as :class:`StoreError`, never raised.
    """

    def __init__(
        self,
        categories: Optional[CategoryStorage] = None,
        tasks: Optional[TaskStorage] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        if categories is None or tasks is None:
            # Lazy import so callers injecting their own stores need no environment
            from todo_backend.config.settings import settings

            if categories is None:
                categories = new_category_storage(max_items=settings.max_categories)
            if tasks is None:
                tasks = new_task_storage(categories, max_items=settings.max_tasks)
        self.categories = categories
        self.tasks = tasks
        self._clock: Clock = clock or _utc_now
        self._lock = threading.Lock()

    def _now(self) -> str:
        return format_timestamp(self._clock())

    # -------------------- categories --------------------
    def create_category(self, name: str) -> Category | StoreError:
        with self._lock:
            category = new_category(
                _next_id(c.id for c in self.categories), name.strip(), self._now()
            )
            error = self.categories.add_category(category)
        if error is not None:
            _log_rejected("create_category", error)
            return error
        logger.info("Category created", extra={"operation": "create_category", "id": category.id})
        return category

    def rename_category(self, category_id: int, name: str) -> Category | StoreError:
        with self._lock:
            current = self.categories.get_category(category_id)
            if current is None:
                return StoreError.not_found("Category", category_id)
            renamed = current.model_copy(update={"name": name.strip()})
            error = self.categories.replace_category(renamed)
        if error is not None:
            _log_rejected("rename_category", error)
            return error
        logger.info("Category renamed", extra={"operation": "rename_category", "id": category_id})
        return renamed

    def delete_category(self, category_id: int) -> Optional[StoreError]:
        with self._lock:
            referencing = self.tasks.list_by_category(category_id)
            if referencing:
                error = StoreError.invalid_reference(
                    f"Category id={category_id} is still used by {len(referencing)} task(s)",
                    category_id,
                )
            else:
                error = self.categories.delete_category(category_id)
        if error is not None:
            _log_rejected("delete_category", error)
            return error
        logger.info("Category deleted", extra={"operation": "delete_category", "id": category_id})
        return None

    def list_categories(self) -> list[Category]:
        return list(self.categories)

    # -------------------- tasks --------------------
    def create_task(
        self,
        title: str,
        description: str = "",
        priority: Priority | str = Priority.MEDIUM,
        category_id: int | None = None,
    ) -> Task | StoreError:
        with self._lock:
            task = new_task(
                _next_id(t.id for t in self.tasks),
                title.strip(),
                description,
                _priority_label(priority),
                category_id,
                False,
                self._now(),
            )
            error = self.tasks.add_task(task)
        if error is not None:
            _log_rejected("create_task", error)
            return error
        logger.info("Task created", extra={"operation": "create_task", "id": task.id})
        return task

    def update_task(
        self,
        task_id: int,
        *,
        title: str | None = None,
        description: str | None = None,
        priority: Priority | str | None = None,
        category_id: int | None = None,
        clear_category: bool = False,
    ) -> Task | StoreError:
        changes: dict[str, object] = {}
        if title is not None:
            changes["title"] = title.strip()
        if description is not None:
            changes["description"] = description
        if priority is not None:
            changes["priority"] = _priority_label(priority)
        if clear_category:
            changes["category_id"] = None
        elif category_id is not None:
            changes["category_id"] = category_id
        # delete_category checks references under the same lock
        with self._lock:
            current = self.tasks.get_task(task_id)
            if current is None:
                return StoreError.not_found("Task", task_id)
            updated = current.model_copy(update=changes)
            error = self.tasks.replace_task(updated)
        if error is not None:
            _log_rejected("update_task", error)
            return error
        logger.info(
            "Task updated",
            extra={"operation": "update_task", "id": task_id, "fields": sorted(changes)},
        )
        return updated

    def toggle_task(self, task_id: int) -> Task | StoreError:
        with self._lock:
            result = self.tasks.toggle_completion(task_id)
        if isinstance(result, StoreError):
            _log_rejected("toggle_task", result)
        return result

    def delete_task(self, task_id: int) -> Optional[StoreError]:
        error = self.tasks.delete_task(task_id)
        if error is not None:
            _log_rejected("delete_task", error)
            return error
        logger.info("Task deleted", extra={"operation": "delete_task", "id": task_id})
        return None

    def list_tasks(self) -> list[Task]:
        return list(self.tasks)

    def tasks_in_category(self, category_id: int) -> list[Task]:
        return self.tasks.list_by_category(category_id)

    def open_tasks(self) -> list[Task]:
        return self.tasks.list_by_completion(False)

    def completed_tasks(self) -> list[Task]:
        return self.tasks.list_by_completion(True)


def _next_id(existing: Iterable[int]) -> int:
    return max(existing, default=0) + 1


def _priority_label(priority: Priority | str) -> str:
    return priority.value if isinstance(priority, Priority) else str(priority)


def _log_rejected(operation: str, error: StoreError) -> None:
    logger.warning(
        "Operation rejected: %s",
        error.message,
        extra={"operation": operation, "kind": error.kind.value, "id": error.identifier},
    )
