from __future__ import annotations

import logging
import threading
from typing import Iterator, Optional

from todo_backend.domain.entities import Task
from todo_backend.domain.errors import StoreError
from todo_backend.domain.value_objects.enums import Priority

from ..categories import CategoriesRepo
from ..tasks import TasksRepo

logger = logging.getLogger(__name__)


class TaskStorage(TasksRepo):
    """In-memory implementation of :class:`TasksRepo`.

    Tasks are kept in insertion order and guarded by a re-entrant lock, the
    same way :class:`~todo_backend.repositories.memory.CategoryStorage` is.

    ``category_id`` is checked against ``categories`` on every add/replace
    when a category store is attached. Without one the reference is stored
    as given and never checked.
    """

    def __init__(
        self,
        categories: CategoriesRepo | None = None,
        max_items: int | None = None,
    ) -> None:
        self._items: dict[int, Task] = {}
        self._categories = categories
        self._max_items = max_items
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __iter__(self) -> Iterator[Task]:
        with self._lock:
            snapshot = list(self._items.values())
        return iter(snapshot)

    def __contains__(self, task_id: object) -> bool:
        with self._lock:
            return task_id in self._items

    def __getitem__(self, index: int) -> Task:
        with self._lock:
            return list(self._items.values())[index]

    # -------------------- mutation --------------------
    def add_task(self, task: Task) -> Optional[StoreError]:
        with self._lock:
            error = self._validate(task)
            if error is None and task.id in self._items:
                error = StoreError.duplicate("Task", task.id)
            if (
                error is None
                and self._max_items is not None
                and len(self._items) >= self._max_items
            ):
                error = StoreError.full("Task", self._max_items)
            if error is not None:
                logger.debug("Task rejected id=%s kind=%s", task.id, error.kind.value)
                return error
            self._items[task.id] = task
            logger.debug(
                "Task added id=%s category_id=%s total=%s",
                task.id,
                task.category_id,
                len(self._items),
            )
            return None

    def replace_task(self, task: Task) -> Optional[StoreError]:
        with self._lock:
            if task.id not in self._items:
                return StoreError.not_found("Task", task.id)
            error = self._validate(task)
            if error is not None:
                return error
            self._items[task.id] = task
            logger.debug("Task replaced id=%s", task.id)
            return None

    def set_completion(self, task_id: int, is_complete: bool = True) -> Task | StoreError:
        with self._lock:
            current = self._items.get(task_id)
            if current is None:
                return StoreError.not_found("Task", task_id)
            updated = current.model_copy(update={"is_complete": bool(is_complete)})
            self._items[task_id] = updated
            logger.debug("Task completion id=%s is_complete=%s", task_id, updated.is_complete)
            return updated

    def toggle_completion(self, task_id: int) -> Task | StoreError:
        with self._lock:
            current = self._items.get(task_id)
            if current is None:
                return StoreError.not_found("Task", task_id)
            return self.set_completion(task_id, not current.is_complete)

    def delete_task(self, task_id: int) -> Optional[StoreError]:
        with self._lock:
            if self._items.pop(task_id, None) is None:
                return StoreError.not_found("Task", task_id)
            logger.debug("Task deleted id=%s", task_id)
            return None

    # -------------------- queries --------------------
    def get_task(self, task_id: int) -> Optional[Task]:
        with self._lock:
            return self._items.get(task_id)

    def list_all(self, *, limit: int = 100, offset: int = 0) -> list[Task]:
        with self._lock:
            start = max(0, offset)
            return list(self._items.values())[start : start + max(0, limit)]

    def list_by_category(self, category_id: int) -> list[Task]:
        with self._lock:
            return [t for t in self._items.values() if t.category_id == category_id]

    def list_by_completion(self, is_complete: bool) -> list[Task]:
        with self._lock:
            return [t for t in self._items.values() if t.is_complete == bool(is_complete)]

    def _validate(self, task: Task) -> Optional[StoreError]:
        if not task.title.strip():
            return StoreError.invalid("Task title must not be empty", task.id)
        if Priority.parse(task.priority) is None:
            allowed = ", ".join(p.value for p in Priority)
            return StoreError.invalid(
                f"Task priority {task.priority!r} is not one of: {allowed}", task.id
            )
        if (
            task.category_id is not None
            and self._categories is not None
            and task.category_id not in self._categories
        ):
            return StoreError.invalid_reference(
                f"Task id={task.id} references unknown category id={task.category_id}",
                task.category_id,
            )
        return None


def new_task_storage(
    categories: CategoriesRepo | None = None, max_items: int | None = None
) -> TaskStorage:
    """Return an empty task store, optionally bound to a category store."""
    return TaskStorage(categories=categories, max_items=max_items)
