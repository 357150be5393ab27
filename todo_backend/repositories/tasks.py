from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from todo_backend.domain.entities import Task
from todo_backend.domain.errors import StoreError


class TasksRepo(ABC):
    @abstractmethod
    def add_task(self, task: Task) -> Optional[StoreError]:
        """
        Append a new task.

        Example:
            >>> repo.add_task(new_task(1, "Learn Go", "", "HIGH", None, False, "2023-10-01T10:00:00Z"))

        :param task: Task value to retain.
        :return: ``None`` on success, otherwise the reason it was rejected.
        """

    @abstractmethod
    def get_task(self, task_id: int) -> Optional[Task]:
        """
        Fetch a task by its identifier.

        :param task_id: Unique identifier of the task.
        :return: Task if found, otherwise None.
        """

    @abstractmethod
    def list_all(self, *, limit: int = 100, offset: int = 0) -> list[Task]:
        """
        List tasks in insertion order.

        Example:
            >>> repo.list_all(limit=10)
            [Task(...), Task(...)]
        """

    @abstractmethod
    def list_by_category(self, category_id: int) -> list[Task]:
        """List tasks referencing the given category, in insertion order."""

    @abstractmethod
    def list_by_completion(self, is_complete: bool) -> list[Task]:
        """List tasks whose completion flag equals ``is_complete``."""

    @abstractmethod
    def replace_task(self, task: Task) -> Optional[StoreError]:
        """
        Replace the stored task that has the same identifier.

        The task keeps its position in insertion order.
        """

    @abstractmethod
    def set_completion(self, task_id: int, is_complete: bool = True) -> Task | StoreError:
        """
        Store a copy of the task with a new completion flag.

        :return: The new task value, or the reason the change was rejected.
        """

    @abstractmethod
    def toggle_completion(self, task_id: int) -> Task | StoreError:
        """Flip the completion flag in one step and return the new task value."""

    @abstractmethod
    def delete_task(self, task_id: int) -> Optional[StoreError]:
        """Remove a task by identifier."""
