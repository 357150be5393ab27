from .category import Category, new_category
from .task import Task, new_task

__all__ = [
    "Category",
    "Task",
    "new_category",
    "new_task",
]
