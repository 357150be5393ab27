from .categories_memory import CategoryStorage, new_category_storage
from .tasks_memory import TaskStorage, new_task_storage

__all__ = [
    "CategoryStorage",
    "TaskStorage",
    "new_category_storage",
    "new_task_storage",
]
