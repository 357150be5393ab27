from .enums import Priority
from .ids import CategoryId, TaskId

__all__ = ["CategoryId", "Priority", "TaskId"]
