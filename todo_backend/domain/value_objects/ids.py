from typing import NewType

CategoryId = NewType("CategoryId", int)
TaskId = NewType("TaskId", int)
