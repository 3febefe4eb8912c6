"""Models package."""

from .task import ErrorResponse, MessageResponse, Task, TaskCreate

__all__ = [
    "Task",
    "TaskCreate",
    "MessageResponse",
    "ErrorResponse",
]
