"""Database package."""

from .client import (
    complete_task,
    create_db_engine,
    create_task,
    delete_task,
    get_all_tasks,
    get_db,
    get_task_by_id,
    init_db,
    ping_db,
    search_task_by_id,
)
from .errors import StoreError, TaskDecodeError

__all__ = [
    "create_db_engine",
    "get_db",
    "init_db",
    "ping_db",
    "create_task",
    "get_all_tasks",
    "get_task_by_id",
    "search_task_by_id",
    "complete_task",
    "delete_task",
    "StoreError",
    "TaskDecodeError",
]
