"""Relational database operations for tasks."""

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from pydantic import ValidationError
from sqlalchemy import Connection, Engine, create_engine, make_url, text
from sqlalchemy.exc import SQLAlchemyError

from ..models import Task
from .errors import StoreError, TaskDecodeError
from .schema import metadata

logger = logging.getLogger(__name__)

# Function that builds a JSON object from key/value pairs, per dialect.
_JSON_OBJECT_FUNCS = {
    "postgresql": "json_build_object",
    "sqlite": "json_object",
}


def create_db_engine(
    url: str,
    *,
    pool_size: int = 5,
    max_overflow: int = 10,
    pool_timeout: int = 30,
) -> Engine:
    """Create an engine whose pool bounds the number of open connections."""
    if make_url(url).get_backend_name() == "sqlite":
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(
        url,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_timeout=pool_timeout,
        pool_pre_ping=True,
    )


@contextmanager
def get_db(engine: Engine) -> Iterator[Connection]:
    """Check a connection out of the pool for one operation."""
    try:
        with engine.connect() as conn:
            try:
                yield conn
                conn.commit()
            except Exception:
                conn.rollback()
                raise
    except SQLAlchemyError as e:
        raise StoreError(str(e)) from e


def init_db(engine: Engine) -> None:
    """Create the ``tasks`` table if it does not exist."""
    try:
        metadata.create_all(engine)
    except SQLAlchemyError as e:
        raise StoreError(str(e)) from e


def _select_json(engine: Engine) -> str:
    func = _JSON_OBJECT_FUNCS.get(engine.dialect.name, "json_build_object")
    return f"""
        SELECT {func}(
            'id', id,
            'title', title,
            'description', description,
            'due_date', due_date,
            'completed', completed
        ) AS json_data
        FROM tasks
    """


def _decode_task(raw: Any) -> Task:
    # psycopg decodes json columns itself; SQLite hands back the text.
    try:
        if isinstance(raw, (str, bytes, bytearray)):
            return Task.model_validate_json(raw)
        return Task.model_validate(raw)
    except ValidationError as e:
        raise TaskDecodeError(f"Failed to decode task JSON: {raw!r}") from e


def get_all_tasks(engine: Engine) -> list[Task]:
    """Get all tasks. Order is whatever the store returns."""
    with get_db(engine) as conn:
        rows = conn.execute(text(_select_json(engine) + " WHERE id >= 1"))
        return [_decode_task(row.json_data) for row in rows]


def get_task_by_id(engine: Engine, task_id: int) -> Task | None:
    """Get a task by ID, or None if no row matches."""
    with get_db(engine) as conn:
        row = conn.execute(
            text(_select_json(engine) + " WHERE id = :id"),
            {"id": task_id},
        ).first()
        return _decode_task(row.json_data) if row else None


def search_task_by_id(engine: Engine, task_id: int) -> Task | None:
    """Look up a task for the search page."""
    task = get_task_by_id(engine, task_id)
    if task is None:
        logger.info("Search found no task with id %d", task_id)
    return task


def create_task(engine: Engine, title: str, description: str, due_date: str) -> int:
    """Create a new task and return its database-assigned id."""
    with get_db(engine) as conn:
        task_id = conn.execute(
            text(
                """
                INSERT INTO tasks (title, description, due_date, completed)
                VALUES (:title, :description, :due_date, :completed)
                RETURNING id
                """
            ),
            {
                "title": title,
                "description": description,
                "due_date": due_date,
                "completed": False,
            },
        ).scalar_one()
    logger.info("Created task %d", task_id)
    return task_id


def delete_task(engine: Engine, task_id: int) -> bool:
    """Delete a task by ID. Returns False if there was nothing to delete."""
    with get_db(engine) as conn:
        result = conn.execute(text("DELETE FROM tasks WHERE id = :id"), {"id": task_id})
        return result.rowcount > 0


def complete_task(engine: Engine, task_id: int) -> bool:
    """Mark a task as completed. Returns False if no task has this ID."""
    with get_db(engine) as conn:
        result = conn.execute(
            text("UPDATE tasks SET completed = :completed WHERE id = :id"),
            {"completed": True, "id": task_id},
        )
        return result.rowcount > 0


def ping_db(engine: Engine) -> None:
    """Open one connection to prove the store is reachable."""
    with get_db(engine) as conn:
        conn.execute(text("SELECT 1"))
