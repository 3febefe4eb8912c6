"""Task API router."""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy import Engine

from ..db import StoreError, complete_task, delete_task, get_all_tasks, get_task_by_id
from ..dependencies import get_engine, parse_task_id
from ..models import ErrorResponse, MessageResponse, Task

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"])

TASK_NOT_FOUND = "Task Not Found"


# =============================================================================
# Helper Functions
# =============================================================================


def error_response(message: str, status_code: int) -> JSONResponse:
    """Build a JSON ``{"error": ...}`` response."""
    return JSONResponse(
        ErrorResponse(error=message).model_dump(),
        status_code=status_code,
    )


def invalid_id_response(raw: str) -> JSONResponse:
    logger.info("Rejected non-integer task id %r", raw)
    return error_response("Invalid task id", status.HTTP_400_BAD_REQUEST)


def redirect_home() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=status.HTTP_302_FOUND)


# =============================================================================
# REST API Endpoints (JSON)
# =============================================================================


@router.get("", response_model=list[Task])
def list_tasks(engine: Engine = Depends(get_engine)):
    """Get all tasks."""
    try:
        return get_all_tasks(engine)
    except StoreError:
        logger.exception("Failed to load tasks")
        return error_response("Failed to load tasks", status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.get("/{task_id}", response_model=Task | MessageResponse)
def get_task(task_id: str, engine: Engine = Depends(get_engine)):
    """Get a task by ID."""
    parsed = parse_task_id(task_id)
    if parsed is None:
        return invalid_id_response(task_id)

    try:
        task = get_task_by_id(engine, parsed)
    except StoreError:
        logger.exception("Failed to load task %d", parsed)
        return error_response("Failed to load task", status.HTTP_500_INTERNAL_SERVER_ERROR)

    if task is None:
        return MessageResponse(message=TASK_NOT_FOUND)
    return task


# =============================================================================
# Browser actions (redirect back to the task list)
# =============================================================================


@router.get("/{task_id}/delete")
def delete_task_endpoint(task_id: str, engine: Engine = Depends(get_engine)):
    """Delete a task."""
    parsed = parse_task_id(task_id)
    if parsed is None:
        return invalid_id_response(task_id)

    try:
        deleted = delete_task(engine, parsed)
    except StoreError:
        logger.exception("Failed to delete task %d", parsed)
        return error_response("Failed to delete task", status.HTTP_500_INTERNAL_SERVER_ERROR)

    if not deleted:
        logger.info("Delete requested for missing task %d", parsed)
    return redirect_home()


@router.get("/{task_id}/complete")
def complete_task_endpoint(task_id: str, engine: Engine = Depends(get_engine)):
    """Mark a task as completed."""
    parsed = parse_task_id(task_id)
    if parsed is None:
        return invalid_id_response(task_id)

    try:
        completed = complete_task(engine, parsed)
    except StoreError:
        logger.exception("Failed to complete task %d", parsed)
        return error_response("Failed to complete task", status.HTTP_500_INTERNAL_SERVER_ERROR)

    if not completed:
        logger.info("Complete requested for missing task %d", parsed)
    return redirect_home()
