"""Server-rendered HTML pages."""

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Form, Query, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError
from sqlalchemy import Engine

from ..db import StoreError, create_task, get_all_tasks, search_task_by_id
from ..dependencies import get_engine, parse_task_id
from ..models import Task, TaskCreate
from .tasks import error_response, redirect_home

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"

templates = Jinja2Templates(directory=TEMPLATES_DIR)

router = APIRouter(tags=["pages"])

DATABASE_ERROR = "Database error"


# =============================================================================
# Helper Functions
# =============================================================================


def render_index(
    request: Request,
    engine: Engine,
    *,
    tasks: list[Task] | None = None,
    error: str | None = None,
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    """Render the task list page, loading all tasks unless ``tasks`` is given."""
    if tasks is None:
        try:
            tasks = get_all_tasks(engine)
        except StoreError:
            logger.exception("Failed to load tasks for page")
            tasks = []
            error = error or DATABASE_ERROR
    return templates.TemplateResponse(
        request,
        "index.html",
        {"tasks": tasks, "error": error},
        status_code=status_code,
    )


# =============================================================================
# Pages
# =============================================================================


@router.get("/", response_class=HTMLResponse)
def index(request: Request, engine: Engine = Depends(get_engine)):
    """Render the main page."""
    try:
        tasks = get_all_tasks(engine)
    except StoreError:
        logger.exception("Failed to load tasks for page")
        return render_index(
            request,
            engine,
            tasks=[],
            error=DATABASE_ERROR,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return render_index(request, engine, tasks=tasks)


@router.get("/search", response_class=HTMLResponse)
def search(
    request: Request,
    raw_id: str = Query("", alias="id"),
    engine: Engine = Depends(get_engine),
):
    """Show a single task by ID."""
    if raw_id.strip() == "":
        return redirect_home()

    task_id = parse_task_id(raw_id)
    if task_id is None:
        return render_index(request, engine, error="Invalid ID format")

    try:
        task = search_task_by_id(engine, task_id)
    except StoreError:
        logger.exception("Search for task %d failed", task_id)
        return render_index(request, engine, error=DATABASE_ERROR)

    if task is None:
        return render_index(request, engine, error="Task not found")
    return render_index(request, engine, tasks=[task])


@router.post("/", response_class=HTMLResponse)
@router.post("/tasks", response_class=HTMLResponse)
def create_task_form(
    request: Request,
    title: str = Form(""),
    description: str = Form(""),
    due_date: str = Form(""),
    engine: Engine = Depends(get_engine),
):
    """Create a task from the page form."""
    try:
        data = TaskCreate(title=title, description=description, due_date=due_date)
    except ValidationError:
        logger.info("Rejected task without title or due date")
        return render_index(
            request,
            engine,
            error="Title and due date are required",
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    try:
        create_task(engine, data.title, data.description, data.due_date)
    except StoreError:
        logger.exception("Failed to create task")
        return error_response("Failed to create task", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return redirect_home()
