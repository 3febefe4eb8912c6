"""Pydantic models for tasks."""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, field_validator


class Task(BaseModel):
    """A to-do item as stored in the ``tasks`` table."""

    id: int
    title: str
    description: str = ""
    due_date: str
    completed: bool = False

    @field_validator("description", mode="before")
    @classmethod
    def _null_description(cls, v):
        return "" if v is None else v


def _not_blank(v: str) -> str:
    if not v.strip():
        raise ValueError("must not be blank")
    return v


NonBlankStr = Annotated[str, AfterValidator(_not_blank)]


class TaskCreate(BaseModel):
    """Form input for creating a task. Values are stored as submitted."""

    title: NonBlankStr
    description: str = ""
    due_date: NonBlankStr


class MessageResponse(BaseModel):
    """Informational JSON body, e.g. for a task that does not exist."""

    message: str


class ErrorResponse(BaseModel):
    """JSON body for a failed request."""

    error: str
