"""FastAPI dependencies shared by the routers."""

import re

from fastapi import Request
from sqlalchemy import Engine

_ID_RE = re.compile(r"[+-]?[0-9]+")

# Ids are stored as signed 64-bit integers.
_ID_MIN = -(2**63)
_ID_MAX = 2**63 - 1


def get_engine(request: Request) -> Engine:
    """Return the application's database engine."""
    return request.app.state.engine


def parse_task_id(raw: str) -> int | None:
    """Parse a task id from a path or query string, or None if it is not an integer."""
    if not _ID_RE.fullmatch(raw):
        return None
    value = int(raw)
    if not _ID_MIN <= value <= _ID_MAX:
        return None
    return value
