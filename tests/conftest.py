# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine

from tasktracker.db import create_db_engine, init_db
from tasktracker.main import create_app


@pytest.fixture()
def engine(tmp_path: Path) -> Iterator[Engine]:
    """SQLite engine with the tasks table created, one database file per test."""
    eng = create_db_engine(f"sqlite:///{tmp_path / 'tasks.sqlite3'}")
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture()
def broken_engine(tmp_path: Path) -> Iterator[Engine]:
    """
    Engine pointing at a database without the tasks table.

    Every task query fails, which stands in for an unavailable store.
    """
    eng = create_db_engine(f"sqlite:///{tmp_path / 'empty.sqlite3'}")
    yield eng
    eng.dispose()


@pytest.fixture()
def client(engine: Engine) -> Iterator[TestClient]:
    app = create_app(engine=engine)
    with TestClient(app, follow_redirects=False) as c:
        yield c


@pytest.fixture()
def broken_client(broken_engine: Engine) -> Iterator[TestClient]:
    app = create_app(engine=broken_engine)
    with TestClient(app, follow_redirects=False) as c:
        yield c
