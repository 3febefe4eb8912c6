"""Table definition for the ``tasks`` table."""

from sqlalchemy import Boolean, Column, Integer, MetaData, Table, Text, false

metadata = MetaData()

tasks_table = Table(
    "tasks",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", Text, nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column("due_date", Text, nullable=False),
    Column("completed", Boolean, nullable=False, server_default=false()),
    # AUTOINCREMENT keeps SQLite from reusing ids of deleted rows.
    sqlite_autoincrement=True,
)
