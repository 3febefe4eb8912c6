"""Errors raised by the data access layer."""


class StoreError(Exception):
    """The relational store could not complete an operation."""


class TaskDecodeError(StoreError):
    """A row's JSON projection could not be decoded into a task."""
