"""Routers package."""

from . import pages, tasks

__all__ = ["pages", "tasks"]
