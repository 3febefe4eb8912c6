"""Minimal task tracking web service."""
