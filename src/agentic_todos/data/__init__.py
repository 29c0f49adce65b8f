"""Data access layer."""

from __future__ import annotations

from .repositories import ContactRepository, TodoRepository

__all__ = ["ContactRepository", "TodoRepository"]
