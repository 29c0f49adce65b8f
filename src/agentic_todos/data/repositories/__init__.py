"""In-memory repositories for contacts and todos."""

from __future__ import annotations

from .contacts import ContactRepository, sample_contacts
from .todos import TodoRepository

__all__ = ["ContactRepository", "TodoRepository", "sample_contacts"]
