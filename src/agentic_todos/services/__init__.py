"""Application services wrapping repositories and domain rules."""

from __future__ import annotations

from .contacts import ContactLookup
from .context import ServiceContext
from .due_dates import DueDateResolver
from .todos import TodoService

__all__ = ["ContactLookup", "DueDateResolver", "ServiceContext", "TodoService"]
