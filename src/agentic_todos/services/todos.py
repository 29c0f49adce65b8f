from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..data.repositories import TodoRepository
from ..domain import Todo
from .due_dates import DueDateResolver

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TodoService:
    repository: TodoRepository
    resolver: DueDateResolver

    def create(
        self,
        *,
        title: str,
        due_date_text: str,
        content: Optional[str] = None,
        contact_id: Optional[str] = None,
    ) -> Todo:
        """Resolve the due date, store the todo and return it."""

        todo = Todo(
            title=title,
            content=content or title,
            due_date=self.resolver.resolve(due_date_text),
            contact_id=contact_id or None,
            created_at=self.resolver.now(),
        )
        self.repository.add(todo)
        logger.info("Created todo %s %r due %s", todo.id, todo.title, todo.due_date.isoformat())
        return todo

    def list(self) -> List[Todo]:
        return self.repository.list()
