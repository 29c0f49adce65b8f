from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Optional

from ..config import AppSettings, get_settings
from ..data.repositories import ContactRepository, TodoRepository
from .contacts import ContactLookup
from .due_dates import DueDateResolver
from .todos import TodoService


@dataclass(slots=True)
class ServiceContext:
    """Aggregate root for services to share settings and repositories."""

    settings: AppSettings = field(default_factory=get_settings)
    contact_repository: Optional[ContactRepository] = None
    todo_repository: TodoRepository = field(default_factory=TodoRepository)
    clock: Optional[Callable[[], datetime]] = None
    resolver: DueDateResolver = field(init=False)
    contacts: ContactLookup = field(init=False)
    todos: TodoService = field(init=False)

    def __post_init__(self) -> None:
        if self.contact_repository is None:
            contacts_file = self.settings.todos.contacts_file
            self.contact_repository = (
                ContactRepository.from_file(contacts_file) if contacts_file else ContactRepository()
            )
        self.resolver = DueDateResolver(
            zone=self.settings.todos.zone,
            default_hour=self.settings.todos.default_due_hour,
            clock=self.clock,
        )
        self.contacts = ContactLookup(self.contact_repository)
        self.todos = TodoService(repository=self.todo_repository, resolver=self.resolver)
