from __future__ import annotations

import threading
from copy import copy
from typing import List

from ...domain import Todo


class TodoRepository:
    """Append-only, process-wide todo list. Writes and snapshots share one lock."""

    def __init__(self) -> None:
        self._todos: List[Todo] = []
        self._lock = threading.Lock()

    def add(self, todo: Todo) -> None:
        with self._lock:
            self._todos.append(todo)

    def list(self) -> List[Todo]:
        with self._lock:
            return [copy(todo) for todo in self._todos]
