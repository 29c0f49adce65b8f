from __future__ import annotations

from enum import Enum


class ToolKind(str, Enum):
    FIND_CONTACT = "find_contact"
    CREATE_TODO = "create_todo"
    UNKNOWN = "unknown"

    @classmethod
    def from_name(cls, name: str) -> "ToolKind":
        for kind in cls:
            if kind is not cls.UNKNOWN and kind.value == name:
                return kind
        return cls.UNKNOWN
