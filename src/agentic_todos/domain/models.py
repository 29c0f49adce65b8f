from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import uuid4

from .enums import ToolKind


@dataclass(frozen=True, slots=True)
class Contact:
    id: str
    first_name: str
    last_name: str

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Contact":
        return cls(
            id=str(record.get("id") or uuid4()),
            first_name=str(record["firstName"]),
            last_name=str(record["lastName"]),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "firstName": self.first_name,
            "lastName": self.last_name,
        }


@dataclass(slots=True)
class Todo:
    title: str
    content: str
    due_date: datetime
    contact_id: Optional[str] = None
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: Optional[datetime] = None

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "dueDate": self.due_date.isoformat(),
            "contactId": self.contact_id,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }


@dataclass(frozen=True, slots=True)
class ToolCall:
    """A single tool request emitted by the model in one assistant turn."""

    id: str
    name: str
    raw_arguments: str = ""
    arguments: Dict[str, Any] = field(default_factory=dict)
    arguments_error: Optional[str] = None

    @property
    def kind(self) -> ToolKind:
        return ToolKind.from_name(self.name)

    def to_message(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "type": "function",
            "function": {"name": self.name, "arguments": self.raw_arguments},
        }


@dataclass(frozen=True, slots=True)
class ModelTurn:
    content: Optional[str]
    finish_reason: Optional[str] = None
    tool_calls: List[ToolCall] = field(default_factory=list)

    @property
    def wants_tools(self) -> bool:
        return bool(self.tool_calls)

    def to_message(self) -> Dict[str, Any]:
        message: Dict[str, Any] = {"role": "assistant", "content": self.content}
        if self.tool_calls:
            message["tool_calls"] = [call.to_message() for call in self.tool_calls]
        return message
