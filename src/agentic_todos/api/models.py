from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..domain import Contact, Todo


class FindContactArguments(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    query: str = Field(description="Name or partial, e.g. 'steve'")


class CreateTodoArguments(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid", str_strip_whitespace=True)

    title: str = Field(min_length=1, description="Short imperative title, e.g. 'Call Steve'")
    content: Optional[str] = Field(default=None, description="Full description of the task")
    due_date: str = Field(alias="dueDate", description="Natural text like 'Friday', 'tomorrow 2pm'")
    contact_id: Optional[str] = Field(
        default=None,
        alias="contactId",
        description="Optional contact id from find_contact",
    )


class CreateTodoRequest(BaseModel):
    prompt: str = Field(min_length=1)


class ContactPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    display_name: str = Field(alias="displayName")

    @classmethod
    def from_domain(cls, contact: Contact) -> "ContactPayload":
        return cls(**contact.to_record(), displayName=contact.display_name)


class TodoPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    content: str
    due_date: str = Field(alias="dueDate")
    due_date_display: str = Field(alias="dueDateDisplay")
    contact_id: Optional[str] = Field(default=None, alias="contactId")
    created_at: Optional[str] = Field(default=None, alias="createdAt")

    @classmethod
    def from_domain(cls, todo: Todo) -> "TodoPayload":
        return cls(**todo.to_record(), dueDateDisplay=describe_due_date(todo))


class TodoListPayload(BaseModel):
    todos: List[TodoPayload] = Field(default_factory=list)


def describe_due_date(todo: Todo) -> str:
    """Render the due date the way the confirmation should read it, e.g. 'Friday, October 23 at 9:00 AM'."""

    due = todo.due_date
    return f"{due:%A, %B} {due.day} at {due.strftime('%I:%M %p').lstrip('0')}"


def dump(payload: BaseModel) -> Dict[str, Any]:
    return payload.model_dump(by_alias=True)
