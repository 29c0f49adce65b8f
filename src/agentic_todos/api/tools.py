from __future__ import annotations

from typing import Any, Dict, Optional

from ..domain import ToolKind
from ..services import ServiceContext
from .models import ContactPayload, CreateTodoArguments, FindContactArguments, TodoPayload, dump
from .registry import register_tool


@register_tool(
    ToolKind.FIND_CONTACT,
    description="Find a contact by name or partial name. Returns best match or null.",
    arguments=FindContactArguments,
)
def find_contact(services: ServiceContext, arguments: FindContactArguments) -> Optional[Dict[str, Any]]:
    contact = services.contacts.find(arguments.query)
    return dump(ContactPayload.from_domain(contact)) if contact else None


@register_tool(
    ToolKind.CREATE_TODO,
    description="Create a TODO with a natural-language due date. Server resolves the date.",
    arguments=CreateTodoArguments,
)
def create_todo(services: ServiceContext, arguments: CreateTodoArguments) -> Dict[str, Any]:
    todo = services.todos.create(
        title=arguments.title,
        due_date_text=arguments.due_date,
        content=arguments.content,
        contact_id=arguments.contact_id,
    )
    return dump(TodoPayload.from_domain(todo))
