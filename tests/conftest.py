from __future__ import annotations

import copy
import json
from datetime import datetime
from zoneinfo import ZoneInfo

import pytest

from agentic_todos.config import AgentSettings, AppSettings, LlmSettings, TodoSettings
from agentic_todos.data.repositories import ContactRepository
from agentic_todos.domain import Contact, ModelTurn, ToolCall
from agentic_todos.services import ServiceContext

ZONE = ZoneInfo("America/Kentucky/Louisville")
# Wednesday afternoon, daylight saving time (UTC-4).
FIXED_NOW = datetime(2026, 10, 21, 14, 30, tzinfo=ZONE)

PETER = Contact(id="c-peter", first_name="Peter", last_name="Parker")
TONY = Contact(id="c-tony", first_name="Tony", last_name="Stark")
BRUCE = Contact(id="c-bruce", first_name="Bruce", last_name="Banner")


def make_settings(**agent_overrides) -> AppSettings:
    agent = {"max_iterations": 10, "request_deadline_seconds": 60.0, **agent_overrides}
    return AppSettings(
        llm=LlmSettings(
            api_key="test-key",
            model="test-model",
            base_url=None,
            organization=None,
            project=None,
            timeout_seconds=5.0,
        ),
        agent=AgentSettings(**agent),
        todos=TodoSettings(timezone="America/Kentucky/Louisville", default_due_hour=9, contacts_file=None),
    )


def make_context(**agent_overrides) -> ServiceContext:
    return ServiceContext(
        settings=make_settings(**agent_overrides),
        contact_repository=ContactRepository([PETER, TONY, BRUCE]),
        clock=lambda: FIXED_NOW,
    )


def call(call_id: str, name: str, arguments=None, *, raw: str | None = None) -> ToolCall:
    arguments = arguments or {}
    return ToolCall(
        id=call_id,
        name=name,
        raw_arguments=raw if raw is not None else json.dumps(arguments),
        arguments=arguments,
    )


def tool_turn(*calls: ToolCall) -> ModelTurn:
    return ModelTurn(content=None, finish_reason="tool_calls", tool_calls=list(calls))


def text_turn(text: str | None) -> ModelTurn:
    return ModelTurn(content=text, finish_reason="stop")


class ScriptedModel:
    """Stands in for the chat endpoint; replays turns and records every request."""

    def __init__(self, *turns) -> None:
        self.turns = list(turns)
        self.requests: list[dict] = []

    def complete(self, messages, tools):
        self.requests.append({"messages": copy.deepcopy(messages), "tools": tools})
        if not self.turns:
            raise AssertionError("Unexpected model call")
        turn = self.turns.pop(0)
        if isinstance(turn, Exception):
            raise turn
        if callable(turn):
            return turn(messages)
        return turn


@pytest.fixture
def context() -> ServiceContext:
    return make_context()
