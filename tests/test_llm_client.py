from __future__ import annotations

from types import SimpleNamespace

import httpx
import openai
import pytest

from agentic_todos.errors import EndpointError
from agentic_todos.llm import ChatModel, parse_arguments

from conftest import make_settings

REQUEST = httpx.Request("POST", "https://api.example.test/v1/chat/completions")


class FakeCompletions:
    def __init__(self, outcome) -> None:
        self.outcome = outcome
        self.kwargs = None

    def create(self, **kwargs):
        self.kwargs = kwargs
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome


def _model(outcome):
    completions = FakeCompletions(outcome)
    client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return ChatModel(make_settings().llm, client=client), completions


def _completion(content=None, tool_calls=None, finish_reason="stop"):
    message = SimpleNamespace(content=content, tool_calls=tool_calls)
    return SimpleNamespace(choices=[SimpleNamespace(message=message, finish_reason=finish_reason)])


def _tool_call(call_id, name, arguments):
    return SimpleNamespace(id=call_id, type="function", function=SimpleNamespace(name=name, arguments=arguments))


def test_text_completion_becomes_plain_turn():
    model, completions = _model(_completion(content="Todo created"))

    turn = model.complete([{"role": "user", "content": "hi"}], [{"type": "function"}])

    assert turn.content == "Todo created"
    assert turn.finish_reason == "stop"
    assert not turn.wants_tools
    assert completions.kwargs["model"] == "test-model"
    assert completions.kwargs["tools"] == [{"type": "function"}]
    assert "tool_choice" not in completions.kwargs


def test_tool_calls_are_parsed():
    model, _ = _model(
        _completion(
            tool_calls=[
                _tool_call("call_1", "find_contact", '{"query": "Peter"}'),
                _tool_call("call_2", "create_todo", "{broken"),
            ],
            finish_reason="tool_calls",
        )
    )

    turn = model.complete([], [])

    assert turn.wants_tools
    first, second = turn.tool_calls
    assert (first.id, first.name, first.arguments, first.arguments_error) == (
        "call_1",
        "find_contact",
        {"query": "Peter"},
        None,
    )
    assert second.arguments == {}
    assert second.arguments_error.startswith("arguments are not valid JSON")
    assert turn.to_message()["tool_calls"][1]["function"]["arguments"] == "{broken"


@pytest.mark.parametrize(
    ("error", "retryable"),
    [
        (openai.APITimeoutError(request=REQUEST), True),
        (openai.APIConnectionError(request=REQUEST), True),
        (
            openai.InternalServerError(
                "boom", response=httpx.Response(500, request=REQUEST), body=None
            ),
            True,
        ),
        (
            openai.AuthenticationError(
                "bad key", response=httpx.Response(401, request=REQUEST), body=None
            ),
            False,
        ),
        (
            openai.RateLimitError(
                "slow down", response=httpx.Response(429, request=REQUEST), body=None
            ),
            True,
        ),
    ],
)
def test_transport_failures_become_endpoint_errors(error, retryable):
    model, _ = _model(error)

    with pytest.raises(EndpointError) as info:
        model.complete([], [])

    assert info.value.retryable is retryable
    assert info.value.to_dict()["error"] == "endpoint_error"


def test_empty_choices_is_endpoint_error():
    model, _ = _model(SimpleNamespace(choices=[]))

    with pytest.raises(EndpointError):
        model.complete([], [])


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("", ({}, None)),
        ('{"query": "x"}', ({"query": "x"}, None)),
        ("[1, 2]", ({}, "arguments must be a JSON object")),
    ],
)
def test_parse_arguments(raw, expected):
    assert parse_arguments(raw) == expected
