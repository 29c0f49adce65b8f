from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, List, Optional, Protocol

import orjson

from ..api import execute_tool, tool_definitions
from ..domain import ModelTurn, Todo, ToolCall
from ..errors import LoopBudgetExceeded, RequestDeadlineExceeded, ToolError
from ..llm import ChatModel
from ..services import ServiceContext
from .prompts import build_system_prompt
from .verifiers import verify_tool_output

logger = logging.getLogger(__name__)

FALLBACK_REPLY = "OK"


class CompletionModel(Protocol):
    def complete(self, messages: List[Dict[str, Any]], tools: List[Dict[str, Any]]) -> ModelTurn: ...


class TodoOrchestrator:
    """Multi-step tool loop: ask the model, run requested tools, repeat until it answers in text."""

    def __init__(
        self,
        context: ServiceContext,
        model: CompletionModel,
        *,
        max_iterations: Optional[int] = None,
        deadline_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        agent_settings = context.settings.agent
        self.context = context
        self.model = model
        self.max_iterations = agent_settings.max_iterations if max_iterations is None else max_iterations
        self.deadline_seconds = (
            agent_settings.request_deadline_seconds if deadline_seconds is None else deadline_seconds
        )
        self._clock = clock
        self._tools = tool_definitions()

    # ------------------------------------------------------------------ public API

    def run(self, user_text: str) -> str:
        started = self._clock()
        messages: List[Dict[str, Any]] = [
            {"role": "system", "content": build_system_prompt(self.context.resolver.now())},
            {"role": "user", "content": user_text},
        ]
        answered: set[str] = set()

        for iteration in range(1, self.max_iterations + 1):
            self._check_deadline(started)
            turn = self.model.complete(messages, self._tools)
            logger.debug(
                "Iteration %d: finish_reason=%s tool_calls=%d",
                iteration,
                turn.finish_reason,
                len(turn.tool_calls),
            )

            if not turn.wants_tools:
                if turn.content and turn.content.strip():
                    return turn.content
                return FALLBACK_REPLY

            calls = self._unique_calls(turn.tool_calls, answered)
            messages.append(ModelTurn(turn.content, turn.finish_reason, calls).to_message())
            for call in calls:
                result = self._execute(call)
                messages.append(
                    {
                        "role": "tool",
                        "tool_call_id": call.id,
                        "content": orjson.dumps(result).decode("utf-8"),
                    }
                )

        logger.error("Model did not settle after %d iterations", self.max_iterations)
        raise LoopBudgetExceeded(
            f"The assistant did not finish within {self.max_iterations} model calls."
        )

    # ------------------------------------------------------------------ helpers

    def _check_deadline(self, started: float) -> None:
        elapsed = self._clock() - started
        if elapsed >= self.deadline_seconds:
            logger.error("Request deadline of %.1fs exceeded (%.1fs elapsed)", self.deadline_seconds, elapsed)
            raise RequestDeadlineExceeded(
                f"The request did not complete within {self.deadline_seconds:g} seconds."
            )

    def _unique_calls(self, calls: List[ToolCall], answered: set[str]) -> List[ToolCall]:
        """Keep the first call for each id not answered earlier in this run; ``answered`` is updated in place."""

        unique: List[ToolCall] = []
        for call in calls:
            if call.id in answered:
                logger.warning("Dropping reused tool call id %s (%s)", call.id, call.name)
                continue
            answered.add(call.id)
            unique.append(call)
        return unique

    def _execute(self, call: ToolCall) -> Any:
        try:
            output = execute_tool(self.context, call)
        except ToolError as exc:
            logger.warning("Tool call %s (%s) failed: %s", call.id, call.name, exc.to_payload())
            return exc.to_payload()
        verification = verify_tool_output(call.kind, output)
        logger.info("Tool %s [%s]: %s", call.name, call.id, verification.summary)
        return output


class TodoAgent:
    """Inbound surface: create todos from prompts and list what was created."""

    def __init__(self, context: Optional[ServiceContext] = None, model: Optional[CompletionModel] = None) -> None:
        self.context = context or ServiceContext()
        if model is None:
            model = ChatModel(self.context.settings.require_llm())
        self.orchestrator = TodoOrchestrator(self.context, model)

    def create_todo(self, prompt: str) -> str:
        return self.orchestrator.run(prompt)

    def list_todos(self) -> List[Todo]:
        return self.context.todos.list()
