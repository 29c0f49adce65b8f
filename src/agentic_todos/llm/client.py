from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

import openai
from openai import OpenAI

from ..config import LlmSettings
from ..domain import ModelTurn, ToolCall
from ..errors import EndpointError

logger = logging.getLogger(__name__)


class ChatModel:
    """Chat-completions adapter that turns SDK responses into ``ModelTurn`` values."""

    def __init__(self, settings: LlmSettings, *, client: Optional[OpenAI] = None) -> None:
        self.settings = settings
        self._client = client or self._build_client()

    # ------------------------------------------------------------------ public API

    def complete(self, messages: List[Dict[str, Any]], tools: List[Dict[str, Any]]) -> ModelTurn:
        try:
            completion = self._client.chat.completions.create(
                model=self.settings.model,
                messages=messages,
                tools=tools,
            )
        except openai.APITimeoutError as exc:
            raise EndpointError(f"Language model request timed out: {exc}", retryable=True) from exc
        except openai.APIConnectionError as exc:
            raise EndpointError(f"Language model is unreachable: {exc}", retryable=True) from exc
        except openai.RateLimitError as exc:
            raise EndpointError(f"Language model rate limit reached: {exc}", retryable=True) from exc
        except openai.APIStatusError as exc:
            raise EndpointError(
                f"Language model returned HTTP {exc.status_code}: {exc.message}",
                retryable=exc.status_code >= 500,
            ) from exc
        except openai.APIError as exc:
            raise EndpointError(f"Language model request failed: {exc}") from exc

        if not completion.choices:
            raise EndpointError("Language model returned no choices.")
        choice = completion.choices[0]
        message = choice.message
        calls = [self._to_tool_call(call) for call in (message.tool_calls or [])]
        return ModelTurn(content=message.content, finish_reason=choice.finish_reason, tool_calls=calls)

    # ------------------------------------------------------------------ helpers

    def _build_client(self) -> OpenAI:
        return OpenAI(
            api_key=self.settings.api_key,
            base_url=self.settings.base_url,
            organization=self.settings.organization,
            project=self.settings.project,
            timeout=self.settings.timeout_seconds,
            max_retries=0,
        )

    def _to_tool_call(self, call: Any) -> ToolCall:
        function = getattr(call, "function", None)
        name = getattr(function, "name", None) or ""
        raw = getattr(function, "arguments", None) or ""
        arguments, error = parse_arguments(raw)
        if error:
            logger.warning("Tool call %s (%s) carried unusable arguments: %s", call.id, name, error)
        return ToolCall(id=call.id, name=name, raw_arguments=raw, arguments=arguments, arguments_error=error)


def parse_arguments(raw: str) -> tuple[Dict[str, Any], Optional[str]]:
    if not raw or not raw.strip():
        return {}, None
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as exc:
        return {}, f"arguments are not valid JSON ({exc.msg})"
    if not isinstance(parsed, dict):
        return {}, "arguments must be a JSON object"
    return parsed, None
