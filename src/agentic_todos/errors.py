"""Exception taxonomy shared by the tool layer, the orchestrator and the HTTP surface."""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class AgenticTodosError(Exception):
    """Base class for all application errors."""


class ConfigurationError(AgenticTodosError):
    """Raised at startup when required configuration is missing or invalid."""


class ToolError(AgenticTodosError):
    """A single tool invocation failed; reported back to the model, never fatal."""

    def __init__(self, tool_name: str, message: str) -> None:
        super().__init__(message)
        self.tool_name = tool_name
        self.message = message

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.message, "tool": self.tool_name}


class ToolArgumentError(ToolError):
    """Raised when a tool call carries missing or malformed arguments."""

    def __init__(self, tool_name: str, details: Optional[List[str]] = None) -> None:
        super().__init__(tool_name, "Invalid arguments")
        self.details = list(details or [])

    def to_payload(self) -> Dict[str, Any]:
        payload = super().to_payload()
        payload["details"] = self.details
        return payload


class UnknownToolError(ToolError):
    """Raised when the model requests a tool outside the declared set."""

    def __init__(self, tool_name: str) -> None:
        super().__init__(tool_name, "Unknown function")

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.message}


class OrchestrationError(AgenticTodosError):
    """Fatal to the current request."""

    code = "orchestration_error"
    retryable = False

    def __init__(self, message: str, *, retryable: Optional[bool] = None) -> None:
        super().__init__(message)
        self.message = message
        if retryable is not None:
            self.retryable = retryable

    def to_dict(self) -> Dict[str, Any]:
        return {"detail": self.message, "error": self.code, "retryable": self.retryable}


class EndpointError(OrchestrationError):
    """The model service was unreachable or answered with a transport fault."""

    code = "endpoint_error"


class LoopBudgetExceeded(OrchestrationError):
    """The model kept requesting tools without settling on a text answer."""

    code = "loop_budget_exceeded"


class RequestDeadlineExceeded(OrchestrationError):
    """The overall request deadline elapsed before the model answered."""

    code = "deadline_exceeded"
    retryable = True
