"""Tool surface exposed to the language model."""

from __future__ import annotations

from .registry import ToolSpec, ensure_complete, execute_tool, get_tool_specs, register_tool, tool_definitions

# Import tools so decorators run at module import time.
from . import tools  # noqa: F401

ensure_complete()

__all__ = [
    "ToolSpec",
    "execute_tool",
    "get_tool_specs",
    "register_tool",
    "tool_definitions",
]
