"""Domain models for contact-aware todos."""

from __future__ import annotations

from .enums import ToolKind
from .models import Contact, ModelTurn, Todo, ToolCall

__all__ = ["Contact", "ModelTurn", "Todo", "ToolCall", "ToolKind"]
