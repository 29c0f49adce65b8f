"""Language model client."""

from __future__ import annotations

from .client import ChatModel, parse_arguments

__all__ = ["ChatModel", "parse_arguments"]
