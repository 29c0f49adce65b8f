"""Configuration models and helpers."""

from __future__ import annotations

from .settings import AgentSettings, AppSettings, LlmSettings, TodoSettings, get_settings, load_settings

__all__ = ["AgentSettings", "AppSettings", "LlmSettings", "TodoSettings", "get_settings", "load_settings"]
