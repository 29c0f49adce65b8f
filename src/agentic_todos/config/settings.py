from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

from ..errors import ConfigurationError

load_dotenv()

DEFAULT_MODEL = "gpt-5-nano"
DEFAULT_TIMEZONE = "America/Kentucky/Louisville"


@dataclass(frozen=True)
class LlmSettings:
    api_key: Optional[str]
    model: str
    base_url: Optional[str]
    organization: Optional[str]
    project: Optional[str]
    timeout_seconds: float

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key and self.model)

    @property
    def missing_env_vars(self) -> list[str]:
        missing = []
        if not self.api_key:
            missing.append("OPENAI_API_KEY")
        if not self.model:
            missing.append("OPENAI_MODEL")
        return missing


@dataclass(frozen=True)
class AgentSettings:
    max_iterations: int
    request_deadline_seconds: float


@dataclass(frozen=True)
class TodoSettings:
    timezone: str
    default_due_hour: int
    contacts_file: Optional[Path]

    @property
    def zone(self) -> ZoneInfo:
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ConfigurationError(f"Unknown timezone: {self.timezone!r}") from exc


@dataclass(frozen=True)
class AppSettings:
    llm: LlmSettings
    agent: AgentSettings
    todos: TodoSettings

    def require_llm(self) -> LlmSettings:
        """Return the LLM settings, failing fast when the credential is missing."""

        if not self.llm.is_configured:
            missing = ", ".join(self.llm.missing_env_vars)
            raise ConfigurationError(f"Language model is not configured. Missing: {missing}")
        return self.llm


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc


def _float_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc


def load_settings() -> AppSettings:
    llm = LlmSettings(
        api_key=os.getenv("OPENAI_API_KEY"),
        model=os.getenv("OPENAI_MODEL", DEFAULT_MODEL),
        base_url=os.getenv("OPENAI_BASE_URL"),
        organization=os.getenv("OPENAI_ORG"),
        project=os.getenv("OPENAI_PROJECT"),
        timeout_seconds=_float_from_env("AGENTIC_TODOS_LLM_TIMEOUT_SECONDS", 30.0),
    )

    agent = AgentSettings(
        max_iterations=max(1, _int_from_env("AGENTIC_TODOS_MAX_ITERATIONS", 10)),
        request_deadline_seconds=_float_from_env("AGENTIC_TODOS_REQUEST_DEADLINE_SECONDS", 60.0),
    )

    default_hour = _int_from_env("AGENTIC_TODOS_DEFAULT_DUE_HOUR", 9)
    if not 0 <= default_hour <= 23:
        raise ConfigurationError(f"AGENTIC_TODOS_DEFAULT_DUE_HOUR must be between 0 and 23, got {default_hour}")

    contacts_file = os.getenv("AGENTIC_TODOS_CONTACTS_FILE")
    todos = TodoSettings(
        timezone=os.getenv("AGENTIC_TODOS_TIMEZONE", DEFAULT_TIMEZONE),
        default_due_hour=default_hour,
        contacts_file=Path(contacts_file) if contacts_file else None,
    )

    return AppSettings(llm=llm, agent=agent, todos=todos)


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    return load_settings()
