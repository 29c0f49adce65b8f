"""LLM-driven orchestration for todo creation."""

from __future__ import annotations

from .agent import FALLBACK_REPLY, TodoAgent, TodoOrchestrator
from .verifiers import VerificationResult

__all__ = ["FALLBACK_REPLY", "TodoAgent", "TodoOrchestrator", "VerificationResult"]
