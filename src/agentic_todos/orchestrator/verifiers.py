from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..domain import ToolKind


@dataclass(frozen=True)
class VerificationResult:
    ok: bool
    summary: str


def verify_tool_output(kind: ToolKind, output: Any) -> VerificationResult:
    if isinstance(output, dict) and "error" in output:
        return VerificationResult(False, f"Error returned: {output['error']}.")

    if kind is ToolKind.FIND_CONTACT:
        if output is None:
            return VerificationResult(True, "No matching contact.")
        if isinstance(output, dict) and output.get("id"):
            return VerificationResult(True, f"Matched {output.get('displayName', 'contact')} ({output['id']}).")
        return VerificationResult(False, "Contact payload missing id.")

    if kind is ToolKind.CREATE_TODO:
        if not isinstance(output, dict):
            return VerificationResult(False, "Output is not a mapping.")
        if output.get("id") and output.get("dueDate"):
            contact = output.get("contactId") or "no contact"
            return VerificationResult(True, f"Todo saved ({output.get('title', 'untitled')}, due {output['dueDate']}, {contact}).")
        return VerificationResult(False, "Todo payload missing id or due date.")

    return VerificationResult(False, "Unknown function.")
