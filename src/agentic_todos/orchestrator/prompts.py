from __future__ import annotations

from datetime import datetime

CONFIRMATION_PHRASE = "Todo created"

SYSTEM_PROMPT = f"""You turn user requests into TODOs using tools.
Rules:
- If a person is mentioned, call find_contact first with the name.
- Then call create_todo with a concise title and a dueDate copied verbatim from the request (e.g. 'Friday', 'tomorrow').
- Use contactId from find_contact if a suitable match exists (name similarity). Omit it otherwise.
- Be brief and confirm the todo created with the date in local words (e.g. 'Friday 9:00 AM'). The message must start with "{CONFIRMATION_PHRASE}"."""


def build_system_prompt(now: datetime) -> str:
    zone = getattr(now.tzinfo, "key", None) or now.tzname() or "local time"
    return f"{SYSTEM_PROMPT}\nToday is {now:%A, %B} {now.day}, {now.year} ({zone})."
