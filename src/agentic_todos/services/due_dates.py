"""Turn the due-date text chosen by the model into an absolute, zone-aware timestamp.

Rules are applied in order and the first one that applies wins:

1. a full weekday name (any case) means the next such day, today included, at the
   default hour;
2. a literal date or date-time (it must contain a digit) is parsed strictly and
   converted into the configured zone, keeping its time of day;
3. anything else means tomorrow at the default hour.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, time, timedelta
from typing import Callable, Optional
from zoneinfo import ZoneInfo

from dateutil import parser as date_parser

logger = logging.getLogger(__name__)

WEEKDAYS = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
}

_DIGIT_RE = re.compile(r"\d")


@dataclass(frozen=True, slots=True)
class DueDateResolver:
    zone: ZoneInfo
    default_hour: int = 9
    clock: Optional[Callable[[], datetime]] = None

    def now(self) -> datetime:
        if self.clock is None:
            return datetime.now(self.zone)
        return self.clock().astimezone(self.zone)

    def resolve(self, text: Optional[str], *, now: Optional[datetime] = None) -> datetime:
        local_now = (now or self.now()).astimezone(self.zone)
        trimmed = (text or "").strip()

        weekday = WEEKDAYS.get(trimmed.casefold())
        if weekday is not None:
            offset = (weekday - local_now.weekday() + 7) % 7
            return self._at_default_hour(local_now, offset)

        parsed = self._parse_literal(trimmed, local_now)
        if parsed is not None:
            return parsed

        logger.debug("Falling back to tomorrow for due date text %r", trimmed)
        return self._at_default_hour(local_now, 1)

    def _at_default_hour(self, local_now: datetime, days: int) -> datetime:
        target = local_now.date() + timedelta(days=days)
        return datetime.combine(target, time(hour=self.default_hour), tzinfo=self.zone)

    def _parse_literal(self, text: str, local_now: datetime) -> Optional[datetime]:
        if not _DIGIT_RE.search(text):
            return None
        # Missing fields default to today's date at midnight, so "14:30" means today.
        default = datetime.combine(local_now.date(), time())
        try:
            parsed = date_parser.parse(text, default=default)
            if parsed.tzinfo is None:
                return parsed.replace(tzinfo=self.zone)
            # Offsets near the calendar limits can push the converted value out of range.
            return parsed.astimezone(self.zone)
        except (ValueError, OverflowError):
            logger.debug("Ignoring unusable due date literal %r", text)
            return None
