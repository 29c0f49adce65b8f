from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional
from uuid import uuid4

import orjson

from ...domain import Contact
from ...errors import ConfigurationError

logger = logging.getLogger(__name__)

SAMPLE_CONTACTS = (
    ("Peter", "Parker"),
    ("Tony", "Stark"),
    ("Bruce", "Banner"),
)


def sample_contacts() -> List[Contact]:
    return [Contact(id=str(uuid4()), first_name=first, last_name=last) for first, last in SAMPLE_CONTACTS]


class ContactRepository:
    """Read-only contact directory supplied at startup."""

    def __init__(self, contacts: Optional[Iterable[Contact]] = None) -> None:
        self._contacts = tuple(contacts) if contacts is not None else tuple(sample_contacts())

    @classmethod
    def from_file(cls, path: Path) -> "ContactRepository":
        try:
            raw = path.read_bytes()
            records = orjson.loads(raw) if raw else []
        except (OSError, orjson.JSONDecodeError) as exc:
            raise ConfigurationError(f"Could not read contacts file {path}: {exc}") from exc
        if not isinstance(records, list):
            raise ConfigurationError(f"Contacts file {path} must contain a JSON list.")
        try:
            contacts = [Contact.from_record(record) for record in records]
        except (AttributeError, KeyError, TypeError) as exc:
            raise ConfigurationError(
                f"Contacts file {path} has an entry without firstName and lastName: {exc!r}"
            ) from exc
        logger.info("Loaded %d contacts from %s", len(contacts), path)
        return cls(contacts)

    def list(self) -> List[Contact]:
        return list(self._contacts)
