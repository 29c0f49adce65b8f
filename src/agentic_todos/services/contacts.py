from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..data.repositories import ContactRepository
from ..domain import Contact


@dataclass(slots=True)
class ContactLookup:
    repository: ContactRepository

    def find(self, query: str) -> Optional[Contact]:
        """Return the best contact whose display name contains ``query``, ignoring case.

        The query is matched as given, without trimming, so an empty query matches
        every contact. Matching candidates are ordered by display name; ``None`` when
        nothing matches.
        """

        needle = (query or "").casefold()
        ranked = sorted(
            self.repository.list(),
            key=lambda contact: (
                needle not in contact.display_name.casefold(),
                contact.display_name.casefold(),
                contact.display_name,
            ),
        )
        if ranked and needle in ranked[0].display_name.casefold():
            return ranked[0]
        return None
