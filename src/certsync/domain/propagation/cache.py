"""Context-scoped memo of contacts resolved during propagation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping
    from uuid import UUID

    from certsync.domain.model import Contact


@dataclass(slots=True)
class ProcessedCache:
    """Latest contact value per id within one sync context.

    Once a contact is cached, every lookup for its id returns the cached value;
    copies fetched elsewhere may predate the update that was just propagated.
    """

    _entries: dict[UUID, Contact] = field(default_factory=dict["UUID", "Contact"])

    def get(self, contact_id: UUID) -> Contact | None:
        return self._entries.get(contact_id)

    def put(self, contact_id: UUID, contact: Contact) -> None:
        # Passes run in order, so the most recent put is the newest value.
        self._entries[contact_id] = contact

    def resolve(self, contact_id: UUID, fallback: Mapping[UUID, Contact]) -> Contact | None:
        """Cache first, ``fallback`` only on a miss."""

        cached = self._entries.get(contact_id)
        if cached is not None:
            return cached
        return fallback.get(contact_id)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, contact_id: object) -> bool:
        return contact_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)
