"""Contact (source) and Certification (dependent) records.

A certification carries two fields derived from the contact it references:
``office_id`` and ``company_id``. The propagation engine keeps them equal to
the contact's values in both directions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from certsync.domain.model.entity import Entity

if TYPE_CHECKING:
    from uuid import UUID

TRACKED_CONTACT_FIELDS: Final[tuple[str, ...]] = ("office_id", "company_id", "status")
DERIVED_FIELDS: Final[tuple[str, ...]] = ("office_id", "company_id")


@dataclass(eq=False, kw_only=True)
class Contact(Entity):
    office_id: UUID | None = None
    company_id: UUID | None = None
    status: str | None = None

    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None

    def snapshot(self) -> Contact:
        """Return a detached copy, suitable as the "old" side of a change set."""

        return Contact(
            id=self.id,
            office_id=self.office_id,
            company_id=self.company_id,
            status=self.status,
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
        )

    def __repr__(self) -> str:
        return (
            f"Contact(id={self.id}, office_id={self.office_id}, "
            f"company_id={self.company_id}, status={self.status!r})"
        )


@dataclass(eq=False, kw_only=True)
class Certification(Entity):
    contact_id: UUID | None = None
    office_id: UUID | None = None
    company_id: UUID | None = None

    name: str | None = None
    owner_id: UUID | None = None

    def mirror(self, contact: Contact) -> None:
        """Copy the derived fields from ``contact`` onto this certification."""

        self.office_id = contact.office_id
        self.company_id = contact.company_id

    def __repr__(self) -> str:
        return (
            f"Certification(id={self.id}, contact_id={self.contact_id}, "
            f"office_id={self.office_id}, company_id={self.company_id})"
        )
