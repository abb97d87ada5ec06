"""Ports for fetching and persisting contacts and certifications."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from certsync.domain.model import Certification, Contact

if TYPE_CHECKING:
    from collections.abc import Collection, Iterator, Sequence
    from uuid import UUID


@runtime_checkable
class Repository[TEntity](Protocol):
    """Minimal repository contract for a persistent record store."""

    def add(self, entity: TEntity) -> None: ...


@runtime_checkable
class ContactRepository(Repository[Contact], Protocol):
    """Persistence contract for contacts (the source side of propagation)."""

    def fetch_by_ids(self, ids: Collection[UUID]) -> dict[UUID, Contact]:
        """Bulk lookup keyed by contact id; unknown ids are simply absent."""
        ...


@runtime_checkable
class CertificationRepository(Repository[Certification], Protocol):
    """Persistence contract for certifications (the dependent side)."""

    def fetch_by_contact_ids(self, contact_ids: Collection[UUID]) -> Sequence[Certification]:
        """Return certifications for ``contact_ids`` visible to the current caller."""
        ...

    def fetch_by_contact_ids_unrestricted(
        self,
        contact_ids: Collection[UUID],
    ) -> Sequence[Certification]:
        """Return every certification for ``contact_ids``, bypassing row-level access.

        Only the push direction may use this: the actor that changed a contact
        can lack visibility into certifications that still have to follow it.
        """
        ...

    def iter_batches(self, batch_size: int) -> Iterator[Sequence[Certification]]: ...
