"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

from sqlalchemy import select

from certsync.adapters.sqlalchemy.mappings import certification_table, contact_table
from certsync.domain.model import Certification, Contact

if TYPE_CHECKING:
    from collections.abc import Collection, Iterator, Sequence
    from uuid import UUID

    from sqlalchemy import Select
    from sqlalchemy.orm import Session

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AccessScope:
    """Row-level visibility of the acting principal: the owners whose rows it may read."""

    owner_ids: frozenset[UUID]

    def restrict(self, stmt: Select[tuple[Certification]]) -> Select[tuple[Certification]]:
        return stmt.where(certification_table.c.owner_id.in_(list(self.owner_ids)))


class SqlAlchemyContactRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: Contact) -> None:
        self.session.add(entity)

    def fetch_by_ids(self, ids: Collection[UUID]) -> dict[UUID, Contact]:
        if not ids:
            return {}
        stmt = select(Contact).where(contact_table.c.id.in_(list(ids)))
        return {contact.id: contact for contact in self.session.scalars(stmt)}


class SqlAlchemyCertificationRepository:
    """Certification queries; ``scope`` restricts reads unless a method says otherwise."""

    def __init__(self, session: Session, *, scope: AccessScope | None = None) -> None:
        self.session = session
        self.scope = scope

    def add(self, entity: Certification) -> None:
        self.session.add(entity)

    def fetch_by_contact_ids(self, contact_ids: Collection[UUID]) -> Sequence[Certification]:
        if not contact_ids:
            return []
        stmt = self._by_contact_ids(contact_ids)
        if self.scope is not None:
            stmt = self.scope.restrict(stmt)
        return list(self.session.scalars(stmt))

    def fetch_by_contact_ids_unrestricted(
        self,
        contact_ids: Collection[UUID],
    ) -> Sequence[Certification]:
        if not contact_ids:
            return []
        # Elevated read: deliberately ignores self.scope for this query only.
        log.debug("Unrestricted certification read for %s contact(s)", len(contact_ids))
        return list(self.session.scalars(self._by_contact_ids(contact_ids)))

    def iter_batches(self, batch_size: int) -> Iterator[Sequence[Certification]]:
        if batch_size <= 0:
            raise ValueError("batch_size must be positive")
        offset = 0
        while True:
            stmt = select(Certification).order_by(certification_table.c.id)
            if self.scope is not None:
                stmt = self.scope.restrict(stmt)
            batch = list(self.session.scalars(stmt.offset(offset).limit(batch_size)))
            if not batch:
                return
            yield batch
            offset += len(batch)

    @staticmethod
    def _by_contact_ids(contact_ids: Collection[UUID]) -> Select[tuple[Certification]]:
        return (
            select(Certification)
            .where(certification_table.c.contact_id.in_(list(contact_ids)))
            .order_by(certification_table.c.id)
        )


if TYPE_CHECKING:
    from certsync.domain.ports.persistence import CertificationRepository, ContactRepository

    _session_stub = cast("Session", object())
    _contact_repo: ContactRepository = SqlAlchemyContactRepository(_session_stub)
    _certification_repo: CertificationRepository = SqlAlchemyCertificationRepository(
        _session_stub
    )
