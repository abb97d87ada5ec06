"""Reusable fakes and builders for propagation tests."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from certsync.domain.model import Certification, Contact

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable, Iterator, Sequence

    from certsync.domain.model import Entity

OFFICE_A = UUID("00000000-0000-0000-0000-00000000000a")
OFFICE_B = UUID("00000000-0000-0000-0000-00000000000b")
COMPANY_X = UUID("00000000-0000-0000-0000-0000000000c1")
COMPANY_Y = UUID("00000000-0000-0000-0000-0000000000c2")


def make_contact(
    *,
    office_id: UUID | None = OFFICE_A,
    company_id: UUID | None = COMPANY_X,
    status: str | None = "active",
    contact_id: UUID | None = None,
    email: str | None = None,
) -> Contact:
    return Contact(
        id=contact_id or uuid4(),
        office_id=office_id,
        company_id=company_id,
        status=status,
        first_name="Ada",
        last_name="Lovelace",
        email=email,
    )


def make_certification(
    contact: Contact | None,
    *,
    office_id: UUID | None = OFFICE_A,
    company_id: UUID | None = COMPANY_X,
    owner_id: UUID | None = None,
    contact_id: UUID | None = None,
) -> Certification:
    return Certification(
        contact_id=contact.id if contact is not None else contact_id,
        office_id=office_id,
        company_id=company_id,
        name="Forklift operator",
        owner_id=owner_id,
    )


class FakeContactRepository:
    """In-memory contact store recording every bulk fetch."""

    def __init__(self, contacts: Iterable[Contact] = ()) -> None:
        self.contacts: dict[UUID, Contact] = {contact.id: contact for contact in contacts}
        self.fetch_calls: list[set[UUID]] = []

    def add(self, entity: Contact) -> None:
        self.contacts[entity.id] = entity

    def fetch_by_ids(self, ids: Collection[UUID]) -> dict[UUID, Contact]:
        self.fetch_calls.append(set(ids))
        return {
            contact_id: self.contacts[contact_id] for contact_id in ids if contact_id in self.contacts
        }


class FakeCertificationRepository:
    """In-memory certification store recording every unrestricted fetch."""

    def __init__(self, certifications: Iterable[Certification] = ()) -> None:
        self.certifications: list[Certification] = list(certifications)
        self.unrestricted_calls: list[set[UUID]] = []

    def add(self, entity: Certification) -> None:
        if entity not in self.certifications:
            self.certifications.append(entity)

    def fetch_by_contact_ids(self, contact_ids: Collection[UUID]) -> Sequence[Certification]:
        return [cert for cert in self.certifications if cert.contact_id in contact_ids]

    def fetch_by_contact_ids_unrestricted(
        self,
        contact_ids: Collection[UUID],
    ) -> Sequence[Certification]:
        self.unrestricted_calls.append(set(contact_ids))
        return [cert for cert in self.certifications if cert.contact_id in contact_ids]

    def iter_batches(self, batch_size: int) -> Iterator[Sequence[Certification]]:
        for start in range(0, len(self.certifications), batch_size):
            yield self.certifications[start : start + batch_size]


class FakeCommitGateway:
    """Records registered batches and commits; optionally fails on commit."""

    def __init__(self, *, fail_with: Exception | None = None) -> None:
        self.registered: list[list[Entity]] = []
        self.commits = 0
        self.fail_with = fail_with

    def register_dirty(self, records: Iterable[Entity]) -> None:
        self.registered.append(list(records))

    def commit(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.commits += 1


class UnavailableContactRepository(FakeContactRepository):
    def fetch_by_ids(self, ids: Collection[UUID]) -> dict[UUID, Contact]:
        raise ConnectionError("contact store unavailable")


class UnavailableCertificationRepository(FakeCertificationRepository):
    def fetch_by_contact_ids_unrestricted(
        self,
        contact_ids: Collection[UUID],
    ) -> Sequence[Certification]:
        raise ConnectionError("certification store unavailable")
