"""Tests for SQLAlchemy repositories."""

from __future__ import annotations

from uuid import uuid4

import pytest
from sqlalchemy.orm import Session  # noqa: TC002

from certsync.adapters.sqlalchemy.repositories import (
    AccessScope,
    SqlAlchemyCertificationRepository,
    SqlAlchemyContactRepository,
)
from tests.helpers.records import OFFICE_B, make_certification, make_contact


def test_contact_repository_fetches_by_ids(sqlite_session: Session) -> None:
    repository = SqlAlchemyContactRepository(sqlite_session)
    first = make_contact()
    second = make_contact(office_id=OFFICE_B)
    repository.add(first)
    repository.add(second)
    sqlite_session.commit()

    fetched = repository.fetch_by_ids({first.id, second.id, uuid4()})

    assert set(fetched) == {first.id, second.id}
    assert fetched[second.id].office_id == OFFICE_B


def test_contact_repository_empty_lookup(sqlite_session: Session) -> None:
    repository = SqlAlchemyContactRepository(sqlite_session)

    assert repository.fetch_by_ids(set()) == {}


def test_restricted_fetch_honours_access_scope(sqlite_session: Session) -> None:
    owner = uuid4()
    stranger = uuid4()
    contact = make_contact()
    visible = make_certification(contact, owner_id=owner)
    hidden = make_certification(contact, owner_id=stranger)
    sqlite_session.add_all([contact, visible, hidden])
    sqlite_session.commit()

    repository = SqlAlchemyCertificationRepository(
        sqlite_session, scope=AccessScope(owner_ids=frozenset({owner}))
    )

    assert [cert.id for cert in repository.fetch_by_contact_ids({contact.id})] == [visible.id]


def test_unrestricted_fetch_ignores_access_scope(sqlite_session: Session) -> None:
    contact = make_contact()
    certifications = [make_certification(contact, owner_id=uuid4()) for _ in range(3)]
    other_contact = make_contact()
    unrelated = make_certification(other_contact)
    sqlite_session.add_all([contact, other_contact, *certifications, unrelated])
    sqlite_session.commit()

    repository = SqlAlchemyCertificationRepository(
        sqlite_session, scope=AccessScope(owner_ids=frozenset())
    )

    fetched = repository.fetch_by_contact_ids_unrestricted({contact.id})

    assert {cert.id for cert in fetched} == {cert.id for cert in certifications}
    assert repository.fetch_by_contact_ids({contact.id}) == []


def test_iter_batches_pages_through_all_rows(sqlite_session: Session) -> None:
    contact = make_contact()
    certifications = [make_certification(contact) for _ in range(5)]
    sqlite_session.add_all([contact, *certifications])
    sqlite_session.commit()
    repository = SqlAlchemyCertificationRepository(sqlite_session)

    batches = list(repository.iter_batches(2))

    assert [len(batch) for batch in batches] == [2, 2, 1]
    assert {cert.id for batch in batches for cert in batch} == {
        cert.id for cert in certifications
    }


def test_iter_batches_rejects_non_positive_size(sqlite_session: Session) -> None:
    repository = SqlAlchemyCertificationRepository(sqlite_session)

    with pytest.raises(ValueError, match="batch_size"):
        list(repository.iter_batches(0))


def test_iter_batches_honours_access_scope(sqlite_session: Session) -> None:
    owner = uuid4()
    contact = make_contact()
    visible = [make_certification(contact, owner_id=owner) for _ in range(3)]
    hidden = [make_certification(contact, owner_id=uuid4()) for _ in range(2)]
    sqlite_session.add_all([contact, *visible, *hidden])
    sqlite_session.commit()
    repository = SqlAlchemyCertificationRepository(
        sqlite_session, scope=AccessScope(owner_ids=frozenset({owner}))
    )

    batches = list(repository.iter_batches(2))

    assert [len(batch) for batch in batches] == [2, 1]
    assert {cert.id for batch in batches for cert in batch} == {cert.id for cert in visible}
