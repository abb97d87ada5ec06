"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from contextlib import AbstractContextManager, nullcontext
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from certsync.config import get_sync_config
from certsync.domain.ports.unit_of_work import SyncUnitOfWork
from certsync.domain.propagation import (
    SyncEngine,
    change_sets_for,
    sync_context,
    sync_dependents_after_source_save,
    sync_dependents_before_save,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from uuid import UUID

    from certsync.domain.model import Certification
    from certsync.domain.propagation import PropagationResult, SyncContext

UnitOfWorkFactory = Callable[[], SyncUnitOfWork]

_UNSET = object()

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ContactUpdate:
    """Field values to write onto a stored contact.

    Fields left unset are not touched; an explicit ``None`` clears the field.
    """

    office_id: UUID | None | object = _UNSET
    company_id: UUID | None | object = _UNSET
    status: str | None | object = _UNSET
    first_name: str | None | object = _UNSET
    last_name: str | None | object = _UNSET
    email: str | None | object = _UNSET

    def changes(self) -> dict[str, object]:
        return {
            name: getattr(self, name)
            for name in ("office_id", "company_id", "status", "first_name", "last_name", "email")
            if getattr(self, name) is not _UNSET
        }


@dataclass(slots=True)
class ReconcileResult:
    """Outcome of a full drift-repair sweep over stored certifications."""

    batches: int = 0
    examined: int = 0
    patched: int = 0
    unresolved: int = 0
    committed_batches: int = 0
    patched_ids: list[UUID] = field(default_factory=list["UUID"])


def _scoped(context: SyncContext | None) -> AbstractContextManager[SyncContext]:
    return nullcontext(context) if context is not None else sync_context()


def _build_engine(uow: SyncUnitOfWork) -> SyncEngine:
    config = get_sync_config()
    return SyncEngine(
        contacts=uow.repositories.contacts,
        certifications=uow.repositories.certifications,
        gateway=uow,
        warn_on_unresolved=config.warn_on_unresolved,
    )


def _default_unit_of_work_factory() -> UnitOfWorkFactory:
    from certsync.adapters.sqlalchemy.unit_of_work import (  # noqa: PLC0415
        SqlAlchemySyncUnitOfWork,
        is_started,
        startup,
    )

    if not is_started():
        startup()
    return SqlAlchemySyncUnitOfWork


def save_certifications(
    certifications: Iterable[Certification],
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    context: SyncContext | None = None,
) -> PropagationResult:
    """Align ``certifications`` with their contacts, then insert/update them."""

    batch = list(certifications)
    effective_uow = unit_of_work_factory or _default_unit_of_work_factory()

    with effective_uow() as uow:
        engine = _build_engine(uow)
        with _scoped(context) as active:
            result = sync_dependents_before_save(batch, engine=engine, context=active)
        for certification in batch:
            uow.repositories.certifications.add(certification)
        uow.commit()

    log.info("Saved %s certification(s), %s aligned with contact", len(batch), result.patched)
    return result


def update_contacts(
    updates: Mapping[UUID, ContactUpdate],
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    context: SyncContext | None = None,
) -> PropagationResult:
    """Apply ``updates`` to stored contacts and cascade them to certifications.

    Contact changes and certification patches are committed together. When no
    certification needed patching, the contact changes are committed on their own.
    """

    effective_uow = unit_of_work_factory or _default_unit_of_work_factory()

    with effective_uow() as uow:
        contacts = uow.repositories.contacts.fetch_by_ids(updates.keys())
        missing = [str(contact_id) for contact_id in updates if contact_id not in contacts]
        if missing:
            raise LookupError(f"Unknown contact id(s): {', '.join(sorted(missing))}")

        old_by_id = {contact_id: contact.snapshot() for contact_id, contact in contacts.items()}
        for contact_id, update in updates.items():
            contact = contacts[contact_id]
            for name, value in update.changes().items():
                setattr(contact, name, value)

        change_sets = change_sets_for(contacts.values(), old_by_id)
        engine = _build_engine(uow)
        with _scoped(context) as active:
            result = sync_dependents_after_source_save(change_sets, engine=engine, context=active)
        if not result.committed:
            uow.commit()

    log.info(
        "Updated %s contact(s); %s certification(s) followed",
        len(updates),
        result.patched,
    )
    return result


def reconcile_all(
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    batch_size: int | None = None,
) -> ReconcileResult:
    """Repair drift by running the pull direction over every stored certification."""

    effective_uow = unit_of_work_factory or _default_unit_of_work_factory()
    effective_batch_size = (
        batch_size if batch_size is not None else get_sync_config().reconcile_batch_size
    )
    summary = ReconcileResult()

    log.info("Starting reconcile sweep: batch_size=%s", effective_batch_size)
    with effective_uow() as uow, sync_context() as context:
        engine = _build_engine(uow)
        for batch in uow.repositories.certifications.iter_batches(effective_batch_size):
            result = engine.process_dependents(batch, context=context)
            summary.batches += 1
            summary.examined += result.examined
            summary.unresolved += result.unresolved
            if result.patched_records:
                uow.register_dirty(result.patched_records)
                uow.commit()
                summary.patched += result.patched
                summary.committed_batches += 1
                summary.patched_ids.extend(record.id for record in result.patched_records)

    log.info(
        "Finished reconcile sweep: batches=%s, examined=%s, patched=%s, unresolved=%s",
        summary.batches,
        summary.examined,
        summary.patched,
        summary.unresolved,
    )
    return summary
