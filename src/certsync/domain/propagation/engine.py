"""Propagation engine keeping certifications aligned with their contacts.

Two directions share one engine:

- pull (``process_dependents``): certifications about to be saved copy the
  current office/company of their contact. The caller persists them.
- push (``process_sources``): contacts that changed on a tracked field cascade
  their office/company to every referencing certification, which are then
  committed as one batch through the gateway.

Both directions only touch a certification when ``dependent_needs_sync``
reports a real mismatch. Repository and commit failures propagate unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from certsync.domain.propagation.changes import changed_fields, filter_changed
from certsync.domain.propagation.requirements import dependent_needs_sync

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from uuid import UUID

    from certsync.domain.model import Certification, Contact
    from certsync.domain.ports import CertificationRepository, CommitGateway, ContactRepository
    from certsync.domain.propagation.changes import ChangeSet
    from certsync.domain.propagation.context import SyncContext

log = logging.getLogger(__name__)


@dataclass(slots=True)
class PropagationResult:
    """Outcome of a single propagation pass."""

    examined: int = 0
    patched: int = 0
    unresolved: int = 0
    committed: bool = False
    patched_records: list[Certification] = field(default_factory=list["Certification"])


@dataclass(slots=True)
class SyncEngine:
    """Run pull and push propagation against the configured collaborators."""

    contacts: ContactRepository
    certifications: CertificationRepository
    gateway: CommitGateway
    warn_on_unresolved: bool = False

    def process_dependents(
        self,
        dependents: Iterable[Certification],
        *,
        context: SyncContext,
    ) -> PropagationResult:
        """Pull contact values onto ``dependents`` in place, without committing."""

        pass_number = context.begin_pass()
        batch = list(dependents)
        result = PropagationResult(examined=len(batch))

        contact_ids = {cert.contact_id for cert in batch if cert.contact_id is not None}
        fetched: Mapping[UUID, Contact] = (
            self.contacts.fetch_by_ids(contact_ids) if contact_ids else {}
        )

        for certification in batch:
            resolved = (
                context.cache.resolve(certification.contact_id, fetched)
                if certification.contact_id is not None
                else None
            )
            if resolved is None:
                result.unresolved += 1
                self._log_unresolved(certification)
                continue
            if not dependent_needs_sync(certification, resolved):
                continue
            log.debug("Pull: %r <- %r", certification, resolved)
            certification.mirror(resolved)
            result.patched += 1
            result.patched_records.append(certification)

        log.info(
            "Pull pass %s/%s: examined=%s, patched=%s, unresolved=%s",
            context.context_id,
            pass_number,
            result.examined,
            result.patched,
            result.unresolved,
        )
        return result

    def process_sources(
        self,
        change_sets: Iterable[ChangeSet[Contact]],
        *,
        context: SyncContext,
    ) -> PropagationResult:
        """Push changed contact values to their certifications and commit them once."""

        pass_number = context.begin_pass()
        pending = list(change_sets)
        changed = filter_changed(pending)
        if not changed:
            log.debug("Push pass %s/%s: no tracked changes", context.context_id, pass_number)
            return PropagationResult()

        for change in pending:
            fields = changed_fields(change.old, change.new)
            if fields:
                log.debug("Push: contact %s changed %s", change.new.id, ", ".join(fields))

        changed_by_id = {contact.id: contact for contact in changed}
        dependents = self.certifications.fetch_by_contact_ids_unrestricted(changed_by_id.keys())
        result = PropagationResult(examined=len(dependents))

        for certification in dependents:
            resolved = (
                changed_by_id.get(certification.contact_id)
                if certification.contact_id is not None
                else None
            )
            if resolved is None:
                result.unresolved += 1
                self._log_unresolved(certification)
                continue
            if not dependent_needs_sync(certification, resolved):
                continue
            log.debug("Push: %r <- %r", certification, resolved)
            certification.mirror(resolved)
            result.patched_records.append(certification)
            context.cache.put(resolved.id, resolved)

        result.patched = len(result.patched_records)
        if result.patched_records:
            self.gateway.register_dirty(result.patched_records)
            self.gateway.commit()
            result.committed = True

        log.info(
            "Push pass %s/%s: changed_contacts=%s, examined=%s, patched=%s, committed=%s",
            context.context_id,
            pass_number,
            len(changed_by_id),
            result.examined,
            result.patched,
            result.committed,
        )
        return result

    def _log_unresolved(self, certification: Certification) -> None:
        level = logging.WARNING if self.warn_on_unresolved else logging.DEBUG
        log.log(
            level,
            "Skipping certification %s: contact %s could not be resolved",
            certification.id,
            certification.contact_id,
        )
