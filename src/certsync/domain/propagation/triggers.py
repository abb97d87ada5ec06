"""Entry points for whatever event layer reacts to record saves.

The functions are free of any dispatch mechanism: an ORM event hook, a
message consumer or a plain service call can invoke them with the records
it has at hand.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from certsync.domain.propagation.changes import ChangeSet

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from uuid import UUID

    from certsync.domain.model import Certification, Contact
    from certsync.domain.propagation.context import SyncContext
    from certsync.domain.propagation.engine import PropagationResult, SyncEngine


def sync_dependents_before_save(
    batch: Iterable[Certification],
    *,
    engine: SyncEngine,
    context: SyncContext,
) -> PropagationResult:
    """Align certifications with their contacts before the caller saves them."""

    return engine.process_dependents(batch, context=context)


def sync_dependents_after_source_save(
    change_sets: Iterable[ChangeSet[Contact]],
    *,
    engine: SyncEngine,
    context: SyncContext,
) -> PropagationResult:
    """Cascade saved contact changes to their certifications."""

    return engine.process_sources(change_sets, context=context)


def change_sets_for(
    new_records: Iterable[Contact],
    old_by_id: Mapping[UUID, Contact],
) -> list[ChangeSet[Contact]]:
    """Pair after-save contacts with their before-save snapshots.

    Contacts missing from ``old_by_id`` are treated as creations.
    """

    return [ChangeSet(new=record, old=old_by_id.get(record.id)) for record in new_records]
