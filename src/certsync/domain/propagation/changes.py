"""Change detection for contacts on the fields certifications depend on."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from certsync.domain.model import TRACKED_CONTACT_FIELDS

if TYPE_CHECKING:
    from collections.abc import Iterable
    from uuid import UUID


class TrackedSource(Protocol):
    """Structural view of the contact fields that trigger a cascade."""

    @property
    def office_id(self) -> UUID | None: ...

    @property
    def company_id(self) -> UUID | None: ...

    @property
    def status(self) -> str | None: ...


@dataclass(frozen=True)
class ChangeSet[T]:
    """Before/after pairing for one record; ``old`` is None for a creation."""

    new: T
    old: T | None = None

    @property
    def is_creation(self) -> bool:
        return self.old is None


def changed_fields(old: TrackedSource | None, new: TrackedSource) -> tuple[str, ...]:
    """Return the tracked field names whose values differ between ``old`` and ``new``."""

    if old is None:
        return ()
    return tuple(
        name for name in TRACKED_CONTACT_FIELDS if getattr(old, name) != getattr(new, name)
    )


def has_changed(old: TrackedSource | None, new: TrackedSource) -> bool:
    """Return whether a contact changed in a way that must cascade.

    A creation (``old is None``) never counts: there are no certifications
    pointing at a record that did not exist yet.
    """

    return bool(changed_fields(old, new))


def filter_changed[T: TrackedSource](change_sets: Iterable[ChangeSet[T]]) -> list[T]:
    """Return the new side of every change set that ``has_changed``, in input order."""

    return [change.new for change in change_sets if has_changed(change.old, change.new)]
