"""Staleness checks between a certification and its resolved contact."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from certsync.domain.model import Certification, Contact


def dependent_needs_sync(dependent: Certification, resolved_source: Contact | None) -> bool:
    """Return True iff ``resolved_source`` exists and disagrees on a derived field.

    An unresolved source is a skip rather than a failure: there is nothing to
    copy from.
    """

    if resolved_source is None:
        return False
    return (
        resolved_source.office_id != dependent.office_id
        or resolved_source.company_id != dependent.company_id
    )
