"""Public domain model surface."""

from __future__ import annotations

from certsync.domain.model.entity import Entity
from certsync.domain.model.records import (
    DERIVED_FIELDS,
    TRACKED_CONTACT_FIELDS,
    Certification,
    Contact,
)

__all__ = [
    "DERIVED_FIELDS",
    "TRACKED_CONTACT_FIELDS",
    "Certification",
    "Contact",
    "Entity",
]
