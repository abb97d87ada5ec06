"""Domain port definitions for adapters."""

from __future__ import annotations

from .persistence import CertificationRepository, ContactRepository, Repository
from .unit_of_work import (
    CommitGateway,
    RepositoryCollection,
    SyncRepositories,
    SyncUnitOfWork,
    UnitOfWork,
)

__all__ = [
    "CertificationRepository",
    "CommitGateway",
    "ContactRepository",
    "Repository",
    "RepositoryCollection",
    "SyncRepositories",
    "SyncUnitOfWork",
    "UnitOfWork",
]
