"""Unit-of-work abstractions for coordinating repositories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable
    from types import TracebackType

    from certsync.domain.model import Entity
    from certsync.domain.ports.persistence import CertificationRepository, ContactRepository


@runtime_checkable
class CommitGateway(Protocol):
    """Batches dirty records and persists them as one atomic unit.

    ``commit`` either persists everything registered so far or raises, leaving
    nothing applied.
    """

    def register_dirty(self, records: Iterable[Entity]) -> None: ...

    def commit(self) -> None: ...


@runtime_checkable
class RepositoryCollection(Protocol):
    """Marker protocol for groups of repositories managed together."""


@runtime_checkable
class UnitOfWork[TRepositories: RepositoryCollection](CommitGateway, Protocol):
    """Generic unit-of-work boundary around a repository collection."""

    @property
    def repositories(self) -> TRepositories: ...

    def __enter__(self) -> UnitOfWork[TRepositories]: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool: ...

    def rollback(self) -> None: ...


@dataclass(slots=True)
class SyncRepositories(RepositoryCollection):
    """Repositories required by both propagation directions."""

    contacts: ContactRepository
    certifications: CertificationRepository


type SyncUnitOfWork = UnitOfWork[SyncRepositories]
