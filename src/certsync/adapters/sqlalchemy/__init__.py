"""SQLAlchemy adapter package for certsync."""

from __future__ import annotations

from .mappings import create_all_tables, mapper_registry, start_mappers
from .repositories import (
    AccessScope,
    SqlAlchemyCertificationRepository,
    SqlAlchemyContactRepository,
)
from .unit_of_work import (
    SqlAlchemySyncUnitOfWork,
    StartupError,
    configured_engine,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "AccessScope",
    "SqlAlchemyCertificationRepository",
    "SqlAlchemyContactRepository",
    "SqlAlchemySyncUnitOfWork",
    "StartupError",
    "configured_engine",
    "create_all_tables",
    "is_started",
    "mapper_registry",
    "shutdown",
    "start_mappers",
    "startup",
]
