"""SQLAlchemy mapping metadata for the certsync domain model."""

from __future__ import annotations

import logging
import uuid
from functools import cache
from typing import TYPE_CHECKING

from sqlalchemy import Column, ForeignKey, Index, String, Table, Uuid, orm
from sqlalchemy.orm import configure_mappers

from certsync.domain.model import Certification, Contact

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

UUIDColumnType = Uuid[uuid.UUID]


mapper_registry = orm.registry()
mapper_registry.metadata.naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

contact_table = Table(
    "contact",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("office_id", UUIDColumnType, nullable=True),
    Column("company_id", UUIDColumnType, nullable=True),
    Column("status", String, nullable=True),
    Column("first_name", String, nullable=True),
    Column("last_name", String, nullable=True),
    Column("email", String, nullable=True),
)

certification_table = Table(
    "certification",
    mapper_registry.metadata,
    Column("id", UUIDColumnType, primary_key=True, default=uuid.uuid4),
    Column("contact_id", UUIDColumnType, ForeignKey("contact.id"), nullable=True),
    Column("office_id", UUIDColumnType, nullable=True),
    Column("company_id", UUIDColumnType, nullable=True),
    Column("name", String, nullable=True),
    Column("owner_id", UUIDColumnType, nullable=True),
    Index("ix_certification_contact_id", "contact_id"),
    Index("ix_certification_owner_id", "owner_id"),
)


@cache
def start_mappers() -> orm.registry:
    """Configure SQLAlchemy mappers for the domain model."""

    log.info("Starting SQLAlchemy mappers")

    mapper_registry.map_imperatively(Contact, contact_table)
    mapper_registry.map_imperatively(Certification, certification_table)

    configure_mappers()
    return mapper_registry


def create_all_tables(engine: Engine) -> None:
    """Create database tables for the mapped metadata."""

    log.info("Creating all tables")
    mapper_registry.metadata.create_all(engine)
