"""Execution context shared by the propagation passes of one logical operation."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING
from uuid import uuid4

from certsync.domain.propagation.cache import ProcessedCache

if TYPE_CHECKING:
    from collections.abc import Iterator

log = getLogger(__name__)


def _new_context_id() -> str:
    return uuid4().hex[:12]


@dataclass(slots=True)
class SyncContext:
    """Mutable state carried across passes inside one execution context.

    A context lives as long as the logical operation that triggered it (for
    example a contact update together with the certification cascade it
    causes). Unrelated operations must each get their own context.
    """

    cache: ProcessedCache = field(default_factory=ProcessedCache)
    context_id: str = field(default_factory=_new_context_id)
    passes: int = 0

    def begin_pass(self) -> int:
        self.passes += 1
        return self.passes


@contextmanager
def sync_context() -> Iterator[SyncContext]:
    """Yield a fresh context and discard its cache when the block exits."""

    context = SyncContext()
    log.debug("Opened sync context %s", context.context_id)
    try:
        yield context
    finally:
        log.debug(
            "Closing sync context %s after %s pass(es), %s cached contact(s)",
            context.context_id,
            context.passes,
            len(context.cache),
        )
        context.cache.clear()
