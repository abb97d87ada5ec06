"""Field propagation between contacts and certifications.

Layered flow:
1) detect tracked changes on contacts (``changes``)
2) resolve the authoritative contact, cache first (``cache``)
3) decide staleness per certification (``requirements``)
4) patch and commit (``engine``)
"""

from __future__ import annotations

from .cache import ProcessedCache
from .changes import ChangeSet, changed_fields, filter_changed, has_changed
from .context import SyncContext, sync_context
from .engine import PropagationResult, SyncEngine
from .requirements import dependent_needs_sync
from .triggers import (
    change_sets_for,
    sync_dependents_after_source_save,
    sync_dependents_before_save,
)

__all__ = [
    "ChangeSet",
    "ProcessedCache",
    "PropagationResult",
    "SyncContext",
    "SyncEngine",
    "change_sets_for",
    "changed_fields",
    "dependent_needs_sync",
    "filter_changed",
    "has_changed",
    "sync_context",
    "sync_dependents_after_source_save",
    "sync_dependents_before_save",
]
