"""Propagation defaults for the sync engine and the reconcile sweep."""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_positive_int

DEFAULT_RECONCILE_BATCH_SIZE = 200


@dataclass(frozen=True, slots=True)
class SyncConfig:
    reconcile_batch_size: int = DEFAULT_RECONCILE_BATCH_SIZE
    # Certifications whose contact cannot be resolved are skipped either way;
    # this only raises their log level from DEBUG to WARNING.
    warn_on_unresolved: bool = False


def get_sync_config() -> SyncConfig:
    return SyncConfig(
        reconcile_batch_size=env_positive_int(
            "CERTSYNC_RECONCILE_BATCH_SIZE",
            default=DEFAULT_RECONCILE_BATCH_SIZE,
        ),
        warn_on_unresolved=env_bool("CERTSYNC_WARN_ON_UNRESOLVED", default=False),
    )
