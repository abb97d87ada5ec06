from __future__ import annotations

from certsync.domain.propagation import ProcessedCache
from tests.helpers.records import OFFICE_A, OFFICE_B, make_contact


def test_get_misses_on_empty_cache() -> None:
    cache = ProcessedCache()
    contact = make_contact()

    assert cache.get(contact.id) is None
    assert contact.id not in cache
    assert len(cache) == 0


def test_resolve_prefers_cached_value_over_fallback() -> None:
    cache = ProcessedCache()
    updated = make_contact(office_id=OFFICE_B)
    stale = make_contact(office_id=OFFICE_A, contact_id=updated.id)
    cache.put(updated.id, updated)

    assert cache.resolve(updated.id, {stale.id: stale}) is updated


def test_resolve_falls_back_on_miss() -> None:
    cache = ProcessedCache()
    fetched = make_contact()

    assert cache.resolve(fetched.id, {fetched.id: fetched}) is fetched
    assert fetched.id not in cache


def test_resolve_returns_none_when_absent_everywhere() -> None:
    cache = ProcessedCache()

    assert cache.resolve(make_contact().id, {}) is None


def test_put_keeps_latest_resolution() -> None:
    cache = ProcessedCache()
    first = make_contact(office_id=OFFICE_A)
    latest = make_contact(office_id=OFFICE_B, contact_id=first.id)

    cache.put(first.id, first)
    cache.put(first.id, latest)

    assert cache.get(first.id) is latest
    assert len(cache) == 1


def test_clear_empties_cache() -> None:
    cache = ProcessedCache()
    contact = make_contact()
    cache.put(contact.id, contact)

    cache.clear()

    assert cache.get(contact.id) is None
