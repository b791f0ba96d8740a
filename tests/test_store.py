from __future__ import annotations

import dataclasses

import pytest

from eventlist.store import Event, EventStore, default_store


def test_default_store_is_seeded_once():
    store = default_store()
    assert store is default_store()
    assert [ev.name for ev in store.all()] == ["Spring Festival", "Tech Conference", "Music Gig"]


def test_store_rejects_duplicate_ids():
    with pytest.raises(ValueError, match="duplicate"):
        EventStore([Event(1, "a", "2025-01-01"), Event(1, "b", "2025-01-02")])


def test_store_rejects_non_positive_ids():
    with pytest.raises(ValueError):
        EventStore([Event(0, "a", "2025-01-01")])


def test_events_are_immutable():
    ev = Event(1, "a", "2025-01-01")
    with pytest.raises(dataclasses.FrozenInstanceError):
        ev.name = "b"  # type: ignore[misc]

