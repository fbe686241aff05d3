"""Session store — idle expiry and bounded size."""

from __future__ import annotations

from fraudguard.models.session_store import SessionStore


class _Clock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def test_idle_session_expires():
    clock = _Clock()
    store = SessionStore(ttl_seconds=60, clock=clock)
    session = store.create()

    clock.now += 30
    assert store.get(session.id) is session

    clock.now += 61
    assert store.get(session.id) is None
    assert len(store) == 0


def test_access_refreshes_ttl():
    clock = _Clock()
    store = SessionStore(ttl_seconds=60, clock=clock)
    session = store.create()

    for _ in range(3):
        clock.now += 45
        assert store.get(session.id) is session


def test_create_purges_expired_sessions():
    clock = _Clock()
    store = SessionStore(ttl_seconds=60, clock=clock)
    store.create()
    store.create()

    clock.now += 120
    store.create()

    assert len(store) == 1


def test_full_store_evicts_least_recently_used():
    store = SessionStore(max_sessions=2, clock=_Clock())
    first = store.create()
    second = store.create()

    assert store.get(first.id) is first
    third = store.create()

    assert len(store) == 2
    assert store.get(second.id) is None
    assert store.get(first.id) is first
    assert store.get(third.id) is third


def test_discard():
    store = SessionStore()
    session = store.create()

    assert store.discard(session.id) is True
    assert store.discard(session.id) is False
    assert store.get(session.id) is None
