from datetime import datetime, timedelta, timezone

from ora2pg_web.repositories.session import InMemorySessionRepository


def _age(session, seconds):
    session.updated_at = datetime.now(timezone.utc) - timedelta(seconds=seconds)


def test_idle_sessions_are_evicted_on_lookup():
    repository = InMemorySessionRepository(ttl_seconds=60)
    idle = repository.create()
    active = repository.create()
    _age(idle, 120)

    assert repository.get(active.session_id) is active
    assert repository.get(idle.session_id) is None


def test_idle_sessions_are_evicted_on_create():
    repository = InMemorySessionRepository(ttl_seconds=60)
    idle = repository.create()
    _age(idle, 120)

    repository.create()

    assert idle.session_id not in repository._store


def test_save_refreshes_idle_timer():
    repository = InMemorySessionRepository(ttl_seconds=60)
    session = repository.create()
    _age(session, 120)

    repository.save(session)

    assert repository.get(session.session_id) is session


def test_sessions_with_requests_in_flight_are_kept():
    repository = InMemorySessionRepository(ttl_seconds=60)
    session = repository.create()
    session.is_translating = True
    _age(session, 120)

    assert repository.get(session.session_id) is session


def test_no_ttl_keeps_sessions_until_deleted():
    repository = InMemorySessionRepository()
    session = repository.create()
    _age(session, 10 ** 6)

    assert repository.get(session.session_id) is session
    assert repository.delete(session.session_id) is True
    assert repository.get(session.session_id) is None
