from datetime import datetime, timezone

from stickit.sessions import FAR_FUTURE, SessionRegistry


def test_create_and_check():
    registry = SessionRegistry()
    token = registry.create("alice")
    session = registry.check(token)
    assert session.username == "alice"
    assert session.token == token
    assert session.expires_at == FAR_FUTURE


def test_tokens_are_unique_per_login():
    registry = SessionRegistry()
    first = registry.create("alice")
    second = registry.create("alice")
    assert first != second
    assert len(registry) == 2


def test_unknown_or_missing_token_is_unauthenticated():
    registry = SessionRegistry()
    registry.create("alice")
    assert registry.check("not-a-token") is None
    assert registry.check("") is None
    assert registry.check(None) is None


def test_expired_session_is_removed():
    registry = SessionRegistry(lifetime_minutes=-1)
    token = registry.create("alice")
    assert registry.check(token) is None
    assert len(registry) == 0


def test_far_future_expiry():
    assert FAR_FUTURE.year == 2038
    registry = SessionRegistry()
    session = registry.check(registry.create("bob"))
    assert not session.is_expired(datetime(2030, 1, 1, tzinfo=timezone.utc))


def test_destroy():
    registry = SessionRegistry()
    token = registry.create("alice")
    registry.destroy(token)
    assert registry.check(token) is None
    # destroying twice is harmless
    registry.destroy(token)


def test_destroy_user_and_rename():
    registry = SessionRegistry()
    a1 = registry.create("alice")
    a2 = registry.create("alice")
    b = registry.create("bob")

    registry.rename_user("bob", "robert")
    assert registry.check(b).username == "robert"

    assert registry.destroy_user("alice") == 2
    assert registry.check(a1) is None
    assert registry.check(a2) is None
    assert registry.check(b) is not None
