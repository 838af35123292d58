"""Shared fixtures: in-memory stores and an async Redis double."""

import os

# Cheap hashes for tests; must be set before settings are first read.
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SESSION_SECRET", "test-secret")

import pytest  # noqa: E402

from postboard.services.operations import RequestContext  # noqa: E402
from postboard.services.sessions import SessionStore  # noqa: E402
from postboard.stores.records import InMemoryPostRepository, InMemoryUserRepository  # noqa: E402


class FakeRedis:
    """Minimal async stand-in for the redis.asyncio commands the app uses."""

    def __init__(self) -> None:
        self.data: dict[str, str] = {}
        self.ttls: dict[str, int] = {}

    async def get(self, key: str) -> str | None:
        return self.data.get(key)

    async def set(self, key: str, value: str, ex: int | None = None) -> bool:
        self.data[key] = value
        if ex is not None:
            self.ttls[key] = ex
        return True

    async def delete(self, *keys: str) -> int:
        removed = 0
        for key in keys:
            if self.data.pop(key, None) is not None:
                removed += 1
            self.ttls.pop(key, None)
        return removed


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture
def sessions(fake_redis: FakeRedis) -> SessionStore:
    return SessionStore(fake_redis, ttl_seconds=86400)


@pytest.fixture
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def posts() -> InMemoryPostRepository:
    return InMemoryPostRepository()


@pytest.fixture
def make_ctx(sessions, users, posts):
    """Build a RequestContext for a given session id over shared stores."""

    def _make(session_id: str = "session-a") -> RequestContext:
        return RequestContext(session_id=session_id, sessions=sessions, users=users, posts=posts)

    return _make


@pytest.fixture(autouse=True)
def reset_app_records():
    """Empty the process-wide repositories around every test."""
    from postboard.routes import deps

    deps._users.clear()
    deps._posts.clear()
    yield
    deps._users.clear()
    deps._posts.clear()
