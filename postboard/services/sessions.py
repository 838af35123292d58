"""Session store: session id -> public view of the authenticated user.

Backed by Redis. Keys are "session-{session_id}"; entries expire after the
session TTL (24 hours by default). No retries: any cache failure surfaces as
InfrastructureError.
"""

import logging

import redis.asyncio as redis
from redis.exceptions import RedisError

from postboard.errors import InfrastructureError
from postboard.models import PublicUser
from postboard.stores.redis import (
    PREFIX_SESSION,
    cache_delete,
    cache_get_json,
    cache_set_json,
    get_redis,
)

logger = logging.getLogger("uvicorn.error")


def session_key(session_id: str) -> str:
    return f"{PREFIX_SESSION}{session_id}"


class SessionStore:
    """Reads and writes session payloads in the shared cache."""

    def __init__(self, client: redis.Redis | None, ttl_seconds: int):
        self._client = client
        self._ttl = ttl_seconds

    def _get_client(self) -> redis.Redis:
        if self._client is None:
            raise InfrastructureError("client not initialized", operation="connect")
        return self._client

    async def set_session_user(self, session_id: str, user: PublicUser) -> None:
        """Store the public user for session_id."""
        client = self._get_client()
        try:
            await cache_set_json(client, session_key(session_id), user.to_dict(), self._ttl)
        except RedisError as e:
            raise InfrastructureError(str(e), operation="write") from e

    async def get_session_user(self, session_id: str) -> PublicUser | None:
        """Return the public user for session_id, or None if unset/expired."""
        client = self._get_client()
        try:
            payload = await cache_get_json(client, session_key(session_id))
        except RedisError as e:
            raise InfrastructureError(str(e), operation="read") from e
        except ValueError as e:
            raise InfrastructureError(f"malformed session payload ({e})", operation="read") from e

        if payload is None:
            return None
        try:
            return PublicUser.from_dict(payload)
        except (KeyError, TypeError) as e:
            raise InfrastructureError(f"malformed session payload ({e})", operation="read") from e

    async def clear_session_user(self, session_id: str) -> None:
        """Remove the session entry."""
        client = self._get_client()
        try:
            await cache_delete(client, session_key(session_id))
        except RedisError as e:
            raise InfrastructureError(str(e), operation="delete") from e


def create_session_store(ttl_seconds: int) -> SessionStore:
    """Build a SessionStore over the application's Redis client."""
    try:
        client = get_redis()
    except RuntimeError:
        logger.error("Session store requested before Redis was initialized")
        client = None
    return SessionStore(client, ttl_seconds)
