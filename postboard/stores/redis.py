"""Redis store for session data.

Handles:
- Connection lifecycle (init on startup, close on shutdown)
- Generic cache operations with TTL
- JSON encode/decode of cached values

TTL policies:
- Session payloads: 24 hours (settings.session_ttl_seconds)
"""

import json
import logging
from typing import Any

import redis.asyncio as redis

from postboard.settings import get_settings

# Key prefixes
PREFIX_SESSION = "session-"

# Redis client (initialized on startup)
_redis: redis.Redis | None = None
logger = logging.getLogger("uvicorn.error")


async def init_redis() -> None:
    """Initialize Redis connection."""
    global _redis
    settings = get_settings()
    _redis = redis.from_url(
        settings.redis_url,
        encoding="utf-8",
        decode_responses=True,
        socket_connect_timeout=5,
        socket_timeout=5,
    )
    # Validate connectivity early.
    await _redis.ping()
    logger.info("Redis connected")


async def close_redis() -> None:
    """Close Redis connection."""
    global _redis
    if _redis:
        await _redis.aclose()
        _redis = None


def get_redis() -> redis.Redis:
    """Get Redis client instance."""
    if _redis is None:
        raise RuntimeError("Redis not initialized. Call init_redis() first.")
    return _redis


# ============================================================
# Generic cache operations
# ============================================================


async def cache_get(client: redis.Redis, key: str) -> str | None:
    """Get value from cache.

    Args:
        client: Redis client.
        key: Cache key.

    Returns:
        Cached value or None if not found.
    """
    return await client.get(key)


async def cache_set(client: redis.Redis, key: str, value: str, ttl: int) -> None:
    """Set value in cache with TTL.

    Args:
        client: Redis client.
        key: Cache key.
        value: Value to cache.
        ttl: Time-to-live in seconds.
    """
    await client.set(key, value, ex=ttl)


async def cache_delete(client: redis.Redis, key: str) -> None:
    """Delete value from cache."""
    await client.delete(key)


async def cache_get_json(client: redis.Redis, key: str) -> dict[str, Any] | None:
    """Get JSON value from cache.

    Returns:
        Parsed JSON dict or None if not found (or stored as JSON null).

    Raises:
        ValueError: If the cached value is not a JSON object.
    """
    value = await cache_get(client, key)
    if not value:
        return None
    parsed = json.loads(value)
    if parsed is None:
        return None
    if not isinstance(parsed, dict):
        raise ValueError(f"expected JSON object at {key}")
    return parsed


async def cache_set_json(client: redis.Redis, key: str, value: dict[str, Any], ttl: int) -> None:
    """Set JSON value in cache."""
    await cache_set(client, key, json.dumps(value), ttl)
