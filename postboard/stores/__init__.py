"""Data stores for persistence and caching.

Stores handle:
- Records: users and posts (in-memory repositories, one lock per collection)
- Redis: session payloads with TTL

No business/authorization logic in stores - that belongs in services.
"""
