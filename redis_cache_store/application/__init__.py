"""Application layer: the caller-facing cache facade."""

from redis_cache_store.application.cache import Cache

__all__ = ["Cache"]
