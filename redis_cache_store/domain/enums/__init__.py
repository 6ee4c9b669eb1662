"""Domain enums.

Available Enums:
    - ConnectionState: Health of a pooled link to the remote store
"""

from redis_cache_store.domain.enums.connection_state import ConnectionState

__all__ = ["ConnectionState"]
