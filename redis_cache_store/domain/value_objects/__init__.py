"""Domain value objects.

Usage:
    from redis_cache_store.domain.value_objects import Absent, WriteOptions
"""

from redis_cache_store.domain.value_objects.absence import Absent
from redis_cache_store.domain.value_objects.write_options import (
    TTLArgument,
    WriteOptions,
)

__all__ = ["Absent", "TTLArgument", "WriteOptions"]
