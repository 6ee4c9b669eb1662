"""Connection handle lifecycle states.

State Machine:
    CONNECTED ↔ ERRORING → DISCONNECTED

    - CONNECTED: Last use of the link succeeded (or it has not failed yet)
    - ERRORING: Last use failed at the network level; next use may recover
    - DISCONNECTED: Explicitly closed (terminal)

Usage:
    from redis_cache_store.domain.enums import ConnectionState

    if handle.state is ConnectionState.DISCONNECTED:
        ...
"""

from enum import Enum


class ConnectionState(str, Enum):
    """Connection handle lifecycle states.

    Owned and mutated by the connection handle only. The store observes it.

    State Transitions:
        CONNECTED → ERRORING: Network failure, socket or pool timeout
        ERRORING → CONNECTED: Next command completes
        Any → DISCONNECTED: disconnect() called (terminal)
    """

    CONNECTED = "connected"
    DISCONNECTED = "disconnected"
    ERRORING = "erroring"
