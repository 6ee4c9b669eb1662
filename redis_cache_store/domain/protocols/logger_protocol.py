"""LoggerProtocol definition for structured logging.

All logging in this package is structured (message + key-value context) and
backend-agnostic. Implementations MUST NOT receive cached values: log keys,
operation names and error details only.

Log Levels (standard 5-level hierarchy):
    - DEBUG: Per-operation tracing (completed commands)
    - INFO: Connection lifecycle events
    - WARNING: Failed cache operations, degraded connection
    - ERROR: Operation failed in a way callers cannot recover from
    - CRITICAL: Reserved, unused by the store itself

Usage:
    logger: LoggerProtocol = get_logger()
    logger.info("Cache connection established", url=safe_url)

    store_logger = logger.bind(component="redis_store")
    store_logger.warning("Cache operation failed", operation="mget", keys=3)
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Supports 5 standard log levels and context binding.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message for catastrophic failures."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged (immutable pattern).

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...
