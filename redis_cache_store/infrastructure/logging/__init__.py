"""Logging adapters implementing LoggerProtocol."""

from redis_cache_store.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
