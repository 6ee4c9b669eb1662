"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- All LoggerProtocol methods (debug, info, warning, error, critical)
- Context binding
- Renderer and level selection

Architecture:
- Unit tests with mocked structlog
- NO real logging output
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

from redis_cache_store.infrastructure.logging.console_adapter import ConsoleAdapter

STRUCTLOG = "redis_cache_store.infrastructure.logging.console_adapter.structlog"


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("level", ["debug", "info", "warning"])
    def test_logs_message_with_context(self, level):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            getattr(adapter, level)("Cache operation completed", operation="get", key="foo")

            getattr(mock_logger, level).assert_called_once_with(
                "Cache operation completed",
                operation="get",
                key="foo",
            )

    def test_error_adds_exception_details(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("Cache reset failed", error=ConnectionError("refused"), db=0)

            mock_logger.error.assert_called_once_with(
                "Cache reset failed",
                db=0,
                error_type="ConnectionError",
                error_message="refused",
            )

    def test_critical_without_exception(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.critical("Cache unavailable")

            mock_logger.critical.assert_called_once_with("Cache unavailable")


@pytest.mark.unit
class TestConsoleAdapterBinding:
    """Test bind()."""

    def test_bind_returns_new_adapter_with_bound_logger(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            bound_logger = MagicMock()
            mock_logger.bind.return_value = bound_logger
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            bound = adapter.bind(component="redis_store")
            bound.info("Cache reset")

            assert bound is not adapter
            assert isinstance(bound, ConsoleAdapter)
            mock_logger.bind.assert_called_once_with(component="redis_store")
            bound_logger.info.assert_called_once_with("Cache reset")
            mock_logger.info.assert_not_called()


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    """Test structlog configuration."""

    def test_json_renderer_when_requested(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(use_json=True)

            mock_structlog.processors.JSONRenderer.assert_called_once()
            mock_structlog.dev.ConsoleRenderer.assert_not_called()

    def test_console_renderer_by_default(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter()

            mock_structlog.dev.ConsoleRenderer.assert_called_once_with(colors=True)
            mock_structlog.processors.JSONRenderer.assert_not_called()

    def test_level_filtering(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(level=logging.WARNING)

            mock_structlog.make_filtering_bound_logger.assert_called_once_with(
                logging.WARNING
            )
            mock_structlog.configure.assert_called_once()
