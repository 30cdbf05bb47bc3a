"""Unit tests for ConsoleAdapter (structured console logging).

Tests cover:
- LoggerProtocol methods forward message and context
- error/critical add error_type and error_message
- bind returns a new adapter with bound context
- Renderer selection (JSON vs console)

Architecture:
- structlog is patched; no real output
"""

from unittest.mock import MagicMock, patch

import pytest

from freequo_dispatch.infrastructure.logging import ConsoleAdapter

STRUCTLOG = "freequo_dispatch.infrastructure.logging.console_adapter.structlog"


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    @pytest.mark.parametrize("level", ["debug", "info", "warning"])
    def test_level_methods_forward_context(self, level):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            getattr(adapter, level)("side_effect_sent", record_id="app-1", attempt=1)

            getattr(mock_logger, level).assert_called_once_with(
                "side_effect_sent", record_id="app-1", attempt=1
            )

    def test_error_adds_exception_fields(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error(
                "payment_order_create_failed",
                error=TimeoutError("read timed out"),
                job_id="job_42",
            )

            mock_logger.error.assert_called_once_with(
                "payment_order_create_failed",
                job_id="job_42",
                error_type="TimeoutError",
                error_message="read timed out",
            )

    def test_critical_without_error(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.critical("status_write_failed", record_id="app-1")

            mock_logger.critical.assert_called_once_with(
                "status_write_failed", record_id="app-1"
            )


@pytest.mark.unit
class TestConsoleAdapterBinding:
    """Test context binding."""

    def test_bind_returns_new_adapter(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            bound_logger = MagicMock()
            mock_logger.bind.return_value = bound_logger
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            bound = adapter.bind(delivery_id="evt-1")
            bound.info("side_effect_already_sent")

            assert bound is not adapter
            mock_logger.bind.assert_called_once_with(delivery_id="evt-1")
            bound_logger.info.assert_called_once_with("side_effect_already_sent")
            mock_logger.info.assert_not_called()

    def test_with_context_is_bind_alias(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            ConsoleAdapter().with_context(order_id="order_1")

            mock_logger.bind.assert_called_once_with(order_id="order_1")


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    """Test structlog configuration."""

    def test_json_renderer_when_use_json(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(use_json=True)

            processors = mock_structlog.configure.call_args.kwargs["processors"]
            assert processors[-1] is mock_structlog.processors.JSONRenderer.return_value
            mock_structlog.dev.ConsoleRenderer.assert_not_called()

    def test_console_renderer_by_default(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter()

            processors = mock_structlog.configure.call_args.kwargs["processors"]
            assert processors[-1] is mock_structlog.dev.ConsoleRenderer.return_value
            assert processors[0] is mock_structlog.contextvars.merge_contextvars

    def test_logger_name(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter()

            mock_structlog.get_logger.assert_called_once_with("freequo_dispatch")
