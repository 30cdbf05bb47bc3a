"""Unit tests for LoggingEventHandler.

Registered on a real InMemoryEventBus; asserts one structured log line per
dispatch event at the expected level.
"""

import pytest

from freequo_dispatch.domain.enums import EventKind
from freequo_dispatch.domain.events import (
    PaymentConfirmationCancelled,
    SideEffectDispatchAttempted,
    SideEffectDispatchFailed,
    SideEffectDispatchSucceeded,
    SideEffectDispatchSuppressed,
)
from freequo_dispatch.infrastructure.events import InMemoryEventBus
from freequo_dispatch.infrastructure.events.handlers import LoggingEventHandler


@pytest.fixture
def bus(mock_logger) -> InMemoryEventBus:
    event_bus = InMemoryEventBus(logger=mock_logger)
    LoggingEventHandler(logger=mock_logger).register(event_bus)
    return event_bus


@pytest.mark.unit
class TestLoggingEventHandler:
    """Test log lines for each dispatch event."""

    async def test_attempted_logs_info(self, bus, mock_logger):
        await bus.publish(
            SideEffectDispatchAttempted(
                source_record_id="app-1",
                kind=EventKind.RECORD_CREATED,
                delivery_id="evt-1",
                target="asha@example.com",
            )
        )

        args, kwargs = mock_logger.info.call_args
        assert args == ("side_effect_dispatch_attempted",)
        assert kwargs["target"] == "asha@example.com"
        assert kwargs["kind"] == "record_created"

    async def test_succeeded_logs_info_with_reference(self, bus, mock_logger):
        await bus.publish(
            SideEffectDispatchSucceeded(
                source_record_id="order_1",
                kind=EventKind.PAYMENT_RESOLVED,
                delivery_id="req-1",
                target="order_1",
                provider_reference="mock_pay_1",
                is_mock=True,
            )
        )

        args, kwargs = mock_logger.info.call_args
        assert args == ("side_effect_sent",)
        assert kwargs["provider_reference"] == "mock_pay_1"
        assert kwargs["is_mock"] is True

    async def test_failed_logs_warning(self, bus, mock_logger):
        # Act
        await bus.publish(
            SideEffectDispatchFailed(
                source_record_id="app-1",
                kind=EventKind.RECORD_CREATED,
                delivery_id="evt-1",
                failure_kind="transient",
                reason="Mail transport timed out after 10.0s",
                recorded=False,
            )
        )

        # Assert
        mock_logger.warning.assert_called_once()
        args, kwargs = mock_logger.warning.call_args
        assert args == ("side_effect_failed",)
        assert kwargs["failure_kind"] == "transient"
        assert kwargs["recorded"] is False

    async def test_suppressed_logs_info(self, bus, mock_logger):
        await bus.publish(
            SideEffectDispatchSuppressed(
                source_record_id="app-1",
                kind=EventKind.RECORD_CREATED,
                delivery_id="evt-2",
            )
        )

        assert mock_logger.info.call_args.args == ("side_effect_duplicate_suppressed",)

    async def test_cancelled_logs_info(self, bus, mock_logger):
        await bus.publish(PaymentConfirmationCancelled(order_id="order_1", job_id="job_42"))

        args, kwargs = mock_logger.info.call_args
        assert args == ("payment_confirmation_cancelled",)
        assert kwargs["order_id"] == "order_1"
