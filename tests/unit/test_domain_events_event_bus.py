"""Unit tests for InMemoryEventBus.

Tests cover:
- Subscribe and publish by exact event type
- Multiple handlers run for one event
- Fail-open: a failing handler is logged, the others still run
- Publishing with no subscribers is a no-op
"""

from unittest.mock import AsyncMock

import pytest

from freequo_dispatch.domain.enums import EventKind
from freequo_dispatch.domain.events import (
    SideEffectDispatchAttempted,
    SideEffectDispatchFailed,
    SideEffectDispatchSucceeded,
)
from freequo_dispatch.infrastructure.events import InMemoryEventBus


def _failed_event() -> SideEffectDispatchFailed:
    return SideEffectDispatchFailed(
        source_record_id="app-1",
        kind=EventKind.RECORD_CREATED,
        delivery_id="evt-1",
        failure_kind="permanent",
        reason="Address rejected",
        recorded=True,
    )


@pytest.mark.unit
class TestEventBusSubscribeAndPublish:
    """Test handler registration and delivery."""

    async def test_handler_receives_event(self, mock_logger):
        # Arrange
        bus = InMemoryEventBus(logger=mock_logger)
        handler = AsyncMock()
        bus.subscribe(SideEffectDispatchFailed, handler)
        event = _failed_event()

        # Act
        await bus.publish(event)

        # Assert
        handler.assert_awaited_once_with(event)

    async def test_all_handlers_run(self, mock_logger):
        bus = InMemoryEventBus(logger=mock_logger)
        first, second = AsyncMock(), AsyncMock()
        bus.subscribe(SideEffectDispatchFailed, first)
        bus.subscribe(SideEffectDispatchFailed, second)

        await bus.publish(_failed_event())

        first.assert_awaited_once()
        second.assert_awaited_once()

    async def test_exact_type_match_only(self, mock_logger):
        bus = InMemoryEventBus(logger=mock_logger)
        succeeded_handler = AsyncMock()
        bus.subscribe(SideEffectDispatchSucceeded, succeeded_handler)

        await bus.publish(_failed_event())

        succeeded_handler.assert_not_awaited()

    async def test_no_subscribers_is_noop(self, mock_logger):
        bus = InMemoryEventBus(logger=mock_logger)

        await bus.publish(
            SideEffectDispatchAttempted(
                source_record_id="app-1",
                kind=EventKind.RECORD_CREATED,
                delivery_id="evt-1",
            )
        )

        mock_logger.debug.assert_not_called()


@pytest.mark.unit
class TestEventBusFailOpen:
    """A handler failure never reaches the publisher."""

    async def test_failing_handler_is_logged_and_others_run(self, mock_logger):
        # Arrange
        bus = InMemoryEventBus(logger=mock_logger)
        failing = AsyncMock(side_effect=RuntimeError("sink down"))
        healthy = AsyncMock()
        bus.subscribe(SideEffectDispatchFailed, failing)
        bus.subscribe(SideEffectDispatchFailed, healthy)

        # Act
        await bus.publish(_failed_event())

        # Assert
        healthy.assert_awaited_once()
        mock_logger.warning.assert_called_once()
        args, kwargs = mock_logger.warning.call_args
        assert args == ("event_handler_failed",)
        assert kwargs["error_type"] == "RuntimeError"
        assert kwargs["error_message"] == "sink down"
        assert kwargs["event_type"] == "SideEffectDispatchFailed"
