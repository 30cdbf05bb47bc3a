"""Logging event handler for dispatch events.

Log Levels:
    - INFO: ATTEMPTED, SUCCEEDED, SUPPRESSED and cancelled confirmations
    - WARNING: FAILED events

Structured Fields:
    - event_id, occurred_at
    - source_record_id, kind, delivery_id
    - reason, failure_kind, recorded (FAILED events)
"""

from freequo_dispatch.domain.events import (
    PaymentConfirmationCancelled,
    SideEffectDispatchAttempted,
    SideEffectDispatchFailed,
    SideEffectDispatchSucceeded,
    SideEffectDispatchSuppressed,
)
from freequo_dispatch.domain.protocols.event_bus_protocol import EventBusProtocol
from freequo_dispatch.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Writes one structured log line per dispatch event.

    Example:
        >>> handler = LoggingEventHandler(logger=get_logger())
        >>> handler.register(event_bus)
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    def register(self, event_bus: EventBusProtocol) -> None:
        """Subscribe every handler method to its event type."""
        event_bus.subscribe(SideEffectDispatchAttempted, self.handle_dispatch_attempted)
        event_bus.subscribe(SideEffectDispatchSucceeded, self.handle_dispatch_succeeded)
        event_bus.subscribe(SideEffectDispatchFailed, self.handle_dispatch_failed)
        event_bus.subscribe(
            SideEffectDispatchSuppressed, self.handle_dispatch_suppressed
        )
        event_bus.subscribe(
            PaymentConfirmationCancelled, self.handle_confirmation_cancelled
        )

    async def handle_dispatch_attempted(
        self, event: SideEffectDispatchAttempted
    ) -> None:
        self._logger.info(
            "side_effect_dispatch_attempted",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            source_record_id=event.source_record_id,
            kind=event.kind.value,
            delivery_id=event.delivery_id,
            target=event.target,
        )

    async def handle_dispatch_succeeded(
        self, event: SideEffectDispatchSucceeded
    ) -> None:
        self._logger.info(
            "side_effect_sent",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            source_record_id=event.source_record_id,
            kind=event.kind.value,
            delivery_id=event.delivery_id,
            target=event.target,
            provider_reference=event.provider_reference,
            is_mock=event.is_mock,
        )

    async def handle_dispatch_failed(self, event: SideEffectDispatchFailed) -> None:
        self._logger.warning(
            "side_effect_failed",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            source_record_id=event.source_record_id,
            kind=event.kind.value,
            delivery_id=event.delivery_id,
            failure_kind=event.failure_kind,
            reason=event.reason,
            recorded=event.recorded,
        )

    async def handle_dispatch_suppressed(
        self, event: SideEffectDispatchSuppressed
    ) -> None:
        self._logger.info(
            "side_effect_duplicate_suppressed",
            event_id=str(event.event_id),
            source_record_id=event.source_record_id,
            kind=event.kind.value,
            delivery_id=event.delivery_id,
        )

    async def handle_confirmation_cancelled(
        self, event: PaymentConfirmationCancelled
    ) -> None:
        self._logger.info(
            "payment_confirmation_cancelled",
            event_id=str(event.event_id),
            order_id=event.order_id,
            job_id=event.job_id,
        )
