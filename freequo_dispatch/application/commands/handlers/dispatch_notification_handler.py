"""Pipeline handler for RecordCreated: the application confirmation email.

Flow:
1. Build the RecordCreated event
2. Idempotency pre-check (suppress if already sent)
3. Validate the payload (missing email is recorded, no send)
4. Render the message
5. Emit SideEffectDispatchAttempted
6. Send exactly once, bounded by the mail timeout
7. Transient failure: emit Failed, raise TransientChannelFailure (no write)
8. Record the outcome (conditional write)
9. Emit Succeeded or Failed, return the attempt

Errors that propagate: TransientChannelFailure and StatusWriteFailure. A
StatusWriteFailure after a successful send means a redelivery may send
again (at-least-once).
"""

from uuid_extensions import uuid7

from freequo_dispatch.application.commands.dispatch_commands import (
    DispatchRecordCreated,
)
from freequo_dispatch.application.content import ContentBuilder
from freequo_dispatch.application.errors import TransientChannelFailure
from freequo_dispatch.application.services import NotificationExecutor, StatusWriter
from freequo_dispatch.application.sources import EventSource
from freequo_dispatch.core.result import Failure, Success
from freequo_dispatch.domain.entities import SideEffectAttempt
from freequo_dispatch.domain.events import (
    RecordCreated,
    SideEffectDispatchAttempted,
    SideEffectDispatchFailed,
    SideEffectDispatchSucceeded,
    SideEffectDispatchSuppressed,
)
from freequo_dispatch.domain.protocols import EventBusProtocol, LoggerProtocol


class DispatchNotificationHandler:
    """Handler for DispatchRecordCreated."""

    def __init__(
        self,
        *,
        event_source: EventSource,
        content_builder: ContentBuilder,
        executor: NotificationExecutor,
        status_writer: StatusWriter,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._source = event_source
        self._builder = content_builder
        self._executor = executor
        self._status_writer = status_writer
        self._event_bus = event_bus
        self._logger = logger

    async def handle(self, cmd: DispatchRecordCreated) -> SideEffectAttempt | None:
        """Process one delivery of a record-created trigger.

        Returns:
            The terminal attempt, or None when the idempotency guard
            suppressed a redelivery (no channel call, no write).

        Raises:
            TransientChannelFailure: Mail transport timed out or was unavailable.
            StatusWriteFailure: Outcome could not be recorded.
        """
        event = self._source.record_created(
            delivery_id=cmd.delivery_id,
            record_id=cmd.record_id,
            data=cmd.data,
            occurred_at=cmd.occurred_at,
        )
        log = self._logger.bind(
            delivery_id=event.delivery_id,
            record_id=event.source_record_id,
            kind=event.kind.value,
        )

        if await self._status_writer.already_sent(event.source_record_id, event.kind):
            log.info("side_effect_already_sent")
            await self._event_bus.publish(
                SideEffectDispatchSuppressed(
                    event_id=uuid7(),
                    source_record_id=event.source_record_id,
                    kind=event.kind,
                    delivery_id=event.delivery_id,
                )
            )
            return None

        match self._source.application_notice(event):
            case Failure(error=error):
                attempt = SideEffectAttempt.missing_field(
                    event.source_record_id, error.message
                )
                await self._status_writer.record(
                    event.source_record_id, event.kind, attempt
                )
                await self._publish_failed(event, attempt, recorded=True)
                return attempt
            case Success(value=notice):
                message = self._builder.render_application_confirmation(notice)

        await self._event_bus.publish(
            SideEffectDispatchAttempted(
                event_id=uuid7(),
                source_record_id=event.source_record_id,
                kind=event.kind,
                delivery_id=event.delivery_id,
                target=message.recipient,
            )
        )

        attempt = await self._executor.execute(message)

        if attempt.is_transient_failure:
            await self._publish_failed(event, attempt, recorded=False)
            raise TransientChannelFailure(
                event.source_record_id, attempt.error_detail or "Transient failure"
            )

        recorded = await self._status_writer.record(
            event.source_record_id, event.kind, attempt
        )

        if attempt.is_sent:
            await self._event_bus.publish(
                SideEffectDispatchSucceeded(
                    event_id=uuid7(),
                    source_record_id=event.source_record_id,
                    kind=event.kind,
                    delivery_id=event.delivery_id,
                    target=attempt.target,
                    provider_reference=attempt.provider_reference,
                )
            )
        else:
            await self._publish_failed(event, attempt, recorded=recorded)

        return attempt

    async def _publish_failed(
        self, event: RecordCreated, attempt: SideEffectAttempt, *, recorded: bool
    ) -> None:
        await self._event_bus.publish(
            SideEffectDispatchFailed(
                event_id=uuid7(),
                source_record_id=event.source_record_id,
                kind=event.kind,
                delivery_id=event.delivery_id,
                failure_kind=attempt.failure_kind.value if attempt.failure_kind else "",
                reason=attempt.error_detail or "",
                recorded=recorded,
            )
        )
