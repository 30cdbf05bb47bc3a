"""Pipeline handler for PaymentResolved: interactive payment confirmation.

Flow:
1. Validate the checkout order and load the stored order
2. Idempotency pre-check (a confirmed order is never confirmed again)
3. Emit SideEffectDispatchAttempted
4. Open the checkout and await its single terminal outcome
5. Build PaymentResolved and normalize the gateway response
6. Finalize: verify the signature of a success
7. Cancelled: emit PaymentConfirmationCancelled, return without writing
8. Record the outcome (conditional write)
9. Emit Succeeded or Failed, return the normalized result

The normalized result is what the UI callback receives, in both live and
simulated modes.
"""

from dataclasses import replace

from uuid_extensions import uuid7

from freequo_dispatch.application.commands.dispatch_commands import ConfirmPayment
from freequo_dispatch.application.content import ContentBuilder
from freequo_dispatch.application.errors import (
    ApplicationError,
    ApplicationErrorCode,
)
from freequo_dispatch.application.services import PaymentExecutor, StatusWriter
from freequo_dispatch.application.sources import EventSource
from freequo_dispatch.core.result import Failure, Result, Success
from freequo_dispatch.domain.enums import AttemptOutcome, EventKind, PaymentStatus
from freequo_dispatch.domain.events import (
    PaymentConfirmationCancelled,
    SideEffectDispatchAttempted,
    SideEffectDispatchFailed,
    SideEffectDispatchSucceeded,
    SideEffectDispatchSuppressed,
)
from freequo_dispatch.domain.protocols import (
    EventBusProtocol,
    LoggerProtocol,
    PaymentOrderRepository,
)
from freequo_dispatch.domain.value_objects import PaymentResult


class ConfirmPaymentError:
    """ConfirmPayment-specific errors."""

    INVALID_ORDER = "Invalid payment order"
    ALREADY_CONFIRMED = "Payment already confirmed for this order"
    ORDER_NOT_FOUND = "Payment order not found"


class ConfirmPaymentHandler:
    """Handler for ConfirmPayment."""

    def __init__(
        self,
        *,
        event_source: EventSource,
        content_builder: ContentBuilder,
        executor: PaymentExecutor,
        status_writer: StatusWriter,
        order_repository: PaymentOrderRepository,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._source = event_source
        self._orders = order_repository
        self._builder = content_builder
        self._executor = executor
        self._status_writer = status_writer
        self._event_bus = event_bus
        self._logger = logger

    async def handle(
        self, cmd: ConfirmPayment
    ) -> Result[PaymentResult, ApplicationError]:
        """Confirm one payment.

        Returns:
            Success(PaymentResult) for every terminal outcome, including
            Failure and Cancelled results. Failure(ApplicationError) when the
            order is invalid, unknown or already confirmed.

        Raises:
            StatusWriteFailure: Outcome could not be recorded.
        """
        kind = EventKind.PAYMENT_RESOLVED

        match self._source.payment_order(cmd.order_data):
            case Failure(error=error):
                return Failure(
                    error=ApplicationError(
                        code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
                        message=ConfirmPaymentError.INVALID_ORDER,
                        domain_error=error,
                    )
                )
            case Success(value=order):
                pass

        stored = await self._orders.find_by_order_id(order.order_id)
        if stored is None:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND,
                    message=ConfirmPaymentError.ORDER_NOT_FOUND,
                    details={"order_id": order.order_id},
                )
            )
        if (stored.amount_minor, stored.currency) != (order.amount_minor, order.currency):
            self._logger.warning(
                "payment_order_amount_mismatch",
                order_id=order.order_id,
                stored_amount_minor=stored.amount_minor,
                claimed_amount_minor=order.amount_minor,
            )
        # Amount and correlation fields come from the stored order; the
        # request only contributes checkout prefill.
        order = replace(
            stored,
            payer_name=order.payer_name,
            payer_email=order.payer_email,
            payer_phone=order.payer_phone,
        )

        if await self._status_writer.already_sent(order.order_id, kind):
            await self._event_bus.publish(
                SideEffectDispatchSuppressed(
                    event_id=uuid7(),
                    source_record_id=order.order_id,
                    kind=kind,
                    delivery_id=cmd.delivery_id,
                )
            )
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.CONFLICT,
                    message=ConfirmPaymentError.ALREADY_CONFIRMED,
                    details={"order_id": order.order_id},
                )
            )

        await self._event_bus.publish(
            SideEffectDispatchAttempted(
                event_id=uuid7(),
                source_record_id=order.order_id,
                kind=kind,
                delivery_id=cmd.delivery_id,
                target=order.order_id,
            )
        )

        outcome = await self._executor.await_outcome(order)
        event = self._source.payment_resolved(
            delivery_id=cmd.delivery_id, order=order, outcome=outcome
        )
        result = self._builder.normalize_payment_result(event)
        attempt = self._executor.finalize(result)

        if attempt.outcome is AttemptOutcome.CANCELLED:
            self._logger.info(
                "payment_confirmation_cancelled",
                order_id=order.order_id,
                job_id=order.job_id,
            )
            await self._event_bus.publish(
                PaymentConfirmationCancelled(
                    event_id=uuid7(),
                    order_id=order.order_id,
                    job_id=order.job_id,
                )
            )
            return Success(value=result)

        if result.succeeded and not attempt.is_sent:
            result = replace(
                result,
                status=PaymentStatus.FAILURE,
                error_message=attempt.error_detail,
            )

        recorded = await self._status_writer.record(order.order_id, kind, attempt)

        if attempt.is_sent:
            await self._event_bus.publish(
                SideEffectDispatchSucceeded(
                    event_id=uuid7(),
                    source_record_id=order.order_id,
                    kind=kind,
                    delivery_id=cmd.delivery_id,
                    target=order.order_id,
                    provider_reference=attempt.provider_reference,
                    is_mock=attempt.is_mock,
                )
            )
        else:
            await self._event_bus.publish(
                SideEffectDispatchFailed(
                    event_id=uuid7(),
                    source_record_id=order.order_id,
                    kind=kind,
                    delivery_id=cmd.delivery_id,
                    failure_kind=attempt.failure_kind.value if attempt.failure_kind else "",
                    reason=attempt.error_detail or "",
                    recorded=recorded,
                )
            )

        return Success(value=result)
