"""Side-effect executors: one external call per attempt.

NotificationExecutor sends one email through the mail transport.
PaymentExecutor drives one interactive payment confirmation and checks the
normalized result. Neither retries; retry is the trigger infrastructure's
job, driven by the TransientChannelFailure the pipeline raises.
"""

import asyncio

from freequo_dispatch.core.result import Failure, Success
from freequo_dispatch.domain.entities import SideEffectAttempt
from freequo_dispatch.domain.enums import FailureKind, GatewayStatus, PaymentStatus
from freequo_dispatch.domain.protocols import (
    LoggerProtocol,
    MailTransportProtocol,
    PaymentChannelProtocol,
)
from freequo_dispatch.domain.value_objects import (
    GatewayOutcome,
    MailSenderConfig,
    PaymentOrder,
    PaymentResult,
    RenderedMessage,
)

GATEWAY_LOAD_FAILED = "Failed to load payment gateway"
SIGNATURE_INVALID = "Payment verification failed"
PAYMENT_ID_MISSING = "Payment succeeded without a payment id"


class NotificationExecutor:
    """Sends a rendered email with a bounded wait.

    A transport call that outlives ``config.timeout_seconds`` is cancelled
    and reported as a transient failure.
    """

    def __init__(
        self,
        *,
        transport: MailTransportProtocol,
        config: MailSenderConfig,
        logger: LoggerProtocol,
    ) -> None:
        self._transport = transport
        self._config = config
        self._logger = logger

    async def execute(self, message: RenderedMessage) -> SideEffectAttempt:
        """Perform exactly one transport call.

        Returns:
            SideEffectAttempt in SENT or FAILED state. Never raises for
            channel failures.
        """
        attempt = SideEffectAttempt(target=message.recipient, rendered_content=message)

        try:
            async with asyncio.timeout(self._config.timeout_seconds):
                result = await self._transport.send(message)
        except TimeoutError:
            self._logger.warning(
                "mail_transport_timeout",
                recipient=message.recipient,
                timeout_seconds=self._config.timeout_seconds,
            )
            attempt.mark_failed(
                f"Mail transport timed out after {self._config.timeout_seconds}s",
                FailureKind.TRANSIENT,
            )
            return attempt

        match result:
            case Success(value=receipt):
                attempt.mark_sent(receipt.message_id)
            case Failure(error=error):
                kind = FailureKind.TRANSIENT if error.is_transient else FailureKind.PERMANENT
                self._logger.warning(
                    "mail_transport_failed",
                    recipient=message.recipient,
                    error_code=error.code.value,
                    failure_kind=kind.value,
                )
                attempt.mark_failed(error.message, kind)

        return attempt


class PaymentExecutor:
    """Runs an interactive confirmation on the configured payment channel."""

    def __init__(
        self,
        *,
        channel: PaymentChannelProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._channel = channel
        self._logger = logger

    async def await_outcome(self, order: PaymentOrder) -> GatewayOutcome:
        """Open the checkout and wait for its single terminal outcome.

        There is no timeout: only the user (or the simulated channel's
        fixed delay) ends a confirmation.
        """
        match await self._channel.open_checkout(order):
            case Failure(error=error):
                self._logger.error(
                    "payment_gateway_load_failed",
                    order_id=order.order_id,
                    error_code=error.code.value,
                    reason=error.message,
                )
                return GatewayOutcome(
                    status=GatewayStatus.FAILED,
                    response={"message": GATEWAY_LOAD_FAILED},
                    is_mock=self._channel.is_simulated,
                )
            case Success(value=handle):
                self._logger.info(
                    "payment_confirmation_opened",
                    order_id=order.order_id,
                    is_mock=handle.is_mock,
                )
                return await handle.wait()

    def finalize(self, result: PaymentResult) -> SideEffectAttempt:
        """Turn a normalized result into the attempt to record.

        Successes must carry a payment id and a valid signature; anything
        else from the gateway is a permanent failure. Dismissal cancels.
        """
        attempt = SideEffectAttempt(
            target=result.order_id,
            rendered_content=result,
            is_mock=result.is_mock,
        )

        match result.status:
            case PaymentStatus.SUCCESS:
                if not result.payment_id:
                    attempt.mark_failed(PAYMENT_ID_MISSING, FailureKind.PERMANENT)
                elif not self._channel.verify(result):
                    self._logger.warning(
                        "payment_signature_invalid",
                        order_id=result.order_id,
                        payment_id=result.payment_id,
                    )
                    attempt.mark_failed(SIGNATURE_INVALID, FailureKind.PERMANENT)
                else:
                    attempt.mark_sent(result.payment_id)
            case PaymentStatus.FAILURE:
                attempt.mark_failed(
                    result.error_message or "Payment failed", FailureKind.PERMANENT
                )
            case PaymentStatus.CANCELLED:
                attempt.mark_cancelled(result.error_message or "Payment cancelled")

        return attempt
