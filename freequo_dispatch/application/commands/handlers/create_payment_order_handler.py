"""Create a gateway order for a job milestone.

Flow:
1. Convert the amount to minor units
2. Create the order on the payment channel (live gateway or simulated)
3. Persist the order so its confirmation status can be recorded
4. Return the order
"""

import time
from dataclasses import replace

from freequo_dispatch.application.commands.dispatch_commands import (
    CreatePaymentOrder,
)
from freequo_dispatch.application.errors import (
    ApplicationError,
    ApplicationErrorCode,
)
from freequo_dispatch.core.result import Failure, Result, Success
from freequo_dispatch.domain.protocols import (
    LoggerProtocol,
    PaymentChannelProtocol,
    PaymentOrderRepository,
)
from freequo_dispatch.domain.value_objects import Money, PaymentOrder


class CreatePaymentOrderError:
    """CreatePaymentOrder-specific errors."""

    INVALID_AMOUNT = "Amount must be positive"
    GATEWAY_FAILED = "Error creating payment order"


class CreatePaymentOrderHandler:
    """Handler for CreatePaymentOrder."""

    def __init__(
        self,
        *,
        channel: PaymentChannelProtocol,
        order_repository: PaymentOrderRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._channel = channel
        self._orders = order_repository
        self._logger = logger

    async def handle(
        self, cmd: CreatePaymentOrder
    ) -> Result[PaymentOrder, ApplicationError]:
        """Create and persist an order.

        Returns:
            Success(PaymentOrder) with the gateway order id and amount in
            minor units, or Failure(ApplicationError).
        """
        try:
            money = Money(cmd.amount, cmd.currency)
        except ValueError as e:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
                    message=str(e),
                )
            )
        if money.amount <= 0:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
                    message=CreatePaymentOrderError.INVALID_AMOUNT,
                )
            )

        receipt = f"job_{cmd.job_id}_{int(time.time() * 1000)}"
        notes = {"job_id": cmd.job_id}
        if cmd.milestone:
            notes["milestone"] = cmd.milestone

        match await self._channel.create_order(
            amount_minor=money.minor_units,
            currency=money.currency,
            receipt=receipt,
            notes=notes,
        ):
            case Failure(error=error):
                self._logger.error(
                    "payment_order_create_failed",
                    job_id=cmd.job_id,
                    error_code=error.code.value,
                    reason=error.message,
                )
                code = (
                    ApplicationErrorCode.CHANNEL_UNAVAILABLE
                    if error.is_transient
                    else ApplicationErrorCode.COMMAND_EXECUTION_FAILED
                )
                return Failure(
                    error=ApplicationError(
                        code=code,
                        message=CreatePaymentOrderError.GATEWAY_FAILED,
                        domain_error=error,
                    )
                )
            case Success(value=created):
                order = replace(
                    created,
                    job_id=cmd.job_id,
                    milestone=cmd.milestone,
                    job_title=cmd.job_title,
                    freelancer_name=cmd.freelancer_name,
                )

        await self._orders.save(
            order, is_mock=self._channel.is_simulated, receipt=receipt
        )
        self._logger.info(
            "payment_order_created",
            order_id=order.order_id,
            job_id=order.job_id,
            amount_minor=order.amount_minor,
            is_mock=self._channel.is_simulated,
        )
        return Success(value=order)
