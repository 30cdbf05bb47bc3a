"""Deliver the checkout widget's terminal outcome to the waiting confirmation."""

from freequo_dispatch.application.commands.dispatch_commands import (
    ResolvePaymentOutcome,
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
from freequo_dispatch.domain.value_objects import GatewayOutcome


class ResolvePaymentOutcomeHandler:
    """Handler for ResolvePaymentOutcome.

    Only orders created through this service accept an outcome. The first
    outcome per open checkout wins; later ones are conflicts.
    """

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

    async def handle(self, cmd: ResolvePaymentOutcome) -> Result[None, ApplicationError]:
        if await self._orders.find_by_order_id(cmd.order_id) is None:
            self._logger.warning(
                "payment_outcome_unknown_order",
                order_id=cmd.order_id,
                status=cmd.status.value,
            )
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.NOT_FOUND,
                    message=f"Payment order '{cmd.order_id}' not found",
                    details={"order_id": cmd.order_id},
                )
            )

        outcome = GatewayOutcome(
            status=cmd.status,
            response=cmd.response,
            is_mock=self._channel.is_simulated,
        )
        match self._channel.resolve(cmd.order_id, outcome):
            case Failure(error=error):
                self._logger.warning(
                    "payment_outcome_rejected",
                    order_id=cmd.order_id,
                    status=cmd.status.value,
                    reason=error.message,
                )
                return Failure(
                    error=ApplicationError(
                        code=ApplicationErrorCode.CONFLICT,
                        message=error.message,
                        domain_error=error,
                    )
                )
            case Success():
                self._logger.info(
                    "payment_outcome_delivered",
                    order_id=cmd.order_id,
                    status=cmd.status.value,
                )
                return Success(value=None)
