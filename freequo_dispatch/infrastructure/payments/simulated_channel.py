"""Simulated payment channel.

Used when no gateway credentials are configured. Every confirmation
resolves as succeeded after a fixed delay with a mock payment id and a mock
signature, and never touches the network. A dismissal delivered through
``resolve`` before the delay elapses still wins.
"""

import asyncio
import time

import structlog
from uuid_extensions import uuid7

from freequo_dispatch.core.errors import ConflictError
from freequo_dispatch.core.result import Result, Success
from freequo_dispatch.domain.entities import PaymentHandle
from freequo_dispatch.domain.enums import GatewayStatus
from freequo_dispatch.domain.errors import PaymentChannelError
from freequo_dispatch.domain.value_objects import (
    GatewayOutcome,
    PaymentOrder,
    PaymentResult,
)
from freequo_dispatch.infrastructure.payments.pending_confirmations import (
    PendingConfirmations,
)

MOCK_SIGNATURE = "mock_signature"
MOCK_KEY_ID = "mock_key"


class SimulatedChannel:
    """Payment channel that always succeeds after ``delay_seconds``."""

    is_simulated = True

    def __init__(
        self,
        *,
        delay_seconds: float,
        pending: PendingConfirmations | None = None,
    ) -> None:
        self._delay_seconds = delay_seconds
        self._pending = pending if pending is not None else PendingConfirmations()
        self._timers: dict[PaymentHandle, asyncio.TimerHandle] = {}
        self._logger = structlog.get_logger("simulated_payment_channel")

    async def create_order(
        self,
        *,
        amount_minor: int,
        currency: str,
        receipt: str,
        notes: dict[str, str],
    ) -> Result[PaymentOrder, PaymentChannelError]:
        order_id = f"mock_order_{int(time.time() * 1000)}_{uuid7().hex[-8:]}"
        self._logger.info(
            "mock_order_created",
            order_id=order_id,
            amount_minor=amount_minor,
            receipt=receipt,
        )
        return Success(
            value=PaymentOrder(
                order_id=order_id,
                amount_minor=amount_minor,
                currency=currency,
            )
        )

    async def open_checkout(
        self, order: PaymentOrder
    ) -> Result[PaymentHandle, PaymentChannelError]:
        handle = self._pending.get_or_create(order.order_id, is_mock=True)
        if not handle.delivered and handle not in self._timers:
            timer = asyncio.get_running_loop().call_later(
                self._delay_seconds, self._complete, handle
            )
            self._timers[handle] = timer
            handle.add_done_callback(lambda: self._cancel_timer(handle))
        return Success(value=handle)

    def resolve(
        self, order_id: str, outcome: GatewayOutcome
    ) -> Result[None, ConflictError]:
        return self._pending.resolve(order_id, outcome)

    def verify(self, result: PaymentResult) -> bool:
        """Simulated results carry the mock signature; nothing else is valid."""
        return result.is_mock and result.signature == MOCK_SIGNATURE

    def _complete(self, handle: PaymentHandle) -> None:
        payment_id = f"mock_pay_{uuid7().hex}"
        result = handle.deliver(
            GatewayOutcome(
                status=GatewayStatus.SUCCEEDED,
                response={
                    "razorpay_order_id": handle.order_id,
                    "razorpay_payment_id": payment_id,
                    "razorpay_signature": MOCK_SIGNATURE,
                },
                is_mock=True,
            )
        )
        if isinstance(result, Success):
            self._logger.info(
                "mock_payment_completed",
                order_id=handle.order_id,
                payment_id=payment_id,
            )

    def _cancel_timer(self, handle: PaymentHandle) -> None:
        timer = self._timers.pop(handle, None)
        if timer is not None:
            timer.cancel()
