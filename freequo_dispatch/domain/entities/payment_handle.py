"""Single-shot result channel for an interactive payment confirmation.

The checkout widget reports through callbacks (success, failure, dismiss)
that may fire in any order and more than once. The handle turns that into
exactly one delivered GatewayOutcome: the first delivery wins and every
later one is refused.

Usage:
    handle = PaymentHandle(order_id="order_1", checkout_options={...})

    # widget callback side
    handle.deliver(GatewayOutcome(status=GatewayStatus.DISMISSED))

    # waiter side (no timeout: only the user ends the confirmation)
    outcome = await handle.wait()
"""

import asyncio
import time
from collections.abc import Callable
from typing import Any

from freequo_dispatch.core.enums import ErrorCode
from freequo_dispatch.core.errors import ConflictError
from freequo_dispatch.core.result import Failure, Result, Success
from freequo_dispatch.domain.value_objects.payment_result import GatewayOutcome


class PaymentHandleError:
    """PaymentHandle delivery error messages."""

    ALREADY_DELIVERED = "Payment outcome was already delivered"


class PaymentHandle:
    """Awaitable, deliver-once outcome of one checkout.

    Attributes:
        order_id: Gateway order the checkout belongs to.
        checkout_options: Options the UI needs to open the widget.
        is_mock: True for handles created by the simulated channel.
        delivered_at: Monotonic time of the delivery, None while pending.
    """

    def __init__(
        self,
        *,
        order_id: str,
        checkout_options: dict[str, Any] | None = None,
        is_mock: bool = False,
        on_release: Callable[["PaymentHandle"], None] | None = None,
    ) -> None:
        self.order_id = order_id
        self.checkout_options = checkout_options or {}
        self.is_mock = is_mock
        self.delivered_at: float | None = None
        self._on_release = on_release
        self._waiters = 0
        self._future: asyncio.Future[GatewayOutcome] = (
            asyncio.get_running_loop().create_future()
        )

    @property
    def delivered(self) -> bool:
        """Whether an outcome has been delivered."""
        return self._future.done()

    def add_done_callback(self, callback: Callable[[], None]) -> None:
        """Run ``callback`` once an outcome is delivered."""
        self._future.add_done_callback(lambda _: callback())

    def deliver(self, outcome: GatewayOutcome) -> Result[None, ConflictError]:
        """Deliver the terminal outcome. Only the first call succeeds."""
        if self._future.done():
            return Failure(
                error=ConflictError(
                    code=ErrorCode.PAYMENT_ALREADY_RESOLVED,
                    message=PaymentHandleError.ALREADY_DELIVERED,
                    resource_type="PaymentOrder",
                    details={"order_id": self.order_id},
                )
            )
        self.delivered_at = time.monotonic()
        self._future.set_result(outcome)
        return Success(value=None)

    async def wait(self) -> GatewayOutcome:
        """Wait for the terminal outcome.

        When the last waiter leaves, whether with the outcome or cancelled,
        the handle is released from its registry so the next checkout for
        the same order starts fresh.
        """
        self._waiters += 1
        try:
            return await asyncio.shield(self._future)
        finally:
            self._waiters -= 1
            if self._waiters == 0 and self._on_release is not None:
                self._on_release(self)
