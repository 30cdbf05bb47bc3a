"""PaymentChannelProtocol - Port for interactive payment confirmation.

Two variants implement it and one is chosen at construction time, never
per call:
    - LiveChannel: real gateway checkout, outcome reported by the widget
    - SimulatedChannel: resolves as succeeded after a fixed delay, no network

Both produce the same GatewayOutcome shape, so everything downstream is
mode-agnostic.
"""

from typing import Protocol

from freequo_dispatch.core.errors import ConflictError
from freequo_dispatch.core.result import Result
from freequo_dispatch.domain.entities import PaymentHandle
from freequo_dispatch.domain.errors import PaymentChannelError
from freequo_dispatch.domain.value_objects import (
    GatewayOutcome,
    PaymentOrder,
    PaymentResult,
)


class PaymentChannelProtocol(Protocol):
    """Payment channel protocol (port).

    Attributes:
        is_simulated: True when the channel never touches the real gateway.
    """

    is_simulated: bool

    async def create_order(
        self,
        *,
        amount_minor: int,
        currency: str,
        receipt: str,
        notes: dict[str, str],
    ) -> Result[PaymentOrder, PaymentChannelError]:
        """Create a gateway order a checkout can later confirm.

        Args:
            amount_minor: Amount in minor units.
            currency: Three-letter currency code.
            receipt: Merchant receipt reference.
            notes: Free-form key-value notes stored with the order.
        """
        ...

    async def open_checkout(
        self, order: PaymentOrder
    ) -> Result[PaymentHandle, PaymentChannelError]:
        """Open the confirmation for an order and return its single-shot handle.

        A Failure means the gateway could not be loaded at all.
        """
        ...

    def resolve(
        self, order_id: str, outcome: GatewayOutcome
    ) -> Result[None, ConflictError]:
        """Deliver the widget's terminal outcome for an order.

        Only the first delivery per order is accepted.
        """
        ...

    def verify(self, result: PaymentResult) -> bool:
        """Check the gateway signature of a successful result."""
        ...
