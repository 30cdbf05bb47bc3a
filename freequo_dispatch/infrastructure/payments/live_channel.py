"""Live Razorpay payment channel.

Creates real gateway orders and exposes the checkout options the widget
needs on the handle. The widget reports its terminal outcome through
``resolve`` (payment handler, ``payment.failed`` or modal dismissal).
The Razorpay client is built on first use and reused afterwards.
"""

from collections.abc import Callable
from typing import Any

import structlog

from freequo_dispatch.core.enums import ErrorCode
from freequo_dispatch.core.errors import ConflictError
from freequo_dispatch.core.result import Failure, Result, Success
from freequo_dispatch.domain.entities import PaymentHandle
from freequo_dispatch.domain.errors import PaymentChannelError
from freequo_dispatch.domain.value_objects import (
    CheckoutConfig,
    GatewayOutcome,
    PaymentOrder,
    PaymentResult,
)
from freequo_dispatch.infrastructure.payments.pending_confirmations import (
    PendingConfirmations,
)
from freequo_dispatch.infrastructure.payments.razorpay_client import RazorpayClient


class LiveChannel:
    """Payment channel backed by Razorpay checkout."""

    is_simulated = False

    def __init__(
        self,
        *,
        client_factory: Callable[[], RazorpayClient],
        config: CheckoutConfig,
        pending: PendingConfirmations | None = None,
    ) -> None:
        self._client_factory = client_factory
        self._client: RazorpayClient | None = None
        self._config = config
        self._pending = pending if pending is not None else PendingConfirmations()
        self._logger = structlog.get_logger("razorpay_channel")

    def _load_client(self) -> Result[RazorpayClient, PaymentChannelError]:
        if self._client is None:
            try:
                self._client = self._client_factory()
            except ValueError as e:
                self._logger.error("razorpay_client_load_failed", error=str(e))
                return Failure(
                    error=PaymentChannelError(
                        code=ErrorCode.PAYMENT_GATEWAY_UNAVAILABLE,
                        message="Razorpay client could not be initialized",
                        service_name="razorpay",
                        is_transient=False,
                    )
                )
        return Success(value=self._client)

    def checkout_options(self, order: PaymentOrder, key_id: str) -> dict[str, Any]:
        """Options for the checkout widget."""
        return {
            "key": self._config.key_id or key_id,
            "amount": order.amount_minor,
            "currency": order.currency or self._config.default_currency,
            "order_id": order.order_id,
            "name": self._config.brand_name,
            "description": f"Payment for: {order.job_title or order.order_id}",
            "image": self._config.logo_url,
            "prefill": {
                "name": order.payer_name or "",
                "email": order.payer_email or "",
                "contact": order.payer_phone or "",
            },
            "notes": {
                "job_id": order.job_id or "",
                "milestone": order.milestone or "",
            },
            "theme": {"color": self._config.theme_color},
        }

    async def create_order(
        self,
        *,
        amount_minor: int,
        currency: str,
        receipt: str,
        notes: dict[str, str],
    ) -> Result[PaymentOrder, PaymentChannelError]:
        match self._load_client():
            case Failure() as failure:
                return failure
            case Success(value=client):
                pass

        match await client.create_order(
            amount_minor=amount_minor,
            currency=currency,
            receipt=receipt,
            notes=notes,
        ):
            case Failure() as failure:
                return failure
            case Success(value=data):
                pass

        if "id" not in data:
            return Failure(
                error=PaymentChannelError(
                    code=ErrorCode.CHANNEL_INVALID_RESPONSE,
                    message="Razorpay order response has no id",
                    service_name="razorpay",
                    is_transient=False,
                )
            )
        return Success(
            value=PaymentOrder(
                order_id=str(data["id"]),
                amount_minor=int(data.get("amount", amount_minor)),
                currency=str(data.get("currency", currency)),
            )
        )

    async def open_checkout(
        self, order: PaymentOrder
    ) -> Result[PaymentHandle, PaymentChannelError]:
        match self._load_client():
            case Failure() as failure:
                return failure
            case Success(value=client):
                pass

        handle = self._pending.get_or_create(order.order_id)
        handle.checkout_options = self.checkout_options(order, client.key_id)
        return Success(value=handle)

    def resolve(
        self, order_id: str, outcome: GatewayOutcome
    ) -> Result[None, ConflictError]:
        return self._pending.resolve(order_id, outcome)

    def verify(self, result: PaymentResult) -> bool:
        """Verify the checkout signature. Mock results are never valid here."""
        if result.is_mock or not (result.payment_id and result.signature):
            return False
        match self._load_client():
            case Success(value=client):
                return client.verify_signature(
                    order_id=result.order_id,
                    payment_id=result.payment_id,
                    signature=result.signature,
                )
            case Failure():
                return False
