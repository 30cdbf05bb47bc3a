"""Payment channel outcomes: raw and normalized.

GatewayOutcome is exactly what the channel reported. PaymentResult has one
fixed shape whatever the gateway sent, so consumers never branch on
gateway-specific fields or on live versus simulated mode.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from freequo_dispatch.domain.enums import GatewayStatus, PaymentStatus


@dataclass(frozen=True, slots=True, kw_only=True)
class GatewayOutcome:
    """Terminal outcome reported by a payment channel.

    Attributes:
        status: succeeded, failed or dismissed.
        response: Raw gateway response (success fields or error object).
        is_mock: True when produced by the simulated channel.
    """

    status: GatewayStatus
    response: dict[str, Any] = field(default_factory=dict)
    is_mock: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class PaymentResult:
    """Normalized payment result.

    Attributes:
        status: Success, Failure or Cancelled.
        order_id: Gateway order id.
        amount: Amount in major units.
        correlation_id: Caller's correlation id (the job id).
        payment_id: Gateway payment id, on success.
        signature: Gateway signature over order and payment id, on success.
        milestone: Milestone label the payment is for.
        is_mock: True for simulated confirmations.
        error_message: Human-readable reason for Failure and Cancelled.
    """

    status: PaymentStatus
    order_id: str
    amount: Decimal
    correlation_id: str | None = None
    payment_id: str | None = None
    signature: str | None = None
    milestone: str | None = None
    is_mock: bool = False
    error_message: str | None = None

    @property
    def reference(self) -> str | None:
        """External reference of a confirmed payment."""
        return self.payment_id

    @property
    def succeeded(self) -> bool:
        """True for a Success result."""
        return self.status is PaymentStatus.SUCCESS

    def to_callback_payload(self) -> dict[str, Any]:
        """Object handed back to the UI callback, identical in both modes."""
        return {
            "status": self.status.value,
            "razorpay_order_id": self.order_id,
            "razorpay_payment_id": self.payment_id,
            "razorpay_signature": self.signature,
            "correlationId": self.correlation_id,
            "jobId": self.correlation_id,
            "amount": float(self.amount),
            "milestone": self.milestone,
            "isMock": self.is_mock,
            "errorMessage": self.error_message,
        }
