"""Payment request and response schemas.

Wire names are camelCase to match what the checkout UI sends and expects.
Amounts in requests to create an order are in major units; every other
amount on the wire that belongs to an order is in minor units, as the
gateway reports it. The confirmation result carries major units.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from freequo_dispatch.domain.entities import StatusRecord
from freequo_dispatch.domain.enums import GatewayStatus
from freequo_dispatch.domain.value_objects import PaymentOrder


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# =============================================================================
# Request Schemas
# =============================================================================


class CreatePaymentOrderRequest(_CamelModel):
    """Create a checkout order for a job milestone."""

    job_id: str = Field(..., alias="jobId", min_length=1)
    amount: Decimal = Field(..., gt=0, description="Amount in major units")
    currency: str = Field("INR", min_length=3, max_length=3)
    milestone: str | None = None
    job_title: str | None = Field(None, alias="jobTitle")
    freelancer_name: str | None = Field(None, alias="freelancerName")


class ConfirmPaymentRequest(_CamelModel):
    """Checkout order data held by the UI.

    Validation happens in the pipeline so that incomplete orders produce a
    problem-details response instead of a schema error.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    amount: int | None = Field(None, description="Amount in minor units")
    currency: str | None = None
    job_id: str | None = Field(None, alias="jobId")
    milestone: str | None = None
    job_title: str | None = Field(None, alias="jobTitle")
    freelancer_name: str | None = Field(None, alias="freelancerName")
    user_name: str | None = Field(None, alias="userName")
    user_email: str | None = Field(None, alias="userEmail")
    user_phone: str | None = Field(None, alias="userPhone")

    def to_order_data(self, order_id: str) -> dict[str, Any]:
        """Order data with the path order id, camelCase keys."""
        data = self.model_dump(by_alias=True, exclude_none=True)
        data["orderId"] = order_id
        return data


class PaymentOutcomeRequest(BaseModel):
    """Terminal outcome reported by the checkout widget."""

    status: GatewayStatus
    response: dict[str, Any] = Field(default_factory=dict)


# =============================================================================
# Response Schemas
# =============================================================================


class PaymentOrderResponse(_CamelModel):
    """A created or stored checkout order."""

    order_id: str = Field(..., alias="orderId")
    amount: int = Field(..., description="Amount in minor units")
    currency: str
    job_id: str | None = Field(None, alias="jobId")
    milestone: str | None = None
    is_mock: bool | None = Field(None, alias="isMock")

    @classmethod
    def from_order(
        cls, order: PaymentOrder, *, is_mock: bool | None = None
    ) -> "PaymentOrderResponse":
        return cls(
            order_id=order.order_id,
            amount=order.amount_minor,
            currency=order.currency,
            job_id=order.job_id,
            milestone=order.milestone,
            is_mock=is_mock,
        )


class PaymentOrderStatusResponse(PaymentOrderResponse):
    """Stored order with its recorded confirmation status."""

    confirmed: bool = False
    payment_id: str | None = Field(None, alias="paymentId")
    error: str | None = None

    @classmethod
    def from_status(
        cls, order: PaymentOrder, status: StatusRecord | None
    ) -> "PaymentOrderStatusResponse":
        status = status or StatusRecord()
        return cls(
            order_id=order.order_id,
            amount=order.amount_minor,
            currency=order.currency,
            job_id=order.job_id,
            milestone=order.milestone,
            is_mock=status.side_effect_simulated if status.side_effect_sent else None,
            confirmed=status.side_effect_sent,
            payment_id=status.side_effect_reference,
            error=status.side_effect_error,
        )


class PaymentOutcomeResponse(BaseModel):
    """Acknowledgement of a delivered widget outcome."""

    order_id: str = Field(..., alias="orderId")
    status: GatewayStatus
    delivered: bool = True

    model_config = ConfigDict(populate_by_name=True)
