"""Dispatch commands (CQRS write operations).

Commands represent intent to perform a side effect. All commands are
immutable (frozen=True) and use keyword-only arguments (kw_only=True).
Handlers return the attempt or a Result; commands carry data only.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any

from freequo_dispatch.domain.enums import GatewayStatus


@dataclass(frozen=True, kw_only=True)
class DispatchRecordCreated:
    """Send the confirmation email for a newly created record.

    Attributes:
        delivery_id: Trigger invocation id (not unique per logical event).
        record_id: Created record id.
        data: Full field set of the new record.
        occurred_at: When the record was created, if the trigger says.
    """

    delivery_id: str
    record_id: str
    data: dict[str, Any] = field(default_factory=dict)
    occurred_at: datetime | None = None


@dataclass(frozen=True, kw_only=True)
class CreatePaymentOrder:
    """Create a gateway order for a job milestone.

    Attributes:
        job_id: Job the payment funds.
        amount: Amount in major units (rupees).
        currency: Three-letter currency code.
        milestone: Milestone label.
        job_title: Shown in the checkout description.
        freelancer_name: Payee display name.
    """

    job_id: str
    amount: Decimal
    currency: str = "INR"
    milestone: str | None = None
    job_title: str | None = None
    freelancer_name: str | None = None


@dataclass(frozen=True, kw_only=True)
class ConfirmPayment:
    """Run the interactive confirmation of an order and record its outcome.

    Attributes:
        delivery_id: Id of this confirmation request.
        order_data: Checkout order data (camelCase keys, amount in minor units).
    """

    delivery_id: str
    order_data: dict[str, Any]


@dataclass(frozen=True, kw_only=True)
class ResolvePaymentOutcome:
    """Report the checkout widget's terminal outcome for an order.

    Attributes:
        order_id: Gateway order id.
        status: succeeded, failed or dismissed.
        response: Raw widget payload (payment fields or error object).
    """

    order_id: str
    status: GatewayStatus
    response: dict[str, Any] = field(default_factory=dict)
