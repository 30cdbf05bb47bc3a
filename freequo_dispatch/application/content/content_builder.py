"""Content builder: pure rendering of side-effect content.

Turns validated event data into a RenderedMessage (notification channel) or
a normalized PaymentResult (payment channel). No I/O and no clock: the same
input always renders the same output.
"""

from datetime import datetime
from decimal import Decimal
from html import escape
from typing import Any

from freequo_dispatch.application.content.templates import (
    APPLICATION_CONFIRMATION_HTML,
    APPLICATION_CONFIRMATION_SUBJECT,
    APPLICATION_CONFIRMATION_TEXT,
    NEXT_STEPS,
)
from freequo_dispatch.core.constants import (
    GENERIC_GREETING_NAME,
    MISSING_FIELD_PLACEHOLDER,
)
from freequo_dispatch.domain.enums import GatewayStatus, PaymentStatus
from freequo_dispatch.domain.events import PaymentResolved
from freequo_dispatch.domain.value_objects import (
    ApplicationNotice,
    MailSenderConfig,
    Money,
    PaymentResult,
    RenderedMessage,
)

DEFAULT_SUBJECT_TITLE = "Job Application"
PAYMENT_FAILED_MESSAGE = "Payment failed"
PAYMENT_CANCELLED_MESSAGE = "Payment was cancelled before completion"
ORDER_MISMATCH_MESSAGE = "Payment response belongs to a different order"


def format_applied_on(value: datetime) -> str:
    """Format as 'March 5, 2025, 02:30 PM'."""
    return f"{value:%B} {value.day}, {value.year}, {value:%I:%M %p}"


def _gateway_error_message(response: dict[str, Any]) -> str:
    error = response.get("error")
    if isinstance(error, dict):
        for key in ("description", "message"):
            if error.get(key):
                return str(error[key])
    for key in ("description", "message"):
        if response.get(key):
            return str(response[key])
    return PAYMENT_FAILED_MESSAGE


class ContentBuilder:
    """Renders confirmation emails and normalizes payment results.

    Attributes:
        brand_name: Product name shown in headers and footers.
    """

    def __init__(self, *, sender: MailSenderConfig, brand_name: str) -> None:
        self._sender = sender
        self.brand_name = brand_name

    def render_application_confirmation(
        self, notice: ApplicationNotice
    ) -> RenderedMessage:
        """Render the application confirmation email.

        Absent job name, salary and duration show as "N/A"; an absent
        recipient name greets "there".
        """
        values = {
            "name": notice.recipient_name or GENERIC_GREETING_NAME,
            "job_name": notice.job_name or MISSING_FIELD_PLACEHOLDER,
            "salary": notice.salary or MISSING_FIELD_PLACEHOLDER,
            "duration": notice.duration or MISSING_FIELD_PLACEHOLDER,
            "applied_on": format_applied_on(notice.applied_at),
            "dashboard_url": self._sender.dashboard_url,
            "brand": self.brand_name,
            "brand_initial": self.brand_name[:1].upper(),
            "year": str(notice.applied_at.year),
        }

        html_values = {key: escape(value) for key, value in values.items()}
        html_values["next_steps_html"] = "\n".join(
            f"                <li>{escape(step)}</li>" for step in NEXT_STEPS
        )
        text_values = dict(values)
        text_values["next_steps_text"] = "\n".join(f"- {step}" for step in NEXT_STEPS)

        return RenderedMessage(
            sender=self._sender.sender,
            recipient=notice.recipient_email,
            subject=APPLICATION_CONFIRMATION_SUBJECT.substitute(
                job_title=notice.job_name or DEFAULT_SUBJECT_TITLE
            ),
            text=APPLICATION_CONFIRMATION_TEXT.substitute(text_values),
            html=APPLICATION_CONFIRMATION_HTML.substitute(html_values),
        )

    def normalize_payment_result(self, event: PaymentResolved) -> PaymentResult:
        """Map a terminal gateway outcome onto the fixed PaymentResult shape.

        The amount is always reported in major units, whatever mode
        produced the outcome. The result always names the order being
        confirmed; a success response for any other order is a failure.
        """
        payload = event.payload
        response: dict[str, Any] = payload.get("response") or {}
        status = GatewayStatus(payload["status"])
        amount: Decimal = Money.from_minor_units(
            payload["amount"], payload.get("currency") or "INR"
        ).amount
        order_id: str = payload["order_id"]
        reported_order_id = response.get("razorpay_order_id")

        common = {
            "order_id": order_id,
            "amount": amount,
            "correlation_id": payload.get("job_id"),
            "milestone": payload.get("milestone"),
            "is_mock": bool(payload.get("is_mock")),
        }

        match status:
            case GatewayStatus.SUCCEEDED if (
                reported_order_id and reported_order_id != order_id
            ):
                return PaymentResult(
                    status=PaymentStatus.FAILURE,
                    error_message=ORDER_MISMATCH_MESSAGE,
                    **common,
                )
            case GatewayStatus.SUCCEEDED:
                return PaymentResult(
                    status=PaymentStatus.SUCCESS,
                    payment_id=response.get("razorpay_payment_id"),
                    signature=response.get("razorpay_signature"),
                    **common,
                )
            case GatewayStatus.FAILED:
                return PaymentResult(
                    status=PaymentStatus.FAILURE,
                    error_message=_gateway_error_message(response),
                    **common,
                )
            case GatewayStatus.DISMISSED:
                return PaymentResult(
                    status=PaymentStatus.CANCELLED,
                    error_message=PAYMENT_CANCELLED_MESSAGE,
                    **common,
                )
