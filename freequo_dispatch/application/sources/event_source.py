"""Event source: turns raw trigger deliveries into typed trigger events.

The EventSource is the only place untyped record payloads are interpreted.
It builds RecordCreated and PaymentResolved events and validates their
payloads into ApplicationNotice and PaymentOrder value objects. It does not
deduplicate: the same record may be delivered any number of times.

Usage:
    source = EventSource(watched_collection="jobApplications")
    event = source.record_created(
        delivery_id="evt-1", record_id="app-1", data={"freelancerEmail": "a@b.com"}
    )
    match source.application_notice(event):
        case Success(value=notice):
            ...
        case Failure(error=error):
            ...
"""

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from freequo_dispatch.core.enums import ErrorCode
from freequo_dispatch.core.result import Failure, Result, Success
from freequo_dispatch.domain.errors import MissingRequiredFieldError
from freequo_dispatch.domain.events import PaymentResolved, RecordCreated
from freequo_dispatch.domain.value_objects import (
    ApplicationNotice,
    GatewayOutcome,
    PaymentOrder,
)
from freequo_dispatch.schemas.event_payloads import (
    JobApplicationPayload,
    PaymentOrderPayload,
)


class EventSourceError:
    """EventSource validation messages."""

    FREELANCER_EMAIL_MISSING = "Freelancer email is missing"
    ORDER_ID_MISSING = "Order id is missing"
    INVALID_FIELD = "Invalid or missing field"


def _first_error_field(exc: PydanticValidationError) -> str:
    errors = exc.errors()
    if not errors or not errors[0]["loc"]:
        return "payload"
    return str(errors[0]["loc"][0])


class EventSource:
    """Builds and validates trigger events.

    Attributes:
        watched_collection: Collection whose creation events start a
            confirmation email.
    """

    def __init__(self, *, watched_collection: str) -> None:
        self.watched_collection = watched_collection

    def accepts(self, collection: str) -> bool:
        """Whether creation events of ``collection`` are dispatched."""
        return collection == self.watched_collection

    def record_created(
        self,
        *,
        delivery_id: str,
        record_id: str,
        data: Mapping[str, Any],
        occurred_at: datetime | None = None,
    ) -> RecordCreated:
        """Build the trigger event for a newly created record."""
        return RecordCreated(
            delivery_id=delivery_id,
            source_record_id=record_id,
            payload=dict(data),
            occurred_at=occurred_at or datetime.now(UTC),
        )

    def application_notice(
        self, event: RecordCreated
    ) -> Result[ApplicationNotice, MissingRequiredFieldError]:
        """Validate a job-application payload.

        Only the freelancer email is mandatory. Missing or unreadable
        optional fields stay None; ``applied_at`` falls back to the event time.

        Returns:
            Success(ApplicationNotice), or Failure(MissingRequiredFieldError)
            when the email is absent or not a string.
        """
        try:
            payload = JobApplicationPayload.model_validate(event.payload)
        except PydanticValidationError as e:
            field = _first_error_field(e)
            return Failure(
                error=MissingRequiredFieldError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message=f"{EventSourceError.INVALID_FIELD}: {field}",
                    field=field,
                )
            )

        if payload.freelancer_email is None:
            return Failure(
                error=MissingRequiredFieldError(
                    code=ErrorCode.MISSING_REQUIRED_FIELD,
                    message=EventSourceError.FREELANCER_EMAIL_MISSING,
                    field="freelancerEmail",
                )
            )

        applied_at = payload.applied_at or event.occurred_at
        if applied_at.tzinfo is None:
            applied_at = applied_at.replace(tzinfo=UTC)

        return Success(
            value=ApplicationNotice(
                record_id=event.source_record_id,
                recipient_email=payload.freelancer_email,
                recipient_name=payload.freelancer_name,
                job_name=payload.job_name,
                salary=payload.salary,
                duration=payload.duration,
                applied_at=applied_at,
            )
        )

    def payment_order(
        self, data: Mapping[str, Any]
    ) -> Result[PaymentOrder, MissingRequiredFieldError]:
        """Validate checkout order data (``orderId`` and ``amount`` required)."""
        try:
            payload = PaymentOrderPayload.model_validate(dict(data))
        except PydanticValidationError as e:
            field = _first_error_field(e)
            if field in ("orderId", "order_id"):
                return Failure(
                    error=MissingRequiredFieldError(
                        code=ErrorCode.MISSING_REQUIRED_FIELD,
                        message=EventSourceError.ORDER_ID_MISSING,
                        field="orderId",
                    )
                )
            return Failure(
                error=MissingRequiredFieldError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message=f"{EventSourceError.INVALID_FIELD}: {field}",
                    field=field,
                )
            )

        return Success(
            value=PaymentOrder(
                order_id=payload.order_id,
                amount_minor=payload.amount,
                currency=payload.currency,
                job_id=payload.job_id,
                milestone=payload.milestone,
                job_title=payload.job_title,
                freelancer_name=payload.freelancer_name,
                payer_name=payload.payer_name,
                payer_email=payload.payer_email,
                payer_phone=payload.payer_phone,
            )
        )

    def payment_resolved(
        self,
        *,
        delivery_id: str,
        order: PaymentOrder,
        outcome: GatewayOutcome,
    ) -> PaymentResolved:
        """Build the trigger event for a terminal payment outcome."""
        return PaymentResolved(
            delivery_id=delivery_id,
            source_record_id=order.order_id,
            payload={
                "status": outcome.status.value,
                "response": dict(outcome.response),
                "order_id": order.order_id,
                "job_id": order.job_id,
                "amount": order.amount_minor,
                "currency": order.currency,
                "milestone": order.milestone,
                "is_mock": outcome.is_mock,
            },
        )
