"""Trigger request and response schemas.

The trigger infrastructure posts one request per delivery of a record
creation event. Deliveries are at-least-once: the same ``recordId`` may
arrive several times with different ``eventId`` values.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from freequo_dispatch.domain.entities import SideEffectAttempt


class RecordCreatedTrigger(BaseModel):
    """Record creation event as delivered by the trigger infrastructure.

    Attributes:
        event_id: Delivery id (differs between redeliveries).
        collection: Collection the record was created in.
        record_id: Id of the created record.
        data: Full field set of the record.
        occurred_at: Creation time, if the trigger reports one.
    """

    model_config = ConfigDict(populate_by_name=True)

    event_id: str = Field(..., alias="eventId", min_length=1, description="Delivery id")
    collection: str = Field(..., min_length=1, examples=["jobApplications"])
    record_id: str = Field(..., alias="recordId", min_length=1, description="Record id")
    data: dict[str, Any] = Field(default_factory=dict, description="Record fields")
    occurred_at: datetime | None = Field(None, alias="occurredAt")


class AttemptResponse(BaseModel):
    """Summary of a processed trigger."""

    model_config = ConfigDict(populate_by_name=True)

    status: str = Field(..., description="Terminal attempt outcome", examples=["sent"])
    target: str = Field(..., description="Recipient or correlation id")
    reference: str | None = Field(None, description="Provider message id")
    error: str | None = Field(None, description="Failure reason")
    failure_kind: str | None = Field(None, alias="failureKind")

    @classmethod
    def from_attempt(cls, attempt: SideEffectAttempt) -> "AttemptResponse":
        """Build the response from a terminal attempt."""
        return cls(
            status=attempt.outcome.value,
            target=attempt.target,
            reference=attempt.provider_reference,
            error=attempt.error_detail,
            failure_kind=attempt.failure_kind.value if attempt.failure_kind else None,
        )


class DuplicateDeliveryResponse(BaseModel):
    """Returned when the side effect was already recorded for the record."""

    status: str = Field("duplicate", examples=["duplicate"])
