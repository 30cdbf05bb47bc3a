"""Dispatch observability events.

Published on the event bus after each pipeline step so logging (and any
future audit sink) can follow a dispatch without the pipeline knowing about
them. Follows the ATTEMPTED / SUCCEEDED / FAILED pattern; SUPPRESSED marks a
redelivery stopped by the idempotency guard.
"""

from dataclasses import dataclass

from freequo_dispatch.domain.enums import EventKind
from freequo_dispatch.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class SideEffectDispatchAttempted(DomainEvent):
    """A trigger passed the idempotency pre-check and is about to execute."""

    source_record_id: str
    kind: EventKind
    delivery_id: str
    target: str | None = None


@dataclass(frozen=True, kw_only=True, slots=True)
class SideEffectDispatchSucceeded(DomainEvent):
    """The side effect was acknowledged and recorded."""

    source_record_id: str
    kind: EventKind
    delivery_id: str
    target: str
    provider_reference: str | None
    is_mock: bool = False


@dataclass(frozen=True, kw_only=True, slots=True)
class SideEffectDispatchFailed(DomainEvent):
    """The side effect failed.

    Attributes:
        failure_kind: FailureKind value (missing_required_field, transient,
            permanent).
        recorded: Whether the failure was written onto the record.
    """

    source_record_id: str
    kind: EventKind
    delivery_id: str
    failure_kind: str
    reason: str
    recorded: bool


@dataclass(frozen=True, kw_only=True, slots=True)
class SideEffectDispatchSuppressed(DomainEvent):
    """A redelivery found the side effect already recorded as sent."""

    source_record_id: str
    kind: EventKind
    delivery_id: str


@dataclass(frozen=True, kw_only=True, slots=True)
class PaymentConfirmationCancelled(DomainEvent):
    """The user dismissed the checkout. Not a channel failure."""

    order_id: str
    job_id: str | None = None
