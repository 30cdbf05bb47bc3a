"""Trigger events: the normalized payloads that start a dispatch.

The trigger infrastructure delivers these at-least-once. The same logical
event may arrive again with a new or identical ``delivery_id``; nothing here
deduplicates. The idempotency guard lives in the StatusWriter.

Payloads are untyped mappings at this layer. The EventSource validates them
into typed value objects before any content is built.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar

from freequo_dispatch.domain.enums import EventKind
from freequo_dispatch.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class TriggerEvent(DomainEvent):
    """An event that triggers exactly one side effect on a source record.

    Attributes:
        delivery_id: Opaque identifier of this trigger invocation, as supplied
            by the trigger infrastructure. Not unique per logical event.
        source_record_id: Identifier of the record the event is about (job
            application id, payment order id).
        payload: Field name to value mapping, validated downstream.
        kind: Class-level discriminator.
    """

    kind: ClassVar[EventKind]

    delivery_id: str
    source_record_id: str
    payload: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, kw_only=True, slots=True)
class RecordCreated(TriggerEvent):
    """A record was created in the watched collection.

    ``payload`` is the full field set of the new record.
    """

    kind: ClassVar[EventKind] = EventKind.RECORD_CREATED


@dataclass(frozen=True, kw_only=True, slots=True)
class PaymentResolved(TriggerEvent):
    """The payment channel reached a terminal state.

    ``payload`` carries ``status`` (succeeded, failed, dismissed), the raw
    gateway ``response``, and the caller's correlation fields (``order_id``,
    ``job_id``, ``amount``, ``milestone``, ``currency``, ``is_mock``).
    """

    kind: ClassVar[EventKind] = EventKind.PAYMENT_RESOLVED
